from sbg_api.observability.logging import configure_logging

__all__ = ["configure_logging"]

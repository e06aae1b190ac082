"""Thin client for the Seven Bridges Genomics REST API."""

from sbg_api.client import ApiRequest, ResponseStatusError, SBGError, check_and_retrieve_response

__all__ = ["ApiRequest", "ResponseStatusError", "SBGError", "check_and_retrieve_response"]

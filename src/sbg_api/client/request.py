from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Literal

import httpx

from sbg_api.client.errors import (
    InvalidQueryParameterError,
    RequestBodyError,
    RequestURLError,
    UnsupportedMethodError,
)
from sbg_api.client.response import check_and_retrieve_response
from sbg_api.config.settings import get_settings

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]

SUPPORTED_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")
BODY_METHODS = frozenset({"POST", "PUT"})
AUTH_HEADER = "X-SBG-Auth-Token"
JSON_CONTENT_TYPE = "application/json"
URL_SCHEMES = frozenset({"http", "https"})


def _encode_query_value(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidQueryParameterError(key, value)


def encode_query_params(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Coerce query values to strings in insertion order.

    Booleans and ``None`` render the way they read in JSON text. Nested values
    (mappings, lists) cannot be expressed as a single query pair and are rejected.
    """

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        try:
            pairs.append((str(key), _encode_query_value(str(key), value)))
        except InvalidQueryParameterError as exc:
            logger.warning("Rejecting query parameter: %s", exc)
            raise
    return pairs


def _check_url(url: httpx.URL) -> httpx.URL:
    if url.scheme not in URL_SCHEMES or not url.host:
        raise RequestURLError(f"request URL must be absolute http(s) with a host, got {str(url)!r}")
    return url


def _parse_url(raw: str) -> httpx.URL:
    try:
        return _check_url(httpx.URL(raw))
    except httpx.InvalidURL as exc:
        raise RequestURLError(f"invalid request URL {raw!r}: {exc}") from exc


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one call against the SBG API.

    ``url`` and ``headers`` are derived on every access, so a descriptor copied
    with a different version always points at the matching endpoint.
    """

    auth_token: str
    path: str
    method: Method
    query_params: Mapping[str, Any] | None = None
    body_params: Mapping[str, Any] | None = None
    base_url: str = "https://api.sbgenomics.com"
    version: str = "1.1"

    def __post_init__(self) -> None:
        if not isinstance(self.auth_token, str) or not self.auth_token:
            raise ValueError("auth token must be a non-empty string")
        method = str(self.method).upper()
        if method not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(str(self.method), SUPPORTED_METHODS)
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "path", self.path.lstrip("/"))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        _parse_url(self.base_url)
        version = str(self.version).strip("/")
        if not version:
            raise ValueError("API version must be a non-empty string")
        object.__setattr__(self, "version", version)
        if self.query_params is not None:
            object.__setattr__(self, "query_params", dict(self.query_params))
        if self.body_params is not None:
            object.__setattr__(self, "body_params", dict(self.body_params))

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.version}/{self.path}"

    @property
    def headers(self) -> dict[str, str]:
        return {
            AUTH_HEADER: self.auth_token,
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def with_version(self, version: str) -> RequestDescriptor:
        return replace(self, version=version)


class ApiRequest:
    """Build, send and interpret a single request to the Seven Bridges Genomics API."""

    def __init__(
        self,
        auth_token: str | None,
        path: str,
        method: str,
        query_params: Mapping[str, Any] | None = None,
        body_params: Mapping[str, Any] | None = None,
        *,
        base_url: str | None = None,
        version: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self._descriptor = RequestDescriptor(
            auth_token=auth_token or settings.auth_token or "",
            path=path,
            method=method,  # type: ignore[arg-type]
            query_params=query_params,
            body_params=body_params,
            base_url=base_url or settings.base_url,
            version=version or settings.api_version,
        )
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.timeout)

    @property
    def descriptor(self) -> RequestDescriptor:
        return self._descriptor

    def set_version(self, new_version: str) -> None:
        """Point subsequent requests at another API version."""

        self._descriptor = self._descriptor.with_version(new_version)

    def get_request_url(self) -> str:
        return self._descriptor.url

    def build_request(self) -> httpx.Request:
        descriptor = self._descriptor
        params = encode_query_params(descriptor.query_params) if descriptor.query_params is not None else None

        content: str | None = None
        if descriptor.method in BODY_METHODS and descriptor.body_params is not None:
            try:
                content = json.dumps(descriptor.body_params, separators=(",", ":"), allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise RequestBodyError(f"request body is not serializable as JSON: {exc}") from exc

        try:
            request = self._client.build_request(
                descriptor.method,
                self.get_request_url(),
                params=params,
                content=content,
                headers=descriptor.headers,
            )
        except httpx.InvalidURL as exc:
            raise RequestURLError(f"invalid request URL {self.get_request_url()!r}: {exc}") from exc
        _check_url(request.url)
        return request

    def generate_request(self) -> httpx.Response:
        """Send the request and return the raw response.

        Transport failures surface as :class:`httpx.TransportError`.
        """

        request = self.build_request()
        logger.debug("SBG %s %s", request.method, request.url)
        return self._client.send(request)

    def check_and_retrieve_response(self, response: httpx.Response) -> Any:
        return check_and_retrieve_response(response)

    def execute(self) -> Any:
        return check_and_retrieve_response(self.generate_request())

    def close(self) -> None:
        """Close the HTTP client, unless it was passed in by the caller."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> ApiRequest:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "AUTH_HEADER",
    "ApiRequest",
    "Method",
    "RequestDescriptor",
    "SUPPORTED_METHODS",
    "encode_query_params",
]

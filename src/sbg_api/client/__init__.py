from sbg_api.client.errors import (
    InvalidQueryParameterError,
    RequestBodyError,
    RequestURLError,
    ResponseParseError,
    ResponseStatusError,
    SBGError,
    UnsupportedMethodError,
)
from sbg_api.client.request import ApiRequest, RequestDescriptor, encode_query_params
from sbg_api.client.response import SUCCESS_MARKER, check_and_retrieve_response

__all__ = [
    "ApiRequest",
    "InvalidQueryParameterError",
    "RequestBodyError",
    "RequestDescriptor",
    "RequestURLError",
    "ResponseParseError",
    "ResponseStatusError",
    "SBGError",
    "SUCCESS_MARKER",
    "UnsupportedMethodError",
    "check_and_retrieve_response",
    "encode_query_params",
]

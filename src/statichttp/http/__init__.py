"""
=============================================================================
HTTP PROTOCOL LAYER
=============================================================================

Everything that knows what HTTP looks like on the wire, with no sockets
and no filesystem:

    request.py        Request line → HTTPRequest
    response.py       HTTPResponse → bytes
    status_codes.py   Status codes and reason phrases
    content_types.py  File extension → Content-type

=============================================================================
"""

from .request import HTTPRequest, RequestParser, HTTPParseError, parse_request
from .response import (
    HTTPResponse,
    FileBody,
    ResponseHeaders,
    serialize,
    file_response,
    bad_request,
    forbidden,
    not_found,
    method_not_allowed,
    internal_error,
)
from .status_codes import HTTPStatus, reason_phrase
from .content_types import ContentType, content_type_for, extension_of, mime_value

__all__ = [
    # Request parsing
    "HTTPRequest",
    "RequestParser",
    "HTTPParseError",
    "parse_request",

    # Responses
    "HTTPResponse",
    "FileBody",
    "ResponseHeaders",
    "serialize",
    "file_response",
    "bad_request",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "internal_error",

    # Status codes
    "HTTPStatus",
    "reason_phrase",

    # Content types
    "ContentType",
    "content_type_for",
    "extension_of",
    "mime_value",
]

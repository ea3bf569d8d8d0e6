"""
=============================================================================
HTTP RESPONSE
=============================================================================

The response record and its wire serialization.

=============================================================================
WIRE FORMAT
=============================================================================

Every response this server writes has this exact shape:

    ┌─────────────────────────────────────────────────────────────────────┐
    │  HTTP/1.0 200 OK\n                  ← status line (always)          │
    │  Allow: GET\n                       ← always, whatever the status   │
    │  Content-type: text/html\n          ← only when a file was read     │
    │  \n                                 ← only when there is a body     │
    │  <file bytes>                       ← only when there is a body     │
    └─────────────────────────────────────────────────────────────────────┘

Two things differ from textbook HTTP:

1. LINE ENDINGS: every line ends in a bare "\n", not "\r\n".

2. NO BODY, NO BLANK LINE: an error response stops right after its last
   header line. There is no Content-Length either; HTTP/1.0 clients read
   until the server closes the connection.

    Error example (404):

        HTTP/1.0 404 Not Found\n
        Allow: GET\n

=============================================================================
BODY / CONTENT TYPE PAIRING
=============================================================================

A body always comes with a content type and only ever on a 200. Instead of
two independent optional fields that could disagree, the response holds a
single optional FileBody:

    HTTPResponse(status=404)                                  ✓
    HTTPResponse(status=200, payload=FileBody(b"hi", HTML))   ✓
    HTTPResponse(status=404, payload=FileBody(...))           ✗ ValueError

=============================================================================
"""

from dataclasses import dataclass
from typing import Optional

from .content_types import ContentType
from .status_codes import HTTPStatus, reason_phrase


HTTP_VERSION = "HTTP/1.0"
ALLOWED_METHODS = "GET"
LINE_END = b"\n"


@dataclass(frozen=True)
class FileBody:
    """The bytes of a file together with the type they are labelled as."""

    content: bytes
    content_type: ContentType


@dataclass(frozen=True)
class ResponseHeaders:
    """Headers that vary between responses (Allow never does)."""

    content_type: Optional[ContentType] = None


@dataclass(frozen=True)
class HTTPResponse:
    """
    An HTTP response ready to be serialized.

    Attributes:
        status:  Numeric status code (an HTTPStatus or any int)
        payload: File contents and their content type, 200 only
    """

    status: int = HTTPStatus.OK
    payload: Optional[FileBody] = None

    def __post_init__(self):
        if self.payload is not None and self.status != HTTPStatus.OK:
            raise ValueError(
                f"A {self.status} response cannot carry a body"
            )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def headers(self) -> ResponseHeaders:
        if self.payload is None:
            return ResponseHeaders()
        return ResponseHeaders(content_type=self.payload.content_type)

    @property
    def content_type(self) -> Optional[ContentType]:
        return self.headers.content_type

    @property
    def body(self) -> Optional[bytes]:
        return None if self.payload is None else self.payload.content

    @property
    def status_line(self) -> str:
        """
        The status line without its terminator.

        Unknown codes keep the trailing space and get an empty phrase:
        "HTTP/1.0 299 ".
        """
        return f"{HTTP_VERSION} {int(self.status)} {reason_phrase(self.status)}"

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_bytes(self) -> bytes:
        """
        Serialize the response to the exact bytes sent to the client.

        Deterministic: the same response always gives the same bytes.
        """
        lines = [self.status_line, f"Allow: {ALLOWED_METHODS}"]

        if self.content_type is not None:
            lines.append(f"Content-type: {self.content_type.value}")

        head = b"".join(line.encode("utf-8") + LINE_END for line in lines)

        if self.body is None:
            return head

        # One blank line separates headers from the body
        return head + LINE_END + self.body


def serialize(response: HTTPResponse) -> bytes:
    """Serialize a response; same as ``response.to_bytes()``."""
    return response.to_bytes()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================
#
#     return file_response(data, ContentType.PNG)
#     return not_found()
#
# =============================================================================

def file_response(content: bytes, content_type: ContentType) -> HTTPResponse:
    """Create a 200 OK response carrying file contents."""
    return HTTPResponse(HTTPStatus.OK, FileBody(content, content_type))


def bad_request() -> HTTPResponse:
    """Create a 400 Bad Request response (no body)."""
    return HTTPResponse(HTTPStatus.BAD_REQUEST)


def forbidden() -> HTTPResponse:
    """Create a 403 Forbidden response (no body)."""
    return HTTPResponse(HTTPStatus.FORBIDDEN)


def not_found() -> HTTPResponse:
    """Create a 404 Not Found response (no body)."""
    return HTTPResponse(HTTPStatus.NOT_FOUND)


def method_not_allowed() -> HTTPResponse:
    """
    Create a 405 Method Not Allowed response (no body).

    The Allow header listing GET is added by to_bytes() for every response,
    so nothing extra is needed here.
    """
    return HTTPResponse(HTTPStatus.METHOD_NOT_ALLOWED)


def internal_error() -> HTTPResponse:
    """Create a 500 Internal Server Error response (no body)."""
    return HTTPResponse(HTTPStatus.INTERNAL_SERVER_ERROR)

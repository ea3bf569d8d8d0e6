"""
=============================================================================
HTTP REQUEST LINE PARSER
=============================================================================

Turns the first line of an HTTP request into a structured HTTPRequest.

This is a static HTTP/1.0 server, so the request line is ALL we read.
Headers and bodies that follow it are never looked at.

=============================================================================
REQUEST LINE ANATOMY
=============================================================================

    GET /css/site.css HTTP/1.0\n
    ─┬─ ──────┬────── ────┬───
     │        │           │
   Method    Path      Version

The line is split on single spaces. The first three pieces become method,
path and version, each with surrounding whitespace trimmed (which is what
removes the trailing "\r\n" or "\n"). Anything after the third piece is
ignored.

=============================================================================
WHAT COUNTS AS MALFORMED?
=============================================================================

Only one thing: fewer than three pieces.

    ""                       → 1 piece   → HTTPParseError
    "BADLINE\n"              → 1 piece   → HTTPParseError
    "GET /index.html\n"      → 2 pieces  → HTTPParseError
    "GET /index.html HTTP/1.0\n"         → OK
    "GET /a HTTP/1.0 trailing junk\n"    → OK (junk ignored)

The method is not validated here. Deciding what to do with a POST is the
static handler's job (it answers 405).

=============================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime


class HTTPParseError(Exception):
    """
    Raised when a request line cannot be parsed.

    Carries the HTTP status code the client should receive (always 400 for
    this parser) and the raw line, so it can be logged verbatim.
    """

    def __init__(self, message: str, raw: str = "", status_code: int = 400):
        super().__init__(message)
        self.raw = raw
        self.status_code = status_code


def _now() -> datetime:
    """Current wall-clock time in the local time zone."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class HTTPRequest:
    """
    A parsed request line.

    Immutable once parsed. ``time`` is when the line was parsed; it is only
    used for the access log.

    Attributes:
        method:  Request method exactly as sent ("GET", "POST", ...)
        path:    Request target, used verbatim to locate the file
        version: Protocol version string ("HTTP/1.0")
        time:    Local, timezone-aware parse timestamp
    """

    method: str
    path: str
    version: str
    time: datetime = field(default_factory=_now, compare=False)


class RequestParser:
    """
    Parses request lines into HTTPRequest objects.

    Stateless; one instance can be shared by any number of connections.

        parser = RequestParser()
        request = parser.parse("GET /index.html HTTP/1.0\\n")
        request.path   # "/index.html"
    """

    SEPARATOR = " "

    def parse(self, line: str) -> HTTPRequest:
        """
        Parse one request line.

        Args:
            line: The raw line as read from the client, terminator included.

        Returns:
            HTTPRequest stamped with the current local time.

        Raises:
            HTTPParseError: If the line has fewer than three parts.
        """
        # maxsplit=3 keeps any trailing junk in a fourth piece we never read
        parts = line.split(self.SEPARATOR, 3)
        if len(parts) < 3:
            raise HTTPParseError(f"Malformed request line: {line!r}", raw=line)

        method, path, version = (part.strip() for part in parts[:3])

        return HTTPRequest(
            method=method,
            path=path,
            version=version,
            time=_now(),
        )


def parse_request(line: str) -> HTTPRequest:
    """
    Convenience function to parse a request line.

    Equivalent to ``RequestParser().parse(line)``.
    """
    return RequestParser().parse(line)

"""
=============================================================================
HTTP STATUS CODES
=============================================================================

Status codes and their canonical reason phrases, as written on the status
line of every response this server sends:

    HTTP/1.0 404 Not Found
             ─┬─ ────┬────
              │      │
              │      └── Reason phrase (from _STATUS_PHRASES)
              └───────── Status code

=============================================================================
WHICH CODES DOES A STATIC FILE SERVER ACTUALLY SEND?
=============================================================================

    ┌────────┬──────────────────────────────────────────────────────────┐
    │  200   │ File found and read                                      │
    │  400   │ Request line has fewer than three parts                  │
    │  403   │ File exists but the process may not read it              │
    │  404   │ No file at static_root + path                            │
    │  405   │ Anything other than GET                                  │
    │  500   │ Any other filesystem error (e.g. path is a directory)    │
    └────────┴──────────────────────────────────────────────────────────┘

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes and reason phrases.

    Being an IntEnum, members compare equal to plain integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200                            # File found and read

    BAD_REQUEST = 400                   # Malformed request line
    FORBIDDEN = 403                     # Permission denied on the file
    NOT_FOUND = 404                     # File does not exist
    METHOD_NOT_ALLOWED = 405            # Only GET is served

    INTERNAL_SERVER_ERROR = 500         # Any other I/O failure

    @property
    def phrase(self) -> str:
        """Reason phrase for this status code."""
        return _STATUS_PHRASES[self]


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def reason_phrase(code: int) -> str:
    """
    Canonical reason phrase for a numeric status code.

    Unlike HTTPStatus.phrase this accepts any integer and returns an empty
    string for codes it does not know, so a status line can always be
    written:

        >>> reason_phrase(404)
        'Not Found'
        >>> reason_phrase(299)
        ''
    """
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""

"""
=============================================================================
ACCESS LOG
=============================================================================

One line per handled connection.

    Parsed requests:

        [2026-10-17 09:14:03.512870+02:00] "GET /index.html HTTP/1.0" 200

    Request lines that could not be parsed (no fields to show, so the raw
    text is logged instead):

        Bad request: BADLINE

=============================================================================
WHERE DO THE LINES GO?
=============================================================================

By default to the "statichttp.access" logger at INFO, so the usual logging
configuration decides the destination:

    logging.getLogger("statichttp.access").addHandler(file_handler)

Any callable taking a string can be injected instead. Tests use this to
capture lines without touching global logging state:

    lines = []
    log = AccessLog(sink=lines.append)

=============================================================================
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .http.request import HTTPRequest


logger = logging.getLogger("statichttp.access")

LogSink = Callable[[str], None]


@dataclass(frozen=True)
class RequestLog:
    """Fields of one access log entry."""

    time: datetime
    method: str
    path: str
    version: str
    status_code: int

    @classmethod
    def from_request(cls, request: HTTPRequest, status_code: int) -> "RequestLog":
        return cls(
            time=request.time,
            method=request.method,
            path=request.path,
            version=request.version,
            status_code=int(status_code),
        )

    def to_text(self) -> str:
        return (
            f'[{self.time}] '
            f'"{self.method} {self.path} {self.version}" {self.status_code}'
        )


class AccessLog:
    """Formats access log lines and hands them to a sink."""

    def __init__(self, sink: Optional[LogSink] = None):
        self.sink = sink if sink is not None else logger.info

    def request(self, request: HTTPRequest, status_code: int) -> None:
        """Log a parsed request and the status it was answered with."""
        self.sink(RequestLog.from_request(request, status_code).to_text())

    def bad_request(self, raw_line: str) -> None:
        """Log a request line that failed to parse, verbatim."""
        line = raw_line.rstrip("\r\n")
        self.sink(f"Bad request: {line}")

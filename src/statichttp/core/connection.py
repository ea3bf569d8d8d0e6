"""
=============================================================================
CONNECTION HANDLING
=============================================================================

Runs one connection through the whole pipeline:

    ┌──────────────┐   line   ┌───────────────┐ request ┌───────────────────┐
    │ stream       │ ───────► │ RequestParser │ ──────► │ StaticFileHandler │
    │ .readline()  │          └───────┬───────┘         └─────────┬─────────┘
    └──────────────┘                  │ HTTPParseError            │ response
                                      ▼                           ▼
                                 400 response               access log line
                                 "Bad request: ..."               │
                                      │                           │
                                      └──────────┬────────────────┘
                                                 ▼
                                   stream.write(response.to_bytes())

=============================================================================
STREAMS, NOT SOCKETS
=============================================================================

The handler works on any binary file-like object with readline(), write()
and flush(). The socket server passes ``sock.makefile("rwb")``; tests pass
an in-memory stream. Opening and closing the stream is the caller's job.

=============================================================================
ERRORS
=============================================================================

    Malformed request line       → 400 response, never raised
    Non-GET, missing file, ...   → status code, never raised
    readline() / write() failure → OSError propagates, nothing is sent

A request line that is not valid UTF-8 is treated as a failed read.

=============================================================================
"""

import logging
from typing import BinaryIO, Optional

from ..access_log import AccessLog, LogSink
from ..handlers.static import StaticFileHandler
from ..http.request import RequestParser, HTTPParseError
from ..http.response import HTTPResponse, bad_request


logger = logging.getLogger(__name__)


class ConnectionHandler:
    """
    Serves one request per call to handle().

    Keeps no per-connection state between calls, so one instance can be
    reused for every accepted connection.

        handler = ConnectionHandler("/srv/www")
        with sock.makefile("rwb") as stream:
            handler.handle(stream)
    """

    def __init__(
        self,
        static_root: str,
        access_log: Optional[AccessLog] = None,
        confine_to_root: bool = False,
    ):
        self.parser = RequestParser()
        self.files = StaticFileHandler(static_root, confine_to_root=confine_to_root)
        self.access_log = access_log if access_log is not None else AccessLog()

    def handle(self, stream: BinaryIO) -> None:
        """
        Read one request line from stream and write the response back.

        Raises:
            OSError: If reading the request line or writing the response
                     fails.
        """
        line = self._read_request_line(stream)
        response = self.respond(line)

        stream.write(response.to_bytes())
        stream.flush()

    def respond(self, line: str) -> HTTPResponse:
        """Turn a raw request line into a response, logging the outcome."""
        try:
            request = self.parser.parse(line)
        except HTTPParseError as e:
            self.access_log.bad_request(e.raw)
            return bad_request()

        response = self.files.build(request)
        self.access_log.request(request, response.status)
        return response

    def _read_request_line(self, stream: BinaryIO) -> str:
        raw = stream.readline()
        logger.debug(f"Read request line: {raw!r}")

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OSError(f"Request line is not valid UTF-8: {e}") from e


def handle(stream: BinaryIO, static_root: str, log: Optional[LogSink] = None) -> None:
    """
    Handle one connection: read a request line, write a response.

    Args:
        stream: Open binary stream to the client.
        static_root: Prefix prepended to the request path.
        log: Where access log lines go; the "statichttp.access" logger
             when omitted.

    Raises:
        OSError: If the stream cannot be read from or written to.
    """
    ConnectionHandler(static_root, access_log=AccessLog(sink=log)).handle(stream)

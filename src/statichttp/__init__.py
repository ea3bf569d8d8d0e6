"""
=============================================================================
STATICHTTP - A MINIMAL STATIC FILE SERVER
=============================================================================

A single-threaded HTTP/1.0 server that answers exactly one request line per
connection with the contents of a file.

=============================================================================
ARCHITECTURE OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         statichttp                                  │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   __main__.py / server.py      CLI, logging setup, lifecycle        │
    │          │                                                           │
    │          ▼                                                           │
    │   core/socket_server.py        bind, listen, accept, close          │
    │          │  binary stream                                            │
    │          ▼                                                           │
    │   core/connection.py           read line → respond → write          │
    │          │                                                           │
    │          ├──► http/request.py          "GET /a HTTP/1.0" → request  │
    │          ├──► handlers/static.py       request → status + file      │
    │          │        └──► http/content_types.py                         │
    │          ├──► access_log.py            one line per request         │
    │          └──► http/response.py         response → bytes             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
QUICK START
=============================================================================

    from statichttp import StaticHTTPServer, ServerConfig

    server = StaticHTTPServer(ServerConfig(static_root="./public"))
    server.run()

Or drive the core directly with any binary stream:

    from statichttp import handle

    handle(stream, "./public")

=============================================================================
"""

__version__ = "1.0.0"

from .config import ServerConfig
from .server import StaticHTTPServer
from .core.connection import ConnectionHandler, handle

__all__ = [
    "StaticHTTPServer",
    "ServerConfig",
    "ConnectionHandler",
    "handle",
    "__version__",
]

"""
=============================================================================
CORE I/O LAYER
=============================================================================

    socket_server.py   Accepts TCP connections, one at a time
    connection.py      Serves one request on an open stream

SocketServer knows nothing about HTTP; ConnectionHandler knows nothing
about sockets. They meet at a binary stream:

    SocketServer(config).start(ConnectionHandler(root).handle)

=============================================================================
"""

from .socket_server import SocketServer
from .connection import ConnectionHandler, handle

__all__ = [
    "SocketServer",        # TCP listener - accepts and closes connections
    "ConnectionHandler",   # Request line in, response bytes out
    "handle",              # Function form of ConnectionHandler.handle
]

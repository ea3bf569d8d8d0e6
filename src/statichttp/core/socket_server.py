"""
=============================================================================
SOCKET SERVER
=============================================================================

Accepts TCP connections and hands each one to a callback, one at a time.

=============================================================================
LIFECYCLE
=============================================================================

    socket() → setsockopt(SO_REUSEADDR) → bind() → listen()
        │
        ▼
    ┌─────────────────────────────── accept loop ──────────────────────┐
    │                                                                  │
    │   accept()  ──timeout──► check _running, loop again              │
    │      │                                                           │
    │      ▼                                                           │
    │   stream = client.makefile("rwb")                                │
    │   connection_handler(stream)      ← blocks until response sent   │
    │   close stream and client socket                                 │
    │                                                                  │
    │   OSError while handling → log "Error handling client", go on    │
    │                                                                  │
    └──────────────────────────────────────────────────────────────────┘
        │ shutdown() / SIGINT / SIGTERM
        ▼
    close listening socket

Connections are served sequentially: the next accept() only happens after
the previous client has been answered and closed.

=============================================================================
"""

import signal
import socket
import logging
import threading
from typing import BinaryIO, Callable, Optional, Tuple

from ..config import ServerConfig


logger = logging.getLogger(__name__)

StreamHandler = Callable[[BinaryIO], None]


class SocketServer:
    """
    Low-level TCP listener.

    Usage:
        def handle(stream):
            ...

        server = SocketServer(config)
        server.start(handle)  # Blocks until shutdown()
    """

    def __init__(self, config: ServerConfig):
        """
        Args:
            config: Host, port, backlog and timeouts to use.

        The socket is created in start(), not here.
        """
        self.config = config

        self._socket: Optional[socket.socket] = None
        self._running = False

        # Set once the socket is listening; lets other threads wait for it
        self._ready_event = threading.Event()

        self._original_handlers: dict = {}

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def address(self) -> Tuple[str, int]:
        """
        The (host, port) actually bound.

        Differs from the configured port when the config asked for port 0.
        """
        if self._socket is not None:
            return self._socket.getsockname()[:2]
        return (self.config.host, self.config.port)

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until the server is listening. False on timeout."""
        return self._ready_event.wait(timeout)

    def _create_socket(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

        # Avoid "Address already in use" when restarting during TIME_WAIT
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

        # accept() wakes up periodically so shutdown() is noticed
        sock.settimeout(self.config.accept_timeout)

        return sock

    def _setup_signals(self):
        """
        Route SIGINT and SIGTERM to shutdown().

        Python only allows installing signal handlers from the main thread,
        so a server started from any other thread (tests do this) skips it.
        """
        if threading.current_thread() is not threading.main_thread():
            return

        def shutdown_handler(signum, frame):
            signal_name = signal.Signals(signum).name
            logger.info(f"Received {signal_name}, initiating shutdown...")
            self.shutdown()

        self._original_handlers[signal.SIGTERM] = signal.signal(signal.SIGTERM, shutdown_handler)
        self._original_handlers[signal.SIGINT] = signal.signal(signal.SIGINT, shutdown_handler)

    def _restore_signals(self):
        for sig, handler in self._original_handlers.items():
            signal.signal(sig, handler)
        self._original_handlers.clear()

    def start(self, connection_handler: StreamHandler):
        """
        Bind, listen and serve connections until shutdown() is called.

        Args:
            connection_handler: Called with a binary stream for each
                                accepted client. The stream is closed
                                after it returns.

        Raises:
            OSError: If the address cannot be bound.
        """
        self._socket = self._create_socket()

        try:
            self._socket.bind((self.config.host, self.config.port))
        except OSError as e:
            logger.error(f"Failed to bind to {self.config.host}:{self.config.port}: {e}")
            self._socket.close()
            self._socket = None
            raise

        self._socket.listen(self.config.backlog)
        self._running = True
        self._setup_signals()

        host, port = self.address
        logger.info(f"Server listening on {host}:{port}")
        self._ready_event.set()

        try:
            self._accept_loop(connection_handler)
        finally:
            self._cleanup()

    def _accept_loop(self, connection_handler: StreamHandler):
        while self._running:
            try:
                client_socket, client_address = self._socket.accept()
            except socket.timeout:
                continue
            except OSError as e:
                if self._running:
                    logger.error(f"Connection failed: {e}")
                    continue
                break

            logger.debug(f"Accepted connection from {client_address[0]}:{client_address[1]}")
            self._serve_client(client_socket, connection_handler)

    def _serve_client(self, client_socket: socket.socket, connection_handler: StreamHandler):
        """Run the handler for one client and always close it afterwards."""
        with client_socket:
            # None means fully blocking
            client_socket.settimeout(self.config.timeout)
            try:
                with client_socket.makefile("rwb") as stream:
                    connection_handler(stream)
            except OSError as e:
                logger.error(f"Error handling client: {e}")

    def shutdown(self):
        """
        Stop accepting connections.

        Safe to call from a signal handler or another thread, and more than
        once. The connection being served, if any, is finished first.
        """
        logger.info("Shutting down socket server...")
        self._running = False

    def _cleanup(self):
        self._restore_signals()

        if self._socket:
            try:
                self._socket.close()
            except OSError:
                pass  # Already closed
            self._socket = None

        self._ready_event.clear()
        logger.info("Socket server stopped")

"""
=============================================================================
STATIC HTTP SERVER
=============================================================================

Ties the pieces together:

    ServerConfig ──► StaticHTTPServer
                        │
                        ├── logging.basicConfig(...)
                        ├── ConnectionHandler(static_root)
                        └── SocketServer(config).start(handler.handle)

    server = StaticHTTPServer(ServerConfig(static_root="/srv/www"))
    server.run()   # Blocks until Ctrl+C

=============================================================================
"""

import logging
from typing import Optional, Tuple

from .config import ServerConfig
from .core.connection import ConnectionHandler
from .core.socket_server import SocketServer


logger = logging.getLogger(__name__)


class StaticHTTPServer:
    """
    A single-threaded static file server.

    Each connection gets exactly one request line read and one response
    written, then it is closed.
    """

    def __init__(self, config: Optional[ServerConfig] = None):
        """
        Args:
            config: Server configuration. Defaults to ServerConfig().

        Raises:
            ValueError: If the configuration is invalid.
        """
        self.config = config or ServerConfig()
        self.config.validate()

        self.handler = ConnectionHandler(
            self.config.static_root,
            confine_to_root=self.config.confine_to_root,
        )
        self._socket_server = SocketServer(self.config)

    @property
    def address(self) -> Tuple[str, int]:
        """The address the server is (or will be) bound to."""
        return self._socket_server.address

    def run(self, setup_logging: bool = True):
        """
        Start serving. Blocks until shutdown() or SIGINT/SIGTERM.

        Args:
            setup_logging: Configure the root logger from config.log_level.
                           Pass False when embedding in an application that
                           configures logging itself.
        """
        if setup_logging:
            self._setup_logging()

        logger.info("Starting server...")
        logger.info(f"Serving files from {self.config.static_root!r}")

        try:
            self._socket_server.start(self.handler.handle)
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt")
            self.shutdown()

        logger.info("Server stopped")

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until the server is accepting connections."""
        return self._socket_server.wait_until_ready(timeout)

    def shutdown(self):
        """Stop the server after the current connection, if any."""
        self._socket_server.shutdown()

    def _setup_logging(self):
        """Configure logging based on config."""
        level = self.config.log_level_number

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        logging.getLogger("statichttp").setLevel(level)

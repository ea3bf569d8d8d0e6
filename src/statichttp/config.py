"""
=============================================================================
SERVER CONFIGURATION
=============================================================================

Everything the server needs to know before it starts, in one dataclass.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    Priority (highest to lowest):

    1. Command-line arguments
       └── python -m statichttp --port 9000

    2. Environment variables
       └── STATICHTTP_PORT=9000 python -m statichttp

    3. Default values (in this dataclass)

The defaults bind to 127.0.0.1:8001 and serve the current directory.

=============================================================================
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """
    Configuration for the static file server.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    NETWORK SETTINGS
    - host, port, backlog, timeout, accept_timeout

    STATIC FILES
    - static_root, confine_to_root

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    """
    The IP address to bind to.
    - "127.0.0.1" - Localhost only
    - "0.0.0.0" - All network interfaces
    """

    port: int = 8001
    """
    The port number to listen on. 0 lets the OS pick a free port.
    """

    backlog: int = 128
    """
    Maximum number of queued connections waiting to be accepted.
    """

    timeout: Optional[float] = None
    """
    Per-connection socket timeout in seconds.
    None = block until the client sends its request line.
    """

    accept_timeout: float = 1.0
    """
    How long accept() waits before checking whether to shut down.
    """

    # ─────────────────────────────────────────────────────────────────────
    # STATIC FILES
    # ─────────────────────────────────────────────────────────────────────

    static_root: str = "."
    """
    Prefix prepended to every request path. Usually a directory without a
    trailing slash, since request paths start with "/".
    """

    confine_to_root: bool = False
    """
    Answer 403 for paths that resolve outside static_root.
    Off by default: paths are used exactly as sent.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    Access log lines are logged at INFO.
    """

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        STATICHTTP_HOST       Server host (default: 127.0.0.1)
        STATICHTTP_PORT       Server port (default: 8001)
        STATICHTTP_ROOT       Static root (default: .)
        STATICHTTP_TIMEOUT    Connection timeout in seconds (default: none)
        STATICHTTP_CONFINE    "1" to confine paths to the root
        STATICHTTP_LOG_LEVEL  Logging level (default: INFO)

        =====================================================================
        """
        timeout = os.getenv("STATICHTTP_TIMEOUT")

        return cls(
            host=os.getenv("STATICHTTP_HOST", "127.0.0.1"),
            port=int(os.getenv("STATICHTTP_PORT", "8001")),
            static_root=os.getenv("STATICHTTP_ROOT", "."),
            timeout=float(timeout) if timeout else None,
            confine_to_root=os.getenv("STATICHTTP_CONFINE", "") in ("1", "true", "yes"),
            log_level=os.getenv("STATICHTTP_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called at startup so a bad value fails immediately rather than on
        the first connection.

        Raises:
            ValueError: Describing the first invalid value found.
        """
        if not 0 <= self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}. Must be 0-65535.")

        if self.backlog < 1:
            raise ValueError("backlog must be >= 1")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        if self.accept_timeout <= 0:
            raise ValueError("accept_timeout must be > 0")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )

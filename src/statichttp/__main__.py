"""
=============================================================================
STATICHTTP CLI ENTRY POINT
=============================================================================

Run the server from the command line:

    python -m statichttp
    python -m statichttp --root ./public --port 8080
    statichttp --host 0.0.0.0 --log-level DEBUG

Options not given on the command line fall back to STATICHTTP_*
environment variables (see config.py), then to the built-in defaults.

=============================================================================
"""

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from . import __version__
from .config import ServerConfig, LOG_LEVELS
from .server import StaticHTTPServer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statichttp",
        description="Single-threaded static file server speaking HTTP/1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m statichttp                       # Serve . on 127.0.0.1:8001
  python -m statichttp --root ./public       # Serve another directory
  python -m statichttp --host 0.0.0.0 -p 80  # Listen on all interfaces
  python -m statichttp --confine             # Refuse paths outside the root
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--host", "-H",
        default=None,
        help="Host to bind to (default: 127.0.0.1)"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to listen on (default: 8001)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # FILE ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--root", "-r",
        dest="static_root",
        default=None,
        help="Static root prepended to request paths (default: .)"
    )

    parser.add_argument(
        "--confine",
        dest="confine_to_root",
        action="store_true",
        default=None,
        help="Answer 403 for paths that resolve outside the static root"
    )

    # ─────────────────────────────────────────────────────────────────────
    # META ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--log-level", "-l",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"statichttp {__version__}"
    )

    return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    """
    Layer command-line arguments over the environment configuration.

    Only arguments the user actually gave (not None) override.
    """
    overrides = {
        name: value
        for name, value in vars(args).items()
        if value is not None
    }
    return dataclasses.replace(ServerConfig.from_env(), **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, build the server and run it until interrupted."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        server = StaticHTTPServer(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        server.run()
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
=============================================================================
STATIC FILE HANDLER
=============================================================================

Decides what response a parsed request gets: which status code, and for a
successful GET, which bytes and which content type.

=============================================================================
FLOW
=============================================================================

    HTTPRequest
        │
        ▼
    method == "GET"? ──no──► 405 Method Not Allowed
        │
       yes
        ▼
    full_path = static_root + path      (plain string concatenation)
        │
        ▼
    read whole file as bytes
        │
        ├── ok ─────────────────► 200, body, Content-type from extension
        ├── FileNotFoundError ──► 404 Not Found
        ├── PermissionError ────► 403 Forbidden
        └── other error ────────► 500 Internal Server Error

=============================================================================
PATH HANDLING
=============================================================================

The request path is appended to the static root exactly as received:

    static_root = "/srv/www"
    path        = "/css/site.css"
    full_path   = "/srv/www/css/site.css"

No URL decoding, no normalization, no index.html for directories (reading
a directory is an I/O error, so it answers 500). A path containing ".."
segments reaches the filesystem unchanged.

Deployments that need containment can pass ``confine_to_root=True``; the
concatenated path is then resolved and anything that lands outside the
static root answers 403 without being read.

=============================================================================
"""

import logging
from pathlib import Path

from ..http.request import HTTPRequest
from ..http.response import (
    HTTPResponse,
    file_response,
    forbidden,
    not_found,
    method_not_allowed,
    internal_error,
)
from ..http.content_types import content_type_for


logger = logging.getLogger(__name__)


class StaticFileHandler:
    """
    Builds responses for requests against one static root.

    Holds no per-request state, so a single instance can serve every
    connection.

        handler = StaticFileHandler("/srv/www")
        response = handler.build(request)
    """

    def __init__(self, static_root: str, confine_to_root: bool = False):
        """
        Args:
            static_root: Prefix prepended verbatim to every request path.
            confine_to_root: Refuse (403) paths that resolve outside
                             static_root.
        """
        self.static_root = static_root
        self.confine_to_root = confine_to_root

    def build(self, request: HTTPRequest) -> HTTPResponse:
        """
        Build the response for a request.

        Never raises for filesystem problems; every failure becomes a
        status code.
        """
        if request.method != "GET":
            return method_not_allowed()

        full_path = self.static_root + request.path

        if self.confine_to_root:
            try:
                inside = self._is_inside_root(full_path)
            except ValueError as e:
                # Embedded NUL byte; not a containment question
                logger.error(f"Error resolving {full_path!r}: {e}")
                return internal_error()

            if not inside:
                logger.warning(f"Path escapes static root: {request.path}")
                return forbidden()

        try:
            content = self._read(full_path)
        except FileNotFoundError:
            return not_found()
        except PermissionError:
            return forbidden()
        except (OSError, ValueError) as e:
            # ValueError: the path itself is unusable (embedded NUL byte)
            logger.error(f"Error reading {full_path}: {e}")
            return internal_error()

        return file_response(content, content_type_for(full_path))

    def _read(self, full_path: str) -> bytes:
        with open(full_path, "rb") as f:
            return f.read()

    def _is_inside_root(self, full_path: str) -> bool:
        """
        Raises:
            ValueError: If the path cannot be resolved at all.
        """
        root = Path(self.static_root).resolve()
        target = Path(full_path).resolve()
        try:
            target.relative_to(root)
        except ValueError:
            return False
        return True


def build_response(request: HTTPRequest, static_root: str) -> HTTPResponse:
    """
    Build the response for a request against a static root.

    Shorthand for ``StaticFileHandler(static_root).build(request)``.
    """
    return StaticFileHandler(static_root).build(request)

"""
=============================================================================
CONTENT TYPE DETECTION
=============================================================================

Maps file extensions to the MIME type sent in the Content-type header.

The set of types is deliberately closed: a file either has one of the
extensions below or it is served as plain text.

    ┌─────────────┬────────────┬──────────────────┐
    │  Extension  │  Member    │  MIME type       │
    ├─────────────┼────────────┼──────────────────┤
    │  css        │  CSS       │  text/css        │
    │  gif        │  GIF       │  image/gif       │
    │  htm, html  │  HTML      │  text/html       │
    │  jpeg, jpg  │  JPEG      │  image/jpeg      │
    │  png        │  PNG       │  image/png       │
    │  svg        │  SVG       │  image/svg+xml   │
    │  txt        │  TEXT      │  text/plain      │
    │  xml        │  XML       │  application/xml │
    │  (anything) │  TEXT      │  text/plain      │
    └─────────────┴────────────┴──────────────────┘

Lookup is case-sensitive: "INDEX.HTML" is served as text/plain.

=============================================================================
"""

from enum import Enum


class ContentType(Enum):
    """
    The content types this server knows how to label.

    Each member's value is its MIME string, so ``ContentType.HTML.value``
    is ``"text/html"``.
    """

    CSS = "text/css"
    GIF = "image/gif"
    HTML = "text/html"
    JPEG = "image/jpeg"
    PNG = "image/png"
    SVG = "image/svg+xml"
    TEXT = "text/plain"
    XML = "application/xml"

    @classmethod
    def from_extension(cls, extension: str) -> "ContentType":
        """
        Resolve an extension (without the leading dot) to a content type.

        Total function: unknown and empty extensions give TEXT.

        Examples:
            >>> ContentType.from_extension("jpg")
            <ContentType.JPEG: 'image/jpeg'>

            >>> ContentType.from_extension("PNG")
            <ContentType.TEXT: 'text/plain'>
        """
        return _EXTENSIONS.get(extension, cls.TEXT)


_EXTENSIONS = {
    "css": ContentType.CSS,
    "gif": ContentType.GIF,
    "htm": ContentType.HTML,
    "html": ContentType.HTML,
    "jpeg": ContentType.JPEG,
    "jpg": ContentType.JPEG,
    "png": ContentType.PNG,
    "svg": ContentType.SVG,
    "txt": ContentType.TEXT,
    "xml": ContentType.XML,
}


def mime_value(content_type: ContentType) -> str:
    """Return the MIME string for a content type."""
    return content_type.value


def extension_of(path: str) -> str:
    """
    Return everything after the last "." in path, or "" if there is none.

    The whole path string is considered, not just the final component, so
    "/v1.2/readme" has the extension "2/readme" (which resolves to TEXT).

    Examples:
        >>> extension_of("/static/index.html")
        'html'
        >>> extension_of("/static/Makefile")
        ''
    """
    _, dot, extension = path.rpartition(".")
    return extension if dot else ""


def content_type_for(path: str) -> ContentType:
    """Content type of a filesystem path, judged by its extension."""
    return ContentType.from_extension(extension_of(path))

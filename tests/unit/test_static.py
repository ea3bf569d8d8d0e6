"""
Unit tests for the static file handler.
"""

import pytest

from statichttp.handlers.static import StaticFileHandler, build_response
from statichttp.http.content_types import ContentType
from statichttp.http.request import HTTPRequest
from statichttp.http.status_codes import HTTPStatus


def get(path: str, method: str = "GET") -> HTTPRequest:
    return HTTPRequest(method=method, path=path, version="HTTP/1.0")


class TestStaticFileHandler:
    """Tests for StaticFileHandler.build."""

    def test_serves_existing_file(self, static_root: str):
        """Test a GET for a file that exists."""
        response = build_response(get("/index.html"), static_root)

        assert response.status == HTTPStatus.OK
        assert response.body == b"hi"
        assert response.content_type is ContentType.HTML

    def test_serves_exact_binary_bytes(self, static_root: str):
        """Test that binary files come back byte for byte."""
        response = build_response(get("/logo.png"), static_root)

        assert response.body == b"\x89PNG\r\n\x1a\n\x00\x00"
        assert response.content_type is ContentType.PNG

    def test_nested_file(self, static_root: str):
        response = build_response(get("/docs/guide.txt"), static_root)

        assert response.body == b"guide"
        assert response.content_type is ContentType.TEXT

    def test_no_extension_is_text(self, static_root: str):
        response = build_response(get("/README"), static_root)

        assert response.status == HTTPStatus.OK
        assert response.content_type is ContentType.TEXT

    @pytest.mark.parametrize("method", ["POST", "HEAD", "PUT", "get"])
    def test_non_get_is_405(self, static_root: str, method: str):
        """Test that anything but GET is refused, even for existing files."""
        response = build_response(get("/index.html", method=method), static_root)

        assert response.status == HTTPStatus.METHOD_NOT_ALLOWED
        assert response.body is None
        assert response.content_type is None

    def test_missing_file_is_404(self, static_root: str):
        response = build_response(get("/missing.png"), static_root)

        assert response.status == HTTPStatus.NOT_FOUND
        assert response.body is None
        assert response.content_type is None

    def test_permission_denied_is_403(self, static_root: str, monkeypatch):
        """Test that an unreadable file answers 403."""
        handler = StaticFileHandler(static_root)

        def deny(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(handler, "_read", deny)
        response = handler.build(get("/index.html"))

        assert response.status == HTTPStatus.FORBIDDEN
        assert response.body is None

    def test_directory_is_500(self, static_root: str):
        """Test that reading a directory is an I/O error, not a listing."""
        response = build_response(get("/docs"), static_root)

        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert response.body is None

    def test_other_io_error_is_500(self, static_root: str, monkeypatch):
        handler = StaticFileHandler(static_root)

        def fail(path):
            raise OSError(5, "Input/output error", path)

        monkeypatch.setattr(handler, "_read", fail)

        assert handler.build(get("/index.html")).status == HTTPStatus.INTERNAL_SERVER_ERROR

    def test_nul_byte_in_path_is_500(self, static_root: str):
        response = build_response(get("/index.html\x00"), static_root)

        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR

    def test_path_is_concatenated_verbatim(self, tmp_path):
        """Test that the root is a plain string prefix, not a directory join."""
        (tmp_path / "site-index.html").write_bytes(b"prefixed")
        root = str(tmp_path / "site")

        response = build_response(get("-index.html"), root)

        assert response.body == b"prefixed"


class TestConfineToRoot:
    """Tests for the opt-in path containment."""

    def test_traversal_reaches_filesystem_by_default(self, tmp_path):
        """Test that ".." is passed through when containment is off."""
        (tmp_path / "secret.txt").write_bytes(b"secret")
        root = tmp_path / "www"
        root.mkdir()

        response = build_response(get("/../secret.txt"), str(root))

        assert response.status == HTTPStatus.OK
        assert response.body == b"secret"

    def test_traversal_refused_when_confined(self, tmp_path):
        (tmp_path / "secret.txt").write_bytes(b"secret")
        root = tmp_path / "www"
        root.mkdir()

        handler = StaticFileHandler(str(root), confine_to_root=True)
        response = handler.build(get("/../secret.txt"))

        assert response.status == HTTPStatus.FORBIDDEN
        assert response.body is None

    def test_inside_root_still_served_when_confined(self, static_root: str):
        handler = StaticFileHandler(static_root, confine_to_root=True)

        assert handler.build(get("/docs/guide.txt")).body == b"guide"

    def test_missing_file_inside_root_is_404_when_confined(self, static_root: str):
        handler = StaticFileHandler(static_root, confine_to_root=True)

        assert handler.build(get("/nope.html")).status == HTTPStatus.NOT_FOUND

    def test_nul_byte_is_500_when_confined(self, static_root: str, caplog):
        """Test that an unusable path is an error, not a containment refusal."""
        handler = StaticFileHandler(static_root, confine_to_root=True)

        with caplog.at_level("WARNING", logger="statichttp.handlers.static"):
            response = handler.build(get("/index.html\x00"))

        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert "escapes static root" not in caplog.text

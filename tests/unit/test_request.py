"""
Unit tests for request line parsing.
"""

from datetime import datetime

import pytest

from statichttp.http.request import (
    HTTPRequest,
    RequestParser,
    HTTPParseError,
    parse_request,
)


class TestRequestParser:
    """Tests for RequestParser class."""

    def test_parse_simple_get(self):
        """Test parsing a simple GET request line."""
        parser = RequestParser()
        request = parser.parse("GET /index.html HTTP/1.0\n")

        assert request.method == "GET"
        assert request.path == "/index.html"
        assert request.version == "HTTP/1.0"

    def test_parse_trims_crlf(self):
        """Test that the CRLF terminator is trimmed from the version."""
        request = parse_request("GET /a.txt HTTP/1.1\r\n")

        assert request.version == "HTTP/1.1"

    def test_parse_without_terminator(self):
        """Test that a line without a newline still parses."""
        request = parse_request("GET / HTTP/1.0")

        assert (request.method, request.path, request.version) == ("GET", "/", "HTTP/1.0")

    @pytest.mark.parametrize("line", [
        "POST /form HTTP/1.0\n",
        "DELETE /x HTTP/1.0\n",
        "get /lower HTTP/1.0\n",
    ])
    def test_parse_any_method(self, line: str):
        """Test that the parser does not judge the method."""
        request = parse_request(line)

        assert request.method == line.split(" ")[0]

    def test_parse_ignores_trailing_tokens(self):
        """Test that text after the version is ignored."""
        request = parse_request("GET /a HTTP/1.0 extra stuff here\n")

        assert request.path == "/a"
        assert request.version == "HTTP/1.0"

    def test_parse_keeps_path_verbatim(self):
        """Test that the path is neither decoded nor normalized."""
        request = parse_request("GET /../secret%20file?x=1 HTTP/1.0\n")

        assert request.path == "/../secret%20file?x=1"

    @pytest.mark.parametrize("line, expected", [
        ("GET  HTTP/1.0\n", ("GET", "", "HTTP/1.0")),
        ("GET  /a HTTP/1.0\n", ("GET", "", "/a")),
        (" GET /index.html HTTP/1.0\n", ("", "GET", "/index.html")),
        ("  \n", ("", "", "")),
    ])
    def test_parse_splits_on_single_spaces(self, line: str, expected):
        """Test that each space separates a part, so doubled spaces give empty parts."""
        request = parse_request(line)

        assert (request.method, request.path, request.version) == expected

    @pytest.mark.parametrize("line", [
        "",
        "\n",
        "BADLINE\n",
        "GET\n",
        "GET /index.html\n",
        "GET /index.html",
    ])
    def test_parse_too_few_parts(self, line: str):
        """Test that fewer than three parts is a parse error."""
        with pytest.raises(HTTPParseError) as exc_info:
            parse_request(line)

        assert exc_info.value.status_code == 400
        assert exc_info.value.raw == line

    def test_parse_records_local_time(self):
        """Test that the request is stamped with an aware local time."""
        before = datetime.now().astimezone()
        request = parse_request("GET / HTTP/1.0\n")
        after = datetime.now().astimezone()

        assert request.time.tzinfo is not None
        assert before <= request.time <= after


class TestHTTPRequest:
    """Tests for HTTPRequest dataclass."""

    def test_is_immutable(self):
        """Test that a parsed request cannot be modified."""
        request = HTTPRequest(method="GET", path="/", version="HTTP/1.0")

        with pytest.raises(AttributeError):
            request.path = "/other"

    def test_equality_ignores_time(self):
        """Test that two parses of the same line compare equal."""
        assert parse_request("GET / HTTP/1.0\n") == parse_request("GET / HTTP/1.0\n")

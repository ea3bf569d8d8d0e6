"""
pytest configuration and fixtures.
"""

import io
import socket
import threading
from pathlib import Path
from typing import Generator, List

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from statichttp import StaticHTTPServer, ServerConfig
from statichttp.access_log import AccessLog


class FakeStream:
    """In-memory stand-in for socket.makefile("rwb")."""

    def __init__(self, data: bytes):
        self._input = io.BytesIO(data)
        self.written = b""
        self.flushed = False

    def readline(self) -> bytes:
        return self._input.readline()

    def write(self, data: bytes) -> int:
        self.written += data
        return len(data)

    def flush(self):
        self.flushed = True


class BrokenStream(FakeStream):
    """A stream whose reads fail like a reset connection."""

    def readline(self) -> bytes:
        raise ConnectionResetError("Connection reset by peer")


@pytest.fixture
def fake_stream():
    """The FakeStream class, for building in-memory connections."""
    return FakeStream


@pytest.fixture
def broken_stream():
    """The BrokenStream class, whose reads always fail."""
    return BrokenStream


@pytest.fixture
def static_root(tmp_path: Path) -> str:
    """A static root with a few files, as a string without trailing slash."""
    (tmp_path / "index.html").write_bytes(b"hi")
    (tmp_path / "style.css").write_bytes(b"body { color: red; }")
    (tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (tmp_path / "README").write_bytes(b"no extension")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.txt").write_bytes(b"guide")
    return str(tmp_path)


@pytest.fixture
def log_lines() -> List[str]:
    """Collects access log lines."""
    return []


@pytest.fixture
def access_log(log_lines: List[str]) -> AccessLog:
    """An AccessLog writing into log_lines."""
    return AccessLog(sink=log_lines.append)


class TestServer:
    """Test server helper that runs in a background thread."""

    def __init__(self, server: StaticHTTPServer):
        self.server = server
        self._thread: threading.Thread = None

    @property
    def port(self) -> int:
        return self.server.address[1]

    def start(self):
        """Start server in background thread."""
        self._thread = threading.Thread(
            target=self.server.run,
            kwargs={"setup_logging": False},
            daemon=True,
        )
        self._thread.start()

        if not self.server.wait_until_ready(timeout=5.0):
            raise RuntimeError("Server failed to start")

    def stop(self):
        """Stop the server."""
        self.server.shutdown()

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)

    def request(self, data: bytes) -> bytes:
        """Send raw bytes and read until the server closes the connection."""
        with socket.create_connection(("127.0.0.1", self.port), timeout=5.0) as sock:
            sock.sendall(data)
            chunks = []
            while True:
                chunk = sock.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
        return b"".join(chunks)


@pytest.fixture
def test_server(static_root: str) -> Generator[TestServer, None, None]:
    """A running server on a free port serving static_root."""
    server = StaticHTTPServer(ServerConfig(
        host="127.0.0.1",
        port=0,  # Let OS pick a free port
        static_root=static_root,
        accept_timeout=0.1,
        timeout=5.0,
        log_level="WARNING",
    ))

    test_srv = TestServer(server)
    test_srv.start()

    yield test_srv

    test_srv.stop()

"""Shared pytest fixtures for all tests."""

import io
import socket
import threading

import pytest

from cli.config import Config


class RecordingConnection:
    """Socket stand-in that records every sendall call."""

    def __init__(self, fail_on_write=None, error=None):
        self.writes = []
        self.close_calls = 0
        self.fail_on_write = fail_on_write
        self.error = error or BrokenPipeError(32, 'Broken pipe')

    def sendall(self, data):
        if self.fail_on_write is not None and len(self.writes) == self.fail_on_write:
            raise self.error
        self.writes.append(bytes(data))

    def close(self):
        self.close_calls += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class TrackingSource(io.BytesIO):
    """In-memory firmware source that counts closes and can fail reads."""

    def __init__(self, data=b'', fail_on_read=None):
        super().__init__(data)
        self.close_calls = 0
        self.reads = 0
        self.fail_on_read = fail_on_read

    def readinto(self, buffer):
        if self.fail_on_read is not None and self.reads == self.fail_on_read:
            raise OSError(5, 'Input/output error')
        self.reads += 1
        return super().readinto(buffer)

    def close(self):
        self.close_calls += 1
        super().close()


class LoopbackListener:
    """Single-connection TCP peer on 127.0.0.1 that collects what it receives."""

    def __init__(self):
        self.server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.server.bind(('127.0.0.1', 0))
        self.server.listen(1)
        self.server.settimeout(0.2)
        self.host, self.port = self.server.getsockname()
        self.received = bytearray()
        self.connections = 0
        self.peer_closed = threading.Event()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self):
        while not self._stop.is_set():
            try:
                conn, _ = self.server.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            self.connections += 1
            with conn:
                conn.settimeout(5)
                while True:
                    data = conn.recv(65536)
                    if not data:
                        break
                    self.received.extend(data)
            self.peer_closed.set()
            return

    def wait_for_close(self, timeout=5.0):
        return self.peer_closed.wait(timeout)

    def close(self):
        self._stop.set()
        self._thread.join(timeout=2)
        self.server.close()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep operator environment variables out of tests."""
    for name in ('OTA_TARGET_HOST', 'OTA_TARGET_PORT', 'OTA_CONFIG_PATH', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def listener():
    """
    Start a loopback TCP listener.

    Returns:
        LoopbackListener accepting one connection
    """
    peer = LoopbackListener()
    yield peer
    peer.close()


@pytest.fixture
def closed_port():
    """
    Find a loopback port with nothing listening on it.

    Returns:
        Port number
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]


@pytest.fixture
def firmware_bytes():
    """2500 bytes of non-repeating-per-chunk content."""
    return bytes((i * 7 + i // 256) % 256 for i in range(2500))


@pytest.fixture
def firmware_file(tmp_path, firmware_bytes):
    """
    Create a 2500-byte firmware image.

    Returns:
        Path to firmware file
    """
    file_path = tmp_path / 'firmware.bin'
    file_path.write_bytes(firmware_bytes)
    return file_path


@pytest.fixture
def empty_file(tmp_path):
    """
    Create a zero-byte firmware image.

    Returns:
        Path to empty file
    """
    file_path = tmp_path / 'empty.bin'
    file_path.write_bytes(b'')
    return file_path


@pytest.fixture
def temp_config_path(tmp_path):
    """
    Path for a config file inside a temporary directory.

    Returns:
        Path to (not yet created) config.json
    """
    return tmp_path / '.ota-sender' / 'config.json'


@pytest.fixture
def temp_config(temp_config_path):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_path)


@pytest.fixture
def make_connection():
    """Factory for RecordingConnection instances."""
    return RecordingConnection


@pytest.fixture
def make_source():
    """Factory for TrackingSource instances."""
    return TrackingSource

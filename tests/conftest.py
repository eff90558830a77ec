"""Fixtures for testing."""
import socket
import threading

import pytest


class OneShotListener:
    """Accept a single connection and record what the client sends.

    With a reply set, the reply is written back once the first line has
    arrived and the connection is closed. Otherwise the listener reads
    until the client closes.
    """

    def __init__(self, reply=b''):
        self.reply = reply
        self.received = bytearray()
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.listen(1)
        self.sock.settimeout(5)
        self.port = self.sock.getsockname()[1]
        self.thread = threading.Thread(target=self._serve, daemon=True)

    def _serve(self):
        try:
            conn, _ = self.sock.accept()
        except OSError:
            return
        with conn:
            conn.settimeout(5)
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                self.received.extend(chunk)
                if self.reply and self.received.endswith(b'\n'):
                    conn.sendall(self.reply)
                    break

    def start(self):
        self.thread.start()
        return self

    def join(self):
        self.thread.join(timeout=5)
        self.sock.close()


@pytest.fixture
def listener():
    server = OneShotListener().start()
    yield server
    server.join()


@pytest.fixture
def reply_listener():
    server = OneShotListener(reply=b'Block notify processed').start()
    yield server
    server.join()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port

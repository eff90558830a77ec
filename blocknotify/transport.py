import logging
import socket

from .errors import SocketError

logger = logging.getLogger("blocknotify.transport")

RECV_SIZE = 4096


def _connect(host, port, timeout):
    try:
        return socket.create_connection((host, port), timeout=timeout)
    except (OSError, UnicodeError) as e:
        raise SocketError("Connection failed: " + str(e)) from e


def send_line(host, port, line, timeout=None):
    """Open a TCP connection, write line in one go and close it.

    The socket is released on every path. Nothing is read back.
    """
    data = line.encode('utf-8', 'surrogateescape')
    with _connect(host, port, timeout) as sock:
        logger.info("Connected to " + host + ":" + str(port))
        try:
            sock.sendall(data)
        except OSError as e:
            raise SocketError("Send failed: " + str(e)) from e
    logger.info("Sent " + str(len(data)) + " bytes to " + host + ":" + str(port))


def request(host, port, line, timeout=None):
    """Send line and read the reply until the peer closes the connection."""
    reply = bytearray()
    with _connect(host, port, timeout) as sock:
        try:
            sock.sendall(line.encode('utf-8', 'surrogateescape'))
            while True:
                chunk = sock.recv(RECV_SIZE)
                if not chunk:
                    break
                reply.extend(chunk)
        except OSError as e:
            raise SocketError("Socket error: " + str(e)) from e
    return reply.decode('utf-8', errors='replace')

import logging

from .errors import EndpointFormatError, PortParseError

logger = logging.getLogger("blocknotify.endpoint")

MAX_PORT = 65535


def parse_port(text):
    try:
        port = int(text, 10)
    except ValueError:
        raise PortParseError("Invalid port number: " + repr(text))

    if port < 0 or port > MAX_PORT:
        raise PortParseError("Invalid port number: " + repr(text))
    return port


def parse_endpoint(text):
    """Split a host:port string on its first colon.

    Returns a (host, port) tuple. Nothing before the colon is used as a
    partial host when the separator is missing.
    """
    host, sep, port_text = text.partition(':')
    if not sep or not host:
        raise EndpointFormatError("Invalid host:port format: " + repr(text))

    port = parse_port(port_text)
    logger.debug("Parsed endpoint " + host + " port " + str(port))
    return host, port

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class NotifyError(Exception):
    exit_code = EXIT_FAILURE


class UsageError(NotifyError):
    pass


class EndpointFormatError(NotifyError):
    pass


class PortParseError(NotifyError):
    pass


class SocketError(NotifyError):
    """Socket creation, connect or send failed."""

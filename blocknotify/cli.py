#! /usr/bin/env python3

# Send a command to a running pool's CLI listener and print the reply
#   poolcli blocknotify dogecoin <hash> -port=17117

import logging
import sys

from .endpoint import parse_port
from .errors import EXIT_SUCCESS, NotifyError, UsageError
from .payload import command_payload
from .transport import request

logger = logging.getLogger("blocknotify.cli")

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 17117
REPLY_TIMEOUT = 30

USAGE = "Pool CLI\n usage: <command> [params...] [-key=value ...]"


def parse_args(args):
    """Split args into (command, params, options).

    "-key=value" arguments become string options, everything else is a
    param and the first param is the command.
    """
    params = []
    options = {}
    for arg in args:
        if arg.startswith('-') and '=' in arg:
            key, value = arg[1:].split('=', 1)
            options[key] = value
        else:
            params.append(arg)

    if not params:
        raise UsageError("No command given")
    return params[0], params[1:], options


def run(args):
    try:
        command, params, options = parse_args(args)
    except UsageError:
        print(USAGE)
        return UsageError.exit_code

    host = options.get('host', DEFAULT_HOST)
    try:
        port = parse_port(options.get('port', str(DEFAULT_PORT)))
        reply = request(host, port, command_payload(command, params, options),
                        timeout=REPLY_TIMEOUT)
    except NotifyError as e:
        if isinstance(e.__cause__, ConnectionRefusedError):
            logger.error("Could not connect to any pool at " + host + ":" + str(port))
        else:
            logger.error(str(e))
        return e.exit_code

    if reply:
        print(reply)
    print("Connection closed")
    return EXIT_SUCCESS


def main():
    logging.basicConfig(stream=sys.stderr, format='%(message)s', level=logging.WARNING)
    sys.exit(run(sys.argv[1:]))


if __name__ == '__main__':
    main()

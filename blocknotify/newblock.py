#! /usr/bin/env python3

# This is called by the coin daemon when a new block is received, e.g. in coin.conf
#   blocknotify=blocknotify 127.0.0.1:17117 dogecoin %s

import argparse
import logging
import math
import sys

from .endpoint import parse_endpoint
from .errors import EXIT_SUCCESS, NotifyError, UsageError
from .payload import blocknotify_payload
from .transport import send_line

logger = logging.getLogger("blocknotify.newblock")

USAGE = "Block notify\n usage: <host:port> <coin> <block>"


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def timeout_seconds(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid timeout: " + repr(text))
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError("timeout must be a positive number of seconds: " + repr(text))
    return value


def build_parser():
    parser = ArgumentParser(description='Notify the pool CLI listener of a new block', add_help=False)
    parser.add_argument('endpoint', nargs='?', help='host:port of the pool CLI listener')
    parser.add_argument('coin', nargs='?', help='Coin the block belongs to')
    parser.add_argument('blockhash', nargs='?', help='The hash of the block that has been received')
    parser.add_argument('--escape', action='store_true', help='JSON-escape coin and block hash')
    parser.add_argument('--timeout', type=timeout_seconds, default=None, help='Connect and send timeout in seconds')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log progress to stderr')
    return parser


def parse_args(args):
    # Positionals past the block hash are ignored
    parsed, _ = build_parser().parse_known_intermixed_args(args)
    if parsed.endpoint is None or parsed.coin is None or parsed.blockhash is None:
        raise UsageError("Expected <host:port> <coin> <block>")
    return parsed


def notify(endpoint, coin, blockhash, escape=False, timeout=None):
    host, port = parse_endpoint(endpoint)
    payload = blocknotify_payload(coin, blockhash, escape=escape)
    send_line(host, port, payload, timeout=timeout)


def run(args):
    try:
        parsed = parse_args(args)
    except UsageError as e:
        print(USAGE)
        logger.debug(str(e))
        return e.exit_code

    if parsed.verbose:
        logging.getLogger("blocknotify").setLevel(logging.INFO)

    try:
        notify(parsed.endpoint, parsed.coin, parsed.blockhash,
               escape=parsed.escape, timeout=parsed.timeout)
    except NotifyError as e:
        logger.error(str(e))
        return e.exit_code

    logger.info("Notified " + parsed.endpoint + " of " + parsed.coin + " block " + parsed.blockhash)
    return EXIT_SUCCESS


def main():
    logging.basicConfig(stream=sys.stderr, format='%(message)s', level=logging.WARNING)
    sys.exit(run(sys.argv[1:]))


if __name__ == '__main__':
    main()

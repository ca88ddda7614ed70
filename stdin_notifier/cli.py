#!/usr/bin/env python3
"""
Send whatever arrives on stdin as one chat-bot message.

    echo "deploy done" | stdin-notifier /etc/notifier/conf.toml
"""

from __future__ import annotations

import argparse
import sys
import typing as t

from loguru import logger

from stdin_notifier.errors import NotifierError
from stdin_notifier.stdinNotifier import send_message


def main(argv: t.Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stdin-notifier",
        description="Read a message from stdin and send it to a chat-bot API",
    )
    parser.add_argument("config_path", nargs="?", default="conf.toml", help="TOML config file (default: conf.toml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details to stderr")
    args = parser.parse_args(argv)

    # The CLI owns loguru for the run; loguru's default stderr sink comes back afterwards
    logger.remove()
    sink_id = logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING", format="{message}")
    try:
        try:
            message = sys.stdin.buffer.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"could not read from stdin: {e}")
            return 1

        try:
            send_message(args.config_path, message)
        except NotifierError as e:
            logger.error(f"failed: {e}")
            return 1
        return 0
    finally:
        logger.remove(sink_id)
        logger.add(sys.stderr)


if __name__ == "__main__":
    sys.exit(main())

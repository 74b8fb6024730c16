#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import os
import sys
from enum import Enum
from typing import Mapping, Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from securegen.config import ConfigError, load_config
from securegen.crypto import decrypt_message, encrypt_message
from securegen.logger import setup_logger
from securegen.schema import EncryptResult, render
from securegen.transport import pack

USAGE = """
Usage:
  securegen encrypt "<message>"
  securegen decrypt "<encryptedText>"
"""


class Command(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def resolve(cls, verb: Optional[str]) -> Optional["Command"]:
        try:
            return cls(verb)
        except ValueError:
            return None


# -------------------------------------------------
# CLI parser
# -------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="securegen", add_help=False)
    parser.add_argument("command", nargs="?", help="encrypt or decrypt")
    return parser


# -------------------------------------------------
# Main
# -------------------------------------------------
def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    # ---- config ----
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    try:
        settings = load_config(environ)
    except ConfigError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    # ---- logging ----
    logger = setup_logger(settings)

    # ---- parse args ----
    argv = list(sys.argv[1:] if argv is None else argv)
    # only the verb goes through argparse; the argument may be any text, "--" included
    args, extras = build_parser().parse_known_args(argv[:1])
    rest = argv[1:]
    command = Command.resolve(args.command)
    if command is None or extras or len(rest) != 1:
        print(USAGE)
        return 0

    (argument,) = rest
    try:
        if command is Command.ENCRYPT:
            result = encrypt_message(argument, settings.public_key_armored, logger=logger)
            result = EncryptResult(encrypted=pack(result.encrypted, settings.transport))
        else:
            result = decrypt_message(
                argument,
                settings.private_key_armored,
                passphrase=settings.private_key_passphrase,
                logger=logger,
            )
    except Exception as exc:  # noqa: BLE001
        # printed regardless of the configured log level
        print(f"❌ Error: {exc}", file=sys.stderr)
        logger.debug(f"{command.value} failed", exc_info=True)
        return 1

    print(render(result))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

"""Interface for ``python -m gen_util``."""

from __future__ import annotations

import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from ._version import version
from .config import load_env_file, require_env
from .dates import parse_american_date
from .errors import ConfigError
from .result import Err


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="gen_util")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    commands = parser.add_subparsers(dest="command")

    date_parser = commands.add_parser("date", help="parse a month/day/year date")
    _ = date_parser.add_argument("text")

    env_parser = commands.add_parser("env", help="print a required environment variable")
    _ = env_parser.add_argument("name")
    _ = env_parser.add_argument("--env-file", default=None, help="dotenv file loaded first")

    options = parser.parse_args(args)

    if options.command == "date":
        result = parse_american_date(options.text)
        if isinstance(result, Err):
            print(result.error, file=sys.stderr)
            return 1
        print(result.value.isoformat())
        return 0

    if options.command == "env":
        if options.env_file is not None:
            _ = load_env_file(options.env_file)
        try:
            print(require_env(options.name))
        except ConfigError as error:
            print(error, file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())

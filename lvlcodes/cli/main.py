# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for lvlcodes.

Usage:
    lvlcodes lookup 0x103
    lvlcodes lookup -- -0x1
    lvlcodes name ERROR_NON_MATCHING_UID
    lvlcodes list --config lvlcodes.yaml
    lvlcodes info --log-level DEBUG

The global options (--config, --log-level) are inherited by every
subcommand through argparse's parent parser mechanism.
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from lvlcodes.cli.commands import handle_info, handle_list, handle_lookup, handle_name
from lvlcodes.cli.exit_codes import USER_ERROR


class _CliParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with USER_ERROR instead of 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USER_ERROR, f"{self.prog}: error: {message}\n")


def _build_global_parser() -> argparse.ArgumentParser:
    """Parent parser holding the options every subcommand accepts."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides the config file).",
    )
    return parent


def build_parser() -> argparse.ArgumentParser:
    parent = _build_global_parser()

    root_parser = _CliParser(
        prog="lvlcodes",
        description="lvlcodes: look up license validation result codes.",
    )
    subparsers = root_parser.add_subparsers(dest="command")

    lookup_parser = subparsers.add_parser(
        "lookup", parents=[parent], help="Classify a raw integer result code."
    )
    lookup_parser.add_argument(
        "code",
        help=(
            "Integer code, decimal or with a 0x/0o/0b prefix (e.g. 0x103). "
            "Put -- before negative prefixed codes: lookup -- -0x1."
        ),
    )
    lookup_parser.set_defaults(func=handle_lookup)

    name_parser = subparsers.add_parser(
        "name", parents=[parent], help="Resolve a symbolic name to its code."
    )
    name_parser.add_argument("name", help="Symbolic name, e.g. LICENSED.")
    name_parser.set_defaults(func=handle_name)

    list_parser = subparsers.add_parser(
        "list", parents=[parent], help="List every result code."
    )
    list_parser.set_defaults(func=handle_list)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display environment and config info."
    )
    info_parser.set_defaults(func=handle_info)

    return root_parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main CLI entrypoint, referenced by pyproject.toml's [project.scripts].

    With no subcommand we show help and exit with USER_ERROR.
    """
    root_parser = build_parser()
    args = root_parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()

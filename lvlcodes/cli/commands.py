# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the lvlcodes CLI.

Each handler takes the parsed argparse namespace and returns an exit code.
Results are printed to stdout, one line per result code. Diagnostics go
through the structured logger on stderr.
"""

import argparse
import json
import logging
from pathlib import Path

from lvlcodes.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR
from lvlcodes.codes import InvalidNameError, ResultCode, describe
from lvlcodes.config.exceptions import ConfigError
from lvlcodes.config.loader import resolve_config
from lvlcodes.config.schema import LvlCodesConfig
from lvlcodes.logging.logger import get_logger


def _setup(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, LvlCodesConfig | None, logging.Logger]:
    """
    Shared setup for every command: load config, build the logger.

    --log-level on the command line wins over the config file. If the
    returned exit code is not SUCCESS the caller returns it straight away.
    """
    logger_name = f"lvlcodes.cli.{command_name}"
    config_path = Path(args.config) if args.config is not None else None

    try:
        config = resolve_config(config_path)
    except ConfigError as err:
        logger = get_logger(logger_name, log_level=args.log_level or "INFO")
        logger.error(
            "Configuration error",
            extra={"command": command_name, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    log_level = args.log_level or config.global_config.log_level
    log_file = config.global_config.log_file
    try:
        logger = get_logger(
            logger_name,
            log_level=log_level,
            log_file=Path(log_file) if log_file is not None else None,
        )
    except OSError as err:
        # The console handler is attached before the file handler fails.
        logger = get_logger(logger_name, log_level=log_level)
        logger.error(
            "Configuration error",
            extra={"command": command_name, "log_file": log_file, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    logger.debug(
        "Command started",
        extra={"command": command_name, "config": args.config},
    )
    return SUCCESS, config, logger


def render(result: ResultCode, output_format: str) -> str:
    """Format one result code as a line of CLI output."""
    if output_format == "json":
        return json.dumps(
            {
                "name": result.name,
                "code": result.code,
                "hex": result.hex,
                "description": describe(result),
                "is_licensed": result.is_licensed,
                "is_error": result.is_error,
            }
        )
    return "\t".join((result.name, result.hex, describe(result)))


def handle_lookup(args: argparse.Namespace) -> int:
    """Classify a raw integer code."""
    exit_code, config, logger = _setup(args, "lookup")
    if exit_code != SUCCESS:
        return exit_code

    try:
        raw = int(args.code, 0)
    except ValueError:
        logger.error("Not an integer", extra={"raw_code": args.code})
        return USER_ERROR

    try:
        result = ResultCode.from_code(raw)
        if result is ResultCode.UNKNOWN_RESPONSE_CODE and raw != result.code:
            logger.warning(
                "Unrecognized result code, reporting as unknown",
                extra={"raw_code": raw},
            )
        print(render(result, config.output.format))
        return SUCCESS
    except Exception as err:
        logger.error("Lookup failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_name(args: argparse.Namespace) -> int:
    """Resolve a symbolic name to its code."""
    exit_code, config, logger = _setup(args, "name")
    if exit_code != SUCCESS:
        return exit_code

    try:
        result = ResultCode.value_of(args.name)
    except InvalidNameError as err:
        logger.error(str(err), extra={"requested_name": args.name})
        return USER_ERROR

    print(render(result, config.output.format))
    return SUCCESS


def handle_list(args: argparse.Namespace) -> int:
    """Print every result code in definition order."""
    exit_code, config, logger = _setup(args, "list")
    if exit_code != SUCCESS:
        return exit_code

    try:
        for result in ResultCode:
            print(render(result, config.output.format))
        return SUCCESS
    except Exception as err:
        logger.error("Listing failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_info(args: argparse.Namespace) -> int:
    """Log version and environment information."""
    exit_code, config, logger = _setup(args, "info")
    if exit_code != SUCCESS:
        return exit_code

    from lvlcodes import __version__
    from lvlcodes.runtime.environment import get_system_info

    system_info = get_system_info()

    logger.info(
        "System information",
        extra={
            "lvlcodes_version": __version__,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "result_code_count": len(ResultCode),
            "config": args.config,
        },
    )
    return SUCCESS

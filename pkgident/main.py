"""The main entry point for the pkgident application."""

import logging
import sys
from argparse import Namespace
from typing import Literal

from .argparse import ArgsParseFailure
from .args import get_parser
from .colorlog import create_logger
from .config import Config
from .display import IdentityDisplay
from .exceptions import PackageError
from .package import select_parser
from .parsers import parse_pspec, read_pspec
from .parsers.pspec import check_history_order, identity


def main() -> int:
    """The main entry point for the pkgident application.

    Returns:
        The exit code of the application.
    """
    logger = create_logger("pkgident")

    p = get_parser(sys)
    try:
        args = p.parse_args(sys.argv[1:])
    except ArgsParseFailure as e:
        return e.status

    cfg = Config(args.config)

    return run_pkgident(cfg, logger, args)


def run_pkgident(config: Config, logger: logging.Logger, args: Namespace) -> Literal[0, 1]:
    """Loads and prints the identity of every path in `args`.

    A failing path is reported and does not stop the others.

    Args:
        config: The application configuration.
        logger: The logger instance.
        args: The parsed command-line arguments.

    Returns:
        0 if every path was loaded, 1 otherwise.
    """
    config.merge_args(args)
    logger.setLevel(config.log_level)

    display = IdentityDisplay(sys.stdout, config.output_format)
    ret: Literal[0, 1] = 0
    for path in args.paths:
        try:
            parser = select_parser(path)
            if args.history and parser is parse_pspec:
                pspec = read_pspec(path)
                if config.check_history_order:
                    check_history_order(pspec, str(path))
                display.show_identity(path, identity(pspec), pspec.history)
            else:
                ident = parser(path, check_order=config.check_history_order)
                display.show_identity(path, ident)
        except PackageError as e:
            logger.error("%s: %s", path, e)
            ret = 1

    display.finish()
    return ret

"""Defines the command-line arguments for the pkgident tool."""

from pathlib import Path

from pkgident import __version__

from .argparse import ArgumentParser
from .display import FORMATS


def get_parser(sys) -> ArgumentParser:
    """Creates and configures the argument parser for the application.

    Args:
        sys: The `sys` module, used for stdout/stderr.

    Returns:
        A configured `ArgumentParser` instance.
    """
    parser = ArgumentParser(
        prog="pkgident",
        description="Print name, version and release of packages",
        sys_=sys,
    )
    parser.add_argument(
        "paths",
        metavar="PATH",
        type=Path,
        nargs="+",
        help="pspec.xml or package.yml file",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        dest="output_format",
        help="override config pkgident.format",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        default=False,
        help="also print the update history of pspec files",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="enable debugging output",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version="{}".format(__version__),
        help="print version and exit",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Override default config path"
    )

    return parser

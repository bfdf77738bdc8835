"""Parser for ypkg package.yml build files."""

from os import PathLike

from ..exceptions import UnsupportedFormatError
from ..types import Identity


def parse_ypkg(path: str | PathLike, check_order: bool = True) -> Identity:
    """Returns the identity of the package described by a package.yml file.

    The format is not supported yet, the file is never opened.

    Raises:
        UnsupportedFormatError: Always.
    """
    raise UnsupportedFormatError("ypkg")

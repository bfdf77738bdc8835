"""Selection of the parser for a package description file."""

from collections.abc import Callable
from logging import getLogger
from os import PathLike, fspath

from .exceptions import InvalidPathError
from .parsers import parse_pspec, parse_ypkg
from .types import Identity

logger = getLogger("pkgident.package")

XML_SUFFIX = ".xml"

Parser = Callable[..., Identity]


def select_parser(path: str | PathLike[str]) -> Parser:
    """Chooses the parser for `path` by its suffix.

    Paths ending in `.xml` are pspec files, anything else is treated as
    a ypkg build file. The file itself is not looked at.

    Args:
        path: The path to the package description file.

    Returns:
        The parser callable.

    Raises:
        InvalidPathError: If the path is empty or not a text path.
    """
    name = fspath(path)
    if not name or not isinstance(name, str):
        raise InvalidPathError(path)

    parser = parse_pspec if name.endswith(XML_SUFFIX) else parse_ypkg
    logger.debug("%s: using %s", name, parser.__name__)
    return parser


def load_package(path: str | PathLike[str], check_order: bool = True) -> Identity:
    """Loads the identity of the package described at `path`.

    Args:
        path: The path to a pspec.xml or package.yml file.
        check_order: Whether to warn about out of order pspec history.

    Returns:
        The validated identity.

    Raises:
        PackageError: On any failure, see `pkgident.exceptions`.
    """
    return select_parser(path)(path, check_order=check_order)

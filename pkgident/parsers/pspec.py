"""Parser for pspec.xml package description files.

A pspec file carries the package source information and its history of
updates, most recent first. The identity of the package is the source
name combined with the version and release of the first update.
"""

import re
import xml.etree.ElementTree as ET
from logging import getLogger
from os import PathLike, fspath

from ..exceptions import (
    MalformedDocumentError,
    MissingHistoryError,
    PackageOpenError,
    PackageReadError,
)
from ..types import Identity, PSpec, Source, Update

logger = getLogger("pkgident.parsers.pspec")

_release_re = re.compile(r"\s*[+-]?[0-9]+\s*")

# releases are signed 64 bit integers
_release_max = 2**63 - 1
_release_min = -(2**63)


def _text(parent: ET.Element, tag: str) -> str:
    """Returns the text of the first `tag` child of `parent`.

    Text nested inside grandchildren is skipped, the text following them
    is kept.

    Args:
        parent: The element to search in.
        tag: The tag name of the child element.

    Returns:
        The text, or an empty string if there is no such child.
    """
    child = parent.find(tag)
    if child is None:
        return ""
    return (child.text or "") + "".join(x.tail or "" for x in child)


def _release(update: ET.Element, path: str) -> int:
    """Decodes the `release` attribute of an `<Update>` element.

    A missing or empty attribute decodes to 0.

    Raises:
        MalformedDocumentError: If the attribute is not a decimal integer
            or does not fit in 64 bits.
    """
    attr = update.get("release")
    if not attr:
        return 0
    if not _release_re.fullmatch(attr):
        raise MalformedDocumentError(path, f"invalid release attribute {attr!r}")
    release = int(attr)
    if not _release_min <= release <= _release_max:
        raise MalformedDocumentError(path, f"release attribute {attr!r} out of range")
    return release


def _source(root: ET.Element) -> Source:
    source = root.find("Source")
    if source is None:
        return Source("")
    return Source(_text(source, "Name"), _text(source, "Homepage"))


def _update(update: ET.Element, path: str) -> Update:
    return Update(
        release=_release(update, path),
        date=_text(update, "Date"),
        version=_text(update, "Version"),
        comment=_text(update, "Comment"),
        author=_text(update, "Name"),
        email=_text(update, "Email"),
    )


def decode_pspec(data: bytes, path: str = "<bytes>") -> PSpec:
    """Decodes the content of a pspec file.

    The tag of the root element is not checked and unknown elements are
    ignored.

    Args:
        data: The raw file content.
        path: The origin of the data, used in error messages.

    Returns:
        The decoded document.

    Raises:
        MalformedDocumentError: If the data is not well-formed XML or a
            release attribute is not an integer.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocumentError(path, e) from e

    pspec = PSpec(
        _source(root),
        tuple(_update(x, path) for x in root.findall("History/Update")),
    )
    logger.debug(
        "decoded %s: root <%s>, source %r, %d updates",
        path,
        root.tag,
        pspec.source.name,
        len(pspec.history),
    )
    return pspec


def read_pspec(path: str | PathLike) -> PSpec:
    """Reads and decodes the pspec file at `path`.

    Args:
        path: The path to the pspec file.

    Returns:
        The decoded document.

    Raises:
        PackageOpenError: If the file cannot be opened.
        PackageReadError: If the file cannot be read.
        MalformedDocumentError: If the content cannot be decoded.
    """
    path = fspath(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise PackageOpenError(path, e.strerror or e) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise PackageReadError(path, e.strerror or e) from e

    return decode_pspec(data, path)


def check_history_order(pspec: PSpec, path: str = "<bytes>") -> bool:
    """Checks that no update is newer than the first one.

    Only logs a warning; the first update stays authoritative.

    Returns:
        True if the history is ordered most recent first.
    """
    if not pspec.history:
        return True

    head = pspec.history[0]
    newer = [x for x in pspec.history[1:] if x.release > head.release]
    for x in newer:
        logger.warning(
            "%s: update with release %d listed after release %d",
            path,
            x.release,
            head.release,
        )
    return not newer


def identity(pspec: PSpec) -> Identity:
    """Derives the package identity from a decoded document.

    Args:
        pspec: The decoded document.

    Returns:
        The validated identity.

    Raises:
        MissingHistoryError: If the document has no updates.
        MissingNameError: If the source name is blank.
        MissingVersionError: If the first update has a blank version.
        InvalidReleaseError: If the first update has a negative release.
    """
    if not pspec.history:
        raise MissingHistoryError()

    # the history is most recent first, the first update is the current one
    current = pspec.history[0]
    return Identity(
        pspec.source.name.strip(),
        current.version.strip(),
        current.release,
    )


def parse_pspec(path: str | PathLike, check_order: bool = True) -> Identity:
    """Returns the identity of the package described by a pspec file.

    Args:
        path: The path to the pspec file.
        check_order: Whether to warn about updates listed out of order.

    Returns:
        The validated identity.
    """
    pspec = read_pspec(path)
    if check_order:
        check_history_order(pspec, fspath(path))
    return identity(pspec)

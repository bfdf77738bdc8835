"""Named tuples mirroring the structure of a pspec.xml document.

These hold the decoded but unvalidated content of the file; see
`pkgident.types.identity.Identity` for the validated result.
"""

from typing import NamedTuple


class Source(NamedTuple):
    """The `<Source>` section of a pspec file.

    Attributes:
        name: The package name.
        homepage: The upstream homepage, kept as metadata only.
    """

    name: str
    homepage: str = ""


class Update(NamedTuple):
    """One `<Update>` entry of the package history.

    Attributes:
        release: The packaging release number.
        date: The date of the update.
        version: The package version at this update.
        comment: The changelog comment.
        author: The name of the packager.
        email: The email of the packager.
    """

    release: int
    date: str = ""
    version: str = ""
    comment: str = ""
    author: str = ""
    email: str = ""


class PSpec(NamedTuple):
    """A decoded pspec document.

    Attributes:
        source: The source information.
        history: The updates in document order, most recent first.
    """

    source: Source
    history: tuple[Update, ...] = ()

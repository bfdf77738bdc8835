"""The validated identity of a package."""

from typing import Any, final

from ..exceptions import InvalidReleaseError, MissingNameError, MissingVersionError


@final
class Identity:
    """Canonical name, version and release of a package.

    An `Identity` is validated on construction, so holding one means all
    three fields passed their checks. Instances are immutable.
    """

    __slots__ = ["_name", "_version", "_release"]

    def __init__(self, name: str, version: str, release: int) -> None:
        """Initializes the `Identity` object.

        The checks run in a fixed order: name, version, release.

        Args:
            name: The package name, already trimmed.
            version: The package version, already trimmed.
            release: The packaging release number.

        Raises:
            MissingNameError: If the name is empty.
            MissingVersionError: If the version is empty.
            InvalidReleaseError: If the release is not a non-negative integer.
        """
        if not name:
            raise MissingNameError()
        if not version:
            raise MissingVersionError()
        if isinstance(release, bool) or not isinstance(release, int) or release < 0:
            raise InvalidReleaseError(release)

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_version", version)
        object.__setattr__(self, "_release", release)

    @property
    def name(self) -> str:
        """The package name."""
        return self._name

    @property
    def version(self) -> str:
        """The upstream version of the package."""
        return self._version

    @property
    def release(self) -> int:
        """The packaging release number."""
        return self._release

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def as_dict(self) -> dict[str, Any]:
        """Returns the identity as a plain mapping."""
        return {"name": self.name, "version": self.version, "release": self.release}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return (self.name, self.version, self.release) == (
            other.name,
            other.version,
            other.release,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.version, self.release))

    def __str__(self) -> str:
        """Returns the identity in `name-version-release` form."""
        return f"{self.name}-{self.version}-{self.release}"

    def __repr__(self) -> str:
        return f"<Identity: {self}>"

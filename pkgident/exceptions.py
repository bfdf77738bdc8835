"""Exceptions raised while loading a package description file."""


class PackageError(RuntimeError):
    """Base class for all failures while loading a package identity."""


class InvalidPathError(PackageError, ValueError):
    def __init__(self, path) -> None:
        self.path = path
        super().__init__("Invalid package path: {0!r}".format(path))


class PackageOpenError(PackageError):
    """The package file does not exist or could not be opened."""

    def __init__(self, path, reason) -> None:
        self.path = path
        self.reason = reason
        super().__init__("Cannot open {0!r}: {1!s}".format(path, reason))


class PackageReadError(PackageError):
    """The package file was opened but could not be read completely."""

    def __init__(self, path, reason) -> None:
        self.path = path
        self.reason = reason
        super().__init__("Cannot read {0!r}: {1!s}".format(path, reason))


class MalformedDocumentError(PackageError):
    """The file content does not decode into the pspec structure."""

    def __init__(self, path, reason) -> None:
        self.path = path
        self.reason = reason
        super().__init__("xml: Malformed document {0!r}: {1!s}".format(path, reason))


class MissingHistoryError(PackageError):
    def __init__(self) -> None:
        super().__init__("xml: Malformed pspec file: missing history")


class PackageValidationError(PackageError, ValueError):
    """The decoded document does not carry a usable identity."""


class MissingNameError(PackageValidationError):
    def __init__(self) -> None:
        super().__init__("xml: Missing name in package")


class MissingVersionError(PackageValidationError):
    def __init__(self) -> None:
        super().__init__("xml: Missing version in package")


class InvalidReleaseError(PackageValidationError):
    def __init__(self, release) -> None:
        self.release = release
        super().__init__("xml: Invalid release in package: {0}".format(release))


class UnsupportedFormatError(PackageError):
    """The file format has no parser yet."""

    def __init__(self, fmt: str = "ypkg") -> None:
        self.format = fmt
        super().__init__("{0}: Not yet implemented".format(fmt))

import pytest

from pkgident.exceptions import (
    InvalidReleaseError,
    MissingNameError,
    MissingVersionError,
    PackageValidationError,
)
from pkgident.types import Identity


def test_identity():
    ident = Identity("nano", "2.4", 3)
    assert ident.name == "nano"
    assert ident.version == "2.4"
    assert ident.release == 3
    assert str(ident) == "nano-2.4-3"
    assert repr(ident) == "<Identity: nano-2.4-3>"
    assert ident.as_dict() == {"name": "nano", "version": "2.4", "release": 3}


def test_identity_release_zero():
    assert Identity("nano", "2.4", 0).release == 0


def test_identity_eq_hash():
    assert Identity("nano", "2.4", 3) == Identity("nano", "2.4", 3)
    assert Identity("nano", "2.4", 3) != Identity("nano", "2.4", 4)
    assert len({Identity("nano", "2.4", 3), Identity("nano", "2.4", 3)}) == 1
    assert Identity("nano", "2.4", 3) != "nano-2.4-3"


def test_identity_immutable():
    ident = Identity("nano", "2.4", 3)
    with pytest.raises(AttributeError):
        ident.release = 4  # type: ignore
    with pytest.raises(AttributeError):
        ident.name = "vim"  # type: ignore
    assert ident.release == 3


@pytest.mark.parametrize(
    "name,version,release,exc",
    [
        ("", "2.4", 3, MissingNameError),
        ("nano", "", 3, MissingVersionError),
        ("nano", "2.4", -1, InvalidReleaseError),
        ("nano", "2.4", "3", InvalidReleaseError),
        ("nano", "2.4", True, InvalidReleaseError),
        # name is checked before version, version before release
        ("", "", -1, MissingNameError),
        ("nano", "", -1, MissingVersionError),
    ],
)
def test_identity_invalid(name, version, release, exc):
    with pytest.raises(exc):
        Identity(name, version, release)


def test_identity_invalid_release_message():
    with pytest.raises(PackageValidationError, match="Invalid release in package: -7"):
        Identity("nano", "2.4", -7)

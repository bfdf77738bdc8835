from pathlib import Path
from unittest.mock import patch

import pytest

from pkgident import package
from pkgident.exceptions import (
    InvalidPathError,
    MalformedDocumentError,
    UnsupportedFormatError,
)
from pkgident.parsers import parse_pspec, parse_ypkg
from pkgident.types import Identity


@pytest.mark.parametrize(
    "path",
    ["pspec.xml", "pspec_x86_64.xml", "/a/b/c.xml", Path("nano/pspec.xml"), ".xml"],
)
def test_select_parser_xml(path):
    assert package.select_parser(path) is parse_pspec


@pytest.mark.parametrize(
    "path",
    ["package.yml", "build.yml", "pspec.XML", "pspec.xml.bak", "xml", Path("a.xmlx")],
)
def test_select_parser_ypkg(path):
    assert package.select_parser(path) is parse_ypkg


@pytest.mark.parametrize("path", ["", b"pspec.xml", b"build.yml"])
def test_select_parser_invalid(path):
    with pytest.raises(InvalidPathError):
        package.select_parser(path)


def test_load_package_xml(nano_pspec):
    assert package.load_package(nano_pspec) == Identity("nano", "2.4", 3)


def test_load_package_xml_content_is_yaml(write_pspec):
    path = write_pspec("name: nano\nversion: 2.4\nrelease: 3\n", filename="package.xml")
    with pytest.raises(MalformedDocumentError):
        package.load_package(path)


def test_load_package_ypkg_no_file_access(write_pspec):
    path = write_pspec(filename="build.yml")
    with patch("pkgident.parsers.pspec.open") as m:
        with pytest.raises(UnsupportedFormatError, match="Not yet implemented"):
            package.load_package(path)
    m.assert_not_called()


def test_load_package_ypkg_missing_file():
    with pytest.raises(UnsupportedFormatError):
        package.load_package("/no/such/dir/build.yml")

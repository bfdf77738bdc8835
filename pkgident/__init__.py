"""Extraction of package identity from pspec.xml and package.yml files."""

__all__ = ["main", "package", "types"]

__version__ = "1.0.0"

"""Parsers turning package description files into an `Identity`.

Every parser is a callable taking a path and returning an `Identity`.
"""

from .pspec import decode_pspec, parse_pspec, read_pspec
from .ypkg import parse_ypkg

__all__ = ["decode_pspec", "parse_pspec", "parse_ypkg", "read_pspec"]

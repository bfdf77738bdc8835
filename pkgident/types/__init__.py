"""This package contains the type classes for pkgident."""

from .identity import Identity
from .pspec import PSpec, Source, Update

__all__ = [
    "Identity",
    "PSpec",
    "Source",
    "Update",
]

"""Helpers for locating pkgident files in the XDG base directories."""

from pathlib import Path

from xdg.BaseDirectory import load_first_config as x_load_first_config  # type: ignore
from xdg.BaseDirectory import xdg_config_home  # type: ignore

app = "pkgident"


def config_path(*args: str) -> Path:
    """Returns the path to a file in the user's config directory.

    An existing file anywhere in `$XDG_CONFIG_HOME` or `$XDG_CONFIG_DIRS`
    wins, otherwise the path inside `$XDG_CONFIG_HOME` is returned.

    Args:
        *args: The path components below the application directory.

    Returns:
        A `Path` object representing the full path to the file.
    """
    if found := x_load_first_config(app, *args):
        return Path(found)
    return Path(xdg_config_home).joinpath(app, *args)

from pathlib import Path
from unittest.mock import patch

from pkgident import xdg


@patch("pkgident.xdg.x_load_first_config", return_value="/etc/xdg/pkgident/pkgident.cfg")
def test_config_path_found(mock_load_first_config):
    """
    Test config_path with an existing file
    """
    path = xdg.config_path("pkgident.cfg")
    assert path == Path("/etc/xdg/pkgident/pkgident.cfg")
    mock_load_first_config.assert_called_once_with("pkgident", "pkgident.cfg")


@patch("pkgident.xdg.xdg_config_home", "/home/user/.config")
@patch("pkgident.xdg.x_load_first_config", return_value=None)
def test_config_path_default(mock_load_first_config):
    """
    Test config_path without an existing file
    """
    path = xdg.config_path("pkgident.cfg")
    assert path == Path("/home/user/.config/pkgident/pkgident.cfg")

"""Unit tests configuration file."""

import pytest
from click.testing import CliRunner

from cellabi.abi import Bool, Param, Tuple, Uint


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def point():
    """An attached (uint32,bool) tuple."""
    t = Tuple()
    t.set_components([Param("a", Uint(32)), Param("b", Bool())])
    return t

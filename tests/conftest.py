"""Shared pytest fixtures for all tests."""

from unittest.mock import Mock

import pytest

from cmdkit.cli.core.app import App
from cmdkit.cli.core.command_catalog import CommandCatalog
from cmdkit.lib.config import AppConfig, set_config
from cmdkit.lib.verbosity import Verbosity, VerbosityController


@pytest.fixture(autouse=True)
def default_config():
    """Use default configuration instead of reading the environment."""
    config = AppConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def sink():
    """Mock logger receiving verbosity-gated messages."""
    return Mock()


@pytest.fixture
def verbosity(sink):
    """Controller that lets every message through to the mock sink."""
    return VerbosityController(Verbosity.CRAZY, sink=sink)


@pytest.fixture
def catalog(verbosity):
    """Empty command catalog."""
    return CommandCatalog(verbosity)


@pytest.fixture
def app(default_config, verbosity):
    """Initialized application with debug verbosity."""
    return App(config=default_config, verbosity=verbosity)

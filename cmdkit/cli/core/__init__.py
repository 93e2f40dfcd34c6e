"""Core CLI infrastructure: application, command catalog and error handling."""

from cmdkit.cli.core.app import App, Logo, bootstrap
from cmdkit.cli.core.command_catalog import CommandCatalog
from cmdkit.cli.core.error_handler import CLIError, CLIErrorHandler, CommandConfigError

__all__ = [
    "App",
    "Logo",
    "bootstrap",
    "CommandCatalog",
    "CLIError",
    "CLIErrorHandler",
    "CommandConfigError",
]

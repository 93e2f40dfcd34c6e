"""Error handling utilities for cmdkit applications."""

import sys

from cmdkit.lib.constants import ERR, EXIT_INTERRUPTED
from cmdkit.lib.logging import get_logger

logger = get_logger(__name__)


class CLIError(Exception):
    """Base exception for CLI errors.

    Attributes:
        message: Error message
        exit_code: Exit code to use when this error occurs
    """

    def __init__(self, message: str, exit_code: int = ERR):
        """Initialize CLI error.

        Args:
            message: Error message
            exit_code: Exit code (default: ERR)
        """
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class CommandConfigError(CLIError):
    """Invalid command registration (empty name, empty module prefix).

    Raised while the application is being configured. Nothing is stored
    when it is raised; the bootstrap routine decides whether to abort.
    """

    def __init__(self, message: str, command_name: str = ""):
        super().__init__(message, exit_code=ERR)
        self.command_name = command_name


class CLIErrorHandler:
    """Centralized error handling for cmdkit applications.

    Provides consistent error reporting and exit codes.
    """

    @staticmethod
    def handle_error(error: BaseException, command_name: str = "cli") -> int:
        """Handle an error and return appropriate exit code.

        Args:
            error: Exception that occurred
            command_name: Name of command (or phase) that raised the error

        Returns:
            Exit code
        """
        if isinstance(error, CommandConfigError):
            # Developer mistake found at startup
            logger.error(f"{command_name} configuration invalid: {error.message}")
            print(f"Error: {error.message}", file=sys.stderr)
            return error.exit_code

        elif isinstance(error, CLIError):
            logger.error(f"{command_name} failed: {error.message}")
            print(f"Error: {error.message}", file=sys.stderr)
            return error.exit_code

        elif isinstance(error, KeyboardInterrupt):
            # User interrupted
            logger.info(f"{command_name} interrupted by user")
            print("\n\nInterrupted by user", file=sys.stderr)
            return EXIT_INTERRUPTED

        else:
            # Unexpected error
            logger.error(f"{command_name} failed with unexpected error: {error}", exc_info=error)
            print(f"Error: {error}", file=sys.stderr)
            return ERR

    @staticmethod
    def report(source: object, data: object) -> None:
        """Default handler for the "error" hook event.

        Makes runtime errors visible even when the application registered no
        handler of its own.

        Args:
            source: Object that fired the event
            data: ErrorEvent, exception or message
        """
        error = getattr(data, "error", data)
        source_name = getattr(source, "name", "cli")

        if isinstance(error, CLIError):
            message = error.message
        else:
            message = str(error)

        logger.error(f"{source_name} reported error: {message}")
        print(f"Error: {message}", file=sys.stderr)

"""Unit tests for CLI error handling."""

from cmdkit.cli.core.error_handler import CLIError, CLIErrorHandler, CommandConfigError
from cmdkit.models.command import Command
from cmdkit.models.events import ErrorEvent


class TestHandleError:
    """Test mapping of exceptions to exit codes."""

    def test_command_config_error(self, capsys):
        error = CommandConfigError("The added command name can not be empty.")

        exit_code = CLIErrorHandler.handle_error(error, "bootstrap")

        assert exit_code == 2
        assert "Error: The added command name can not be empty." in capsys.readouterr().err

    def test_cli_error_keeps_exit_code(self, capsys):
        exit_code = CLIErrorHandler.handle_error(CLIError("bad input", exit_code=3))

        assert exit_code == 3
        assert "bad input" in capsys.readouterr().err

    def test_keyboard_interrupt(self, capsys):
        exit_code = CLIErrorHandler.handle_error(KeyboardInterrupt())

        assert exit_code == 130
        assert "Interrupted by user" in capsys.readouterr().err

    def test_unexpected_error(self, capsys):
        exit_code = CLIErrorHandler.handle_error(RuntimeError("boom"))

        assert exit_code == 2
        assert "Error: boom" in capsys.readouterr().err


class TestReport:
    """Test the default "error" hook handler."""

    def test_reports_error_event(self, capsys):
        CLIErrorHandler.report(Command("serve"), ErrorEvent(error=ValueError("bad port")))

        assert "Error: bad port" in capsys.readouterr().err

    def test_reports_plain_message(self, capsys):
        CLIErrorHandler.report(None, "something broke")

        assert "Error: something broke" in capsys.readouterr().err

    def test_reports_cli_error_message(self, capsys):
        CLIErrorHandler.report(None, CLIError("not allowed"))

        assert "Error: not allowed" in capsys.readouterr().err

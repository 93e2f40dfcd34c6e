"""Unit tests for CLI main entry point (__main__.py)."""

from unittest.mock import Mock, patch

import pytest

from cmdkit.cli.__main__ import (
    builtin_commands,
    create_parser,
    format_commands,
    main,
    resolve_verbosity,
)
from cmdkit.cli.core.app import bootstrap
from cmdkit.lib.verbosity import Verbosity
from cmdkit.models.command import Command


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_has_version(self):
        """Test that parser includes version flag."""
        parser = create_parser()

        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(['--version'])

        assert exc_info.value.code == 0

    def test_parser_requires_command(self):
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_list_command_parser(self):
        parser = create_parser()

        args = parser.parse_args(['list'])
        assert args.command == 'list'
        assert args.module is None
        assert args.debug is False

        args = parser.parse_args(['--verbose', 'info', 'list', '-m', 'db'])
        assert args.verbose == 'info'
        assert args.module == 'db'

    def test_verbosity_flags_are_exclusive(self):
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(['--debug', '--quiet', 'list'])


class TestFormatCommands:
    """Tests for catalog listing."""

    def test_lines_are_padded_to_column_width(self, default_config, verbosity):
        app = bootstrap(commands=builtin_commands(), config=default_config, verbosity=verbosity)

        lines = format_commands(app)

        assert lines == [
            "help          Display help information (alias: h)",
            "list          List registered commands (alias: ls)",
        ]

    def test_module_filter(self, default_config, verbosity):
        app = bootstrap(
            commands=[Command("serve"), Command("db:migrate", use_for="Run migrations")],
            config=default_config,
            verbosity=verbosity,
        )

        assert format_commands(app, "db") == ["db:migrate    Run migrations"]


class TestMain:
    """Tests for main()."""

    @pytest.fixture(autouse=True)
    def mock_setup_logging(self):
        """Keep structlog's global configuration untouched."""
        with patch("cmdkit.cli.__main__.setup_logging") as mock:
            yield mock

    def test_logging_configured_from_config(self, mock_setup_logging):
        main(['list'])

        mock_setup_logging.assert_called_once_with("DEBUG", "console")

    def test_list_prints_builtin_commands(self, capsys):
        exit_code = main(['--quiet', 'list'])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "help" in out
        assert "list" in out

    def test_verbose_level_is_applied(self):
        with patch("cmdkit.cli.__main__.format_commands", return_value=[]) as mock_format:
            exit_code = main(['--verbose', 'warn', 'list'])

        app = mock_format.call_args.args[0]
        assert exit_code == 0
        assert app.verbosity.level == Verbosity.WARN

    def test_invalid_verbose_level_returns_error(self, capsys):
        exit_code = main(['--verbose', 'loud', 'list'])

        assert exit_code == 2
        assert "Unknown verbosity" in capsys.readouterr().err

    def test_debug_flag_shows_registration_messages(self):
        """Test --debug is in effect while built-in commands are registered."""
        sink = Mock()
        with patch("cmdkit.lib.verbosity.get_logger", return_value=sink):
            exit_code = main(['--debug', 'list'])

        messages = [c.args[0] for c in sink.debug.call_args_list]
        assert exit_code == 0
        assert "[Catalog.AddCommand] add a new CLI command: help" in messages
        assert "[Catalog.AddCommand] add a new CLI command: list" in messages
        assert "[App.Fire] trigger the application event: init" in messages

    def test_default_level_hides_registration_messages(self):
        sink = Mock()
        with patch("cmdkit.lib.verbosity.get_logger", return_value=sink):
            exit_code = main(['list'])

        assert exit_code == 0
        sink.debug.assert_not_called()


class TestResolveVerbosity:
    """Tests for picking the level from parsed arguments."""

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (['--debug', 'list'], Verbosity.CRAZY),
            (['--quiet', 'list'], Verbosity.QUIET),
            (['--verbose', '3', 'list'], Verbosity.INFO),
            (['list'], Verbosity.ERROR),
        ],
    )
    def test_levels(self, argv, expected):
        args = create_parser().parse_args(argv)

        assert resolve_verbosity(args, "error") is expected

"""CLI application: owns the command catalog, hooks and verbosity."""

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from cmdkit.cli.core.command_catalog import CommandCatalog
from cmdkit.cli.core.error_handler import CLIErrorHandler, CommandConfigError
from cmdkit.lib.config import AppConfig, get_config
from cmdkit.lib.constants import DEFAULT_LOGO_STYLE, EVT_ERROR, EVT_INIT
from cmdkit.lib.help_vars import HelpVars
from cmdkit.lib.hooks import HookFunc, HookRegistry
from cmdkit.lib.verbosity import Verbosity, VerbosityController
from cmdkit.models.command import Command
from cmdkit.models.events import ErrorEvent, HookEvent


@dataclass
class Logo:
    """ASCII logo shown by the help renderer."""

    text: str = ""
    style: str = DEFAULT_LOGO_STYLE  # e.g. "info"


class App:
    """The CLI application definition.

    Usage:
        app = App(lambda a: a.set_logo(LOGO))
        app.add(Command("serve"), Command("db:migrate", aliases=["migrate"]))
        app.on("before", handler)

    The optional configure callable runs before initialize(), so it can
    register hooks (including "init") that fire during construction.
    """

    def __init__(
        self,
        configure: Optional[Callable[["App"], None]] = None,
        *,
        config: Optional[AppConfig] = None,
        verbosity: Optional[VerbosityController] = None,
    ):
        """Initialize application.

        Args:
            configure: Optional callable run with the app before initialization
            config: Configuration (defaults to the global config)
            verbosity: Verbosity controller (defaults to one built from config)
        """
        config = config if config is not None else get_config()

        self.name = config.app_name
        self.version = config.app_version
        self.description = config.description
        self.logo = Logo()
        self.strict = config.strict

        self.verbosity = (
            verbosity if verbosity is not None else VerbosityController(config.verbosity)
        )
        self.hooks = HookRegistry()
        self.help_vars = HelpVars()
        self.catalog = CommandCatalog(self.verbosity)

        self._errors: List[BaseException] = []
        self._default_command = ""
        self._clean_args: List[str] = []

        if configure is not None:
            configure(self)

        self.initialize()

    def config(self, fn: Optional[Callable[["App"], None]]) -> None:
        """Configure the application. Must be called before adding commands."""
        if fn is not None:
            fn(self)

    def initialize(self) -> None:
        """Prepare help variables, install the default error handler and fire "init"."""
        self.help_vars.add_vars(self._app_help_vars())

        self.hooks.on(EVT_ERROR, CLIErrorHandler.report)

        self.fire_event(EVT_INIT, None)

    def _app_help_vars(self) -> Mapping[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "logo_text": self.logo.text,
            "logo_style": self.logo.style,
        }

    def set_logo(self, text: str, style: Optional[str] = None) -> None:
        """Set logo text and, optionally, its color style."""
        self.logo.text = text
        if style:
            self.logo.style = style
        self.help_vars.add_vars({"logo_text": self.logo.text, "logo_style": self.logo.style})

    def set_debug_mode(self) -> None:
        self.verbosity.set_debug_mode()

    def set_quiet_mode(self) -> None:
        self.verbosity.set_quiet_mode()

    def set_verbose(self, level: Union[Verbosity, int, str]) -> None:
        self.verbosity.set_verbose(level)

    def default_command(self, name: str) -> None:
        """Set the command run when none is given on the command line."""
        self._default_command = name

    @property
    def default_command_name(self) -> str:
        return self._default_command

    def new_command(
        self,
        name: str,
        use_for: str = "",
        func: Optional[Callable[..., Any]] = None,
        configure: Optional[Callable[[Command], None]] = None,
    ) -> Command:
        """Create a command (not registered yet).

        Args:
            name: Command name, optionally "module:name"
            use_for: One-line description
            func: Callable the dispatcher runs for this command
            configure: Optional callable run with the new command

        Returns:
            New Command
        """
        command = Command(name=name, use_for=use_for, func=func)
        if configure is not None:
            configure(command)
        return command

    def add(self, command: Command, *more: Command) -> None:
        """Add one or more commands in argument order.

        Raises:
            CommandConfigError: On the first invalid command; later ones are not added
        """
        for cmd in (command, *more):
            self.add_command(cmd)

    def add_command(self, command: Command) -> Command:
        """Register a command and initialize it.

        Args:
            command: Command to register

        Returns:
            The same command

        Raises:
            CommandConfigError: If the command name or module is empty
        """
        self.catalog.add_command(command)
        if command.is_disabled():
            return command

        command.app = self
        command.initialize()
        return command

    def add_aliases(self, name: str, aliases: Iterable[str]) -> None:
        self.catalog.add_aliases(name, aliases)

    def on(self, event: str, handler: HookFunc) -> None:
        """Add a hook handler for an application event."""
        self.verbosity.logf(Verbosity.DEBUG, "[App.On] add application hook: %s", event)
        self.hooks.on(event, handler)

    def fire_event(self, event: str, data: Any = None) -> None:
        """Fire an application event with the app as the source."""
        self.verbosity.logf(Verbosity.DEBUG, "[App.Fire] trigger the application event: %s", event)
        self.hooks.fire(event, self, data)

    def publish(self, event: HookEvent) -> None:
        """Fire a typed application event."""
        self.fire_event(event.name, event)

    def add_error(self, error: BaseException) -> None:
        """Record a runtime error for later inspection."""
        self._errors.append(error)

    def report_error(self, error: BaseException) -> None:
        """Record a runtime error and fire the "error" event for it."""
        self.add_error(error)
        self.publish(ErrorEvent(error=error))

    def errors(self) -> List[BaseException]:
        """Get recorded runtime errors, oldest first."""
        return list(self._errors)

    def names(self) -> Mapping[str, int]:
        """Get all command names mapped to their lengths (read-only)."""
        return self.catalog.names()

    def commands(self) -> Mapping[str, Command]:
        """Get all commands by name (read-only)."""
        return self.catalog.commands()

    @property
    def name_max_length(self) -> int:
        return self.catalog.name_max_length

    def clean_args(self) -> List[str]:
        """Get arguments left after the binary and command name were removed."""
        return list(self._clean_args)

    def set_clean_args(self, args: Iterable[str]) -> None:
        """Store clean arguments (called by the line processor)."""
        self._clean_args = list(args)


def bootstrap(
    configure: Optional[Callable[[App], None]] = None,
    commands: Iterable[Command] = (),
    *,
    config: Optional[AppConfig] = None,
    verbosity: Optional[VerbosityController] = None,
    exit_on_error: bool = True,
) -> App:
    """Build an application and register its commands.

    Invalid command configuration is reported and, with exit_on_error, ends
    the process with exit code ERR before any command runs.

    Args:
        configure: Optional callable run with the app before initialization
        commands: Commands to register, in order
        config: Configuration (defaults to the global config)
        verbosity: Verbosity controller
        exit_on_error: Exit the process on invalid configuration instead of raising

    Returns:
        Configured App

    Raises:
        CommandConfigError: If configuration is invalid and exit_on_error is False
    """
    app = App(configure, config=config, verbosity=verbosity)

    try:
        for command in commands:
            app.add_command(command)
    except CommandConfigError as e:
        exit_code = CLIErrorHandler.handle_error(e, command_name=app.name)
        if exit_on_error:
            sys.exit(exit_code)
        raise

    return app

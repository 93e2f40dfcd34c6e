"""Command catalog: registered commands, module index and aliases."""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from cmdkit.cli.core.error_handler import CommandConfigError
from cmdkit.lib.constants import DEFAULT_NAME_MAX_LENGTH, MODULE_SEPARATOR
from cmdkit.lib.verbosity import Verbosity, VerbosityController
from cmdkit.models.command import Command


class CommandCatalog:
    """Catalog of CLI commands.

    Keeps four indexes in step:
    - names: command name -> name length (for help column alignment)
    - commands: command name -> Command
    - module commands: module prefix -> {command name -> Command}
    - aliases: alias -> canonical command name

    Registering a name twice replaces the earlier command. Disabled commands
    are never stored. Views returned by the accessors are read-only.
    """

    def __init__(self, verbosity: Optional[VerbosityController] = None):
        """Initialize empty catalog.

        Args:
            verbosity: Controller for diagnostic messages (a private one if omitted)
        """
        self._verbosity = verbosity if verbosity is not None else VerbosityController()
        self._names: Dict[str, int] = {}
        self._commands: Dict[str, Command] = {}
        self._module_commands: Dict[str, Dict[str, Command]] = {}
        self._aliases: Dict[str, str] = {}
        self._name_max_length = DEFAULT_NAME_MAX_LENGTH

    def add_command(self, command: Command) -> Command:
        """Validate and store a command.

        Args:
            command: Command to register; its name is trimmed and its module set

        Returns:
            The same command

        Raises:
            CommandConfigError: If the name is empty or starts with ":"
        """
        command.name = command.name.strip()
        if not command.name:
            raise CommandConfigError("The added command name can not be empty.")

        if command.is_disabled():
            self._verbosity.logf(
                Verbosity.DEBUG, "command %s has been disabled, skip add", command.name
            )
            return command

        if command.name.startswith(MODULE_SEPARATOR):
            raise CommandConfigError(
                "The added command module can not be empty.", command_name=command.name
            )

        command.module = Command.module_of(command.name)
        name_length = len(command.name)

        previous = self._commands.get(command.name)
        if previous is not None and previous is not command:
            self._module_commands.get(previous.module, {}).pop(previous.name, None)

        self._names[command.name] = name_length
        self._commands[command.name] = command

        # record command name max length
        if name_length > self._name_max_length:
            self._name_max_length = name_length

        self._module_commands.setdefault(command.module, {})[command.name] = command

        self.add_aliases(command.name, command.aliases)
        self._verbosity.logf(
            Verbosity.DEBUG, "[Catalog.AddCommand] add a new CLI command: %s", command.name
        )
        return command

    def add(self, command: Command, *more: Command) -> None:
        """Register one or more commands in argument order.

        The first invalid command stops the batch; commands after it are
        not registered.

        Raises:
            CommandConfigError: If any command is invalid
        """
        for cmd in (command, *more):
            self.add_command(cmd)

    def add_aliases(self, name: str, aliases: Iterable[str]) -> None:
        """Point each alias at a canonical command name.

        The most recent registration of an alias wins. Re-pointing an alias
        or shadowing a command name is reported at WARN level.

        Args:
            name: Canonical command name (need not be registered yet)
            aliases: Alternate names
        """
        for alias in aliases:
            current = self._aliases.get(alias)
            if current is not None and current != name:
                self._verbosity.logf(
                    Verbosity.WARN,
                    "alias %s of command %s is now used by command %s",
                    alias,
                    current,
                    name,
                )
            elif alias in self._commands and alias != name:
                self._verbosity.logf(
                    Verbosity.WARN, "alias %s of command %s shadows a command name", alias, name
                )
            self._aliases[alias] = name

    def resolve_alias(self, name: str) -> str:
        """Get the canonical command name for an alias.

        Args:
            name: Alias or command name

        Returns:
            Canonical name, or name unchanged when it is not an alias
        """
        return self._aliases.get(name, name)

    def get(self, name: str) -> Optional[Command]:
        """Look up a command by name or alias.

        Args:
            name: Command name or alias

        Returns:
            Command instance, or None if not registered
        """
        if name in self._commands:
            return self._commands[name]
        return self._commands.get(self.resolve_alias(name))

    def has_command(self, name: str) -> bool:
        """Check if a command name (not alias) is registered."""
        return name in self._commands

    def names(self) -> Mapping[str, int]:
        """Get command names mapped to their lengths (read-only)."""
        return MappingProxyType(self._names)

    def commands(self) -> Mapping[str, Command]:
        """Get registered commands by name (read-only)."""
        return MappingProxyType(self._commands)

    def aliases(self) -> Mapping[str, str]:
        """Get aliases mapped to canonical names (read-only)."""
        return MappingProxyType(self._aliases)

    def module_commands(self, module: str = "") -> Mapping[str, Command]:
        """Get commands of one module by name (read-only).

        Args:
            module: Module prefix, "" for commands without one

        Returns:
            Commands of the module; empty when the module is unknown
        """
        return MappingProxyType(self._module_commands.get(module, {}))

    def modules(self) -> List[str]:
        """Get known module prefixes, in first-registration order."""
        return list(self._module_commands)

    @property
    def name_max_length(self) -> int:
        """Longest registered command name length, never below the default floor."""
        return self._name_max_length

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        """Get number of registered commands."""
        return len(self._commands)

"""Command model.

A Command is one named unit of CLI functionality. Its name may carry a
module prefix ("db:migrate" belongs to module "db"). The catalog validates
and stores it; the application attaches itself and runs initialize().
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from cmdkit.lib.constants import EVT_INIT, MODULE_SEPARATOR
from cmdkit.lib.help_vars import HelpVars
from cmdkit.lib.hooks import HookFunc, HookRegistry
from cmdkit.lib.verbosity import Verbosity


@dataclass(eq=False)
class Command:
    """A registered (or registrable) CLI command."""

    name: str
    use_for: str = ""
    aliases: List[str] = field(default_factory=list)
    disabled: bool = False
    func: Optional[Callable[..., Any]] = None  # executed by the dispatcher, never here
    module: str = ""  # derived from name on registration

    # Set by the owning application when the command is accepted
    app: Any = field(default=None, repr=False)
    initialized: bool = field(default=False, repr=False)
    hooks: HookRegistry = field(default_factory=HookRegistry, repr=False)
    help_vars: HelpVars = field(default_factory=HelpVars, repr=False)

    @staticmethod
    def module_of(name: str) -> str:
        """Get the module prefix of a command name.

        Args:
            name: Full command name, e.g. "db:migrate"

        Returns:
            Text before the first ":" ("db"), or "" when there is none
        """
        index = name.find(MODULE_SEPARATOR)
        if index == -1:
            return ""
        return name[:index]

    def is_disabled(self) -> bool:
        return self.disabled

    @property
    def full_name(self) -> str:
        """Name prefixed with the owning application name, when attached."""
        if self.app is None:
            return self.name
        return f"{self.app.name} {self.name}"

    def on(self, event: str, handler: HookFunc) -> None:
        """Add a hook handler for one of this command's events."""
        self.hooks.on(event, handler)

    def fire_event(self, event: str, data: Any = None) -> None:
        """Fire a command event with this command as the source."""
        self._logf(Verbosity.DEBUG, "[Command.Fire] trigger the command event: %s", event)
        self.hooks.fire(event, self, data)

    def initialize(self) -> None:
        """Prepare the command after it has been accepted by an application.

        Fills the help template variables and fires the command's own
        "init" event.
        """
        self.help_vars.add_vars(
            {
                "cmd": self.name,
                "full_cmd": self.full_name,
                "module": self.module,
                "use_for": self.use_for,
            }
        )
        self.initialized = True
        self._logf(Verbosity.DEBUG, "[Command.initialize] command %s initialized", self.name)
        self.fire_event(EVT_INIT)

    def _logf(self, level: Verbosity, fmt: str, *args: Any) -> None:
        if self.app is not None:
            self.app.verbosity.logf(level, fmt, *args)

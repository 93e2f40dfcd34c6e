"""Level-gated verbosity threshold.

Every diagnostic message of the catalog, the hooks and the commands goes
through a VerbosityController. The controller is owned by the application
object and shared with everything it creates, so changing the level on the
app changes it for all of them immediately.
"""

from enum import IntEnum
from typing import Any, Optional, Union

from cmdkit.lib.constants import (
    ALL_VERBOSITY_NAMES,
    DEFAULT_VERBOSITY,
    VERB_CRAZY,
    VERB_DEBUG,
    VERB_ERROR,
    VERB_INFO,
    VERB_QUIET,
    VERB_WARN,
)
from cmdkit.lib.logging import get_logger


class Verbosity(IntEnum):
    """Ordered verbosity levels, QUIET < ERROR < WARN < INFO < DEBUG < CRAZY."""

    QUIET = VERB_QUIET
    ERROR = VERB_ERROR
    WARN = VERB_WARN
    INFO = VERB_INFO
    DEBUG = VERB_DEBUG
    CRAZY = VERB_CRAZY

    @classmethod
    def parse(cls, value: Union["Verbosity", int, str]) -> "Verbosity":
        """Convert a level name or number into a Verbosity.

        Args:
            value: Verbosity member, integer 0-5 or level name ("warn", "DEBUG", "3")

        Returns:
            Matching Verbosity

        Raises:
            ValueError: If value does not name a level
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            text = value.strip().lower()
            if text.isdigit():
                value = int(text)
            elif text in ALL_VERBOSITY_NAMES:
                return cls[text.upper()]
            else:
                raise ValueError(
                    f"Unknown verbosity '{value}', expected one of: {', '.join(ALL_VERBOSITY_NAMES)}"
                )

        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Verbosity must be between {VERB_QUIET} and {VERB_CRAZY}, got {value}") from None


# structlog method used to emit each level
_SINK_METHODS = {
    Verbosity.QUIET: "info",
    Verbosity.ERROR: "error",
    Verbosity.WARN: "warning",
    Verbosity.INFO: "info",
    Verbosity.DEBUG: "debug",
    Verbosity.CRAZY: "debug",
}


class VerbosityController:
    """Holds the current verbosity threshold and writes gated messages to a sink."""

    def __init__(
        self,
        level: Union[Verbosity, int, str] = DEFAULT_VERBOSITY,
        sink: Optional[Any] = None,
    ):
        """Initialize controller.

        Args:
            level: Initial threshold
            sink: structlog-style logger (defaults to the "cmdkit" logger)
        """
        self._level = Verbosity.parse(level)
        self._sink = sink if sink is not None else get_logger("cmdkit")

    @property
    def level(self) -> Verbosity:
        """Current threshold."""
        return self._level

    @property
    def sink(self) -> Any:
        return self._sink

    def set_debug_mode(self) -> None:
        """Report everything."""
        self._level = Verbosity.CRAZY

    def set_quiet_mode(self) -> None:
        """Report only messages logged at QUIET level."""
        self._level = Verbosity.QUIET

    def set_verbose(self, level: Union[Verbosity, int, str]) -> None:
        """Set an arbitrary threshold.

        Args:
            level: New threshold

        Raises:
            ValueError: If level does not name a verbosity
        """
        self._level = Verbosity.parse(level)

    def is_enabled(self, level: Union[Verbosity, int]) -> bool:
        """Check whether a message at this level would be emitted."""
        return level <= self._level

    def logf(self, level: Union[Verbosity, int], fmt: str, *args: Any) -> None:
        """Format and emit a message if level is within the current threshold.

        Args:
            level: Message level
            fmt: %-style format string
            *args: Format arguments
        """
        if not self.is_enabled(level):
            return

        message = fmt % args if args else fmt
        method = _SINK_METHODS[Verbosity(level)]
        getattr(self._sink, method)(message, verbosity=Verbosity(level).name.lower())

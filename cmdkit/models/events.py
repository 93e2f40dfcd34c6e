"""Typed hook events.

Each event carries the payload for one lifecycle point. Handlers registered
with HookRegistry.on() receive (source, event) when an event is published.
CustomEvent covers names outside the reserved set.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional

from cmdkit.lib.constants import EVT_AFTER, EVT_BEFORE, EVT_ERROR, EVT_INIT


@dataclass(frozen=True)
class HookEvent:
    """Base class for events published through a HookRegistry."""

    name: ClassVar[str] = ""


@dataclass(frozen=True)
class InitEvent(HookEvent):
    """Fired once at the end of initialization. No payload."""

    name: ClassVar[str] = EVT_INIT


@dataclass(frozen=True)
class BeforeEvent(HookEvent):
    """Fired by the dispatcher right before a resolved command runs."""

    name: ClassVar[str] = EVT_BEFORE

    command: Any
    args: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AfterEvent(HookEvent):
    """Fired by the dispatcher right after a resolved command returns."""

    name: ClassVar[str] = EVT_AFTER

    command: Any
    args: List[str] = field(default_factory=list)
    exit_code: Optional[int] = None


@dataclass(frozen=True)
class ErrorEvent(HookEvent):
    """A recoverable runtime error that needs user-facing reporting."""

    name: ClassVar[str] = EVT_ERROR

    error: BaseException


@dataclass(frozen=True)
class CustomEvent(HookEvent):
    """Application-defined event with an opaque payload."""

    event_name: str
    payload: Any = None

    def __post_init__(self):
        if not self.event_name.strip():
            raise ValueError("Custom event name can not be empty")

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.event_name

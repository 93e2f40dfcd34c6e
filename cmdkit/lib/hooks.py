"""Event hook registry for application and command lifecycle points."""

from typing import Any, Callable, Dict, List, Tuple

from cmdkit.models.events import HookEvent

# Handler signature: handler(source, data)
HookFunc = Callable[[Any, Any], Any]


class HookRegistry:
    """Named events mapped to ordered handler lists.

    Event names are open strings: "init", "before", "after" and "error" are
    the reserved lifecycle events, any other name is accepted as well.
    Handlers are invoked synchronously in registration order. The registry
    never catches handler exceptions; they propagate to whoever fired the
    event.
    """

    def __init__(self):
        """Initialize empty hook registry."""
        self._hooks: Dict[str, List[HookFunc]] = {}

    def on(self, event: str, handler: HookFunc) -> None:
        """Append a handler for an event.

        Args:
            event: Event name
            handler: Callable invoked as handler(source, data)
        """
        self._hooks.setdefault(event, []).append(handler)

    def fire(self, event: str, source: Any, data: Any = None) -> None:
        """Invoke every handler registered for event, in order, exactly once.

        Args:
            event: Event name
            source: Object firing the event (app or command)
            data: Event payload
        """
        # Snapshot so handlers registering more handlers don't extend this round
        for handler in tuple(self._hooks.get(event, ())):
            handler(source, data)

    def publish(self, source: Any, event: HookEvent) -> None:
        """Fire a typed event; handlers receive the event object as data.

        Args:
            source: Object firing the event
            event: Typed event instance
        """
        self.fire(event.name, source, event)

    def handlers(self, event: str) -> Tuple[HookFunc, ...]:
        """Get handlers registered for an event, in order."""
        return tuple(self._hooks.get(event, ()))

    def has_handlers(self, event: str) -> bool:
        return bool(self._hooks.get(event))

    def events(self) -> List[str]:
        """Get names of events that have at least one handler."""
        return [name for name, handlers in self._hooks.items() if handlers]

    def __len__(self) -> int:
        """Get number of events with handlers."""
        return len(self.events())

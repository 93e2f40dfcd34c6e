"""Template variables handed to the help renderer."""

from types import MappingProxyType
from typing import Any, Mapping


class HelpVars:
    """Store of named values substituted into help templates.

    Rendering happens outside this package; this only collects the values.
    """

    def __init__(self):
        self._vars: dict[str, str] = {}

    def add_var(self, name: str, value: Any) -> None:
        self._vars[name] = str(value)

    def add_vars(self, values: Mapping[str, Any]) -> None:
        """Add several variables, overwriting existing names."""
        for name, value in values.items():
            self.add_var(name, value)

    def get_var(self, name: str) -> str:
        """Get a variable value, or "" when it is not set."""
        return self._vars.get(name, "")

    def get_vars(self) -> Mapping[str, str]:
        """Get a read-only view of all variables."""
        return MappingProxyType(self._vars)

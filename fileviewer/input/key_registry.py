"""Key-token binding table used by the viewer session.

Actions take no arguments and return ``True`` when the viewer should quit.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], bool]


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable from any of ``combos``."""

    combos: tuple[str, ...]
    handler: KeyAction


class KeyComboRegistry:
    """Exact-match dispatch from key tokens to actions.

    Binding a token twice keeps the later action.
    """

    def __init__(self) -> None:
        self._actions: dict[str, KeyAction] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._actions[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(key)
        return None if action is None else action()

"""Registry of named buffer operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from markbuffer.runtime.telemetry import actions_span

from .models import ActionRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    alias_count: int


class ActionRegistry:
    """Owns action references and resolves them by id or alias."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._names: Dict[str, str] = {}
        self._logger_name = logger_name

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def get(self, name: str) -> ActionRef:
        try:
            return self._actions[self._names[name]]
        except KeyError as exc:
            raise KeyError(f"Action '{name}' is not registered") from exc

    def register(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with actions_span(
            "register", logger_name=self._logger_name, action_id=action.id
        ) as handle:
            taken = [
                name
                for name in action.names
                if name in self._names and self._names[name] != action.id
            ]
            if taken:
                handle.add_metadata("conflicts", ",".join(taken))
                raise ValueError(
                    f"Action '{action.id}' reuses registered names {taken}"
                )
            if action.id in self._actions:
                if not replace:
                    raise ValueError(f"Action '{action.id}' already registered")
                self.unregister(action.id)

            self._actions[action.id] = action
            for name in action.names:
                self._names[name] = action.id
            return action

    def unregister(self, action_id: str) -> ActionRef | None:
        action = self._actions.pop(action_id, None)
        if action is None:
            return None
        for name in action.names:
            self._names.pop(name, None)
        return action

    def invoke(self, buffer: object, name: str, *args: object) -> object:
        action = self.get(name)
        if len(args) != action.arity:
            raise TypeError(
                f"Action '{action.id}' takes {action.arity} argument(s), "
                f"got {len(args)}"
            )
        return action(buffer, *args)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            alias_count=len(self._names) - len(self._actions),
        )


__all__ = ["ActionRegistry", "RegistryStats"]

"""Recorded operation sequences replayed through the repeat combinator."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, List, Optional, Sequence, Union

from markbuffer.buffer import Buffer
from markbuffer.runtime.telemetry import actions_span

from .defaults import default_registry
from .registry import ActionRegistry

StepSpec = Union[str, Sequence[Any], "MacroStep"]


@dataclass(frozen=True, slots=True)
class MacroStep:
    action: str
    args: tuple[Any, ...] = ()

    @classmethod
    def coerce(cls, spec: StepSpec) -> "MacroStep":
        if isinstance(spec, MacroStep):
            return spec
        if isinstance(spec, str):
            return cls(spec)
        name, *args = spec
        return cls(str(name), tuple(args))


@dataclass(frozen=True, slots=True)
class Macro:
    """Immutable list of named steps, e.g. ``Macro.of("tl", ("es", "> "))``."""

    steps: tuple[MacroStep, ...]

    @classmethod
    def of(cls, *steps: StepSpec) -> "Macro":
        return cls(tuple(MacroStep.coerce(step) for step in steps))

    def bind(
        self, buffer: Buffer, registry: Optional[ActionRegistry] = None
    ) -> List[Callable[[], Any]]:
        """Resolve every step against ``registry`` before anything runs."""

        actions = registry or default_registry()
        commands: List[Callable[[], Any]] = []
        for step in self.steps:
            action = actions.get(step.action)
            if len(step.args) != action.arity:
                raise TypeError(
                    f"Action '{action.id}' takes {action.arity} argument(s), "
                    f"got {len(step.args)}"
                )
            commands.append(partial(action, buffer, *step.args))
        return commands

    def run(
        self,
        buffer: Buffer,
        *,
        times: int = 1,
        registry: Optional[ActionRegistry] = None,
    ) -> List[Any]:
        commands = self.bind(buffer, registry)
        with actions_span(
            "macro", buffer=buffer.name, steps=len(commands), times=times
        ):
            return buffer.repeat(times, *commands)


__all__ = ["Macro", "MacroStep"]

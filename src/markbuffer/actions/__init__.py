"""Named buffer operations and macro replay."""

from .defaults import DEFAULT_ACTIONS, default_registry, load_default_actions
from .macro import Macro, MacroStep
from .models import ActionRef
from .registry import ActionRegistry, RegistryStats

__all__ = [
    "ActionRef",
    "ActionRegistry",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "default_registry",
    "load_default_actions",
    "Macro",
    "MacroStep",
]

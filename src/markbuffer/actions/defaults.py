"""Built-in table mapping the classic two-letter mnemonics to buffer operations."""

from __future__ import annotations

from typing import Optional

from markbuffer.buffer import Buffer

from .models import ActionRef
from .registry import ActionRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="al",
        handler=Buffer.move_left,
        aliases=("move_left",),
        description="Arrow left",
    ),
    ActionRef(
        id="ar",
        handler=Buffer.move_right,
        aliases=("move_right",),
        description="Arrow right",
    ),
    ActionRef(
        id="go",
        handler=Buffer.go_to,
        aliases=("go_to",),
        arity=1,
        description="Move the cursor to an offset, clamped to the buffer",
    ),
    ActionRef(
        id="tl",
        handler=Buffer.to_start,
        aliases=("to_start",),
        description="Cursor to the start of the buffer",
    ),
    ActionRef(
        id="tr",
        handler=Buffer.to_end,
        aliases=("to_end",),
        description="Cursor to the end of the buffer",
    ),
    ActionRef(
        id="dr",
        handler=Buffer.mark,
        aliases=("mark",),
        description="Define region: marker at cursor",
    ),
    ActionRef(
        id="da",
        handler=Buffer.mark_all,
        aliases=("mark_all",),
        description="Define all: region spans the whole buffer",
    ),
    ActionRef(
        id="es",
        handler=Buffer.insert,
        aliases=("insert",),
        arity=1,
        description="Enter string at the cursor",
    ),
    ActionRef(
        id="xc",
        handler=Buffer.copy,
        aliases=("copy",),
        description="Copy region to the paste register",
    ),
    ActionRef(
        id="xd",
        handler=Buffer.cut,
        aliases=("cut",),
        description="Cut region to the paste register",
    ),
    ActionRef(
        id="xp",
        handler=Buffer.paste_insert,
        aliases=("paste_insert", "paste"),
        description="Insert the paste register at the cursor",
    ),
    ActionRef(
        id="ee",
        handler=Buffer.delete_forward,
        aliases=("delete_forward",),
        description="Delete the character right of the cursor",
    ),
    ActionRef(
        id="ed",
        handler=Buffer.delete_backward,
        aliases=("delete_backward",),
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="cc",
        handler=Buffer.invert_case,
        aliases=("invert_case",),
        description="Invert letter case from marker to cursor",
    ),
    ActionRef(
        id="sc",
        handler=Buffer.substitute_char,
        aliases=("substitute_char",),
        arity=2,
        description="Substitute one character for another from marker to cursor",
    ),
    ActionRef(
        id="dd",
        handler=Buffer.remove_duplicates,
        aliases=("remove_duplicates",),
        description="Keep only first occurrences within the region",
    ),
    ActionRef(
        id="ff",
        handler=Buffer.find_forward,
        aliases=("find_forward",),
        arity=1,
        description="Find forwards by character or predicate",
    ),
    ActionRef(
        id="fb",
        handler=Buffer.find_backward,
        aliases=("find_backward",),
        arity=1,
        description="Find backwards by character or predicate",
    ),
)

_DEFAULT_REGISTRY: Optional[ActionRegistry] = None


def load_default_actions(
    registry: ActionRegistry, *, replace: bool = False
) -> ActionRegistry:
    for action in DEFAULT_ACTIONS:
        registry.register(action, replace=replace)
    return registry


def default_registry() -> ActionRegistry:
    """Return the shared registry seeded with ``DEFAULT_ACTIONS``."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = load_default_actions(
            ActionRegistry(logger_name="markbuffer.actions")
        )
    return _DEFAULT_REGISTRY


__all__ = ["DEFAULT_ACTIONS", "default_registry", "load_default_actions"]

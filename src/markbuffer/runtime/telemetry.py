"""Telemetry for buffer and action operations, built on telelog.

Two kinds of records leave this module:

``span::done`` / ``span::fail``
    written when an instrumented block closes, carrying whatever metadata
    the block attached to its handle (``buffer_span`` / ``actions_span``).
``event::<name>``
    one-off structured events such as ``buffer.search``.

The telelog configuration is read from ``MARKBUFFER_*`` environment
variables unless ``configure`` is given a config or a preset.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MARKBUFFER_"
PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def default_logger_name() -> str:
    return _env("LOGGER") or "markbuffer"


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _build_preset_config(preset: str) -> Any:
    key = preset.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    else:
        # production keeps INFO records in a buffered file; performance
        # captures every span as JSON for offline profiling
        performance = key == "performance"
        config.with_min_level("DEBUG" if performance else "INFO")
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(performance)
        default_file = "markbuffer-performance.log" if performance else "markbuffer.log"
        config.with_file_output(_env("LOG_FILE") or default_file)

    config.with_profiling(True)
    return config


def _build_default_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR", False))

    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` adopts an explicit ``telelog.Config``; ``preset`` picks one of
    ``PRESETS``. With neither, the environment is read again.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_default_config()
    logger_name = name or default_logger_name()
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Callable[..., Any]:
    method = getattr(logger, f"{level.lower()}_with", None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return method


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    payload = {"event": name, **(data or {})}
    _level_method(get_logger(logger_name), level)(
        f"event::{name}", _format_pairs(payload)
    )


def search_event(*, buffer: str, direction: str, found: bool, cursor: int) -> None:
    record_event(
        "buffer.search",
        level="debug",
        data={
            "buffer": buffer,
            "direction": direction,
            "found": found,
            "cursor": cursor,
        },
    )


@dataclass
class SpanHandle:
    """Handle yielded by ``span``; metadata added here is written on close."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(self, level: str, message: str, **extra: Any) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update({key: _stringify(val) for key, val in extra.items()})
        _level_method(self.logger, level)(message, _format_pairs(payload))

    def done(self) -> None:
        self._emit("debug", "span::done")

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", reason=reason)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, track it under ``component`` and report how it ended.

    ``metadata`` is pushed onto the logger context for the duration of the
    block and seeds the handle's metadata.
    """

    log = get_logger(logger_name)
    metadata_payload = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in metadata_payload.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component,
            metadata=dict(metadata_payload),
        )

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        else:
            handle.done()
        finally:
            for key in metadata_payload:
                log.remove_context(key)


def buffer_span(operation: str, *, buffer: str) -> Any:
    """Span for one buffer operation: ``buffer::<operation>``."""

    return span(
        f"buffer::{operation}", component="buffer", metadata={"buffer": buffer}
    )


def actions_span(
    operation: str, *, logger_name: Optional[str] = None, **metadata: Any
) -> Any:
    """Span for registry and macro work: ``actions::<operation>``."""

    return span(
        f"actions::{operation}",
        logger_name=logger_name,
        component="actions",
        metadata=metadata,
    )


__all__ = [
    "PRESETS",
    "SpanHandle",
    "actions_span",
    "buffer_span",
    "configure",
    "default_logger_name",
    "get_logger",
    "record_event",
    "search_event",
    "span",
]

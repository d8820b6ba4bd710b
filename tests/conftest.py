import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

import pytest

# keep pytest output free of telemetry console records
os.environ.setdefault("MARKBUFFER_DISABLE_CONSOLE", "1")

from markbuffer.runtime import telemetry  # noqa: E402


class RecordingLogger:
    """Stand-in for a telelog logger that keeps everything it is given."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}
        self.components: List[str] = []
        self.profiles: List[str] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiles.append(name)
        yield

    def _record(self, level: str, message: str, pairs: Any) -> None:
        self.records.append((level, message, dict(pairs)))

    def debug_with(self, message: str, pairs: Any) -> None:
        self._record("debug", message, pairs)

    def info_with(self, message: str, pairs: Any) -> None:
        self._record("info", message, pairs)

    def error_with(self, message: str, pairs: Any) -> None:
        self._record("error", message, pairs)

    def messages(self, message: str) -> List[Dict[str, str]]:
        return [data for _, text, data in self.records if text == message]


@pytest.fixture
def telemetry_log(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger

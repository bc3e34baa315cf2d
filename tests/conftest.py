"""Top-level pytest configuration for recordkeep."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from recordkeep.config import RecordkeepSettings, get_settings
from recordkeep.console import ConsoleInput
from recordkeep.logging import LoggingSettings


class ScriptedPrompt:
    """Prompt callable that replays canned answers and records the labels asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.asked: list[str] = []

    def __call__(self, label: str) -> str:
        self.asked.append(label)
        try:
            return next(self._answers)
        except StopIteration:
            raise AssertionError(f"No scripted answer left for prompt {label!r}") from None


@pytest.fixture(autouse=True)
def quiet_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep log lines out of captured output and settings out of the real cwd."""
    monkeypatch.setenv("RECORDKEEP_LOGGING_CONSOLE_ENABLED", "false")
    monkeypatch.setenv("RECORDKEEP_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> RecordkeepSettings:
    return RecordkeepSettings(data_dir=tmp_path)


@pytest.fixture
def logging_settings() -> LoggingSettings:
    return LoggingSettings(console_enabled=False)


@pytest.fixture
def scripted() -> Callable[..., ConsoleInput]:
    """Build a ConsoleInput that answers prompts from the given strings."""

    def _make(*answers: str) -> ConsoleInput:
        return ConsoleInput(prompt=ScriptedPrompt(answers))

    return _make


@pytest.fixture
def output() -> list[str]:
    """Collects everything an app prints."""
    return []

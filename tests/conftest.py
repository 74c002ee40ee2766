"""Shared fixtures for filemover tests."""

import io

import pytest
from rich.console import Console

from filemover.config import manager as config_manager_module
from filemover.config.manager import ConfigManager


class ScriptedPrompter:
    """Prompter that replays canned answers and records the questions asked."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions: list[str] = []

    def prompt_line(self, message: str) -> str:
        self.questions.append(message)
        if self.answers:
            return self.answers.pop(0)
        return ""


@pytest.fixture
def console():
    """A console writing into memory, wide enough to keep paths on one line."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output(console):
    """Callable returning everything printed to the in-memory console."""
    return lambda: console.file.getvalue()


@pytest.fixture
def prompter_factory():
    """Build a ScriptedPrompter from a list of answers."""
    return ScriptedPrompter


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests away from real config files and the global config manager."""
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [])
    monkeypatch.setattr(config_manager_module, "_config_manager", None)

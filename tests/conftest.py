"""Shared test fixtures for marknote."""

from datetime import datetime

import pytest

from marknote.config.models import MarknoteConfig
from marknote.documents.store import NoteStore
from marknote.plugins.builtin import AddTimestamp, UppercaseHeadings
from marknote.plugins.registry import PluginRegistry
from marknote.plugins.selection import PluginSelection
from marknote.transform.pipeline import TransformPipeline
from marknote.workspace import Workspace

FIXED_NOW = datetime(2024, 3, 15, 9, 30, 0)


class EchoRenderer:
    """Wraps text in a marker element so tests can see what reached the renderer."""

    def __init__(self):
        self.calls: list[str] = []

    def render(self, text: str) -> str:
        self.calls.append(text)
        return f"<article>{text}</article>"


class BrokenRenderer:
    def render(self, text: str) -> str:
        raise RuntimeError("renderer exploded")


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def registry(fixed_clock):
    """Reference registry with a frozen clock for the timestamp plugin."""
    return PluginRegistry([
        UppercaseHeadings(),
        AddTimestamp(fmt="%Y-%m-%d %H:%M", clock=fixed_clock),
    ])


@pytest.fixture
def selection():
    return PluginSelection()


@pytest.fixture
def pipeline(registry, selection):
    return TransformPipeline(registry, selection)


@pytest.fixture
def store():
    return NoteStore()


@pytest.fixture
def echo_renderer():
    return EchoRenderer()


@pytest.fixture
def workspace(registry, echo_renderer):
    return Workspace(registry=registry, renderer=echo_renderer)


@pytest.fixture
def sample_config():
    return MarknoteConfig()


@pytest.fixture
def broken_renderer():
    return BrokenRenderer()

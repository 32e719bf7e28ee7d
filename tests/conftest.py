"""Shared test fixtures for simple-select."""

from dataclasses import dataclass

import pytest


@dataclass
class Row:
    name: str
    ticked: bool = False


@pytest.fixture
def two_items():
    """The two-item collection used throughout the scenarios."""
    return [
        {"name": "item 1", "ticked": False},
        {"name": "item 2", "ticked": False},
    ]


@pytest.fixture
def mixed_items():
    """Partially ticked collection."""
    return [
        {"name": "a", "ticked": True},
        {"name": "b", "ticked": False},
        {"name": "c", "ticked": True},
    ]


@pytest.fixture
def object_items():
    """Attribute-style items instead of dicts."""
    return [Row("x"), Row("y", ticked=True)]


@pytest.fixture
def recorder():
    """Callable that records each call's arguments."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)

    return Recorder()

"""Shared fixtures for smarthome tests."""

import pytest

from smarthome.controller import reset_controller
from smarthome.events import reset_observer_registry


@pytest.fixture(autouse=True)
def reset_singletons():
    reset_controller()
    reset_observer_registry()
    yield
    reset_controller()
    reset_observer_registry()


@pytest.fixture
def lines():
    """A list that collects every line written to a sink."""
    return []


@pytest.fixture
def sink(lines):
    return lines.append

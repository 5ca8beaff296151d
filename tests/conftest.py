"""Shared fixtures for the engine tests."""

import pytest

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game import create_session


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, components=[])


@pytest.fixture
def session():
    return create_session()

"""Pytest configuration and shared fixtures."""

import logging
import os

import pytest

from subnetcalc.app import ApplicationState
from subnetcalc.logging import LOGGER_NAME
from subnetcalc.keys import decode_keys


@pytest.fixture(autouse=True)
def reset_environment():
    """Drop SUBNETCALC_* variables and logger handlers around each test."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("SUBNETCALC_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)
    log = logging.getLogger(LOGGER_NAME)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()


@pytest.fixture
def state():
    return ApplicationState()


class ScriptedKeys:
    """KeySource that replays typed text; None entries stand for poll timeouts."""

    def __init__(self, *chunks):
        self.events = []
        for chunk in chunks:
            if chunk is None:
                self.events.append(None)
            else:
                self.events.extend(decode_keys(chunk))
        self.polls = []

    def poll(self, timeout):
        self.polls.append(timeout)
        if not self.events:
            raise AssertionError("ran out of scripted keys without a quit")
        return self.events.pop(0)


@pytest.fixture
def scripted_keys():
    return ScriptedKeys


def _press(state, text):
    for key in decode_keys(text):
        if not state.handle_key(key):
            return False
    return True


@pytest.fixture
def press():
    """Feed typed text to a state the way the loop would; False once quit is pressed."""
    return _press

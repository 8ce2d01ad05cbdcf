"""Pytest configuration and fixtures."""

import logging
from datetime import datetime

import pytest

from atm_sim.config import ATMConfig
from atm_sim.console import ScriptedConsole
from atm_sim.session import Session

FIXED_TIME = datetime(2024, 5, 17, 9, 30, 0)


@pytest.fixture
def config() -> ATMConfig:
    """Default configuration (PIN 1234, balance 1000.00)."""
    return ATMConfig()


@pytest.fixture
def console() -> ScriptedConsole:
    """Console with no scripted input."""
    return ScriptedConsole()


@pytest.fixture
def clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_TIME


@pytest.fixture
def session(config: ATMConfig, console: ScriptedConsole, clock) -> Session:
    """Active session over the default configuration."""
    return Session(config, console, clock=clock)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging changes made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_level = logging.getLogger("atm_sim").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("atm_sim").setLevel(package_level)

"""
Pytest configuration for multi-driver testing.

This file sets up automatic parametrization for test classes that inherit from
MultiDriverTestBase.
"""

import pytest

from tcpstate import RecordingSink
from tests.framework.multi_driver_base import MultiDriverTestBase


def pytest_generate_tests(metafunc):
    """
    Pytest hook to automatically parametrize the 'connection' fixture for MultiDriverTestBase subclasses.

    This ensures every test method in classes that inherit from MultiDriverTestBase
    gets run against all enabled drivers.
    """
    if (hasattr(metafunc, 'cls') and
        metafunc.cls is not None and
        issubclass(metafunc.cls, MultiDriverTestBase) and
        'connection' in metafunc.fixturenames):

        drivers = metafunc.cls.get_available_drivers()

        metafunc.parametrize(
            'connection',
            drivers,
            indirect=True,
            ids=[f"driver-{d}" for d in drivers]
        )


@pytest.fixture
def recorder():
    """A fresh in-memory notice sink."""
    return RecordingSink()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TCPSTATE_* variables so settings tests start from defaults."""
    for name in ("TCPSTATE_LOG_LEVEL", "TCPSTATE_TRACE_FORMAT", "TCPSTATE_ANNOUNCE_INITIAL_STATE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

"""
Test framework for connection testing using 4-layer architecture.
"""

from .dsl import ConnectionDsl
from .drivers import DriverInterface, MethodDriver, DispatchDriver, NameDriver
from .multi_driver_base import MultiDriverTestBase

__all__ = [
    'ConnectionDsl',
    'DriverInterface',
    'MethodDriver',
    'DispatchDriver',
    'NameDriver',
    'MultiDriverTestBase',
]

"""
A simulated TCP connection lifecycle as an explicit finite-state machine.

Operations are routed through a (state, operation) transition table owned by
the connection. Pairs missing from the table are absorbed and reported as
"not valid in this state" rather than raised.
"""

from .config import Settings
from .connection import INITIAL_STATE, Connection
from .demo import run_demo
from .exceptions import ConfigurationError, TcpStateError, UnknownOperationError
from .models import (
    ConnectionState,
    DispatchResult,
    Notice,
    NoticeKind,
    Operation,
    Transition,
)
from .trace import RecordingSink, TraceWriter, null_sink
from .transitions import TRANSITIONS, lookup, valid_operations

# The connection is the state machine: it owns the table lookup and the mutation
ConnectionStateMachine = Connection

__version__ = "0.1.0"
__author__ = "tcpstate Contributors"
__license__ = "MIT"

__all__ = [
    "Connection",
    "ConnectionStateMachine",
    "ConnectionState",
    "Operation",
    "Transition",
    "Notice",
    "NoticeKind",
    "DispatchResult",
    "TRANSITIONS",
    "INITIAL_STATE",
    "lookup",
    "valid_operations",
    "TraceWriter",
    "RecordingSink",
    "null_sink",
    "run_demo",
    "Settings",
    "TcpStateError",
    "UnknownOperationError",
    "ConfigurationError",
]

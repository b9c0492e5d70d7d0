"""
Transition table for the simulated TCP connection.

The table is keyed by (state, operation). Any pair missing from it is an
absorbed operation: it is reported as invalid and leaves the state alone.
Established -> Close -> Listen is a deliberate simplification of real TCP.
"""

from typing import Dict, List, Optional, Tuple

from .models import ConnectionState, Operation, Transition

CLOSED = ConnectionState.CLOSED
LISTEN = ConnectionState.LISTEN
ESTABLISHED = ConnectionState.ESTABLISHED

TransitionKey = Tuple[ConnectionState, Operation]


def _table(*rows: Transition) -> Dict[TransitionKey, Transition]:
    table: Dict[TransitionKey, Transition] = {}
    for row in rows:
        key = (row.source, row.operation)
        if key in table:
            raise ValueError(f"Duplicate transition for {row.source.name}/{row.operation.name}")
        table[key] = row
    return table


TRANSITIONS: Dict[TransitionKey, Transition] = _table(
    Transition(
        CLOSED, Operation.ACTIVE_OPEN,
        "CLOSED: Sending SYN, receiving SYN/ACK. Connection established.",
        ESTABLISHED,
    ),
    Transition(
        CLOSED, Operation.PASSIVE_OPEN,
        "CLOSED: Entering passive listening mode.",
        LISTEN,
    ),
    Transition(
        CLOSED, Operation.CLOSE,
        "CLOSED: Connection is already closed.",
        CLOSED,
    ),
    Transition(
        ESTABLISHED, Operation.CLOSE,
        "ESTABLISHED: Sending FIN, receiving ACK. Closing connection...",
        LISTEN,
    ),
    Transition(
        ESTABLISHED, Operation.SEND,
        "ESTABLISHED: Successfully transmitting data octet stream.",
        ESTABLISHED,
    ),
    Transition(
        LISTEN, Operation.SEND,
        "LISTEN: Received SYN request. Sending SYN/ACK. Connection established.",
        ESTABLISHED,
    ),
)


def lookup(state: ConnectionState, operation: Operation) -> Optional[Transition]:
    """Return the transition for (state, operation), or None if it is not valid."""
    return TRANSITIONS.get((state, operation))


def valid_operations(state: ConnectionState) -> List[Operation]:
    """Operations with a defined handler in the given state, in declaration order."""
    return [op for op in Operation if (state, op) in TRANSITIONS]


def rejection_message(operation: Operation) -> str:
    return f"Action '{operation.display_name}' not valid in this state."

"""
Scripted scenarios that walk a connection through the transition table.
"""

import logging
from typing import List, Optional, Tuple

from .connection import Connection
from .models import Operation

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 35

Scenario = Tuple[str, List[Operation]]

SCENARIOS: List[Scenario] = [
    # CLOSED -> ESTABLISHED, transmit, ESTABLISHED -> LISTEN
    ("Scenario 1: Active Open", [Operation.ACTIVE_OPEN, Operation.SEND, Operation.CLOSE]),
    # A Send while listening stands in for an incoming SYN
    ("Scenario 2: Incoming Request", [Operation.SEND]),
    # ActiveOpen is rejected in ESTABLISHED, then the connection is closed
    ("Scenario 3: Invalid Action", [Operation.ACTIVE_OPEN, Operation.CLOSE]),
]


def banner(title: str) -> str:
    return f"{SEPARATOR}\n      {title}\n{SEPARATOR}"


def run_demo(
    connection: Optional[Connection] = None,
    scenarios: Optional[List[Scenario]] = None,
) -> Connection:
    """Run each scenario in turn on a single connection and return it."""
    if connection is None:
        connection = Connection()

    for title, operations in scenarios if scenarios is not None else SCENARIOS:
        logger.debug(f"Running {title!r} from {connection.state.name}")
        connection.announce(banner(title))
        connection.run(operations)

    return connection

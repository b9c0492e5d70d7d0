"""
Connection state machine tests across all drivers.

Covers every row of the transition table, the rejected combinations and the
documented operation sequences.
"""

import pytest

from tcpstate import ConnectionState, Operation
from tcpstate.transitions import TRANSITIONS
from tests.framework import MultiDriverTestBase

CLOSED = ConnectionState.CLOSED
LISTEN = ConnectionState.LISTEN
ESTABLISHED = ConnectionState.ESTABLISHED

REJECTED_PAIRS = [
    (state, operation)
    for state in ConnectionState
    for operation in Operation
    if (state, operation) not in TRANSITIONS
]


class TestInitialState(MultiDriverTestBase):
    """A new connection starts closed."""

    def test_starts_closed(self, connection):
        dsl, driver_name = connection
        dsl.expect_state(CLOSED)

    def test_announces_initial_state(self, connection):
        dsl, driver_name = connection
        assert len(dsl.notices) == 1
        assert dsl.notices[0].message == "[CONNECTION INITIALIZED] Initial State: CLOSED"


class TestDefinedTransitions(MultiDriverTestBase):
    """Each table row performs its effect and moves to its target."""

    def test_closed_active_open_establishes(self, connection):
        dsl, _ = connection
        result = dsl.open_actively()
        assert result.notices[0].message == (
            "CLOSED: Sending SYN, receiving SYN/ACK. Connection established."
        )
        dsl.expect_transition_to(ESTABLISHED)

    def test_closed_passive_open_listens(self, connection):
        dsl, _ = connection
        result = dsl.open_passively()
        assert result.notices[0].message == "CLOSED: Entering passive listening mode."
        dsl.expect_transition_to(LISTEN)

    def test_closed_close_is_absorbed(self, connection):
        dsl, _ = connection
        dsl.close()
        dsl.expect_absorbed_effect("CLOSED: Connection is already closed.")
        dsl.expect_state(CLOSED)

    def test_established_close_goes_to_listen(self, connection):
        dsl, _ = connection
        dsl.drive_to(ESTABLISHED)
        result = dsl.close()
        assert result.notices[0].message == (
            "ESTABLISHED: Sending FIN, receiving ACK. Closing connection..."
        )
        dsl.expect_transition_to(LISTEN)

    def test_established_send_keeps_state(self, connection):
        dsl, _ = connection
        dsl.drive_to(ESTABLISHED)
        dsl.send()
        dsl.expect_absorbed_effect("ESTABLISHED: Successfully transmitting data octet stream.")
        dsl.expect_state(ESTABLISHED)

    def test_listen_send_establishes(self, connection):
        dsl, _ = connection
        dsl.drive_to(LISTEN)
        result = dsl.send()
        assert result.notices[0].message == (
            "LISTEN: Received SYN request. Sending SYN/ACK. Connection established."
        )
        dsl.expect_transition_to(ESTABLISHED)


class TestRejectedOperations(MultiDriverTestBase):
    """Operations missing from the table are reported and leave the state alone."""

    @pytest.mark.parametrize(
        "state,operation",
        REJECTED_PAIRS,
        ids=[f"{s.name}-{o.name}" for s, o in REJECTED_PAIRS],
    )
    def test_rejected_pair_is_noop(self, connection, state, operation):
        dsl, _ = connection
        dsl.drive_to(state)
        before = len(dsl.notices)

        dsl.perform(operation)

        dsl.expect_rejected(operation)
        dsl.expect_state(state)
        assert len(dsl.notices) == before + 1

    def test_send_while_closed_is_noop(self, connection):
        dsl, _ = connection
        dsl.send()
        dsl.expect_rejected(Operation.SEND)
        dsl.expect_state(CLOSED)


class TestSequences(MultiDriverTestBase):
    """Multi-step scenarios."""

    def test_active_open_send_close_ends_listening(self, connection):
        dsl, _ = connection
        dsl.perform(Operation.ACTIVE_OPEN, Operation.SEND, Operation.CLOSE)
        dsl.expect_state(LISTEN)

    def test_passive_open_send_ends_established(self, connection):
        dsl, _ = connection
        dsl.perform(Operation.PASSIVE_OPEN, Operation.SEND)
        dsl.expect_state(ESTABLISHED)

    def test_double_close_from_established(self, connection):
        dsl, _ = connection
        dsl.drive_to(ESTABLISHED)

        dsl.close()
        dsl.expect_transition_to(LISTEN)

        dsl.close()
        dsl.expect_rejected(Operation.CLOSE)
        dsl.expect_state(LISTEN)

    def test_reopen_after_close_via_send(self, connection):
        dsl, _ = connection
        dsl.perform(Operation.ACTIVE_OPEN, Operation.CLOSE, Operation.SEND)
        dsl.expect_transition_to(ESTABLISHED)


class TestDriverDiscovery:
    """Only drivers with a registered factory are parametrized."""

    def test_unregistered_driver_is_not_offered(self):
        class Custom(MultiDriverTestBase):
            ENABLED_DRIVERS = ['methods', 'telnet', 'names']

        assert Custom.get_available_drivers() == ['methods', 'names']

    def test_excluded_driver_is_not_offered(self):
        class Custom(MultiDriverTestBase):
            EXCLUDED_DRIVERS = ['dispatch']

        assert Custom.get_available_drivers() == ['methods', 'names']

"""
Connection context and dispatcher for the TCP state machine.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .models import ConnectionState, DispatchResult, Notice, NoticeKind, Operation
from .trace import NoticeSink, TraceWriter
from .transitions import lookup, rejection_message, valid_operations

# Set up logger for this module
logger = logging.getLogger(__name__)

INITIAL_STATE = ConnectionState.CLOSED


class Connection:
    """Simulated TCP connection driven by the transition table.

    Every operation is total over every state: an operation with no entry in
    the table for the current state is absorbed and reported, never raised.
    """

    def __init__(
        self,
        sinks: Optional[Sequence[NoticeSink]] = None,
        announce: bool = True,
    ):
        """
        Args:
            sinks: Callables receiving every notice. Defaults to a single
                TraceWriter on stdout. Pass an empty sequence for silence.
            announce: Emit the "connection initialized" notice.
        """
        self._state = INITIAL_STATE
        self._sinks: List[NoticeSink] = list(sinks) if sinks is not None else [TraceWriter()]
        self._history: List[Notice] = []
        self._dispatch_count = 0

        logger.debug(f"Connection created in state {self._state.name}")
        if announce:
            self._emit(
                NoticeKind.INITIALIZED,
                f"[CONNECTION INITIALIZED] Initial State: {self.current_state_name()}",
            )

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def history(self) -> Tuple[Notice, ...]:
        return tuple(self._history)

    def current_state_name(self) -> str:
        """Human-readable name of the current state."""
        return self._state.display_name

    def valid_operations(self) -> List[Operation]:
        return valid_operations(self._state)

    def add_sink(self, sink: NoticeSink) -> None:
        self._sinks.append(sink)

    def announce(self, message: str) -> Notice:
        """Write a free-form banner line through the connection's sinks."""
        return self._emit(NoticeKind.BANNER, message)

    # Client operations

    def active_open(self) -> DispatchResult:
        return self.dispatch(Operation.ACTIVE_OPEN)

    def passive_open(self) -> DispatchResult:
        return self.dispatch(Operation.PASSIVE_OPEN)

    def close(self) -> DispatchResult:
        return self.dispatch(Operation.CLOSE)

    def send(self) -> DispatchResult:
        return self.dispatch(Operation.SEND)

    def dispatch(self, operation: Union[Operation, str]) -> DispatchResult:
        """Route an operation through the transition table.

        Args:
            operation: The operation, or a name accepted by ``Operation.parse``.

        Returns:
            A DispatchResult with the notices this call produced.
        """
        operation = Operation.parse(operation)
        self._dispatch_count += 1
        previous = self._state
        transition = lookup(previous, operation)
        notices: List[Notice] = []

        if transition is None:
            logger.debug(
                f"  [{self._dispatch_count}] {previous.name} --{operation.display_name}--> "
                f"rejected"
            )
            notices.append(self._emit(NoticeKind.REJECTED, rejection_message(operation), operation))
            return DispatchResult(operation, previous, previous, tuple(notices), accepted=False)

        logger.debug(
            f"  [{self._dispatch_count}] {previous.name} --{operation.display_name}--> "
            f"{transition.target.name}"
        )
        self._state = transition.target
        notices.append(self._emit(NoticeKind.EFFECT, transition.effect, operation, state=previous))
        if transition.changes_state:
            notices.append(
                self._emit(
                    NoticeKind.TRANSITION,
                    f"[STATE TRANSITION] Current State is now: {self.current_state_name()}",
                    operation,
                )
            )
        return DispatchResult(operation, previous, self._state, tuple(notices), accepted=True)

    def run(self, operations: Sequence[Union[Operation, str]]) -> List[DispatchResult]:
        """Dispatch a sequence of operations in order."""
        return [self.dispatch(op) for op in operations]

    def _emit(
        self,
        kind: NoticeKind,
        message: str,
        operation: Optional[Operation] = None,
        state: Optional[ConnectionState] = None,
    ) -> Notice:
        """Record a notice and fan it out. ``state`` defaults to the current state."""
        if state is None:
            state = self._state
        notice = Notice(kind=kind, state=state, operation=operation, message=message)
        self._history.append(notice)
        for sink in self._sinks:
            sink(notice)
        return notice

    def __repr__(self) -> str:
        return f"Connection(state={self._state.name})"

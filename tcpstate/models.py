"""
Core data models for the TCP connection state machine.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import UnknownOperationError


class ConnectionState(Enum):
    """Enumeration of connection states."""

    CLOSED = "CLOSED"
    LISTEN = "LISTEN"
    ESTABLISHED = "ESTABLISHED"

    @property
    def display_name(self) -> str:
        return self.value


class Operation(Enum):
    """Enumeration of operations a caller can submit against a connection."""

    ACTIVE_OPEN = "ActiveOpen"
    PASSIVE_OPEN = "PassiveOpen"
    CLOSE = "Close"
    SEND = "Send"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def cli_name(self) -> str:
        """Name used on the command line, e.g. ``active-open``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, name: Union["Operation", str]) -> "Operation":
        """Parse an operation from a loose name.

        Accepts ``active-open``, ``active_open``, ``ACTIVE_OPEN`` and
        ``ActiveOpen`` (and the other operations likewise).

        Raises:
            UnknownOperationError: If the name matches no operation.
        """
        if isinstance(name, cls):
            return name
        key = re.sub(r"[-_]", "", str(name).strip().lower())
        for operation in cls:
            if operation.value.lower() == key:
                return operation
        raise UnknownOperationError(name, [op.cli_name for op in cls])


@dataclass(frozen=True)
class Transition:
    """A single row of the transition table."""

    source: ConnectionState
    operation: Operation
    effect: str
    target: ConnectionState

    @property
    def changes_state(self) -> bool:
        return self.source is not self.target


class NoticeKind(str, Enum):
    """Kinds of lines written to the connection trace."""

    INITIALIZED = "initialized"
    EFFECT = "effect"
    TRANSITION = "transition"
    REJECTED = "rejected"
    BANNER = "banner"


class Notice(BaseModel):
    """One line of the connection trace.

    ``state`` is the connection state after the notice was produced.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "kind": "transition",
                "state": "ESTABLISHED",
                "operation": "ActiveOpen",
                "message": "[STATE TRANSITION] Current State is now: ESTABLISHED",
            }
        },
    )

    kind: NoticeKind = Field(..., description="What produced this line")
    state: ConnectionState = Field(..., description="Connection state after this notice")
    operation: Optional[Operation] = Field(
        None, description="Operation being dispatched, if any"
    )
    message: str = Field(..., description="Human-readable trace line")

    def model_dump_json(self, **kwargs):
        """Dump as JSON, omitting unset optional fields by default."""
        kwargs.setdefault("exclude_none", True)
        return super().model_dump_json(**kwargs)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one operation."""

    operation: Operation
    previous_state: ConnectionState
    state: ConnectionState
    notices: Tuple[Notice, ...]
    accepted: bool

    @property
    def transitioned(self) -> bool:
        return self.previous_state is not self.state

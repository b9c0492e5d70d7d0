"""
Notice sinks that turn connection notices into a textual trace.
"""

import sys
from typing import Callable, List, Optional, TextIO

from .models import Notice, NoticeKind

NoticeSink = Callable[[Notice], None]

TRACE_FORMATS = ("text", "json")


class TraceWriter:
    """Write one line per notice to a text stream.

    The stream defaults to ``sys.stdout`` and is looked up at write time so
    redirection (and pytest's ``capsys``) keeps working.
    """

    def __init__(self, stream: Optional[TextIO] = None, fmt: str = "text"):
        if fmt not in TRACE_FORMATS:
            raise ValueError(f"Unsupported trace format: {fmt!r}")
        self._stream = stream
        self.fmt = fmt

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def format(self, notice: Notice) -> str:
        if self.fmt == "json":
            return notice.model_dump_json()
        if notice.kind == NoticeKind.BANNER:
            # Blank line before each scenario banner, as the console demo does
            return "\n" + notice.message
        return notice.message

    def __call__(self, notice: Notice) -> None:
        self.stream.write(self.format(notice) + "\n")


class RecordingSink:
    """Collect notices in memory."""

    def __init__(self):
        self.notices: List[Notice] = []

    def __call__(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def messages(self) -> List[str]:
        return [n.message for n in self.notices]

    def of_kind(self, kind: NoticeKind) -> List[Notice]:
        return [n for n in self.notices if n.kind == kind]

    def clear(self) -> None:
        self.notices.clear()


def null_sink(notice: Notice) -> None:
    """Discard notices."""
    return None

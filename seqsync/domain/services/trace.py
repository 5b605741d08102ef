"""
Trace hook for reconciliation.

Callers may pass any callable accepting a TraceEvent as the `trace`
argument of reconcile() / plan_fix(). Events are informational only;
nothing a sink does can change the outcome of a reconciliation.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class TraceEventKind(str, Enum):
    """Kinds of structured events emitted during reconciliation."""
    STALE_REMOVED = "stale-removed"
    RUN_DETECTED = "run-detected"
    EDIT_APPLIED = "edit-applied"


@dataclass(frozen=True)
class TraceEvent:
    """A single structured trace event."""
    kind: TraceEventKind
    data: Dict[str, Any] = field(default_factory=dict)


TraceSink = Callable[[TraceEvent], None]


def emit(trace: Optional[TraceSink], event_kind: TraceEventKind, **data: Any) -> None:
    """Send an event to the sink, if one was supplied."""
    if trace is None:
        return
    trace(TraceEvent(kind=event_kind, data=data))


class TraceRecorder:
    """
    Sink that keeps every event in memory.

    Usage:
        recorder = TraceRecorder()
        reconcile(spec, state, trace=recorder)
        recorder.of_kind(TraceEventKind.EDIT_APPLIED)
    """

    def __init__(self):
        self.events: List[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: TraceEventKind) -> List[TraceEvent]:
        return [e for e in self.events if e.kind == kind]

    def clear(self) -> None:
        self.events.clear()


class LoggingTraceSink:
    """Sink that forwards events to a logger as structured records."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self._logger = logger or logging.getLogger("seqsync.trace")
        self._level = level

    def __call__(self, event: TraceEvent) -> None:
        extra = {"event": event.kind.value, **event.data}
        self._logger.log(self._level, event.kind.value, extra=extra)

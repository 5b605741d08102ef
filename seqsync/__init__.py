"""seqsync — keep a positional state sequence in step with its specification."""

from seqsync.domain.services.mutator import DeleteAt, InsertAt, NoEdit
from seqsync.domain.services.reconciler import (
    FailureKind,
    ReconcileResult,
    ReconcileStatus,
    reconcile,
    sequences_match,
)
from seqsync.domain.services.trace import TraceEvent, TraceEventKind, TraceRecorder

__version__ = "0.1.0"

__all__ = [
    "reconcile",
    "sequences_match",
    "ReconcileResult",
    "ReconcileStatus",
    "FailureKind",
    "InsertAt",
    "DeleteAt",
    "NoEdit",
    "TraceEvent",
    "TraceEventKind",
    "TraceRecorder",
]

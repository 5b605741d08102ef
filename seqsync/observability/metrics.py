"""Aggregated reconciliation metrics."""

from dataclasses import dataclass, field
from threading import Lock
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from seqsync.domain.services.reconciler import ReconcileResult


@dataclass
class ReconcileMetrics:
    """Counters across many reconcile() calls."""
    calls: int = 0
    converged: int = 0
    failed: int = 0
    no_op: int = 0
    edits_applied: int = 0
    stale_removed: int = 0
    failures_by_kind: Dict[str, int] = field(default_factory=dict)

    @property
    def success_rate(self) -> float:
        """Fraction of calls that converged."""
        if self.calls == 0:
            return 0.0
        return self.converged / self.calls


class MetricsCollector:
    """
    Thread-safe metrics collector.

    Several capture workers may share one collector even though each
    reconcile() call itself is single-threaded.
    """

    def __init__(self):
        self._lock = Lock()
        self._metrics = ReconcileMetrics()

    def record(self, result: "ReconcileResult") -> None:
        """Record the outcome of one reconcile() call."""
        with self._lock:
            self._metrics.calls += 1
            self._metrics.edits_applied += result.edit_count
            self._metrics.stale_removed += len(result.stale_removed)

            if result.converged:
                self._metrics.converged += 1
                if result.edit_count == 0:
                    self._metrics.no_op += 1
            else:
                self._metrics.failed += 1
                kind = result.failure.value if result.failure else "unknown"
                self._metrics.failures_by_kind[kind] = (
                    self._metrics.failures_by_kind.get(kind, 0) + 1
                )

    def record_rejected(self, kind: str = "invalid_input") -> None:
        """Count a case that never reached reconcile() as failed."""
        with self._lock:
            self._metrics.calls += 1
            self._metrics.failed += 1
            self._metrics.failures_by_kind[kind] = self._metrics.failures_by_kind.get(kind, 0) + 1

    def get_metrics(self) -> ReconcileMetrics:
        """Get current metrics snapshot."""
        with self._lock:
            return ReconcileMetrics(
                calls=self._metrics.calls,
                converged=self._metrics.converged,
                failed=self._metrics.failed,
                no_op=self._metrics.no_op,
                edits_applied=self._metrics.edits_applied,
                stale_removed=self._metrics.stale_removed,
                failures_by_kind=dict(self._metrics.failures_by_kind),
            )

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        with self._lock:
            self._metrics = ReconcileMetrics()


# Global metrics collector instance
_collector: Optional[MetricsCollector] = None


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector."""
    global _collector
    if _collector is None:
        _collector = MetricsCollector()
    return _collector


def reset_metrics_collector() -> None:
    """Reset the global metrics collector (for testing)."""
    global _collector
    _collector = None

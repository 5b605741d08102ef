"""Observability module for seqsync."""

from seqsync.observability.logging import (
    JSONFormatter,
    ContextLogger,
    configure_logging,
    get_logger,
)
from seqsync.observability.metrics import (
    ReconcileMetrics,
    MetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)

__all__ = [
    # Logging
    "JSONFormatter",
    "ContextLogger",
    "configure_logging",
    "get_logger",
    # Metrics
    "ReconcileMetrics",
    "MetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]

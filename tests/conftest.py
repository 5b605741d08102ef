"""
Shared pytest fixtures for all tests.

Keeps global state (cached settings, the metrics collector) isolated
between tests.
"""

import pytest

from seqsync.observability.metrics import reset_metrics_collector
from seqsync.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_globals():
    clear_settings_cache()
    reset_metrics_collector()
    yield
    clear_settings_cache()
    reset_metrics_collector()

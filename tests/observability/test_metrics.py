#!filepath: tests/observability/test_metrics.py

from mintwatch.observability.metrics import MetricRecorder


def test_metric_record():
    m = MetricRecorder(enabled=True)
    m.record("signatures_in_window", 123)

    assert m.metrics["signatures_in_window"] == 123


def test_metric_incr():
    m = MetricRecorder(enabled=True)
    m.incr("transactions_missing")
    m.incr("transactions_missing", by=2)

    assert m.metrics["transactions_missing"] == 3


def test_metric_disabled():
    m = MetricRecorder(enabled=False)
    m.record("x", 1)
    m.incr("y")

    assert m.metrics == {}

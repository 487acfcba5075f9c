#!filepath: tests/observability/test_instrumentation.py

import time

from loguru import logger

from mintwatch.observability.instrumentation import Instrumentation, NoOpInstrumentation


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("step_A"):
        time.sleep(0.01)

    assert "step_A" in inst.timeline
    assert inst.timeline["step_A"] > 0


def test_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("Parent", record=False):
        with inst.timer("leaf"):
            pass

    assert list(inst.timeline) == ["leaf"]


def test_timer_records_even_when_body_raises():
    inst = Instrumentation(enabled=True)

    try:
        with inst.timer("boom"):
            raise ValueError("x")
    except ValueError:
        pass

    assert "boom" in inst.timeline


def test_repeated_leaf_accumulates():
    inst = Instrumentation(enabled=True)

    with inst.timer("rpc"):
        time.sleep(0.005)
    first = inst.timeline["rpc"]
    with inst.timer("rpc"):
        time.sleep(0.005)

    assert list(inst.timeline) == ["rpc"]
    assert inst.timeline["rpc"] > first


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("step_A"):
        pass
    inst.metrics.record("rows", 1)

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("x"):
        pass
    inst.metrics.record("rows", 1)
    inst.generate_timeline_report("MintXYZ")

    assert inst.timeline == {}


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("phase_X"):
        time.sleep(0.005)
    inst.metrics.record("token_accounts", 7)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))
    inst.generate_timeline_report("MintXYZ")
    logger.remove(sink_id)

    output = "\n".join(captured)
    assert "phase_X" in output
    assert "token_accounts" in output

#!filepath: mintwatch/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Dict, Iterator

from mintwatch.observability.metrics import MetricRecorder
from mintwatch.observability.timeline_reporter import TimelineReporter


class Instrumentation:
    """
    一次 mint 窗口运行的观测面：leaf 计时 + 运行指标。

    - timeline 只记录叶子计时（record=True），Step / Group 的父级 scope 不入表
    - 同名 leaf 再次计时会累加（例如多次调用同一 RPC 阶段）
    - metrics 由各 Step 写入：token_accounts / signature_pages /
      signatures_in_window / transactions_fetched / transactions_missing /
      transactions_failed
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.metrics = MetricRecorder(enabled=enabled)
        self.timeline: Dict[str, float] = OrderedDict()

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        if not self.enabled:
            yield
            return

        # 起点保存在本次调用的栈帧里，并发 Step 各自独立
        start = time.perf_counter()
        try:
            yield
        finally:
            if record:
                elapsed = time.perf_counter() - start
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed

    def generate_timeline_report(self, run_key: str) -> None:
        TimelineReporter(self.timeline, run_key, self.metrics.metrics).print()


class NoOpInstrumentation:
    """Step 未注入 Instrumentation 时的默认值：不计时、不记指标。"""

    def __init__(self):
        self.enabled = False
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        yield

    def generate_timeline_report(self, run_key: str) -> None:
        pass

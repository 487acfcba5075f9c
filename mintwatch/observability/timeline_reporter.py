#!filepath: mintwatch/observability/timeline_reporter.py
from typing import Any, Dict, Optional

from mintwatch import logs


class TimelineReporter:
    """
    一次运行结束后的汇总日志：

      [Timeline] leaf 耗时 + 占总耗时比例
      [Timeline] 运行指标（按写入顺序）
    """

    def __init__(
        self,
        timeline: Dict[str, float],
        run_key: str,
        metrics: Optional[Dict[str, Any]] = None,
    ):
        self.timeline = timeline
        self.run_key = run_key
        self.metrics = metrics or {}

    def rows(self):
        total = sum(self.timeline.values())
        for name, sec in self.timeline.items():
            share = sec / total * 100 if total > 0 else 0.0
            yield name, sec, share

    def print(self):
        logs.info(f"[Timeline] ===== {self.run_key} =====")

        for name, sec, share in self.rows():
            logs.info(f"[Timeline] {name:<24} {sec:>8.3f}s {share:>5.1f}%")
        logs.info(f"[Timeline] {'Total':<24} {sum(self.timeline.values()):>8.3f}s")

        for name, value in self.metrics.items():
            logs.info(f"[Timeline] {name:<24} {value}")

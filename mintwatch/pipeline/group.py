#!filepath: mintwatch/pipeline/group.py
from __future__ import annotations

import asyncio
from typing import List

from mintwatch import logs
from mintwatch.observability.instrumentation import Instrumentation
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class ConcurrentStepGroup(PipelineStep):
    """
    并发执行一组彼此独立的 Step（共享同一个 ctx）

    约束：组内 Step 不得读取彼此写入的字段，且各写各的字段。
    任一 Step 失败 → 取消其余仍在运行的 Step，等待其退出后异常向上抛出。
    """

    def __init__(self, steps: List[PipelineStep], inst: Instrumentation | None = None):
        super().__init__(inst)
        self.steps = steps

    async def run(self, ctx: WindowContext) -> WindowContext:
        with self.timed():
            tasks = [asyncio.ensure_future(step.run(ctx)) for step in self.steps]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                pending = [t for t in tasks if not t.done()]
                for t in pending:
                    t.cancel()
                # 被取消的 Step 退出后才向上抛出
                await asyncio.gather(*pending, return_exceptions=True)
                if pending:
                    logs.warning(f"[{self.step_name}] cancelled {len(pending)} sibling step(s)")
                raise
        return ctx

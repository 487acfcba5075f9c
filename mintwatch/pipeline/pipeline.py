#!filepath: mintwatch/pipeline/pipeline.py
from __future__ import annotations

from typing import List

from mintwatch import logs
from mintwatch.observability.instrumentation import Instrumentation, NoOpInstrumentation
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class MintWindowPipeline:
    """
    MintWindowPipeline = 调度器（Scheduler）

    设计铁律：
    - Pipeline 负责 orchestration（顺序 / 上下文）
    - Pipeline 不负责任何 Step 级计时
    - 任一 Step 抛出异常即终止整次运行（无重试）
    """

    def __init__(
            self,
            steps: List[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    async def run(self, ctx: WindowContext) -> WindowContext:
        logs.info(f"[Pipeline] ====== START {ctx.mint} ======")

        for step in self.steps:
            ctx = await step.run(ctx)

        # Timeline 只包含 leaf（由 Step 写入）
        self.inst.generate_timeline_report(ctx.mint)
        logs.info(f"[Pipeline] ====== DONE {ctx.mint} ======")
        return ctx

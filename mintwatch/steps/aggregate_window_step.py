#!filepath: mintwatch/steps/aggregate_window_step.py
from __future__ import annotations

from mintwatch import logs
from mintwatch.engines.window_agg_engine import WindowAggEngine
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class AggregateWindowStep(PipelineStep):
    """
    ctx.signatures + ctx.transactions → 按 block_time 排序 → WindowAggEngine → ctx.report

    聚合严格串行，不在这里并行化。
    """

    async def run(self, ctx: WindowContext) -> WindowContext:
        if ctx.t0 is None:
            raise RuntimeError(f"[{self.step_name}] t0 not located, run LocateGenesisStep first")

        engine = WindowAggEngine(mint=ctx.mint, t0=ctx.t0, creator=ctx.creator)
        stream = engine.order_stream(ctx.signatures.values(), ctx.transactions)

        with self.inst.timer("AggregateWindow"):
            ctx.report = engine.execute(stream)

        logs.info(
            f"[{self.step_name}] processed={ctx.report.processed} skipped={ctx.report.skipped} "
            f"trades={sum(b.trades for b in ctx.report.bins)}"
        )
        return ctx

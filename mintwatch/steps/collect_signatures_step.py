#!filepath: mintwatch/steps/collect_signatures_step.py
from __future__ import annotations

from mintwatch.engines.signature_collect_engine import SignatureCollectEngine
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class CollectSignaturesStep(PipelineStep):
    """
    上游：ctx.genesis + ctx.token_accounts
    输出：ctx.signatures（窗口内、已去重）
    """

    def __init__(self, engine: SignatureCollectEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    async def run(self, ctx: WindowContext) -> WindowContext:
        if ctx.t0 is None:
            raise RuntimeError(f"[{self.step_name}] t0 not located, run LocateGenesisStep first")

        with self.inst.timer("CollectSignatures"):
            ctx.signatures = await self.engine.collect(ctx.token_accounts, ctx.t0, ctx.t_end)

        self.inst.metrics.record("signatures_in_window", len(ctx.signatures))
        self.inst.metrics.record("signature_pages", self.engine.pages_fetched)
        return ctx

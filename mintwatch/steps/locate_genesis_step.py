#!filepath: mintwatch/steps/locate_genesis_step.py
from __future__ import annotations

from mintwatch.engines.genesis_locator_engine import GenesisLocatorEngine
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class LocateGenesisStep(PipelineStep):
    """ctx.genesis ← 窗口起点 signature（t0 = genesis.block_time）"""

    def __init__(self, engine: GenesisLocatorEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    async def run(self, ctx: WindowContext) -> WindowContext:
        with self.inst.timer("LocateGenesis"):
            ctx.genesis = await self.engine.locate(ctx.mint)
        return ctx

#!filepath: mintwatch/steps/resolve_token_accounts_step.py
from __future__ import annotations

from mintwatch.engines.token_account_engine import TokenAccountEngine
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class ResolveTokenAccountsStep(PipelineStep):
    def __init__(self, engine: TokenAccountEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    async def run(self, ctx: WindowContext) -> WindowContext:
        with self.inst.timer("ResolveTokenAccounts"):
            ctx.token_accounts = await self.engine.resolve(ctx.mint)
        self.inst.metrics.record("token_accounts", len(ctx.token_accounts))
        return ctx

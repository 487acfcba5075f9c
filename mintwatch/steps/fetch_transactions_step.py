#!filepath: mintwatch/steps/fetch_transactions_step.py
from __future__ import annotations

from mintwatch import logs
from mintwatch.engines.transaction_fetch_engine import TransactionFetchEngine
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep


class FetchTransactionsStep(PipelineStep):
    def __init__(self, engine: TransactionFetchEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    async def run(self, ctx: WindowContext) -> WindowContext:
        if not ctx.signatures:
            logs.warning(f"[{self.step_name}] no signatures in window")
            ctx.transactions = {}
            return ctx

        with self.inst.timer("FetchTransactions"):
            ctx.transactions = await self.engine.fetch(ctx.signatures.keys())

        missing = sum(1 for v in ctx.transactions.values() if v is None)
        self.inst.metrics.record("transactions_fetched", len(ctx.transactions) - missing)
        self.inst.metrics.record("transactions_missing", missing)
        self.inst.metrics.incr("transactions_failed", by=self.engine.failed)
        return ctx

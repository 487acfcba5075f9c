#!filepath: mintwatch/steps/check_mint_step.py
from __future__ import annotations

from mintwatch import logs
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.step import PipelineStep
from mintwatch.utils.errors import MintNotFoundError


class CheckMintStep(PipelineStep):
    """mint 地址必须是已存在的账户，否则整次运行终止。"""

    def __init__(self, client, inst=None):
        super().__init__(inst)
        self.client = client

    async def run(self, ctx: WindowContext) -> WindowContext:
        with self.inst.timer("CheckMint"):
            info = await self.client.get_account_info(ctx.mint)

        if info is None:
            raise MintNotFoundError(ctx.mint)

        logs.info(f"[{self.step_name}] mint account {ctx.mint} found")
        return ctx

#!filepath: mintwatch/engines/token_account_engine.py
from __future__ import annotations

from typing import Set

from mintwatch import logs
from mintwatch.rpc.client import TOKEN_ACCOUNT_MINT_OFFSET, TOKEN_ACCOUNT_SIZE, TOKEN_PROGRAM_ID


class TokenAccountEngine:
    """
    mint → 所有 SPL token account（165 字节布局，offset 0 为 mint）

    结果可能不完整（RPC 二级索引滞后），不重试。
    """

    def __init__(self, client):
        self.client = client

    async def resolve(self, mint: str) -> Set[str]:
        accounts = await self.client.get_program_accounts(
            TOKEN_PROGRAM_ID,
            data_size=TOKEN_ACCOUNT_SIZE,
            memcmp_offset=TOKEN_ACCOUNT_MINT_OFFSET,
            memcmp_bytes=mint,
        )
        accounts = set(accounts)
        logs.info(f"[TokenAccounts] {mint} -> {len(accounts)} token accounts")
        return accounts

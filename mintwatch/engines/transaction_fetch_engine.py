#!filepath: mintwatch/engines/transaction_fetch_engine.py
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Optional

import aiohttp

from mintwatch import logs
from mintwatch.rpc.models import TransactionMeta
from mintwatch.utils.errors import RpcError


class TransactionFetchEngine:
    """
    并发拉取每个 signature 的交易内容

    - 并发上限独立于 SignatureCollectEngine
    - 返回 signature → TransactionMeta | None
    - None = 未找到 / 无 meta / 单笔拉取失败（不区分），下游直接跳过
    """

    FETCH_ERRORS = (RpcError, aiohttp.ClientError, asyncio.TimeoutError)

    def __init__(self, client, concurrency: int = 8):
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self.client = client
        self.concurrency = concurrency
        self.failed = 0

    async def fetch(self, signatures: Iterable[str]) -> Dict[str, Optional[TransactionMeta]]:
        sem = asyncio.Semaphore(self.concurrency)
        signatures = list(dict.fromkeys(signatures))
        self.failed = 0

        async def _run(sig: str) -> Optional[TransactionMeta]:
            async with sem:
                return await self._fetch_one(sig)

        results = await asyncio.gather(*(_run(s) for s in signatures))
        out = dict(zip(signatures, results))

        missing = sum(1 for v in out.values() if v is None)
        logs.info(
            f"[TransactionFetch] {len(out)} transactions, missing={missing} (failed={self.failed})"
        )
        return out

    async def _fetch_one(self, sig: str) -> Optional[TransactionMeta]:
        try:
            return await self.client.get_transaction(sig, max_supported_transaction_version=0)
        except self.FETCH_ERRORS as e:
            self.failed += 1
            logs.warning(f"[TransactionFetch] {sig} fetch failed: {e!r} -> skip")
            return None

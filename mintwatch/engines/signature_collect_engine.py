#!filepath: mintwatch/engines/signature_collect_engine.py
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Optional

from mintwatch import logs
from mintwatch.rpc.models import SignatureInfo


class SignatureCollectEngine:
    """
    收集窗口 [t0, t_end] 内的全部 signature（跨 token account 去重）

    每个 account 向后翻页，遇到以下任一情况停止：
      - 空页
      - 本页最旧一条 block_time < t0（更旧的不可能在窗口内）
      - 短页（历史已耗尽）
      - 达到 max_pages_per_account

    并发：asyncio.Semaphore(concurrency)。
    所有 task 共享同一个 dict：单线程事件循环，只在 await 之间写入，无需加锁。
    """

    def __init__(
        self,
        client,
        concurrency: int = 8,
        max_pages_per_account: int = 50,
        page_limit: int = 1000,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self.client = client
        self.concurrency = concurrency
        self.max_pages_per_account = max_pages_per_account
        self.page_limit = page_limit
        self.pages_fetched = 0

    async def collect(self, accounts: Iterable[str], t0: int, t_end: int) -> Dict[str, SignatureInfo]:
        out: Dict[str, SignatureInfo] = {}
        sem = asyncio.Semaphore(self.concurrency)
        accounts = sorted(set(accounts))

        async def _run(account: str) -> int:
            async with sem:
                return await self._collect_account(account, t0, t_end, out)

        pages = await asyncio.gather(*(_run(a) for a in accounts))
        self.pages_fetched = sum(pages)

        logs.info(
            f"[SignatureCollect] {len(accounts)} accounts, {self.pages_fetched} pages "
            f"-> {len(out)} signatures in [{t0}, {t_end}]"
        )
        return out

    async def _collect_account(
        self,
        account: str,
        t0: int,
        t_end: int,
        out: Dict[str, SignatureInfo],
    ) -> int:
        before: Optional[str] = None
        pages = 0

        for _ in range(self.max_pages_per_account):
            page = await self.client.get_signatures_for_address(
                account, before=before, limit=self.page_limit
            )
            pages += 1
            if not page:
                break

            for s in page:
                if s.block_time is not None and t0 <= s.block_time <= t_end:
                    out[s.signature] = s

            oldest = page[-1]
            before = oldest.signature
            if oldest.block_time is not None and oldest.block_time < t0:
                break
            if len(page) < self.page_limit:
                break

        logs.debug(f"[SignatureCollect] {account} pages={pages}")
        return pages

#!filepath: mintwatch/engines/genesis_locator_engine.py
from __future__ import annotations

from typing import List, Optional

from mintwatch import logs
from mintwatch.rpc.models import SignatureInfo
from mintwatch.utils.errors import LocateError


class GenesisLocatorEngine:
    """
    确定窗口起点 t0

    1. 以 cursor 向后翻页（每页最旧一条作为下一页的 before），最多 max_pages 页
    2. 单独拉取最新一页（head）
    3. t0 = (head 页全部 ∪ 翻页得到的最旧一条) 中最小的已定义 block_time

    翻页顺序不保证严格全局时间序，所以不能直接取“最后到达的那条”。
    """

    def __init__(self, client, max_pages: int = 200, page_limit: int = 1000):
        self.client = client
        self.max_pages = max_pages
        self.page_limit = page_limit

    async def locate(self, address: str) -> SignatureInfo:
        oldest = await self._walk_back(address)
        head = await self.client.get_signatures_for_address(address, limit=self.page_limit)

        candidates: List[SignatureInfo] = list(head)
        if oldest is not None:
            candidates.append(oldest)

        genesis = self.pick_genesis(candidates)
        if genesis is None:
            raise LocateError(f"cannot determine t0 for {address}: no signature carries a block time")

        logs.info(
            f"[GenesisLocator] {address} genesis={genesis.signature} t0={genesis.block_time} "
            f"(candidates={len(candidates)})"
        )
        return genesis

    async def _walk_back(self, address: str) -> Optional[SignatureInfo]:
        before: Optional[str] = None
        oldest: Optional[SignatureInfo] = None

        for _ in range(self.max_pages):
            page = await self.client.get_signatures_for_address(
                address, before=before, limit=self.page_limit
            )
            if not page:
                break
            oldest = page[-1]
            before = oldest.signature
            if len(page) < self.page_limit:
                break
        else:
            logs.warning(f"[GenesisLocator] {address} page cap {self.max_pages} reached")

        return oldest

    @staticmethod
    def pick_genesis(candidates: List[SignatureInfo]) -> Optional[SignatureInfo]:
        """最小已定义 block_time；并列时取先出现的。"""
        best: Optional[SignatureInfo] = None
        for s in candidates:
            if s.block_time is None:
                continue
            if best is None or s.block_time < best.block_time:
                best = s
        return best

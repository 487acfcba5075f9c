# tests/conftest.py
from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Set, Tuple

import pytest
from loguru import logger

from mintwatch.rpc.models import SignatureInfo, TokenBalance, TransactionMeta

MINT = "MintAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class FakeLedger:
    """
    In-memory stand-in for SolanaRpcClient.

    history[address] is newest-first, exactly like getSignaturesForAddress.
    transactions[sig] may hold a TransactionMeta, None, or an Exception to raise.
    """

    def __init__(self):
        self.history: Dict[str, List[SignatureInfo]] = {}
        self.accounts: Dict[str, dict] = {}
        self.program_accounts: Set[str] = set()
        self.transactions: Dict[str, Any] = {}
        self.calls: List[Tuple[Any, ...]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    # ---------- 断言辅助 ----------
    def calls_for(self, method: str) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == method]

    async def _enter(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        # 让出事件循环，制造并发交错
        await asyncio.sleep(0)

    def _exit(self):
        self.in_flight -= 1

    # ---------- rpc surface ----------
    async def get_signatures_for_address(self, address, before=None, limit=1000, commitment=None):
        self.calls.append(("getSignaturesForAddress", address, before, limit))
        await self._enter()
        try:
            hist = self.history.get(address, [])
            start = 0
            if before is not None:
                start = next(i for i, s in enumerate(hist) if s.signature == before) + 1
            return list(hist[start:start + limit])
        finally:
            self._exit()

    async def get_account_info(self, address, commitment=None):
        self.calls.append(("getAccountInfo", address))
        return self.accounts.get(address)

    async def get_program_accounts(self, program_id, data_size, memcmp_offset, memcmp_bytes, commitment=None):
        self.calls.append(("getProgramAccounts", program_id, data_size, memcmp_offset, memcmp_bytes))
        return set(self.program_accounts)

    async def get_transaction(self, signature, max_supported_transaction_version=0, commitment=None):
        self.calls.append(("getTransaction", signature, max_supported_transaction_version))
        await self._enter()
        try:
            value = self.transactions.get(signature)
            if isinstance(value, Exception):
                raise value
            return value
        finally:
            self._exit()


@pytest.fixture
def mint() -> str:
    return MINT


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def make_sig():
    def _make(signature: str, block_time: Optional[int]) -> SignatureInfo:
        return SignatureInfo(signature=signature, block_time=block_time)

    return _make


@pytest.fixture
def make_tx():
    """
    Factory fixture for TransactionMeta.

    Usage:
        make_tx(lamports=[(10, 8), (0, 2)], pre={0: ("A", 0)}, post={0: ("A", 50)})

    lamports : [(pre, post), ...] per account index
    pre/post : {account_index: (owner, amount)} for the tracked mint
    """

    def _make(
        fee: int = 0,
        lamports: Optional[List[Tuple[int, int]]] = None,
        pre: Optional[Dict[int, Tuple[Optional[str], int]]] = None,
        post: Optional[Dict[int, Tuple[Optional[str], int]]] = None,
        token_mint: str = MINT,
    ) -> TransactionMeta:
        lamports = lamports or []
        return TransactionMeta(
            fee=fee,
            pre_balances=[p for p, _ in lamports],
            post_balances=[q for _, q in lamports],
            pre_token_balances=[
                TokenBalance(account_index=i, mint=token_mint, owner=o, amount=a)
                for i, (o, a) in (pre or {}).items()
            ],
            post_token_balances=[
                TokenBalance(account_index=i, mint=token_mint, owner=o, amount=a)
                for i, (o, a) in (post or {}).items()
            ],
        )

    return _make

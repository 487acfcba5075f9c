#!filepath: mintwatch/rpc/client.py
from __future__ import annotations

import itertools
from typing import Any, Dict, List, Optional, Set

import aiohttp

from mintwatch import logs
from mintwatch.config.rpc_config import RpcConfig
from mintwatch.rpc.models import SignatureInfo, TransactionMeta
from mintwatch.utils.errors import RpcError

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TOKEN_ACCOUNT_SIZE = 165
TOKEN_ACCOUNT_MINT_OFFSET = 0


class SolanaRpcClient:
    """
    Minimal Solana JSON-RPC client（aiohttp，单 session）

    - 只覆盖监控需要的 4 个方法
    - JSON-RPC error / 无法解析的 body → RpcError
    - HTTP error → aiohttp.ClientResponseError
    - 不做重试
    """

    def __init__(self, cfg: RpcConfig | None = None, session: aiohttp.ClientSession | None = None):
        self.cfg = cfg or RpcConfig()
        self._session = session
        self._owns_session = session is None
        self._ids = itertools.count(1)

    @property
    def url(self) -> str:
        return self.cfg.url

    async def __aenter__(self) -> "SolanaRpcClient":
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.cfg.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    # --------------------------------------------------
    # transport
    # --------------------------------------------------
    async def _call(self, method: str, params: List[Any]) -> Any:
        if self._session is None:
            raise RuntimeError("Session not initialized")

        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        async with self._session.post(self.cfg.url, json=payload) as resp:
            resp.raise_for_status()
            try:
                data = await resp.json(content_type=None)
            except ValueError as e:
                raise RpcError(-32700, f"unparseable response body: {e}", method=method) from e

        # 空 body → None；网关错误页等非 JSON-RPC 对象同样视为 RPC 错误
        if not isinstance(data, dict):
            raise RpcError(-32700, f"unexpected response body: {data!r:.80}", method=method)

        if data.get("error"):
            err = data["error"]
            raise RpcError(err.get("code", -1), err.get("message", ""), method=method)
        return data.get("result")

    # --------------------------------------------------
    # ledger operations
    # --------------------------------------------------
    async def get_signatures_for_address(
        self,
        address: str,
        before: Optional[str] = None,
        limit: Optional[int] = None,
        commitment: Optional[str] = None,
    ) -> List[SignatureInfo]:
        """Newest-first page of signatures touching ``address``."""
        opts: Dict[str, Any] = {
            "limit": limit or self.cfg.page_limit,
            "commitment": commitment or self.cfg.commitment,
        }
        if before:
            opts["before"] = before

        result = await self._call("getSignaturesForAddress", [address, opts])
        return [SignatureInfo.from_rpc(r) for r in result or []]

    async def get_account_info(self, address: str, commitment: Optional[str] = None) -> Optional[Dict[str, Any]]:
        result = await self._call(
            "getAccountInfo",
            [address, {"encoding": "base64", "commitment": commitment or self.cfg.commitment}],
        )
        if not result:
            return None
        return result.get("value")

    async def get_program_accounts(
        self,
        program_id: str,
        data_size: int,
        memcmp_offset: int,
        memcmp_bytes: str,
        commitment: Optional[str] = None,
    ) -> Set[str]:
        """
        Pubkeys of accounts owned by ``program_id`` with the exact data size
        and the base58 bytes at ``memcmp_offset``.
        """
        opts = {
            "commitment": commitment or self.cfg.commitment,
            "encoding": "base64",
            # only pubkeys are needed
            "dataSlice": {"offset": 0, "length": 0},
            "filters": [
                {"dataSize": data_size},
                {"memcmp": {"offset": memcmp_offset, "bytes": memcmp_bytes}},
            ],
        }
        result = await self._call("getProgramAccounts", [program_id, opts])
        return {r["pubkey"] for r in result or []}

    async def get_transaction(
        self,
        signature: str,
        max_supported_transaction_version: int = 0,
        commitment: Optional[str] = None,
    ) -> Optional[TransactionMeta]:
        result = await self._call(
            "getTransaction",
            [
                signature,
                {
                    "encoding": "json",
                    "maxSupportedTransactionVersion": max_supported_transaction_version,
                    "commitment": commitment or self.cfg.commitment,
                },
            ],
        )
        if result is None:
            logs.debug(f"[Rpc] getTransaction {signature} -> null")
        return TransactionMeta.from_rpc(result)

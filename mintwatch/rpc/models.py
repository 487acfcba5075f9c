#!filepath: mintwatch/rpc/models.py
"""Typed views over the Solana JSON-RPC payloads the monitor consumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True, slots=True)
class SignatureInfo:
    """
    One entry of getSignaturesForAddress.

    block_time is None for signatures the node has not timestamped yet;
    such entries never take part in window or ordering logic.
    """

    signature: str
    block_time: Optional[int] = None

    @classmethod
    def from_rpc(cls, raw: Dict[str, Any]) -> "SignatureInfo":
        bt = raw.get("blockTime")
        return cls(signature=raw["signature"], block_time=int(bt) if bt is not None else None)


@dataclass(frozen=True, slots=True)
class TokenBalance:
    account_index: int
    mint: str
    owner: Optional[str]
    amount: int

    @classmethod
    def from_rpc(cls, raw: Dict[str, Any]) -> "TokenBalance":
        ui = raw.get("uiTokenAmount") or {}
        return cls(
            account_index=int(raw["accountIndex"]),
            mint=raw.get("mint", ""),
            owner=raw.get("owner") or None,
            # raw integer amount is a decimal string, never a float
            amount=int(ui.get("amount") or "0"),
        )


@dataclass(frozen=True, slots=True)
class TransactionMeta:
    """
    Balance effects of one confirmed transaction.

    pre/post_balances are lamports per account index;
    pre/post_token_balances carry every SPL balance the transaction touched.
    """

    fee: int = 0
    pre_balances: List[int] = field(default_factory=list)
    post_balances: List[int] = field(default_factory=list)
    pre_token_balances: List[TokenBalance] = field(default_factory=list)
    post_token_balances: List[TokenBalance] = field(default_factory=list)

    @classmethod
    def from_rpc(cls, raw: Optional[Dict[str, Any]]) -> Optional["TransactionMeta"]:
        """
        Parse a getTransaction result. A null result or a result without
        meta both mean "content absent".
        """
        if not raw:
            return None
        meta = raw.get("meta")
        if not meta:
            return None
        return cls(
            fee=int(meta.get("fee") or 0),
            pre_balances=[int(v) for v in meta.get("preBalances") or []],
            post_balances=[int(v) for v in meta.get("postBalances") or []],
            pre_token_balances=[TokenBalance.from_rpc(b) for b in meta.get("preTokenBalances") or []],
            post_token_balances=[TokenBalance.from_rpc(b) for b in meta.get("postTokenBalances") or []],
        )

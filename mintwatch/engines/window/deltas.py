#!filepath: mintwatch/engines/window/deltas.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set

from mintwatch.rpc.models import TransactionMeta


@dataclass(slots=True)
class OwnerDeltas:
    """Per-owner net change of the tracked mint within one transaction."""

    deltas: Dict[str, int] = field(default_factory=dict)

    @property
    def had_movement(self) -> bool:
        return any(d != 0 for d in self.deltas.values())


def extract_owner_deltas(meta: TransactionMeta, mint: str) -> OwnerDeltas:
    """
    对 tracked mint 计算 owner 级别的 post - pre。

    - account index 取 pre ∪ post
    - 缺失一侧按 0 处理
    - owner 取 post.owner，否则 pre.owner；都没有则跳过该 index
    - 零值 delta 丢弃
    """
    pre = {b.account_index: b for b in meta.pre_token_balances if b.mint == mint}
    post = {b.account_index: b for b in meta.post_token_balances if b.mint == mint}
    indices: Set[int] = set(pre) | set(post)

    acc: Dict[str, int] = {}
    for i in indices:
        pre_b = pre.get(i)
        post_b = post.get(i)
        owner = (post_b.owner if post_b else None) or (pre_b.owner if pre_b else None)
        if not owner:
            continue
        d = (post_b.amount if post_b else 0) - (pre_b.amount if pre_b else 0)
        if d != 0:
            acc[owner] = acc.get(owner, 0) + d

    return OwnerDeltas({owner: d for owner, d in acc.items() if d != 0})


def estimate_volume_lamports(meta: TransactionMeta) -> int:
    """
    SOL 成交量启发式估计（非真实成交额）：

      inbound  = Σ 正向 lamport 变化
      outbound = Σ |负向 lamport 变化|，若大于 fee 则扣除 fee
      volume   = min(inbound, outbound)

    付款方的支出包含 fee，对手方收到的是净额，取较小的一侧近似成交额。
    """
    inbound = 0
    outbound = 0
    for pre_l, post_l in zip(meta.pre_balances, meta.post_balances):
        diff = post_l - pre_l
        if diff > 0:
            inbound += diff
        elif diff < 0:
            outbound += -diff

    if outbound > meta.fee:
        outbound -= meta.fee

    return min(inbound, outbound)

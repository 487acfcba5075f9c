#!filepath: mintwatch/engines/window/balances.py
from __future__ import annotations

from typing import Dict, Mapping, Optional


class OwnerBalanceTable:
    """
    owner → 当前持有量（raw integer amount）

    不变量（冻结）：
      - 表内只存在严格为正的余额
      - 每次修改后显式执行 remove_if_non_positive，余额 <= 0 的 owner 被删除
    """

    def __init__(self):
        self._balances: Dict[str, int] = {}

    def get(self, owner: Optional[str]) -> int:
        if owner is None:
            return 0
        return self._balances.get(owner, 0)

    def add(self, owner: str, delta: int) -> None:
        self._balances[owner] = self._balances.get(owner, 0) + delta
        self.remove_if_non_positive(owner)

    def apply(self, deltas: Mapping[str, int]) -> None:
        for owner, delta in deltas.items():
            self.add(owner, delta)

    def remove_if_non_positive(self, owner: str) -> None:
        if self._balances.get(owner, 0) <= 0:
            self._balances.pop(owner, None)

    def holder_count(self) -> int:
        return sum(1 for v in self._balances.values() if v > 0)

    def total(self) -> int:
        return sum(self._balances.values())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._balances)

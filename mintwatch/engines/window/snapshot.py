#!filepath: mintwatch/engines/window/snapshot.py
from __future__ import annotations

from typing import List, Optional

from mintwatch.engines.window.balances import OwnerBalanceTable
from mintwatch.engines.window.boundaries import N_BINS, boundary_times
from mintwatch.engines.window.types import Snapshot


class BoundarySnapshotter:
    """
    边界快照状态机

    state      : next_index ∈ [0, 11]
    transition : advance(ts) 在 ts >= boundary[next_index] 时触发（流中）
                 finish()    对剩余 index 无条件触发（流结束）
    两个入口都只调用 take_snapshot()，每个 index 恰好产出一次，按升序。
    """

    def __init__(self, t0: int, balances: OwnerBalanceTable, creator: Optional[str] = None):
        self.boundaries = boundary_times(t0)
        self.balances = balances
        self.creator = creator
        self.next_index = 0
        self.snapshots: List[Snapshot] = []

    @property
    def done(self) -> bool:
        return self.next_index >= N_BINS

    def advance(self, ts: int) -> int:
        """Take every snapshot whose boundary ``ts`` has reached. Returns how many fired."""
        fired = 0
        while not self.done and ts >= self.boundaries[self.next_index]:
            self.take_snapshot()
            fired += 1
        return fired

    def finish(self) -> List[Snapshot]:
        while not self.done:
            self.take_snapshot()
        return self.snapshots

    def take_snapshot(self) -> Snapshot:
        if self.done:
            raise RuntimeError("all boundaries already snapshotted")

        snap = Snapshot(
            holders=self.balances.holder_count(),
            creator_pct=self._creator_pct(),
        )
        self.snapshots.append(snap)
        self.next_index += 1
        return snap

    def _creator_pct(self) -> Optional[float]:
        if not self.creator:
            return None
        total = self.balances.total()
        if total <= 0:
            return 0.0
        # 整数放大到万分位后再转 float，保留两位小数
        return (self.balances.get(self.creator) * 10000 // total) / 100

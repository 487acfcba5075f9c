#!filepath: mintwatch/engines/window/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from mintwatch.engines.window.boundaries import N_BINS, WINDOW_SECONDS

LAMPORTS_PER_SOL = 1_000_000_000

BIN_LABELS = ["0:30"] + [str(m) for m in range(1, N_BINS)]


@dataclass(slots=True)
class Bin:
    trades: int = 0
    volume_lamports: int = 0

    @property
    def volume_sol(self) -> float:
        return self.volume_lamports / LAMPORTS_PER_SOL


@dataclass(frozen=True, slots=True)
class Snapshot:
    holders: int
    creator_pct: Optional[float] = None


@dataclass
class WindowReport:
    """
    WindowAggEngine 的唯一输出：11 个 bin + 11 个快照。
    """

    t0: int
    bins: List[Bin]
    snapshots: List[Snapshot]
    creator: Optional[str] = None
    processed: int = 0
    skipped: int = 0
    mint: str = ""

    @property
    def t_end(self) -> int:
        return self.t0 + WINDOW_SECONDS

    @property
    def labels(self) -> List[str]:
        return list(BIN_LABELS)

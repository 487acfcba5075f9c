#!filepath: mintwatch/engines/window/boundaries.py
from __future__ import annotations

import math
from typing import List

WINDOW_SECONDS = 10 * 60
FIRST_BIN_SECONDS = 30
N_BINS = 11

# 快照边界（相对 t0 的秒数），与 bin 一一对应
BOUNDARY_OFFSETS = (30, 60, 120, 180, 240, 300, 360, 420, 480, 540, 600)


def bin_index(ts: int, t0: int) -> int:
    """
    0:30 首桶 + 十个 1 分钟桶。

    ts <= t0+30 → 0
    否则 ceil((ts - t0) / 60)，夹在 [1, 10]
    """
    if ts <= t0 + FIRST_BIN_SECONDS:
        return 0
    m = math.ceil((ts - t0) / 60)
    return min(N_BINS - 1, max(1, m))


def boundary_times(t0: int) -> List[int]:
    return [t0 + off for off in BOUNDARY_OFFSETS]

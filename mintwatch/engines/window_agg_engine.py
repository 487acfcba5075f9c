#!filepath: mintwatch/engines/window_agg_engine.py
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple

from mintwatch.engines.base import BaseEngine
from mintwatch.engines.window import (
    N_BINS,
    Bin,
    BoundarySnapshotter,
    OwnerBalanceTable,
    WindowReport,
    bin_index,
    estimate_volume_lamports,
    extract_owner_deltas,
)
from mintwatch.rpc.models import SignatureInfo, TransactionMeta

WindowEvent = Tuple[SignatureInfo, Optional[TransactionMeta]]


class WindowAggEngine(BaseEngine[WindowEvent, WindowReport]):
    """
    WindowAggEngine（冻结版）

    输入：
      - (SignatureInfo, TransactionMeta | None)，按 block_time 升序

    输出：
      - WindowReport：11 个 bin（trades / volume_lamports）+ 11 个快照（holders / creator_pct）

    每个事件：
      1. content 缺失 → 跳过
      2. 提取 owner 级 token delta
      3. 有变动时更新 OwnerBalanceTable
      4. 估计 SOL volume
      5. 分桶；had_movement 且 volume > 0 才计一笔 trade
      6. 推进边界快照状态机

    设计原则：
      - 纯计算，不做 IO
      - 严格串行：快照正确性依赖按时间顺序应用 delta
      - 相同输入 → 相同输出
    """

    def __init__(self, mint: str, t0: int, creator: Optional[str] = None):
        self.mint = mint
        self.t0 = t0
        self.creator = creator or None
        self.reset()

    # --------------------------------------------------
    def reset(self) -> None:
        self.bins: List[Bin] = [Bin() for _ in range(N_BINS)]
        self.balances = OwnerBalanceTable()
        self.snapshotter = BoundarySnapshotter(self.t0, self.balances, self.creator)
        self.processed = 0
        self.skipped = 0
        self._last_ts: Optional[int] = None

    def process(self, event: WindowEvent) -> None:
        sig, meta = event
        ts = self._check_order(sig)

        if meta is None:
            self.skipped += 1
            return

        deltas = extract_owner_deltas(meta, self.mint)
        if deltas.had_movement:
            self.balances.apply(deltas.deltas)

        volume = estimate_volume_lamports(meta)

        if deltas.had_movement and volume > 0:
            b = self.bins[bin_index(ts, self.t0)]
            b.trades += 1
            b.volume_lamports += volume

        self.snapshotter.advance(ts)
        self.processed += 1

    def finalize(self) -> WindowReport:
        snapshots = self.snapshotter.finish()
        return WindowReport(
            t0=self.t0,
            bins=[Bin(b.trades, b.volume_lamports) for b in self.bins],
            snapshots=list(snapshots),
            creator=self.creator,
            processed=self.processed,
            skipped=self.skipped,
            mint=self.mint,
        )

    # --------------------------------------------------
    @staticmethod
    def order_stream(
        signatures: Iterable[SignatureInfo],
        transactions: Mapping[str, Optional[TransactionMeta]],
    ) -> List[WindowEvent]:
        """
        Pair each timestamped signature with its fetched content, ascending by block time.
        Sort is stable, so same-second ties keep their input order.
        """
        timed = [s for s in signatures if s.block_time is not None]
        timed.sort(key=lambda s: s.block_time)
        return [(s, transactions.get(s.signature)) for s in timed]

    def _check_order(self, sig: SignatureInfo) -> int:
        ts = sig.block_time
        if ts is None:
            raise ValueError(f"WindowAggEngine requires timestamped events: {sig.signature}")
        if self._last_ts is not None and ts < self._last_ts:
            raise ValueError("WindowAggEngine requires input sorted by block_time")
        self._last_ts = ts
        return ts

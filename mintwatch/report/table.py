#!filepath: mintwatch/report/table.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from mintwatch.engines.window.types import WindowReport


def format_t0(t0: int) -> str:
    return datetime.fromtimestamp(t0, tz=timezone.utc).isoformat().replace("+00:00", "Z")


def format_pct(pct: Optional[float]) -> str:
    return "" if pct is None else f"{pct:.2f}%"


def report_rows(report: WindowReport) -> List[List[str]]:
    """
    One row per interval: label, trades, volume (SOL, 6dp), holders[, creator %].
    """
    with_creator = bool(report.creator)
    rows = []
    for label, b, snap in zip(report.labels, report.bins, report.snapshots):
        row = [label, str(b.trades), f"{b.volume_sol:.6f}", str(snap.holders)]
        if with_creator:
            row.append(format_pct(snap.creator_pct))
        rows.append(row)
    return rows


def build_table(report: WindowReport) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Window", justify="right")
    table.add_column("Trades", justify="right")
    table.add_column("Volume (SOL)", justify="right")
    table.add_column("Holders", justify="right")
    if report.creator:
        table.add_column("Creator %", justify="right")

    for row in report_rows(report):
        table.add_row(*row)
    return table


def print_report(report: WindowReport, mint: str, rpc_url: str, console: Console | None = None) -> None:
    console = console or Console()
    console.print(f"Mint: {mint}")
    console.print(f"RPC : {rpc_url}")
    console.print(f"t0  : {format_t0(report.t0)}\n")
    console.print(build_table(report))

#!filepath: mintwatch/report/json_export.py
from __future__ import annotations

import json
from typing import Any, Dict

from mintwatch.engines.window.types import WindowReport
from mintwatch.report.table import format_t0


def report_to_dict(report: WindowReport, mint: str, rpc_url: str = "") -> Dict[str, Any]:
    """
    JSON-friendly view; volume kept as integer lamports plus a 6dp SOL string.
    """
    rows = []
    for i, (label, b, snap) in enumerate(zip(report.labels, report.bins, report.snapshots)):
        rows.append(
            {
                "index": i,
                "label": label,
                "trades": b.trades,
                "volume_lamports": b.volume_lamports,
                "volume_sol": f"{b.volume_sol:.6f}",
                "holders": snap.holders,
                "creator_pct": snap.creator_pct,
            }
        )

    return {
        "mint": mint,
        "rpc": rpc_url,
        "t0": report.t0,
        "t0_iso": format_t0(report.t0),
        "t_end": report.t_end,
        "creator": report.creator,
        "processed": report.processed,
        "skipped": report.skipped,
        "rows": rows,
    }


def report_to_json(report: WindowReport, mint: str, rpc_url: str = "") -> str:
    return json.dumps(report_to_dict(report, mint, rpc_url), ensure_ascii=False, indent=2)

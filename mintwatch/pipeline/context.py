#!filepath: mintwatch/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from mintwatch.engines.window.boundaries import WINDOW_SECONDS
from mintwatch.engines.window.types import WindowReport
from mintwatch.rpc.models import SignatureInfo, TransactionMeta


@dataclass
class WindowContext:
    """
    WindowContext = 一次 mint 窗口监控运行期的唯一上下文

    设计原则：
    - Pipeline 负责构造
    - 每个 Step 只写自己负责的字段
    - 不放业务逻辑
    """

    # -------------------------
    # identity
    # -------------------------
    mint: str
    rpc_url: str = ""
    creator: Optional[str] = None

    # -------------------------
    # ledger facts
    # -------------------------
    genesis: Optional[SignatureInfo] = None
    token_accounts: Set[str] = field(default_factory=set)
    signatures: Dict[str, SignatureInfo] = field(default_factory=dict)
    transactions: Dict[str, Optional[TransactionMeta]] = field(default_factory=dict)

    # -------------------------
    # result
    # -------------------------
    report: Optional[WindowReport] = None

    @property
    def t0(self) -> Optional[int]:
        return self.genesis.block_time if self.genesis else None

    @property
    def t_end(self) -> Optional[int]:
        return self.t0 + WINDOW_SECONDS if self.t0 is not None else None

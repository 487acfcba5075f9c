#!filepath: mintwatch/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar


InEvent = TypeVar("InEvent")
OutResult = TypeVar("OutResult")


class BaseEngine(ABC, Generic[InEvent, OutResult]):
    """
    Engine 抽象基类（Atomic Engine Layer）：

    - 不做任何 I/O（不访问 RPC / 文件 / socket）
    - 专注“有序事件流 → 结果”的纯逻辑
    - 状态只存在于一次 execute 之内
    """

    @abstractmethod
    def reset(self) -> None:
        """清空内部状态，准备下一次 execute。"""
        raise NotImplementedError

    @abstractmethod
    def process(self, event: InEvent) -> None:
        """
        处理单个事件（最小粒度单位）。
        """
        raise NotImplementedError

    @abstractmethod
    def finalize(self) -> OutResult:
        raise NotImplementedError

    def execute(self, events: Iterable[InEvent]) -> OutResult:
        """
        流式处理一批事件，默认逐个调用 process，最后 finalize。
        """
        self.reset()
        for ev in events:
            self.process(ev)
        return self.finalize()

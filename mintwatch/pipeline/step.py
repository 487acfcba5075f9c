#!filepath: mintwatch/pipeline/step.py
from __future__ import annotations

from mintwatch.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from mintwatch.pipeline.context import WindowContext


class PipelineStep:
    """
    Pipeline Step 基类

    职责（唯一）：
      1. 作为 orchestration 层（调用 engine，读写 ctx）
      2. 提供 Step 级时间语义边界（parent scope）

    设计铁律：
      - Step 本身不进入 timeline
      - 计时发生在 Step 内部（leaf timer）
      - Instrumentation 是可选横切关注点，Step 行为不依赖 inst 是否存在
    """

    def __init__(self, inst: Instrumentation | None = None):
        # 永远保证 inst 可用（No-op 语义）
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """Step 级父级 scope（record=False，不进入 timeline）。"""
        return self.inst.timer(self.step_name, record=False)

    async def run(self, ctx: WindowContext) -> WindowContext:
        raise NotImplementedError

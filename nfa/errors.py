from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AutomatonError(Exception):
    message: str
    # 触发错误的取值（状态编号、符号等）
    value: Any = None

    def __str__(self) -> str:
        if self.value is None:
            return f"自动机错误: {self.message}"
        return f"自动机错误: {self.message}（取值: {self.value!r}）"

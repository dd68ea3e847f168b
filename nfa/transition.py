from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Transition:
    """有向带标签的边，source/target 只保存状态编号。

    symbol_index 是 symbol 在字母表中的稠密下标（λ 为 0），
    仅用于排序：先按 target_id 升序，再按 symbol_index 升序。
    """

    source_id: int
    target_id: int
    symbol: str
    symbol_index: int = field(compare=False)

    def sort_key(self) -> Tuple[int, int]:
        return self.target_id, self.symbol_index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"({self.source_id}, {self.target_id}) {self.symbol}"

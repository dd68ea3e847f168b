from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, FrozenSet, List, Sequence, Set

from nfa.transition import Transition


@dataclass(eq=False)
class NFAState:
    """λ-NFA 状态。

    - buckets[i] 保存符号下标为 i 的所有出边（0 为 λ），允许重复边与自环
    - lambda_closure 缓存只经 λ 边可达的状态编号，不含自身
    - 目标状态只按编号引用，由所属自动机负责把编号映射回状态
    """

    state_id: int
    bucket_count: int
    buckets: List[List[Transition]] = field(init=False)
    lambda_closure: FrozenSet[int] = field(init=False, default=frozenset())

    def __post_init__(self) -> None:
        self.buckets = [[] for _ in range(self.bucket_count)]

    def add_transition(self, transition: Transition) -> None:
        if transition.source_id != self.state_id:
            raise ValueError("transition must start at this state")
        self.buckets[transition.symbol_index].append(transition)

    def targets(self, symbol_index: int) -> Set[int]:
        # 经一条 symbol_index 边可达的状态编号（重复边只算一次）
        return {t.target_id for t in self.buckets[symbol_index]}

    def compute_lambda_closure(self, states: Sequence[NFAState]) -> FrozenSet[int]:
        """BFS 只沿 λ 边遍历，每个状态至多访问一次。

        states 为所属自动机的状态表，states[i] 的编号为 i + 1。
        结果同时写回 lambda_closure 缓存。
        """
        visited: Set[int] = {self.state_id}
        queue: Deque[NFAState] = deque([self])

        while queue:
            current = queue.popleft()
            for target_id in current.targets(0):
                if target_id not in visited:
                    visited.add(target_id)
                    queue.append(states[target_id - 1])

        visited.discard(self.state_id)
        self.lambda_closure = frozenset(visited)
        return self.lambda_closure

    def transitions(self) -> List[Transition]:
        out: List[Transition] = []
        for bucket in self.buckets:
            out.extend(bucket)
        return out

    def ordered_transitions(self) -> List[Transition]:
        return sorted(self.transitions())

    def __str__(self) -> str:
        return "".join(f"{t}\n" for t in self.ordered_transitions())

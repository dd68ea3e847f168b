from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Set

from nfa.alphabet import DEFAULT_ALPHABET, Alphabet
from nfa.errors import AutomatonError
from nfa.nfa_state import NFAState
from nfa.transition import Transition

logger = logging.getLogger("nfa.engine")


class LambdaNFA:
    """带 λ 转移的非确定有限自动机。

    状态编号为 1..state_count，构造后状态数不再变化；
    之后唯一的修改操作是 add_transition，每次插入后重算所有状态的 λ 闭包，
    保证查询时闭包缓存总是最新的。
    """

    def __init__(
        self,
        state_count: int,
        start_id: int,
        accepting_ids: Iterable[int],
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> None:
        if state_count < 1:
            raise AutomatonError("state_count must be positive", state_count)
        accepting = frozenset(accepting_ids)
        if not 1 <= start_id <= state_count:
            raise AutomatonError("start state out of range", start_id)
        for state_id in sorted(accepting):
            if not 1 <= state_id <= state_count:
                raise AutomatonError("accepting state out of range", state_id)

        self._alphabet = alphabet
        # 编号 i 的状态存放在 _states[i - 1]
        self._states: List[NFAState] = [
            NFAState(state_id, alphabet.size + 1) for state_id in range(1, state_count + 1)
        ]
        self._start_id = start_id
        self._accepting_ids: FrozenSet[int] = accepting

        logger.debug(
            "创建自动机: %d 个状态, 起始 %d, 接受 %s",
            state_count,
            start_id,
            sorted(accepting),
        )

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def state_count(self) -> int:
        return len(self._states)

    @property
    def start_id(self) -> int:
        return self._start_id

    @property
    def accepting_ids(self) -> FrozenSet[int]:
        return self._accepting_ids

    def _state(self, state_id: int) -> NFAState:
        return self._states[state_id - 1]

    def lambda_closure(self, state_id: int) -> FrozenSet[int]:
        if not 1 <= state_id <= self.state_count:
            raise AutomatonError("state out of range", state_id)
        return self._state(state_id).lambda_closure

    def is_valid_transition(self, source_id: int, target_id: int, symbol: str) -> bool:
        if not 1 <= source_id <= self.state_count:
            return False
        if not 1 <= target_id <= self.state_count:
            return False
        return self._alphabet.is_valid(symbol)

    def add_transition(self, source_id: int, target_id: int, symbol: str) -> None:
        """插入一条转移（允许重复边与自环），然后重算全部 λ 闭包。"""
        if not self.is_valid_transition(source_id, target_id, symbol):
            raise AutomatonError("invalid transition", (source_id, target_id, symbol))

        transition = Transition(
            source_id=source_id,
            target_id=target_id,
            symbol=symbol,
            symbol_index=self._alphabet.index_of(symbol),
        )
        self._state(source_id).add_transition(transition)
        logger.debug("添加转移 %s", transition)
        self._recompute_closures()

    def _recompute_closures(self) -> None:
        # 新增的 λ 边可能影响任意一个传递依赖它的状态，因此全部重算
        for state in self._states:
            state.compute_lambda_closure(self._states)
        logger.debug("已重算 %d 个状态的 λ 闭包", len(self._states))

    def _extend(self, state_ids: Set[int]) -> Set[int]:
        extended = set(state_ids)
        for state_id in state_ids:
            extended |= self._state(state_id).lambda_closure
        return extended

    def _step(self, active: Set[int], symbol: str) -> Set[int]:
        # 字母表之外的字符（包括 λ 本身）没有任何可走的边
        if not self._alphabet.is_symbol(symbol):
            return set()
        index = self._alphabet.index_of(symbol)
        stepped: Set[int] = set()
        for state_id in active:
            stepped |= self._state(state_id).targets(index)
        return self._extend(stepped)

    def _has_accepting(self, active: Set[int]) -> bool:
        return not self._accepting_ids.isdisjoint(active)

    def longest_prefix(self, word: str) -> Optional[str]:
        """返回 word 中被接受的最长前缀；连空前缀都不被接受时返回 None。

        按位置推进活动状态集合：每读一个字符，先沿该字符走一步，再补上 λ 闭包，
        记录最后一次出现接受状态的位置。活动集合为空时提前结束。
        """
        active = self._extend({self._start_id})
        best: Optional[int] = 0 if self._has_accepting(active) else None

        for position, symbol in enumerate(word):
            active = self._step(active, symbol)
            if not active:
                break
            if self._has_accepting(active):
                best = position + 1

        if best is None:
            return None
        return word[:best]

    def is_element(self, word: str) -> bool:
        return self.longest_prefix(word) == word

    def transitions(self) -> List[Transition]:
        out: List[Transition] = []
        for state in self._states:
            out.extend(state.ordered_transitions())
        return out

    def to_display_string(self) -> str:
        # 按状态编号升序，每个状态内部按 Transition 的顺序输出
        return "".join(str(state) for state in self._states)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"LambdaNFA(states={self.state_count}, start={self._start_id}, "
            f"accepting={sorted(self._accepting_ids)})"
        )

from __future__ import annotations

from typing import List, Tuple

from nfa.alphabet import DEFAULT_ALPHABET, Alphabet
from nfa.lambda_nfa import LambdaNFA

# 演示自动机：5 个状态，起始 1，接受 {5}；"~" 位置换成字母表的 λ 符号
DEMO_STATE_COUNT = 5
DEMO_TRANSITIONS: List[Tuple[int, int, str]] = [
    (1, 2, "~"),
    (2, 2, "~"),
    (2, 3, "a"),
    (3, 4, "b"),
    (3, 4, "~"),
    (4, 5, "a"),
    (2, 4, "~"),
    (4, 1, "~"),
]


def build_demo_nfa(alphabet: Alphabet = DEFAULT_ALPHABET) -> LambdaNFA:
    nfa = LambdaNFA(DEMO_STATE_COUNT, 1, {DEMO_STATE_COUNT}, alphabet=alphabet)
    for source, target, symbol in DEMO_TRANSITIONS:
        if symbol == "~":
            symbol = alphabet.lambda_symbol
        nfa.add_transition(source, target, symbol)
    return nfa

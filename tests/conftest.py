"""
Pytest fixtures shared by the engine and shell tests.
"""

import io

import pytest

from nfa.alphabet import Alphabet
from shell.demo import build_demo_nfa
from shell.shell import Shell


@pytest.fixture
def demo_nfa():
    """
    5 状态演示自动机：起始 1，接受 {5}。

    1 -λ-> 2, 2 -λ-> 2, 2 -a-> 3, 3 -b-> 4, 3 -λ-> 4, 4 -a-> 5, 2 -λ-> 4, 4 -λ-> 1
    """
    return build_demo_nfa()


@pytest.fixture
def small_alphabet():
    return Alphabet(first_symbol="a", last_symbol="c", lambda_symbol="~")


@pytest.fixture
def shell_output():
    return io.StringIO()


@pytest.fixture
def shell(shell_output):
    return Shell(out=shell_output)

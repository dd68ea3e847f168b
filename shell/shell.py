from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Iterable, Optional, TextIO

from nfa.alphabet import DEFAULT_ALPHABET, Alphabet
from nfa.errors import AutomatonError
from nfa.lambda_nfa import LambdaNFA
from shell.commands import Command, extract_word, parse_command, parse_int
from shell.demo import build_demo_nfa
from shell.errors import CommandError

logger = logging.getLogger("shell")

PROMPT = "nfa> "

HELP_TEXT = """\
Lambda NFA:
Available Commands:


INIT <n>:           Generates new automaton with n states.

ADD <i> <j> <c>:    Adds a new transition from state i to state
                    j with symbol c.

CHECK "s":          Checks if a given word s is in the language
                    of L(A); A being the current automaton.

PREFIX "s":         Prints the longest prefix of s that is part
                    of the language L(A); A being the current
                    automaton.

DISPLAY:            Prints all transitions that make up the
                    automaton in a sorted list.

GENERATE:           Loads a predefined automaton.

HELP:               Prints a help dialog, showing all available
                    commands and their use.

QUIT:               Exits the program.
"""


class Shell:
    """命令行外壳：解析命令、调用 LambdaNFA 的公开操作并输出结果。

    所有命令错误都以 "Error! <消息>" 输出，循环继续执行。
    """

    def __init__(
        self,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        prompt: str = PROMPT,
        out: Optional[TextIO] = None,
        echo: bool = False,
    ) -> None:
        self.alphabet = alphabet
        self.prompt = prompt
        self.echo = echo
        self.nfa: Optional[LambdaNFA] = None
        self.running = True
        self._out = out if out is not None else sys.stdout
        self._handlers: Dict[str, Callable[[Command], None]] = {
            "INIT": self._init,
            "ADD": self._add,
            "CHECK": self._check,
            "PREFIX": self._prefix,
            "DISPLAY": self._display,
            "GENERATE": self._generate,
            "HELP": self._help,
            "QUIT": self._quit,
        }

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def execute(self, line: str) -> None:
        try:
            command = parse_command(line)
            self._handlers[command.name](command)
        except CommandError as e:
            logger.info("命令被拒绝: %r (%s)", line, e.message)
            self._print(str(e))

    def run(self, lines: Iterable[str]) -> None:
        """依次执行脚本中的命令，遇到 QUIT 提前结束。"""
        for line in lines:
            if not self.running:
                break
            if self.echo:
                self._print(f"{self.prompt}{line}")
            self.execute(line)

    def run_interactive(self, read_line: Callable[[str], str] = input) -> None:
        while self.running:
            try:
                line = read_line(self.prompt)
            except EOFError:
                # 输入结束等同于 QUIT
                self._print()
                break
            self.execute(line)

    def _require_nfa(self) -> LambdaNFA:
        if self.nfa is None:
            raise CommandError("NFA has not been initialized.")
        return self.nfa

    def _init(self, command: Command) -> None:
        if len(command.args) < 1:
            raise CommandError("Not enough arguments supplied.")
        size = parse_int(command.args[0], "First argument has to be an integer")
        if size <= 0:
            raise CommandError("Size has to be greater than 0.")
        self.nfa = LambdaNFA(size, 1, {size}, alphabet=self.alphabet)

    def _add(self, command: Command) -> None:
        if len(command.args) < 3:
            raise CommandError("Not enough arguments supplied.")
        if len(command.args[2]) > 1:
            raise CommandError("Third argument needs to be a character.")
        message = "First and second argument have to be an integer"
        source = parse_int(command.args[0], message)
        target = parse_int(command.args[1], message)
        symbol = command.args[2]

        nfa = self._require_nfa()
        if not nfa.is_valid_transition(source, target, symbol):
            raise CommandError("Transition provided is not valid.")
        nfa.add_transition(source, target, symbol)

    def _check(self, command: Command) -> None:
        nfa = self._require_nfa()
        word = extract_word(command.raw)
        self._print("In language." if nfa.is_element(word) else "Not in language.")

    def _prefix(self, command: Command) -> None:
        nfa = self._require_nfa()
        word = extract_word(command.raw)
        prefix = nfa.longest_prefix(word)
        if prefix is None:
            self._print("No prefix in language.")
        else:
            self._print(f'"{prefix}"')

    def _display(self, command: Command) -> None:
        self._print(self._require_nfa().to_display_string(), end="")

    def _generate(self, command: Command) -> None:
        try:
            self.nfa = build_demo_nfa(self.alphabet)
        except AutomatonError as e:
            raise CommandError(f"Demo automaton does not fit the alphabet {self.alphabet}.") from e

    def _help(self, command: Command) -> None:
        self._print(HELP_TEXT)

    def _quit(self, command: Command) -> None:
        self.running = False

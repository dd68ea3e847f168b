from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from shell.errors import CommandError

COMMAND_NAMES = ("INIT", "ADD", "CHECK", "PREFIX", "DISPLAY", "GENERATE", "HELP", "QUIT")

# 只接受可选符号加 ASCII 数字，不接受 int() 允许的下划线与首尾空白
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Command:
    """一行 shell 输入拆分后的结果。

    name 已转为大写；args 为按空白切分后除命令名外的部分；
    raw 保留原始行，CHECK/PREFIX 需要从原始行中取出带引号的单词。
    """

    name: str
    args: Tuple[str, ...]
    raw: str


def parse_command(line: str) -> Command:
    if not line:
        raise CommandError("Invalid! Try again.")
    slices = line.strip().split()
    # 只含空白的行没有命令名，按未知命令处理
    name = slices[0].upper() if slices else ""
    if name not in COMMAND_NAMES:
        raise CommandError("Not a valid command.")
    return Command(name=name, args=tuple(slices[1:]), raw=line)


def parse_int(text: str, message: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise CommandError(message)
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise CommandError(message)
    return value


def extract_word(raw: str) -> str:
    # 单词取第一个与最后一个双引号之间的内容，中间可以再含引号
    first = raw.find('"')
    last = raw.rfind('"')
    if first == -1 or first == last:
        raise CommandError('Word has to be wrapped in double quotes ("w") ')
    return raw[first + 1 : last]

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Alphabet:
    """输入字母表：一个连续字符区间，外加一个保留的 λ 符号。

    - λ 的下标固定为 0
    - 区间内字符按顺序映射为 1..K
    - λ 符号不能落在区间内
    """

    first_symbol: str = "a"
    last_symbol: str = "z"
    lambda_symbol: str = "~"

    def __post_init__(self) -> None:
        for name in ("first_symbol", "last_symbol", "lambda_symbol"):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character")
        if self.first_symbol > self.last_symbol:
            raise ValueError("first_symbol must not be greater than last_symbol")
        if self.first_symbol <= self.lambda_symbol <= self.last_symbol:
            raise ValueError("lambda_symbol must not be part of the alphabet range")

    @property
    def size(self) -> int:
        return ord(self.last_symbol) - ord(self.first_symbol) + 1

    def is_symbol(self, symbol: str) -> bool:
        return len(symbol) == 1 and self.first_symbol <= symbol <= self.last_symbol

    def is_lambda(self, symbol: str) -> bool:
        return symbol == self.lambda_symbol

    def is_valid(self, symbol: str) -> bool:
        return self.is_lambda(symbol) or self.is_symbol(symbol)

    def index_of(self, symbol: str) -> int:
        # 转移表的稠密下标：λ 为 0，字母表字符为 1..K
        if self.is_lambda(symbol):
            return 0
        if not self.is_symbol(symbol):
            raise ValueError(f"symbol {symbol!r} is not part of the alphabet")
        return ord(symbol) - ord(self.first_symbol) + 1

    def symbols(self) -> List[str]:
        return [chr(code) for code in range(ord(self.first_symbol), ord(self.last_symbol) + 1)]

    def __str__(self) -> str:
        return f"[{self.first_symbol}-{self.last_symbol}], λ='{self.lambda_symbol}'"


DEFAULT_ALPHABET = Alphabet()

"""Dataclass definitions for application configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from nfa.alphabet import Alphabet


@dataclass(frozen=True)
class AlphabetConfig:
    """Input alphabet: contiguous symbol range plus the reserved lambda symbol."""

    first_symbol: str = "a"
    last_symbol: str = "z"
    lambda_symbol: str = "~"

    def build(self) -> Alphabet:
        return Alphabet(
            first_symbol=self.first_symbol,
            last_symbol=self.last_symbol,
            lambda_symbol=self.lambda_symbol,
        )


@dataclass(frozen=True)
class ShellConfig:
    prompt: str = "nfa> "
    # 执行脚本时是否回显 "提示符 + 命令"
    echo: bool = False


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    filepath: Optional[Path] = None
    max_bytes: int = 1_048_576
    backup_count: int = 3
    console: bool = True

    def resolved_path(self) -> Optional[Path]:
        if self.filepath is None:
            return None
        path = self.filepath if isinstance(self.filepath, Path) else Path(self.filepath)
        return path.expanduser().resolve()


@dataclass(frozen=True)
class Config:
    alphabet: AlphabetConfig = field(default_factory=AlphabetConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

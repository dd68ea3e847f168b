from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CommandError(Exception):
    message: str

    def __str__(self) -> str:
        return f"Error! {self.message}"

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    combinators: tuple[str, ...] = (" ", ">", "+", "~")
    log_level: str = "WARNING"

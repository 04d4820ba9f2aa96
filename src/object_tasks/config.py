from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializationConfig:
    separators: tuple[str, str] = (",", ":")
    sort_keys: bool = False
    indent: int | None = None
    ensure_ascii: bool = False  # keep non-ASCII characters as-is

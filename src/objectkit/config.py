from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class SelectorConfig:
    strict_combinators: bool = False  # reject tokens other than ' ', '+', '~', '>'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorConfig:
        env = os.environ if environ is None else environ
        raw = env.get("OBJECTKIT_STRICT_COMBINATORS", "")
        return cls(strict_combinators=raw.strip().lower() in _TRUTHY)

from __future__ import annotations

import os
from dataclasses import dataclass

from .sampling import DEFAULT_QUALITY


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return bool(int(raw))


@dataclass(frozen=True)
class ExtractorSettings:
    quality: int = DEFAULT_QUALITY
    ignore_white: bool = True
    color_count: int = 10
    log_level: str = "INFO"
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> ExtractorSettings:
        return cls(
            quality=int(os.environ.get("PALETTE_CUT_QUALITY", str(DEFAULT_QUALITY))),
            ignore_white=_env_flag("PALETTE_CUT_IGNORE_WHITE", True),
            color_count=int(os.environ.get("PALETTE_CUT_COLOR_COUNT", "10")),
            log_level=os.environ.get("PALETTE_CUT_LOG_LEVEL", "INFO").upper(),
            request_timeout=float(os.environ.get("PALETTE_CUT_REQUEST_TIMEOUT", "10")),
        )

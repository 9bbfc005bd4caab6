from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    seed_data: bool = False
    log_level: str = "INFO"
    log_dir: Optional[Path] = Path("./logs")

    @classmethod
    def from_env(cls) -> "Settings":
        # LOG_DIR set but empty turns the log file off
        raw_log_dir = os.getenv("LOG_DIR", "./logs").strip()
        return cls(
            host=_env("HOST", "0.0.0.0"),
            port=_env_int("PORT", 8080),
            seed_data=_env("SEED_DATA", "false") == "true",
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(raw_log_dir) if raw_log_dir else None,
        )

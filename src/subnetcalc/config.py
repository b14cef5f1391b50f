# src/subnetcalc/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

__all__ = [
    "AppCfg",
    "LOG_LEVELS",
    "load_env",
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_POLL_MS = 100


@dataclass(frozen=True)
class AppCfg:
    """
    Runtime settings. Read from SUBNETCALC_* variables; CLI options override
    them via with_overrides().
    """
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    poll_ms: int = DEFAULT_POLL_MS

    @classmethod
    def from_env(cls) -> "AppCfg":
        poll = os.getenv("SUBNETCALC_POLL_MS", str(DEFAULT_POLL_MS))
        try:
            poll_ms = int(poll)
        except ValueError:
            raise RuntimeError(f"SUBNETCALC_POLL_MS must be an integer, got {poll!r}")
        return cls(
            log_level=os.getenv("SUBNETCALC_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("SUBNETCALC_LOG_FILE") or None,
            poll_ms=poll_ms,
        )

    @property
    def poll_timeout(self) -> float:
        return self.poll_ms / 1000.0

    def with_overrides(self, **kwargs) -> "AppCfg":
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    def validate(self) -> None:
        problems = []
        if self.log_level.upper() not in LOG_LEVELS:
            problems.append(f"log level {self.log_level!r} (expected one of {', '.join(LOG_LEVELS)})")
        if self.poll_ms <= 0:
            problems.append(f"poll interval {self.poll_ms} ms (must be > 0)")
        if problems:
            raise RuntimeError(f"Invalid configuration: {'; '.join(problems)}")


def load_env(env_file: Optional[str | Path] = None) -> None:
    """
    Load environment variables from a .env file.
    - If env_file is provided, load it directly.
    - Otherwise, try the current working directory.
    Variables already set in the environment win.
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

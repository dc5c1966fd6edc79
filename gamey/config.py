"""
Configuration - Settings read from the environment.

Variables:
    GAMEY_ENV                    development | production
    GAMEY_PORT                   HTTP port for server mode (3000)
    GAMEY_DEFAULT_SIZE           Board size for new games (7)
    GAMEY_MCTS_ITERATIONS        Playout budget of mcts_bot (5000)
    GAMEY_MCTS_HARD_ITERATIONS   Playout budget of mcts_bot_hard (20000)
    GAMEY_MCTS_TIME_LIMIT        Optional wall-clock limit per decision, seconds
    GAMEY_LOG_LEVEL              Logging level (INFO)
    ALLOWED_ORIGINS              Comma-separated CORS origins (*)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import os


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


@dataclass
class Settings:
    env: str = "development"
    port: int = 3000
    default_size: int = 7
    mcts_iterations: int = 5_000
    mcts_hard_iterations: int = 20_000
    mcts_time_limit: Optional[float] = None
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            env=os.getenv("GAMEY_ENV", "development"),
            port=_env_int("GAMEY_PORT", 3000),
            default_size=_env_int("GAMEY_DEFAULT_SIZE", 7),
            mcts_iterations=_env_int("GAMEY_MCTS_ITERATIONS", 5_000),
            mcts_hard_iterations=_env_int("GAMEY_MCTS_HARD_ITERATIONS", 20_000),
            mcts_time_limit=_env_float("GAMEY_MCTS_TIME_LIMIT"),
            log_level=os.getenv("GAMEY_LOG_LEVEL", "INFO").upper(),
            allowed_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
        )

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_flag(*names: str) -> bool:
    for name in names:
        raw = os.getenv(name)
        if raw is not None:
            return raw.strip().lower() in _TRUTHY
    return False


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the web and terminal front ends."""
    host: str = "127.0.0.1"
    port: int = 5000
    max_games: int = 256
    log_level: str = "INFO"
    debug: bool = False


def load_settings() -> Settings:
    max_games = _env_int("TICTACTOE_MAX_GAMES", Settings.max_games)
    return Settings(
        host=os.getenv("TICTACTOE_HOST", Settings.host),
        port=_env_int("TICTACTOE_PORT", Settings.port),
        max_games=max_games if max_games > 0 else Settings.max_games,
        log_level=os.getenv("TICTACTOE_LOG_LEVEL", Settings.log_level).upper(),
        debug=_env_flag("FLASK_DEBUG", "DEBUG"),
    )

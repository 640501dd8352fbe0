"""Runtime settings - reference constants, overridable from the environment or a .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from scanmatrix.engine import DWELL_MS, TICK_MS


@dataclass(frozen=True)
class Config:
    width: int = 20
    height: int = 15
    tick_ms: int = TICK_MS
    # Not tied to tick_ms: a faster scanner keeps the same palette dwell
    dwell_ms: int = DWELL_MS
    fps: int = 30
    scale: int = 5
    cell_size: int = 8


def _int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_config(env_file: Path | None = None) -> Config:
    """Build a Config from SCANNER_* environment variables.

    A .env in the working directory (or the nearest parent holding one) is
    loaded first; variables already set in the environment win.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    return Config(
        width=_int("SCANNER_WIDTH", Config.width),
        height=_int("SCANNER_HEIGHT", Config.height),
        tick_ms=_int("SCANNER_TICK_MS", Config.tick_ms),
        dwell_ms=_int("SCANNER_DWELL_MS", Config.dwell_ms, minimum=0),
        fps=_int("SCANNER_FPS", Config.fps),
        scale=_int("SCANNER_SCALE", Config.scale),
        cell_size=_int("SCANNER_CELL_SIZE", Config.cell_size, minimum=3),
    )

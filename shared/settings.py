"""Player settings — YAML to dataclasses."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


class Difficulty(IntEnum):
    EASY = 0
    NORMAL = 1
    HARD = 2

    @property
    def ball_speed_ratio(self) -> float:
        return {Difficulty.EASY: 0.75, Difficulty.HARD: 1.25}.get(self, 1.0)

    @property
    def paddle_width_ratio(self) -> float:
        # easier game -> wider paddle
        return {Difficulty.EASY: 1.25, Difficulty.HARD: 0.75}.get(self, 1.0)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def next(self) -> "Difficulty":
        return Difficulty((self.value + 1) % len(Difficulty))


@dataclass
class Settings:
    difficulty: Difficulty = Difficulty.NORMAL
    sound: bool = True


def _parse_difficulty(value) -> Difficulty:
    if isinstance(value, str):
        try:
            return Difficulty[value.strip().upper()]
        except KeyError:
            pass
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return Difficulty(value)
        except ValueError:
            pass
    logger.warning("Unknown difficulty %r, using %s", value, Difficulty.NORMAL.name)
    return Difficulty.NORMAL


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from a YAML file; missing file or keys give defaults."""
    if path is None or not Path(path).exists():
        return Settings()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        logger.warning("Settings file %s is not a mapping, using defaults", path)
        return Settings()

    settings = Settings()
    if "difficulty" in raw:
        settings.difficulty = _parse_difficulty(raw["difficulty"])
    if "sound" in raw:
        sound = raw["sound"]
        if isinstance(sound, bool):
            settings.sound = sound
        else:
            logger.warning("Invalid sound flag %r, keeping %s", sound, settings.sound)
    return settings


def save_settings(path: Path, settings: Settings):
    """Write settings back in the same shape load_settings reads."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    raw = {"difficulty": settings.difficulty.name.lower(), "sound": settings.sound}
    with open(path, "w") as f:
        yaml.safe_dump(raw, f, default_flow_style=False)
    logger.debug("Saved settings to %s", path)

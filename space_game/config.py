"""
Run-time settings
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from space_game.constants import ASSETS_DIR, HEIGHT, TICK_MS, WIDTH

ENV_PREFIX = "SPACE_GAME_"


@dataclass(frozen=True)
class Settings:  # pylint: disable=too-many-instance-attributes
    """
    Knobs of a game run

    Built from a plain dictionary so that a file or the environment can
    feed it.
    """

    width: int = WIDTH
    height: int = HEIGHT
    tick_ms: int = TICK_MS
    seed: Optional[int] = None
    log_level: str = "INFO"
    volume: float = 0.1
    assets_dir: str = ASSETS_DIR
    title: str = "Space Game"
    font_name: str = "orbitron"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"volume must be between 0 and 1, got {self.volume}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """
        Build settings from a dictionary, ignoring unknown keys

        :param data: Setting values by name
        :type data: Mapping

        :return: Settings
        :rtype: Settings

        :raise ValueError: If a value cannot be converted or is out of range
        """
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data or data[f.name] is None:
                continue
            raw = data[f.name]
            # seed defaults to None, every other field to an int, float or str
            convert = int if f.name == "seed" else type(f.default)
            try:
                values[f.name] = convert(raw)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid value for {f.name}: {raw!r}") from e
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from ``SPACE_GAME_*`` environment variables

        :param environ: Environment to read, ``os.environ`` by default
        :type environ: Mapping

        :return: Settings
        :rtype: Settings
        """
        environ = os.environ if environ is None else environ
        data = {
            key[len(ENV_PREFIX):].lower(): value
            for key, value in environ.items()
            if key.startswith(ENV_PREFIX)
        }
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

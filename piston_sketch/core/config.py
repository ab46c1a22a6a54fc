# -*- coding: utf-8 -*-
"""Application settings.

Defaults can be overridden from the environment:

- ``PISTON_SKETCH_LOG_LEVEL``: logging level name (``DEBUG``, ``INFO``, ...)
- ``PISTON_SKETCH_FPS``: target frame rate of the animation timer
- ``PISTON_SKETCH_SPEED``: crank speed in radians per 16 ms frame, clamped to
  ``MAX_ANGLE_SPEED``

Malformed values are ignored and the default is kept.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .interaction import HANDLE_RADIUS
from .mechanism import EngineParams

logger = logging.getLogger(__name__)

ENV_PREFIX = "PISTON_SKETCH_"

# Radians per 16 ms frame; beyond this the crank visibly aliases.
MAX_ANGLE_SPEED = 1.0


@dataclass
class AppSettings:
    window_width: int = 800
    window_height: int = 600
    target_fps: int = 60
    angle_speed: float = 0.05
    handle_radius: float = HANDLE_RADIUS
    show_cylinder_guides: bool = True
    log_level: str = "INFO"
    engine: EngineParams = field(default_factory=EngineParams)

    @property
    def frame_interval_ms(self) -> int:
        return max(1, int(round(1000.0 / self.target_fps)))

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    @staticmethod
    def log_level_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """Level name from the environment, or None when unset or unknown.

        Does not log, so it can run before logging is configured. Unknown
        names are reported by :meth:`from_env`.
        """
        env = os.environ if environ is None else environ
        level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if level is None:
            return None
        name = level.strip().upper()
        if isinstance(getattr(logging, name, None), int):
            return name
        return None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        env = os.environ if environ is None else environ
        settings = cls()

        level = cls.log_level_from_env(env)
        if level is not None:
            settings.log_level = level
        elif ENV_PREFIX + "LOG_LEVEL" in env:
            logger.warning("Ignoring unknown log level %r", env[ENV_PREFIX + "LOG_LEVEL"])

        fps = _parse(env, "FPS", int)
        if fps is not None:
            if fps > 0:
                settings.target_fps = fps
            else:
                logger.warning("Ignoring non-positive FPS %d", fps)

        speed = _parse(env, "SPEED", float)
        if speed is not None and not math.isfinite(speed):
            logger.warning("Ignoring non-finite speed %r", speed)
            speed = None
        if speed is not None:
            if abs(speed) > MAX_ANGLE_SPEED:
                clamped = max(-MAX_ANGLE_SPEED, min(MAX_ANGLE_SPEED, speed))
                logger.warning("Clamping speed %g to %g", speed, clamped)
                speed = clamped
            settings.angle_speed = speed
        return settings


def _parse(env: Mapping[str, str], key: str, kind):
    raw = env.get(ENV_PREFIX + key)
    if raw is None:
        return None
    try:
        return kind(raw.strip())
    except ValueError:
        logger.warning("Ignoring malformed %s%s=%r", ENV_PREFIX, key, raw)
        return None

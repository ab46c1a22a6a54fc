# -*- coding: utf-8 -*-
"""Crank rotation over time."""

from __future__ import annotations

import logging

from .mechanism import EngineParams

logger = logging.getLogger(__name__)

# Nominal frame length the speed is expressed against (60 FPS).
REFERENCE_FRAME_SECONDS = 0.016


class CrankAnimator:
    def __init__(self, params: EngineParams, speed: float = 0.05):
        self.params = params
        self.speed = float(speed)
        self.running = True

    def frame_delta(self, frame_seconds: float) -> float:
        return max(0.0, float(frame_seconds)) / REFERENCE_FRAME_SECONDS

    def step(self, frame_seconds: float) -> float:
        """Advance the crank for one rendered frame and return the frame delta.

        The delta is returned even while paused so camera damping keeps working.
        """
        delta = self.frame_delta(frame_seconds)
        if self.running:
            self.advance(delta)
        return delta

    def advance(self, frames: float = 1.0):
        self.params.crank_angle += self.speed * frames

    def pause(self):
        if self.running:
            logger.debug("Animation paused at %.4f rad", self.params.crank_angle)
        self.running = False

    def resume(self):
        if not self.running:
            logger.debug("Animation resumed")
        self.running = True

    def toggle(self) -> bool:
        if self.running:
            self.pause()
        else:
            self.resume()
        return self.running

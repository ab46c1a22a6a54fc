# -*- coding: utf-8 -*-
"""Full-revolution sweep of the piston for the current mechanism."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .mechanism import EngineParams, cylinder_parameter, solve_piston_position

logger = logging.getLogger(__name__)


@dataclass
class StrokeSweep:
    angles: np.ndarray
    valid: np.ndarray
    travel: np.ndarray  # piston distance along the axis, NaN where unreachable
    positions: np.ndarray  # (n, 2), NaN rows where unreachable


@dataclass
class StrokeSummary:
    top_dead_centre: float
    bottom_dead_centre: float
    stroke: float
    reachable_fraction: float
    behind_origin: bool

    @property
    def fully_reachable(self) -> bool:
        return self.reachable_fraction >= 1.0


def sweep(params: EngineParams, samples: int = 360) -> StrokeSweep:
    """Solve the piston position at ``samples`` crank angles over [0, 2*pi).

    The crank angle of ``params`` is left untouched.
    """
    if samples < 2:
        raise ValueError(f"samples must be >= 2, got {samples}")
    angles = np.linspace(0.0, 2.0 * math.pi, int(samples), endpoint=False)
    valid = np.zeros(angles.shape, dtype=bool)
    travel = np.full(angles.shape, np.nan)
    positions = np.full((angles.size, 2), np.nan)

    probe = params.copy()
    for i, alpha in enumerate(angles):
        probe.crank_angle = float(alpha)
        res = solve_piston_position(probe)
        if not res.is_valid:
            continue
        valid[i] = True
        positions[i] = res.value
        travel[i] = cylinder_parameter(probe, res.value)
    return StrokeSweep(angles=angles, valid=valid, travel=travel, positions=positions)


def summarize(sw: StrokeSweep) -> StrokeSummary:
    n_valid = int(np.count_nonzero(sw.valid))
    fraction = n_valid / sw.angles.size
    if n_valid == 0:
        return StrokeSummary(math.nan, math.nan, math.nan, 0.0, False)
    t = sw.travel[sw.valid]
    tdc = float(np.max(t))
    bdc = float(np.min(t))
    summary = StrokeSummary(
        top_dead_centre=tdc,
        bottom_dead_centre=bdc,
        stroke=tdc - bdc,
        reachable_fraction=fraction,
        behind_origin=bool(bdc < 0.0),
    )
    logger.debug("Stroke summary: %s", summary)
    return summary

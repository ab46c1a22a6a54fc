# -*- coding: utf-8 -*-
"""Cylinder guide handles and pointer ownership.

Only one handle may follow the mouse at a time. Ownership is an explicit token
held by :class:`PointerCapture`: it is claimed on press, used on every move
and dropped on release. While no token is held, moving the mouse changes
nothing, even if the cursor passes over a handle.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .geometry import Vec2, length
from .mechanism import EngineParams

logger = logging.getLogger(__name__)

HANDLE_RADIUS = 20.0


class HandleKind(enum.Enum):
    CYLINDER_ORIGIN = "cylinder_origin"
    CYLINDER_DIRECTION = "cylinder_direction"

    @property
    def label(self) -> str:
        return "Cylinder origin" if self is HandleKind.CYLINDER_ORIGIN else "Cylinder direction"


@dataclass(frozen=True)
class CaptureToken:
    handle: HandleKind
    before: EngineParams


@dataclass(frozen=True)
class FinishedDrag:
    handle: HandleKind
    before: EngineParams
    after: EngineParams

    @property
    def changed(self) -> bool:
        return (
            self.before.cylinder_origin != self.after.cylinder_origin
            or self.before.cylinder_direction != self.after.cylinder_direction
        )


def handle_position(params: EngineParams, handle: HandleKind) -> Vec2:
    ox, oy = params.cylinder_origin
    if handle is HandleKind.CYLINDER_ORIGIN:
        return ox, oy
    dx, dy = params.cylinder_direction
    return ox + dx, oy + dy


def hit_test(params: EngineParams, point: Vec2, radius: float = HANDLE_RADIUS) -> Optional[HandleKind]:
    """Handle under ``point`` (world coords); the origin handle wins ties."""
    for handle in (HandleKind.CYLINDER_ORIGIN, HandleKind.CYLINDER_DIRECTION):
        hx, hy = handle_position(params, handle)
        if length(point[0] - hx, point[1] - hy) < radius:
            return handle
    return None


class PointerCapture:
    def __init__(self, params: EngineParams, radius: float = HANDLE_RADIUS):
        self.params = params
        self.radius = float(radius)
        self.token: Optional[CaptureToken] = None

    @property
    def active(self) -> Optional[HandleKind]:
        return self.token.handle if self.token is not None else None

    def hovered(self, point: Vec2) -> Optional[HandleKind]:
        return hit_test(self.params, point, self.radius)

    def press(self, point: Vec2) -> Optional[HandleKind]:
        if self.token is not None:
            return self.token.handle
        handle = self.hovered(point)
        if handle is None:
            return None
        self.token = CaptureToken(handle=handle, before=self.params.copy())
        logger.debug("Pointer captured by %s", handle.value)
        return handle

    def move(self, point: Vec2) -> bool:
        """Apply a drag step; returns True when the params were changed."""
        if self.token is None:
            return False
        x, y = float(point[0]), float(point[1])
        if self.token.handle is HandleKind.CYLINDER_ORIGIN:
            self.params.cylinder_origin = (x, y)
        else:
            ox, oy = self.params.cylinder_origin
            self.params.cylinder_direction = (x - ox, y - oy)
        return True

    def release(self) -> Optional[FinishedDrag]:
        if self.token is None:
            return None
        token, self.token = self.token, None
        done = FinishedDrag(handle=token.handle, before=token.before, after=self.params.copy())
        logger.debug("Pointer released by %s (changed=%s)", token.handle.value, done.changed)
        return done

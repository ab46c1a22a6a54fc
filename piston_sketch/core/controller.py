# -*- coding: utf-8 -*-
"""EngineController: the state behind one mechanism window.

Owns the mutable :class:`EngineParams`, the camera, the crank animator, the
pointer capture for the cylinder handles and the undo stack. It has no Qt
dependency; the widgets in ``piston_sketch.ui`` translate Qt events into calls
on this object and paint whatever it holds.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Set

from .animation import CrankAnimator
from .camera import Camera, CameraMotion
from .commands import CommandStack, ParameterChange, same_editable
from .config import AppSettings
from .geometry import Vec2
from .interaction import FinishedDrag, HandleKind, PointerCapture
from .mechanism import EngineParams, PistonPosition, cylinder_parameter, solve_piston_position

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "crank_radius": "Crank radius",
    "rod_length": "Rod length",
    "cylinder_origin": "Cylinder origin",
    "cylinder_direction": "Cylinder direction",
}


class EngineController:
    def __init__(self, settings: Optional[AppSettings] = None, on_change: Optional[Callable[[], None]] = None):
        self.settings = settings or AppSettings()
        self.params: EngineParams = self.settings.engine.copy()
        self.camera = Camera(self.settings.window_width, self.settings.window_height)
        self.camera_motion = CameraMotion()
        self.animator = CrankAnimator(self.params, self.settings.angle_speed)
        self.capture = PointerCapture(self.params, self.settings.handle_radius)
        self.commands = CommandStack(on_change=on_change)
        self.show_cylinder_guides = self.settings.show_cylinder_guides

        self.keys_down: Set[str] = set()
        self._pending_wheel = 0.0
        self.hovered: Optional[HandleKind] = None
        self.result: PistonPosition = solve_piston_position(self.params)

    # ---- frame ----
    def tick(self, frame_seconds: float) -> PistonPosition:
        delta = self.animator.step(frame_seconds)
        self.solve()
        wheel, self._pending_wheel = self._pending_wheel, 0.0
        self.camera_motion.update(self.camera, delta, self.keys_down, wheel)
        return self.result

    def solve(self) -> PistonPosition:
        res = solve_piston_position(self.params)
        if res.is_valid != self.result.is_valid:
            if res.is_valid:
                logger.info("Connecting rod reaches the cylinder again")
            else:
                logger.info("Connecting rod does not reach the cylinder (angle %.3f rad)", self.params.crank_angle)
        self.result = res
        return res

    def piston_travel(self) -> Optional[float]:
        if not self.result.is_valid:
            return None
        return cylinder_parameter(self.params, self.result.value)

    def piston_behind_origin(self) -> bool:
        t = self.piston_travel()
        return t is not None and t < 0.0

    # ---- input ----
    def key_down(self, key: str):
        self.keys_down.add(key.upper())

    def key_up(self, key: str):
        self.keys_down.discard(key.upper())

    def wheel(self, notches: float):
        self._pending_wheel += notches

    def mouse_press(self, display_point: Vec2) -> Optional[HandleKind]:
        if not self.show_cylinder_guides:
            return None
        handle = self.capture.press(self.camera.to_world(display_point))
        if handle is not None:
            self.camera_motion.stop()
        return handle

    def mouse_move(self, display_point: Vec2) -> bool:
        world = self.camera.to_world(display_point)
        self.hovered = self.capture.hovered(world) if self.show_cylinder_guides else None
        if self.capture.move(world):
            self.solve()
            return True
        return False

    def mouse_release(self) -> Optional[FinishedDrag]:
        drag = self.capture.release()
        if drag is not None and drag.changed:
            self.commands.push(
                ParameterChange(self.params, drag.before, drag.after, desc=f"Move {drag.handle.label.lower()}"),
                execute=False,
            )
        return drag

    # ---- edits ----
    def set_value(self, name: str, value):
        if name not in FIELD_LABELS:
            raise KeyError(name)
        if name == "crank_radius" and float(value) < 0.0:
            raise ValueError(f"Crank radius must not be negative, got {value}")
        if name == "rod_length" and float(value) <= 0.0:
            raise ValueError(f"Rod length must be positive, got {value}")
        if name in ("cylinder_origin", "cylinder_direction"):
            value = (float(value[0]), float(value[1]))
        else:
            value = float(value)

        before = self.params.copy()
        setattr(self.params, name, value)
        if same_editable(before, self.params):
            return
        self.commands.push(
            ParameterChange(self.params, before, self.params, desc=f"Set {FIELD_LABELS[name].lower()}"),
            execute=False,
        )
        self.solve()

    def set_component(self, name: str, index: int, value: float):
        """Change one coordinate of a vector field; the other keeps its exact value."""
        if name not in ("cylinder_origin", "cylinder_direction"):
            raise KeyError(name)
        vec = list(getattr(self.params, name))
        vec[index] = float(value)
        self.set_value(name, tuple(vec))

    def set_show_cylinder_guides(self, show: bool):
        self.show_cylinder_guides = bool(show)
        if not self.show_cylinder_guides:
            # A hidden handle cannot keep the pointer.
            self.mouse_release()
            self.hovered = None

    def undo(self):
        self.commands.undo()
        self.solve()

    def redo(self):
        self.commands.redo()
        self.solve()

    def reset_view(self):
        self.camera_motion.stop()
        self.camera.reset()

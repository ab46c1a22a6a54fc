# -*- coding: utf-8 -*-
"""Immediate-mode drawing of the mechanism in world coordinates."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF

from ..core.camera import Camera
from ..core.geometry import Vec2, normalize, rect_corners
from ..core.interaction import HandleKind, handle_position
from ..core.mechanism import EngineParams
from ..utils.constants import (
    AXES,
    AXES_EXTENT,
    AXES_TICK_SIZE,
    AXES_TICK_SPACING,
    BAR_WIDTH,
    BEARING_RADIUS,
    CONNECTING_ROD,
    CRANKSHAFT,
    GUIDE,
    GUIDE_ACTIVE,
    GUIDE_HOVER,
    PISTON,
    PISTON_LENGTH,
    PISTON_WIDTH,
)


def _pt(cam: Camera, v: Vec2) -> QPointF:
    x, y = cam.to_display(v)
    return QPointF(x, y)


def _line(p: QPainter, cam: Camera, a: Vec2, b: Vec2, color: QColor):
    p.setPen(QPen(color, 1))
    p.drawLine(_pt(cam, a), _pt(cam, b))


def draw_circle(p: QPainter, cam: Camera, center: Vec2, radius: float, color: QColor):
    r = cam.length_to_display(radius)
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(QBrush(color))
    p.drawEllipse(_pt(cam, center), r, r)


def draw_bar(p: QPainter, cam: Camera, start: Vec2, end: Vec2, width: float, color: QColor):
    if start == end:
        return
    poly = QPolygonF([_pt(cam, c) for c in rect_corners(start, end, width)])
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(QBrush(color))
    p.drawPolygon(poly)


def draw_coordinates(p: QPainter, cam: Camera):
    size = float(AXES_EXTENT)
    _line(p, cam, (-size, 0.0), (size, 0.0), AXES)
    _line(p, cam, (0.0, -size), (0.0, size), AXES)
    for i in range(-AXES_EXTENT, AXES_EXTENT, AXES_TICK_SPACING):
        _line(p, cam, (i, -AXES_TICK_SIZE), (i, AXES_TICK_SIZE), AXES)
        _line(p, cam, (-AXES_TICK_SIZE, i), (AXES_TICK_SIZE, i), AXES)


def draw_crankshaft(p: QPainter, cam: Camera, params: EngineParams):
    origin = (0.0, 0.0)
    crank = params.crankpin()
    draw_circle(p, cam, origin, BEARING_RADIUS, CRANKSHAFT)
    draw_bar(p, cam, origin, crank, BAR_WIDTH, CRANKSHAFT)
    draw_circle(p, cam, crank, BEARING_RADIUS, CRANKSHAFT)


def draw_connecting_rod(p: QPainter, cam: Camera, params: EngineParams, piston: Vec2):
    crank = params.crankpin()
    draw_circle(p, cam, crank, BEARING_RADIUS, CONNECTING_ROD)
    draw_bar(p, cam, crank, piston, BAR_WIDTH, CONNECTING_ROD)
    draw_circle(p, cam, piston, BEARING_RADIUS, CONNECTING_ROD)


def draw_piston(p: QPainter, cam: Camera, params: EngineParams, piston: Vec2):
    dx, dy = params.axis()
    end = (piston[0] + dx * PISTON_LENGTH, piston[1] + dy * PISTON_LENGTH)
    draw_bar(p, cam, piston, end, PISTON_WIDTH, PISTON)


def _guide_color(handle: HandleKind, active: Optional[HandleKind], hovered: Optional[HandleKind]) -> QColor:
    if active is handle:
        return GUIDE_ACTIVE
    if active is None and hovered is handle:
        return GUIDE_HOVER
    return GUIDE


def draw_cylinder_guides(
    p: QPainter,
    cam: Camera,
    params: EngineParams,
    radius: float,
    active: Optional[HandleKind] = None,
    hovered: Optional[HandleKind] = None,
):
    ox, oy = params.cylinder_origin
    dx, dy = normalize(*params.cylinder_direction)
    # Long enough to leave the viewport at any zoom level.
    reach = cam.length_to_world(2 * max(cam.width, cam.height))
    line_color = GUIDE_ACTIVE if active is not None else GUIDE
    if dx or dy:
        _line(p, cam, (ox - dx * reach, oy - dy * reach), (ox + dx * reach, oy + dy * reach), line_color)

    for handle in (HandleKind.CYLINDER_ORIGIN, HandleKind.CYLINDER_DIRECTION):
        center = handle_position(params, handle)
        draw_circle(p, cam, center, radius, _guide_color(handle, active, hovered))
        draw_circle(p, cam, center, radius * 0.8, QColor(Qt.GlobalColor.white))

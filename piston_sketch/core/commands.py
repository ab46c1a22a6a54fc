# -*- coding: utf-8 -*-
"""Undo/Redo of mechanism edits.

Every user edit (dragging a cylinder handle, changing a value in the panel)
is recorded as a :class:`ParameterChange` holding the editable fields before
and after. The crank angle keeps running underneath and is never restored.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .mechanism import EngineParams

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("crank_radius", "rod_length", "cylinder_origin", "cylinder_direction")


def copy_editable(src: EngineParams, dst: EngineParams):
    for name in EDITABLE_FIELDS:
        setattr(dst, name, getattr(src, name))


def same_editable(a: EngineParams, b: EngineParams) -> bool:
    return all(getattr(a, name) == getattr(b, name) for name in EDITABLE_FIELDS)


class ParameterChange:
    def __init__(self, target: EngineParams, before: EngineParams, after: EngineParams, desc: str = ""):
        self.target = target
        self.before = before.copy()
        self.after = after.copy()
        self.desc = desc or "Edit mechanism"

    def do(self):
        copy_editable(self.after, self.target)

    def undo(self):
        copy_editable(self.before, self.target)


class CommandStack:
    """Linear edit history with a cursor.

    Entries before ``_index`` are applied; entries from ``_index`` on can be
    redone. Recording a new edit drops everything after the cursor.
    """

    def __init__(self, on_change: Optional[Callable[[], None]] = None):
        self._history: List[ParameterChange] = []
        self._index = 0
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._history)

    def _notify(self):
        if self._on_change is not None:
            self._on_change()

    def push(self, cmd: ParameterChange, execute: bool = True):
        if execute:
            cmd.do()
        dropped = len(self._history) - self._index
        del self._history[self._index:]
        self._history.append(cmd)
        self._index = len(self._history)
        logger.debug("Recorded edit: %s (dropped %d redo entries)", cmd.desc, dropped)
        self._notify()

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._history)

    def undo(self):
        if not self.can_undo():
            return
        self._index -= 1
        cmd = self._history[self._index]
        cmd.undo()
        logger.info("Undo: %s", cmd.desc)
        self._notify()

    def redo(self):
        if not self.can_redo():
            return
        cmd = self._history[self._index]
        cmd.do()
        self._index += 1
        logger.info("Redo: %s", cmd.desc)
        self._notify()

    def undo_text(self) -> str:
        return self._history[self._index - 1].desc if self.can_undo() else ""

    def redo_text(self) -> str:
        return self._history[self._index].desc if self.can_redo() else ""

    def clear(self):
        self._history.clear()
        self._index = 0
        self._notify()

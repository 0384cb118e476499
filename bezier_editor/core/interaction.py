import logging
from typing import Optional

from .curve import BezierCurve, COUPLED_HANDLE
from .math import Point, distance

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Pointer state machine for dragging control points.

    A press selects the point under the cursor, drags move it, a release drops
    it. When several points are within the pick radius the last one in index
    order wins. Dragging an anchor carries its handle along; handles move alone.
    """

    def __init__(self, curve: BezierCurve, pick_radius: float):
        self.curve = curve
        self.pick_radius = pick_radius
        self._selected: Optional[int] = None

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def _index_at(self, pos: Point) -> Optional[int]:
        found = None
        for i, p in enumerate(self.curve.points):
            if distance(p, pos) < self.pick_radius:
                found = i
        return found

    def hovered(self, pos: Point) -> Optional[int]:
        return self._index_at(pos)

    # ---- pointer events -----------------------------------------------------
    def on_press(self, pos: Point) -> Optional[int]:
        idx = self._index_at(pos)
        if idx is not None:
            self._selected = idx
            logger.debug("selected point %d at %s", idx, self.curve.point(idx))
        return self._selected

    def on_drag(self, delta: Point) -> bool:
        if self._selected is None:
            return False
        self.curve.move_point(self._selected, delta)
        coupled = COUPLED_HANDLE.get(self._selected)
        if coupled is not None:
            self.curve.move_point(coupled, delta)
        return True

    def on_release(self) -> None:
        if self._selected is not None:
            logger.debug("released point %d at %s", self._selected, self.curve.point(self._selected))
        self._selected = None

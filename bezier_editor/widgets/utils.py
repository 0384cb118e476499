from dataclasses import dataclass

from PySide6 import QtCore

from bezier_editor.core import Point


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


@dataclass(frozen=True)
class ViewTransform:
    """
    Model <-> screen mapping for a widget of the given pixel size.
    Model origin is the widget centre, y points up, and the height spans [-1, 1].
    """
    width: float
    height: float

    @property
    def scale(self) -> float:
        return max(self.height, 1.0) / 2.0

    def to_screen(self, p: Point) -> Point:
        return (self.width / 2.0 + p[0] * self.scale,
                self.height / 2.0 - p[1] * self.scale)

    def to_model(self, p: Point) -> Point:
        return ((p[0] - self.width / 2.0) / self.scale,
                (self.height / 2.0 - p[1]) / self.scale)

    def delta_to_model(self, d: Point) -> Point:
        return (d[0] / self.scale, -d[1] / self.scale)

    def length_to_screen(self, length: float) -> float:
        return length * self.scale

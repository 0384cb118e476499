import logging
from typing import Optional, override

from PySide6 import QtCore, QtGui, QtWidgets

from bezier_editor.config import EditorConfig, GUIDE_ALPHA
from bezier_editor.core import ANCHORS, BezierCurve, InteractionController, MonotonicityReport
from bezier_editor.widgets.utils import ViewTransform, point_to_qpoint, qpoint_to_point

logger = logging.getLogger(__name__)


def _qcolor(rgb, alpha: float = 1.0) -> QtGui.QColor:
    c = QtGui.QColor(*rgb)
    c.setAlphaF(alpha)
    return c


class CurveCanvasWidget(QtWidgets.QWidget):
    """
    View/controller for a single BezierCurve.
    Paints the validity background, the control points and the curve, and
    forwards mouse events (in model coordinates) to an InteractionController.
    """

    curveChanged = QtCore.Signal()           # emitted whenever a control point moves or the curve resets
    reportChanged = QtCore.Signal(object)    # MonotonicityReport of the current curve

    def __init__(self, curve: BezierCurve, config: EditorConfig | None = None, parent=None):
        super().__init__(parent)
        self._config = config or EditorConfig()
        self._curve = curve
        self._controller = InteractionController(curve, pick_radius=self._config.pick_radius)
        self._last_pos: Optional[QtCore.QPointF] = None
        self._last_valid: Optional[bool] = None

        self.setMouseTracking(True)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)

        self.curveChanged.connect(self.refresh)

    # ---- public API ---------------------------------------------------------
    @property
    def curve(self) -> BezierCurve:
        return self._curve

    @property
    def segments(self) -> int:
        return self._config.segments

    @property
    def controller(self) -> InteractionController:
        return self._controller

    def view(self) -> ViewTransform:
        return ViewTransform(float(self.width()), float(self.height()))

    def reset_curve(self) -> None:
        self._controller.on_release()
        self._curve.reset()
        logger.info("curve reset to its initial points")
        self.curveChanged.emit()

    def set_segments(self, segments: int) -> None:
        if segments < 1:
            raise ValueError(f"segments must be >= 1, got {segments}")
        self._config.segments = segments
        self.update()

    @QtCore.Slot()
    def refresh(self) -> None:
        report = self._curve.classify_monotonic()
        self._log_transition(report)
        self.reportChanged.emit(report)
        self.update()

    def _log_transition(self, report: MonotonicityReport) -> None:
        if report.valid != self._last_valid:
            logger.info("curve is %s (%s)", "a valid function" if report.valid else "not a function",
                        report.branch.value)
            self._last_valid = report.valid

    # ---- mouse events -------------------------------------------------------
    @override
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        pos = QtCore.QPointF(e.position())
        self._last_pos = pos
        self._controller.on_press(self.view().to_model(qpoint_to_point(pos)))

    @override
    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        pos = QtCore.QPointF(e.position())
        view = self.view()
        if self._controller.selected is None:
            idx = self._controller.hovered(view.to_model(qpoint_to_point(pos)))
            self.setCursor(
                QtCore.Qt.CursorShape.SizeAllCursor if idx is not None
                else QtCore.Qt.CursorShape.ArrowCursor
            )
            return
        if self._last_pos is None:
            self._last_pos = pos
            return
        delta = pos - self._last_pos
        self._last_pos = pos
        if self._controller.on_drag(view.delta_to_model(qpoint_to_point(delta))):
            self.curveChanged.emit()

    @override
    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        self._last_pos = None
        self._controller.on_release()

    # ---- painting -----------------------------------------------------------
    def _draw_points(self, painter: QtGui.QPainter, view: ViewTransform):
        colors = self._config.colors
        r = view.length_to_screen(self._config.pick_radius)
        painter.setPen(QtGui.QPen(_qcolor(colors["point"]), 2.0))
        anchor_fill = _qcolor(colors["point"], 0.35)
        for i, pt in enumerate(self._curve.points):
            # anchors filled, handles hollow
            painter.setBrush(anchor_fill if i in ANCHORS else QtCore.Qt.BrushStyle.NoBrush)
            painter.drawEllipse(point_to_qpoint(view.to_screen(pt)), r, r)

        painter.setPen(QtGui.QPen(_qcolor(colors["point"], GUIDE_ALPHA), 2.0))
        for a, b in self._curve.guide_lines():
            painter.drawLine(point_to_qpoint(view.to_screen(a)), point_to_qpoint(view.to_screen(b)))

    def _draw_curve(self, painter: QtGui.QPainter, view: ViewTransform):
        colors = self._config.colors
        up = QtGui.QPen(_qcolor(colors["increasing"]), 2.0)
        down = QtGui.QPen(_qcolor(colors["decreasing"]), 2.0)
        for start, end, increasing in self._curve.colored_segments(self._config.segments):
            painter.setPen(up if increasing else down)
            painter.drawLine(point_to_qpoint(view.to_screen(start)), point_to_qpoint(view.to_screen(end)))

    @override
    def paintEvent(self, _):
        view = self.view()
        valid = self._curve.is_valid_function()

        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), _qcolor(self._config.colors["valid" if valid else "invalid"]))
        self._draw_points(p, view)
        self._draw_curve(p, view)
        p.end()

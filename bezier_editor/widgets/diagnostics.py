from PySide6 import QtCore, QtWidgets

from bezier_editor.core import Branch, MonotonicityReport


def format_report(report: MonotonicityReport) -> list[str]:
    """Human-readable lines describing which branch of the classification ran."""
    c = report.coefficients
    lines = [f"a: {c.a:.3f}  b: {c.b:.3f}  c: {c.c:.3f}"]
    match report.branch:
        case Branch.DEGENERATE:
            lines.append("a is zero: linear derivative, not handled")
        case Branch.NO_REAL_ROOTS:
            lines.append("Negative delta")
        case Branch.TWO_ROOTS_UPWARD | Branch.TWO_ROOTS_DOWNWARD:
            root1, root2 = report.roots
            lines.append("Positive delta")
            lines.append(f"Root1: {root1:.3f}")
            lines.append(f"Root2: {root2:.3f}")
            lines.append("Positive a" if report.branch is Branch.TWO_ROOTS_UPWARD else "Negative a")
        case Branch.DOUBLE_ROOT:
            lines.append("Zero delta: double root, assumed valid")
    lines.append("Valid function" if report.valid else "Not a function")
    return lines


class DiagnosticsPanel(QtWidgets.QFrame):
    """
    Side panel listing the classification trace of the current curve.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("DiagnosticsPanel")
        self.setMinimumWidth(180)

        self._label = QtWidgets.QLabel(self)
        self._label.setAlignment(QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignLeft)
        self._label.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)

        lay = QtWidgets.QVBoxLayout(self)
        lay.addWidget(QtWidgets.QLabel("<b>Classification</b>", self))
        lay.addWidget(self._label)
        lay.addStretch(1)

    @property
    def text(self) -> str:
        return self._label.text()

    @QtCore.Slot(object)
    def show_report(self, report: MonotonicityReport) -> None:
        self._label.setText("\n".join(format_report(report)))

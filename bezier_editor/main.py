import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from bezier_editor.config import EditorConfig, PICK_RADIUS, CURVE_SEGMENTS, WINDOW_TITLE
from bezier_editor.core import BezierCurve
from bezier_editor.logging_config import setup_logging
from bezier_editor.menu.bar import Bar
from bezier_editor.widgets import CurveCanvasWidget, DiagnosticsPanel

logger = logging.getLogger(__name__)


class MyWidget(QtWidgets.QWidget):
    def __init__(self, config: EditorConfig):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.main_layout = QtWidgets.QHBoxLayout()
        self.layout = QtWidgets.QVBoxLayout(self)

        self.curve = BezierCurve(config.initial_points)
        self.canvas = CurveCanvasWidget(self.curve, config, parent=self)
        self.diagnostics = DiagnosticsPanel(self)
        self.diagnostics.setVisible(config.show_diagnostics)
        self.top_bar = Bar(self.canvas, self.diagnostics)

        self.main_layout.addWidget(self.canvas, stretch=1)
        self.main_layout.addWidget(self.diagnostics, alignment=QtCore.Qt.AlignmentFlag.AlignRight)
        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addLayout(self.main_layout)

        self.canvas.reportChanged.connect(self.diagnostics.show_report)
        self.canvas.refresh()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drag a cubic Bézier and see whether it is a function of x.")
    parser.add_argument("--segments", type=int, default=CURVE_SEGMENTS,
                        help="number of line pieces used to draw the curve")
    parser.add_argument("--pick-radius", type=float, default=PICK_RADIUS,
                        help="grab distance around control points, in model units")
    parser.add_argument("--no-diagnostics", action="store_true",
                        help="start with the classification panel hidden")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    config = EditorConfig(
        pick_radius=args.pick_radius,
        segments=args.segments,
        show_diagnostics=not args.no_diagnostics,
    )
    logger.info("starting editor (segments=%d, pick radius=%.3f)", config.segments, config.pick_radius)

    app = QtWidgets.QApplication(sys.argv[:1])

    widget = MyWidget(config)
    widget.resize(*config.window_size)
    widget.showMaximized()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

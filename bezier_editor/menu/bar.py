from PySide6 import QtCore, QtWidgets

from bezier_editor.widgets import CurveCanvasWidget, DiagnosticsPanel


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CurveCanvasWidget, diagnostics: DiagnosticsPanel):
        super().__init__()

        self.canvas = canvas
        self.diagnostics = diagnostics
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.reset_button = QtWidgets.QPushButton("reset")
        self.diagnostics_toggle = QtWidgets.QCheckBox("diagnostics")
        self.diagnostics_toggle.setChecked(not diagnostics.isHidden())
        self.segments_box = QtWidgets.QSpinBox()
        self.segments_box.setRange(1, 2000)
        self.segments_box.setPrefix("segments: ")
        self.segments_box.setValue(canvas.segments)

        self.addWidget(self.reset_button)
        self.addWidget(self.diagnostics_toggle)
        self.addWidget(self.segments_box)

        self.reset_button.clicked.connect(self._reset_curve)
        self.diagnostics_toggle.toggled.connect(self.diagnostics.setVisible)
        self.segments_box.valueChanged.connect(self.canvas.set_segments)

    @QtCore.Slot()
    def _reset_curve(self):
        self.canvas.reset_curve()

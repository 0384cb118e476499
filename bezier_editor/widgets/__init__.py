from .canvas import CurveCanvasWidget
from .diagnostics import DiagnosticsPanel, format_report
from .utils import ViewTransform

__all__ = [
    "CurveCanvasWidget",
    "DiagnosticsPanel",
    "ViewTransform",
    "format_report",
]

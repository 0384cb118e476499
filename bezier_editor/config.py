"""
Editor constants and the runtime configuration built from them.

Coordinates are model units: the vertical extent of the canvas spans [-1, 1]
and the horizontal extent follows the aspect ratio.
"""
from dataclasses import dataclass, field

from bezier_editor.core import Point

WINDOW_TITLE = "Bezier Function Editor"
WINDOW_SIZE = (1280, 720)

# How far (model units) a press may land from a control point to grab it.
# Also the drawn radius of the control points.
PICK_RADIUS = 0.05

# Polyline pieces used to draw the curve over t in [0, 1].
CURVE_SEGMENTS = 150

INITIAL_POINTS: tuple[Point, ...] = (
    (-0.5, -0.5),
    (-0.2, 0.5),
    (0.2, 0.5),
    (0.5, -0.5),
)

Rgb = tuple[int, int, int]

VALID_BACKGROUND: Rgb = (0, 191, 255)      # deep sky blue
INVALID_BACKGROUND: Rgb = (134, 1, 17)     # red devil
INCREASING_STROKE: Rgb = (0, 165, 80)      # green pigment
DECREASING_STROKE: Rgb = (199, 21, 133)    # red violet
POINT_STROKE: Rgb = (255, 255, 255)
GUIDE_ALPHA = 0.1


@dataclass
class EditorConfig:
    pick_radius: float = PICK_RADIUS
    segments: int = CURVE_SEGMENTS
    initial_points: tuple[Point, ...] = INITIAL_POINTS
    window_size: tuple[int, int] = WINDOW_SIZE
    show_diagnostics: bool = True
    colors: dict[str, Rgb] = field(default_factory=lambda: {
        "valid": VALID_BACKGROUND,
        "invalid": INVALID_BACKGROUND,
        "increasing": INCREASING_STROKE,
        "decreasing": DECREASING_STROKE,
        "point": POINT_STROKE,
    })

    def __post_init__(self):
        if self.segments < 1:
            raise ValueError(f"segments must be >= 1, got {self.segments}")
        if self.pick_radius <= 0:
            raise ValueError(f"pick radius must be positive, got {self.pick_radius}")
        if len(self.initial_points) != 4:
            raise ValueError(f"expected 4 initial points, got {len(self.initial_points)}")

from typing import Sequence

from .math import Point, as_point, cubic_eval, sample_cubic, translate
from .monotonicity import DerivativeCoefficients, MonotonicityReport, classify_monotonic, derivative_coefficients

ANCHORS = (0, 3)
HANDLES = (1, 2)

# anchor index -> the handle that follows it when dragged
COUPLED_HANDLE = {0: 1, 3: 2}


class BezierCurve:
    """
    A single cubic Bézier curve: exactly four control points, mutated in place.
    Coordinates are held at single precision.
      - 0, 3: anchors, the curve passes through them
      - 1, 2: handles, shape the curvature
    """

    def __init__(self, points: Sequence[Point]):
        self._points: list[Point] = self._checked(points)
        self._initial: tuple[Point, ...] = tuple(self._points)

    @staticmethod
    def _checked(points: Sequence[Point]) -> list[Point]:
        pts = [as_point(p) for p in points]
        if len(pts) != 4:
            raise ValueError(f"a cubic Bézier needs exactly 4 points, got {len(pts)}")
        return pts

    # ---- point access -------------------------------------------------------
    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def point(self, index: int) -> Point:
        self._check_index(index)
        return self._points[index]

    def set_point(self, index: int, p: Point) -> None:
        self._check_index(index)
        self._points[index] = as_point(p)

    def move_point(self, index: int, delta: Point) -> None:
        self._check_index(index)
        self._points[index] = translate(self._points[index], delta)

    def reset(self) -> None:
        self._points = list(self._initial)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < 4:
            raise IndexError(f"control point index out of range: {index}")

    def __getitem__(self, index: int) -> Point:
        return self.point(index)

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(tuple(self._points))

    # ---- evaluation ---------------------------------------------------------
    def evaluate(self, t: float) -> Point:
        """Point at parameter t. t is not clamped to [0, 1]."""
        return cubic_eval(*self._points, t)

    def sample(self, segments: int = 150) -> list[Point]:
        return sample_cubic(*self._points, segments=segments)

    def derivative_coefficients(self) -> DerivativeCoefficients:
        return derivative_coefficients(*(p[0] for p in self._points))

    def classify_monotonic(self) -> MonotonicityReport:
        return classify_monotonic(self._points)

    def is_valid_function(self) -> bool:
        return self.classify_monotonic().valid

    # ---- drawing helpers ----------------------------------------------------
    def colored_segments(self, segments: int = 150) -> list[tuple[Point, Point, bool]]:
        """
        Polyline pieces (start, end, increasing) where 'increasing' is the sign
        of x'(t) at the end of the piece.
        """
        coeffs = self.derivative_coefficients()
        samples = self.sample(segments)
        out: list[tuple[Point, Point, bool]] = []
        for i in range(1, len(samples)):
            t = i / segments
            out.append((samples[i - 1], samples[i], coeffs.at(t) >= 0))
        return out

    def guide_lines(self) -> tuple[tuple[Point, Point], tuple[Point, Point]]:
        p = self._points
        return (p[0], p[1]), (p[3], p[2])

    def __repr__(self) -> str:
        return f"BezierCurve({self._points!r})"

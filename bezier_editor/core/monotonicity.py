"""
Monotonicity of the horizontal component of a cubic Bézier curve.

x(t) is a cubic in t, so x'(t) = a*t^2 + b*t + c. The curve is a valid
function y = f(x) when x'(t) >= 0 for every t in [0, 1]. Everything here is
computed in single precision to stay bit-compatible with the float32 editor
model; results are returned as a structured report and never as text.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from .math import Point

logger = logging.getLogger(__name__)

_f32 = np.float32


class Branch(Enum):
    DEGENERATE = "degenerate"                  # a == 0
    NO_REAL_ROOTS = "no_real_roots"            # delta < 0
    TWO_ROOTS_UPWARD = "two_roots_upward"      # delta > 0, a > 0
    TWO_ROOTS_DOWNWARD = "two_roots_downward"  # delta > 0, a < 0
    DOUBLE_ROOT = "double_root"                # delta == 0


@dataclass(frozen=True)
class DerivativeCoefficients:
    a: float
    b: float
    c: float

    @property
    def discriminant(self) -> float:
        a, b, c = _f32(self.a), _f32(self.b), _f32(self.c)
        return float(b * b - _f32(4) * a * c)

    def at(self, t: float) -> float:
        a, b, c, t = _f32(self.a), _f32(self.b), _f32(self.c), _f32(t)
        return float(a * t * t + b * t + c)


@dataclass(frozen=True)
class MonotonicityReport:
    """
    Outcome of classify_monotonic().
      - valid: x(t) is considered non-decreasing on [0, 1]
      - branch: which case of the sign analysis decided it
      - roots: (root1, root2) with root1 <= root2, only for the two-root branches
    """
    valid: bool
    branch: Branch
    coefficients: DerivativeCoefficients
    discriminant: float | None = None
    roots: tuple[float, float] | None = None


def derivative_coefficients(x0: float, x1: float, x2: float, x3: float) -> DerivativeCoefficients:
    x0, x1, x2, x3 = _f32(x0), _f32(x1), _f32(x2), _f32(x3)
    a = _f32(-3) * x0 + _f32(9) * x1 - _f32(9) * x2 + _f32(3) * x3
    b = _f32(6) * x0 - _f32(12) * x1 + _f32(6) * x2
    c = _f32(-3) * x0 + _f32(3) * x1
    return DerivativeCoefficients(float(a), float(b), float(c))


def classify_monotonic(points: Sequence[Point]) -> MonotonicityReport:
    if len(points) != 4:
        raise ValueError(f"a cubic Bézier needs exactly 4 points, got {len(points)}")
    coeffs = derivative_coefficients(*(p[0] for p in points))
    a, b = _f32(coeffs.a), _f32(coeffs.b)

    # A linear derivative can still be non-negative on [0, 1]; not handled yet.
    if a == 0:
        logger.debug("degenerate derivative (a == 0): reported invalid")
        return MonotonicityReport(False, Branch.DEGENERATE, coeffs)

    delta = _f32(coeffs.discriminant)
    if delta < 0:
        logger.debug("negative delta %.4f, a=%.4f", delta, a)
        return MonotonicityReport(bool(a > 0), Branch.NO_REAL_ROOTS, coeffs, float(delta))

    if delta > 0:
        sign = _f32(1) if a > 0 else _f32(-1)
        sqrt_delta = np.sqrt(delta)
        root1 = (-b - sign * sqrt_delta) / (_f32(2) * a)
        root2 = (-b + sign * sqrt_delta) / (_f32(2) * a)
        roots = (float(root1), float(root2))
        logger.debug("positive delta %.4f, roots %.3f %.3f", delta, root1, root2)
        if a > 0:
            # negative strictly between the roots
            valid = bool(root2 <= 0 or root1 >= 1)
            return MonotonicityReport(valid, Branch.TWO_ROOTS_UPWARD, coeffs, float(delta), roots)
        # negative outside the roots
        valid = bool(root1 <= 0 and root2 >= 1)
        return MonotonicityReport(valid, Branch.TWO_ROOTS_DOWNWARD, coeffs, float(delta), roots)

    # Double root: accepted without checking the sign of a.
    logger.debug("zero delta: reported valid")
    return MonotonicityReport(True, Branch.DOUBLE_ROOT, coeffs, 0.0)

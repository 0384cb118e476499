from .math import Point, distance
from .monotonicity import Branch, DerivativeCoefficients, MonotonicityReport, classify_monotonic
from .curve import BezierCurve, ANCHORS, HANDLES
from .interaction import InteractionController

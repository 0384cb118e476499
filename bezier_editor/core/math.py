import math

import numpy as np

Point = tuple[float, float]

_f32 = np.float32


def as_point(p) -> Point:
    """Round both coordinates to single precision."""
    return (float(_f32(p[0])), float(_f32(p[1])))


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def translate(p: Point, delta: Point) -> Point:
    # float32 addition, so repeated drags accumulate the same rounding as the coordinates
    return (float(_f32(p[0]) + _f32(delta[0])), float(_f32(p[1]) + _f32(delta[1])))


def cubic_eval(p0: Point, c1: Point, c2: Point, p3: Point, t: float) -> Point:
    t = _f32(t)
    u = _f32(1) - t
    w0 = u * u * u
    w1 = _f32(3) * t * u * u
    w2 = _f32(3) * t * t * u
    w3 = t * t * t
    x = w0 * _f32(p0[0]) + w1 * _f32(c1[0]) + w2 * _f32(c2[0]) + w3 * _f32(p3[0])
    y = w0 * _f32(p0[1]) + w1 * _f32(c1[1]) + w2 * _f32(c2[1]) + w3 * _f32(p3[1])
    return (float(x), float(y))


def sample_cubic(p0: Point, c1: Point, c2: Point, p3: Point, segments: int = 150) -> list[Point]:
    """
    Sample 'segments + 1' points at t = i / segments, endpoints included.
    The first and last samples are p0 and p3 exactly.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")
    return [cubic_eval(p0, c1, c2, p3, i / segments) for i in range(segments + 1)]

from __future__ import annotations

from typing import Literal, Sequence

from .svg import fmt_number


Point = tuple[float, float]
CurveKind = Literal["linear", "monotone_x"]


def line_path(points: Sequence[Point], curve: CurveKind = "linear") -> str:
    """SVG path data through `points`; empty string when there is nothing to draw."""
    if not points:
        return ""
    x0, y0 = points[0]
    if len(points) == 1:
        return f"M{_pt(x0, y0)}Z"
    return f"M{_pt(x0, y0)}" + "".join(_segments(points, curve))


def area_path(top: Sequence[Point], bottom: Sequence[Point], curve: CurveKind = "linear") -> str:
    """Closed path running along `top` left to right and back along `bottom`."""
    if len(top) != len(bottom):
        raise ValueError(f"area edges must have equal length: {len(top)} != {len(bottom)}")
    if not top:
        return ""
    back = list(reversed(bottom))
    bx, by = back[0]
    return line_path(top, curve).rstrip("Z") + f"L{_pt(bx, by)}" + "".join(_segments(back, curve)) + "Z"


def baseline_area_path(points: Sequence[Point], baseline_y: float, curve: CurveKind = "linear") -> str:
    return area_path(points, [(x, baseline_y) for x, _ in points], curve)


def _segments(points: Sequence[Point], curve: CurveKind) -> list[str]:
    if curve == "linear" or len(points) < 3:
        return [f"L{_pt(x, y)}" for x, y in points[1:]]
    if curve != "monotone_x":
        raise ValueError(f"unsupported curve: {curve}")
    tangents = _monotone_tangents(points)
    out: list[str] = []
    for i in range(len(points) - 1):
        (x0, y0), (x1, y1) = points[i], points[i + 1]
        dx = (x1 - x0) / 3.0
        out.append(
            "C"
            + _pt(x0 + dx, y0 + dx * tangents[i])
            + ","
            + _pt(x1 - dx, y1 - dx * tangents[i + 1])
            + ","
            + _pt(x1, y1)
        )
    return out


def _monotone_tangents(points: Sequence[Point]) -> list[float]:
    # Fritsch-Carlson tangents: the curve never overshoots between samples.
    n = len(points)
    tangents = [0.0] * n
    for i in range(1, n - 1):
        tangents[i] = _interior_slope(points[i - 1], points[i], points[i + 1])
    tangents[0] = _end_slope(points[0], points[1], tangents[1])
    tangents[-1] = _end_slope(points[-2], points[-1], tangents[-2])
    return tangents


def _interior_slope(p0: Point, p1: Point, p2: Point) -> float:
    h0 = p1[0] - p0[0]
    h1 = p2[0] - p1[0]
    if h0 == 0 or h1 == 0 or h0 + h1 == 0:
        return 0.0
    s0 = (p1[1] - p0[1]) / h0
    s1 = (p2[1] - p1[1]) / h1
    p = (s0 * h1 + s1 * h0) / (h0 + h1)
    return (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))


def _end_slope(p0: Point, p1: Point, tangent: float) -> float:
    h = p1[0] - p0[0]
    if h == 0:
        return tangent
    return (3.0 * (p1[1] - p0[1]) / h - tangent) / 2.0


def _sign(value: float) -> float:
    return -1.0 if value < 0 else 1.0


def _pt(x: float, y: float) -> str:
    return f"{fmt_number(x)},{fmt_number(y)}"

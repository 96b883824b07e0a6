from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import numpy as np

from .geometry import Domain


@dataclass(frozen=True)
class RegressionLine:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * float(x) + self.intercept

    def segment(self, x_domain: Domain) -> tuple[tuple[float, float], tuple[float, float]]:
        x0, x1 = float(x_domain[0]), float(x_domain[1])
        return ((x0, self.predict(x0)), (x1, self.predict(x1)))


def fit_trend(points: Iterable[Any]) -> RegressionLine:
    """Ordinary least-squares fit of `y = slope * x + intercept`.

    Points may be `(x, y)` pairs, `{"x": ..., "y": ...}` mappings, or objects
    exposing `x` and `y` attributes.
    When every x is equal (including a single point) the denominator vanishes;
    the result is then a flat line through the mean of y rather than an error.
    An empty input yields slope 0 and intercept 0.
    """

    xs, ys = _coerce_points(points)
    n = xs.size
    if n == 0:
        return RegressionLine(slope=0.0, intercept=0.0)
    sum_x = float(np.sum(xs))
    sum_y = float(np.sum(ys))
    sum_xy = float(np.sum(xs * ys))
    sum_xx = float(np.sum(xs * xs))
    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return RegressionLine(slope=0.0, intercept=sum_y / n)
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return RegressionLine(slope=slope, intercept=intercept)


def _coerce_points(points: Iterable[Any]) -> tuple[np.ndarray, np.ndarray]:
    xs: list[float] = []
    ys: list[float] = []
    for point in points:
        if isinstance(point, Mapping):
            xs.append(float(point["x"]))
            ys.append(float(point["y"]))
        elif hasattr(point, "x") and hasattr(point, "y"):
            xs.append(float(point.x))
            ys.append(float(point.y))
        else:
            x, y = point
            xs.append(float(x))
            ys.append(float(y))
    return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)

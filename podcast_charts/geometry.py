from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


Domain = tuple[float, float]
PixelRange = tuple[float, float]


@dataclass(frozen=True)
class Margin:
    top: float = 24.0
    right: float = 24.0
    bottom: float = 42.0
    left: float = 60.0


@dataclass(frozen=True)
class ViewportGeometry:
    """Chart size and margins in pixels; the margins frame the plotting rectangle."""

    width: float
    height: float
    margin: Margin = Margin()

    @property
    def plot_left(self) -> float:
        return float(self.margin.left)

    @property
    def plot_right(self) -> float:
        return float(self.width - self.margin.right)

    @property
    def plot_top(self) -> float:
        return float(self.margin.top)

    @property
    def plot_bottom(self) -> float:
        return float(self.height - self.margin.bottom)

    @property
    def plot_width(self) -> float:
        return self.plot_right - self.plot_left

    @property
    def plot_height(self) -> float:
        return self.plot_bottom - self.plot_top

    def x_range(self) -> PixelRange:
        return (self.plot_left, self.plot_right)

    def y_range(self) -> PixelRange:
        # SVG y grows downward, so the data minimum sits at the bottom edge.
        return (self.plot_bottom, self.plot_top)

    def contains(self, x: float, y: float) -> bool:
        return self.plot_left <= x <= self.plot_right and self.plot_top <= y <= self.plot_bottom

    def require_plot_area(self) -> "ViewportGeometry":
        if self.plot_width <= 0:
            raise ConfigurationError(
                f"plotting width must be > 0 (width={self.width}, margin.left={self.margin.left}, "
                f"margin.right={self.margin.right})"
            )
        if self.plot_height <= 0:
            raise ConfigurationError(
                f"plotting height must be > 0 (height={self.height}, margin.top={self.margin.top}, "
                f"margin.bottom={self.margin.bottom})"
            )
        return self


def normalize_domain(domain: tuple[float, float]) -> Domain:
    lo, hi = float(domain[0]), float(domain[1])
    if lo > hi:
        lo, hi = hi, lo
    return (lo, hi)

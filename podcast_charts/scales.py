from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .geometry import Domain, PixelRange


def to_pixel(domain: Domain, range_px: PixelRange, value: float) -> float:
    d0, d1 = float(domain[0]), float(domain[1])
    r0, r1 = float(range_px[0]), float(range_px[1])
    if d0 == d1:
        return (r0 + r1) * 0.5
    return r0 + (float(value) - d0) * (r1 - r0) / (d1 - d0)


def to_value(domain: Domain, range_px: PixelRange, pixel: float) -> float:
    d0, d1 = float(domain[0]), float(domain[1])
    r0, r1 = float(range_px[0]), float(range_px[1])
    if d0 == d1 or r0 == r1:
        return d0
    return d0 + (float(pixel) - r0) * (d1 - d0) / (r1 - r0)


def tick_values(domain: Domain, approx_count: int) -> list[float]:
    if approx_count <= 0:
        raise ValueError("approx_count must be > 0")
    vmin = float(min(domain))
    vmax = float(max(domain))
    if not (np.isfinite(vmin) and np.isfinite(vmax)):
        return []
    if vmin == vmax:
        return [vmin]

    step = _nice_number((vmax - vmin) / float(approx_count))
    start = int(np.ceil(vmin / step - 1e-9))
    stop = int(np.floor(vmax / step + 1e-9))
    ticks = np.arange(start, stop + 1, dtype=np.float64) * step
    # Normalize floating-point drift so values like 0.30000000000000004 print cleanly.
    decimals = max(0, int(-np.floor(np.log10(step))) + 1)
    ticks = np.round(ticks, decimals)
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return [float(v) for v in ticks]


@dataclass(frozen=True)
class LinearScale:
    domain: Domain
    range: PixelRange

    def __call__(self, value: float) -> float:
        return to_pixel(self.domain, self.range, value)

    def invert(self, pixel: float) -> float:
        return to_value(self.domain, self.range, pixel)

    def ticks(self, count: int = 10) -> list[float]:
        return tick_values(self.domain, count)


def _nice_number(value: float) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)
    if frac < 1.5:
        nice_frac = 1.0
    elif frac < 3.0:
        nice_frac = 2.0
    elif frac < 7.0:
        nice_frac = 5.0
    else:
        nice_frac = 10.0
    return float(nice_frac * (10**exp))

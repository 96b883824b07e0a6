from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Literal

from .errors import ConfigurationError
from .events import GESTURE_EVENT_TYPES, WHEEL_DELTA_SCALE, InputEvent
from .geometry import Domain, PixelRange, ViewportGeometry, normalize_domain
from .scales import LinearScale, to_value
from .surface import InteractionSurface

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ZOOM = 12.0
MAX_WHEEL_EXPONENT = 64.0

AxisName = Literal["x", "y"]
ChangeListener = Callable[["ZoomPanController"], None]


@dataclass(frozen=True)
class ZoomTransform:
    """Scale factor `k` and translation `t` applied to one axis in pixel space."""

    k: float = 1.0
    t: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self.k == 1.0 and self.t == 0.0

    def apply(self, pixel: float) -> float:
        return pixel * self.k + self.t

    def invert(self, pixel: float) -> float:
        return (pixel - self.t) / self.k


IDENTITY = ZoomTransform()


@dataclass(frozen=True)
class ZoomAxis:
    base_domain: Domain
    range_px: PixelRange

    @property
    def lo(self) -> float:
        return min(self.range_px)

    @property
    def hi(self) -> float:
        return max(self.range_px)

    def clamp_pointer(self, pixel: float) -> float:
        return min(max(float(pixel), self.lo), self.hi)

    def clamp(self, transform: ZoomTransform) -> ZoomTransform:
        # Keep [lo*k + t, hi*k + t] covering [lo, hi] so no space beyond the base domain is revealed.
        k = transform.k
        t_min = self.hi * (1.0 - k)
        t_max = self.lo * (1.0 - k)
        t = min(max(transform.t, t_min), t_max)
        if t == 0.0:
            t = 0.0
        return ZoomTransform(k=k, t=t)

    def effective_domain(self, transform: ZoomTransform) -> Domain:
        if transform.is_identity:
            return self.base_domain
        r0, r1 = self.range_px
        v0 = to_value(self.base_domain, self.range_px, transform.invert(r0))
        v1 = to_value(self.base_domain, self.range_px, transform.invert(r1))
        base_lo, base_hi = self.base_domain
        return (max(base_lo, min(v0, v1)), min(base_hi, max(v0, v1)))


class ZoomPanController:
    """Owns pan/zoom state for one chart and exposes effective domains derived from it.

    The X axis is always zoomable; passing a Y base domain enables dual-axis zoom.
    Gestures arrive through `handle_event`, either directly or via a surface bound
    with `attach`. Display ranges never change: zooming narrows the reported domain.
    """

    def __init__(
        self,
        geometry: ViewportGeometry,
        x_domain: tuple[float, float],
        y_domain: tuple[float, float] | None = None,
        *,
        max_zoom: float = DEFAULT_MAX_ZOOM,
    ) -> None:
        try:
            max_zoom = float(max_zoom)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"max_zoom must be a number, got {max_zoom!r}") from exc
        if not math.isfinite(max_zoom) or max_zoom < 1.0:
            raise ConfigurationError(f"max_zoom must be a finite number >= 1, got {max_zoom}")
        self._geometry = geometry.require_plot_area()
        self._max_zoom = max_zoom
        self._axes: dict[str, ZoomAxis] = {"x": ZoomAxis(normalize_domain(x_domain), geometry.x_range())}
        if y_domain is not None:
            self._axes["y"] = ZoomAxis(normalize_domain(y_domain), geometry.y_range())
        self._transforms: dict[str, ZoomTransform] = {name: IDENTITY for name in self._axes}
        self._drag_pointer: tuple[float, float] | None = None
        self._surface: InteractionSurface | None = None
        self._change_listeners: list[ChangeListener] = []

    @property
    def geometry(self) -> ViewportGeometry:
        return self._geometry

    @property
    def max_zoom(self) -> float:
        return self._max_zoom

    @property
    def zoom_axes(self) -> tuple[str, ...]:
        return tuple(self._axes)

    @property
    def base_x_domain(self) -> Domain:
        return self._axes["x"].base_domain

    @property
    def base_y_domain(self) -> Domain | None:
        axis = self._axes.get("y")
        return None if axis is None else axis.base_domain

    @property
    def x_domain(self) -> Domain:
        return self._axes["x"].effective_domain(self._transforms["x"])

    @property
    def y_domain(self) -> Domain | None:
        axis = self._axes.get("y")
        if axis is None:
            return None
        return axis.effective_domain(self._transforms["y"])

    @property
    def x_range(self) -> PixelRange:
        return self._axes["x"].range_px

    @property
    def y_range(self) -> PixelRange:
        axis = self._axes.get("y")
        if axis is None:
            return self._geometry.y_range()
        return axis.range_px

    def effective_domains(self) -> tuple[Domain, Domain | None]:
        return (self.x_domain, self.y_domain)

    def x_scale(self) -> LinearScale:
        return LinearScale(self.x_domain, self.x_range)

    def y_scale(self) -> LinearScale | None:
        y_domain = self.y_domain
        if y_domain is None:
            return None
        return LinearScale(y_domain, self.y_range)

    def transform(self, axis: AxisName = "x") -> ZoomTransform:
        if axis not in self._transforms:
            raise KeyError(f"axis `{axis}` is not zoomable")
        return self._transforms[axis]

    @property
    def is_zoomed(self) -> bool:
        return any(not tr.is_identity for tr in self._transforms.values())

    @property
    def is_dragging(self) -> bool:
        return self._drag_pointer is not None

    # --- state transitions ---------------------------------------------------
    def zoom_at(self, pointer: tuple[float, float], factor: float) -> bool:
        """Scale every zoomable axis by `factor`, keeping the data under `pointer` in place."""
        factor = float(factor)
        if not math.isfinite(factor) or factor <= 0:
            raise ValueError("zoom factor must be > 0")
        if not (math.isfinite(pointer[0]) and math.isfinite(pointer[1])):
            raise ValueError("zoom pointer must be finite")
        updated: dict[str, ZoomTransform] = {}
        for name, axis in self._axes.items():
            current = self._transforms[name]
            p = axis.clamp_pointer(pointer[0] if name == "x" else pointer[1])
            k = min(max(current.k * factor, 1.0), self._max_zoom)
            t = p - (p - current.t) * (k / current.k)
            updated[name] = axis.clamp(ZoomTransform(k=k, t=t))
        return self._commit(updated)

    def pan_by(self, dx: float, dy: float = 0.0) -> bool:
        if not (math.isfinite(dx) and math.isfinite(dy)):
            return False
        updated: dict[str, ZoomTransform] = {}
        for name, axis in self._axes.items():
            current = self._transforms[name]
            delta = float(dx) if name == "x" else float(dy)
            updated[name] = axis.clamp(ZoomTransform(k=current.k, t=current.t + delta))
        return self._commit(updated)

    def reset(self) -> bool:
        self._drag_pointer = None
        changed = self._commit({name: IDENTITY for name in self._axes})
        if changed:
            LOGGER.debug("zoom reset to identity for axes %s", ",".join(self._axes))
        return changed

    # --- gesture handling ----------------------------------------------------
    def handle_event(self, event: InputEvent) -> bool:
        """Apply one gesture event; returns True when the zoom state changed."""
        kind = event.event_type
        if kind == "wheel":
            if not event.has_position or event.delta_y is None or not math.isfinite(event.delta_y):
                return False
            scale = WHEEL_DELTA_SCALE.get(event.delta_mode, WHEEL_DELTA_SCALE["pixel"])
            # 2**exponent must stay finite and > 0.
            exponent = min(max(-float(event.delta_y) * scale, -MAX_WHEEL_EXPONENT), MAX_WHEEL_EXPONENT)
            factor = 2.0 ** exponent
            return self.zoom_at((float(event.x), float(event.y)), factor)  # type: ignore[arg-type]
        if kind == "pointer_down":
            if not event.has_position or event.button not in (None, 0):
                return False
            if self._geometry.contains(float(event.x), float(event.y)):  # type: ignore[arg-type]
                self._drag_pointer = (float(event.x), float(event.y))  # type: ignore[arg-type]
            return False
        if kind == "pointer_move":
            if self._drag_pointer is None:
                return False
            if not event.has_position:
                return False
            x, y = float(event.x), float(event.y)  # type: ignore[arg-type]
            px, py = self._drag_pointer
            self._drag_pointer = (x, y)
            return self.pan_by(x - px, y - py)
        if kind in ("pointer_up", "pointer_leave"):
            self._drag_pointer = None
            return False
        if kind == "double_click":
            return self.reset()
        LOGGER.debug("ignoring unsupported gesture event: %s", kind)
        return False

    @property
    def gesture_handler(self) -> Callable[[InputEvent], bool]:
        return self.handle_event

    @property
    def surface(self) -> InteractionSurface | None:
        return self._surface

    def attach(self, surface: InteractionSurface) -> None:
        if self._surface is surface:
            return
        if self._surface is not None:
            self.detach()
        for event_type in GESTURE_EVENT_TYPES:
            surface.add_listener(event_type, self.handle_event)
        self._surface = surface
        LOGGER.debug("zoom controller attached to %s", type(surface).__name__)

    def detach(self) -> None:
        surface = self._surface
        if surface is None:
            return
        for event_type in GESTURE_EVENT_TYPES:
            surface.remove_listener(event_type, self.handle_event)
        self._surface = None
        self._drag_pointer = None
        LOGGER.debug("zoom controller detached from %s", type(surface).__name__)

    # --- change notification -------------------------------------------------
    def add_change_listener(self, listener: ChangeListener) -> None:
        if listener not in self._change_listeners:
            self._change_listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        if listener in self._change_listeners:
            self._change_listeners.remove(listener)

    def _commit(self, updated: dict[str, ZoomTransform]) -> bool:
        if updated == self._transforms:
            return False
        self._transforms = updated
        for listener in tuple(self._change_listeners):
            listener(self)
        return True

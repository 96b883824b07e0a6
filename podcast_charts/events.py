from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping, Optional


GestureEventType = Literal[
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "pointer_leave",
    "wheel",
    "double_click",
]

GESTURE_EVENT_TYPES: tuple[GestureEventType, ...] = (
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "pointer_leave",
    "wheel",
    "double_click",
)

WheelDeltaMode = Literal["pixel", "line", "page"]

# Wheel delta -> log2 zoom factor per unit, by delta mode.
WHEEL_DELTA_SCALE: dict[str, float] = {
    "pixel": 0.002,
    "line": 0.05,
    "page": 1.0,
}


@dataclass(frozen=True)
class InputEvent:
    event_type: GestureEventType
    x: Optional[float] = None
    y: Optional[float] = None
    button: Optional[int] = None
    delta_x: Optional[float] = None
    delta_y: Optional[float] = None
    delta_mode: WheelDeltaMode = "pixel"
    timestamp: float = 0.0

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None and math.isfinite(self.x) and math.isfinite(self.y)


def parse_input_event(event_type: str, payload: object) -> InputEvent | None:
    """Parse a host event name plus payload mapping into an `InputEvent`.

    Unknown event types and payloads without required coordinates yield `None`
    so hosts can forward their raw event stream without pre-filtering.
    """

    if event_type not in GESTURE_EVENT_TYPES:
        return None
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        return None
    x = _optional_float(payload.get("x"))
    y = _optional_float(payload.get("y"))
    if event_type in ("pointer_down", "pointer_move", "wheel") and (x is None or y is None):
        return None
    mode = payload.get("delta_mode", "pixel")
    if mode not in WHEEL_DELTA_SCALE:
        mode = "pixel"
    button = payload.get("button")
    return InputEvent(
        event_type=event_type,  # type: ignore[arg-type]
        x=x,
        y=y,
        button=int(button) if isinstance(button, (int, float)) else None,
        delta_x=_optional_float(payload.get("delta_x")),
        delta_y=_optional_float(payload.get("delta_y")),
        delta_mode=mode,
        timestamp=_optional_float(payload.get("timestamp")) or 0.0,
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None

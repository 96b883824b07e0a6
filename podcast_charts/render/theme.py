from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import re
from typing import Any, Mapping

_COLOR = re.compile(r"^(#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?|rgba?\(\s*[0-9.,\s]+\))$")


@dataclass(frozen=True)
class ChartTheme:
    """Color and type tokens shared by the four analytics charts."""

    background: str = "#0f172a"
    grid: str = "rgba(148, 163, 184, 0.18)"
    axis_text: str = "#94a3b8"
    line_primary: str = "#38bdf8"
    line_secondary: str = "rgba(129, 140, 248, 0.85)"
    reference: str = "#facc15"
    dot: str = "#38bdf8"
    dot_highlight: str = "rgba(250, 204, 21, 0.9)"
    stack_returning: str = "rgba(56, 189, 248, 0.55)"
    stack_new: str = "rgba(129, 140, 248, 0.55)"
    area_fill_top: str = "rgba(129, 140, 248, 0.5)"
    area_fill_bottom: str = "rgba(129, 140, 248, 0)"
    font_family: str = "Inter, system-ui, sans-serif"
    font_size_px: float = 12.0


DEFAULT_THEME = ChartTheme()

_COLOR_TOKENS = tuple(f.name for f in fields(ChartTheme) if f.name not in ("font_family", "font_size_px"))


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ChartTheme:
    """Validate and merge token overrides against the default chart theme."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _COLOR.match(raw[key].strip()):
            raise ValueError(f"Token `{key}` must be a hex (#RRGGBB[AA]) or rgb()/rgba() color")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Token `font_family` must be a non-empty string")

    if isinstance(raw["font_size_px"], bool) or not isinstance(raw["font_size_px"], (int, float)):
        raise ValueError("Token `font_size_px` must be a positive number")
    if float(raw["font_size_px"]) <= 0:
        raise ValueError("Token `font_size_px` must be a positive number")

    raw = {key: (value.strip() if isinstance(value, str) else value) for key, value in raw.items()}
    raw["font_size_px"] = float(raw["font_size_px"])
    return ChartTheme(**raw)


def stylesheet(theme: ChartTheme = DEFAULT_THEME) -> str:
    return "\n".join(
        (
            f".grid-line {{ stroke: {theme.grid}; stroke-width: 1; }}",
            f".axis-label {{ fill: {theme.axis_text}; font-family: {theme.font_family}; "
            f"font-size: {theme.font_size_px:g}px; }}",
            f".line-primary {{ fill: none; stroke: {theme.line_primary}; stroke-width: 2.4; }}",
            f".line-secondary {{ fill: none; stroke: {theme.line_secondary}; stroke-width: 2; }}",
            f".reference-line {{ stroke: {theme.reference}; stroke-width: 1.8; stroke-dasharray: 6 6; }}",
            f".dot {{ fill: {theme.dot}; }}",
            f".dot-highlight {{ fill: {theme.dot_highlight}; }}",
            f".stack-returning {{ fill: {theme.stack_returning}; }}",
            f".stack-new {{ fill: {theme.stack_new}; }}",
            ".interaction-layer { fill: transparent; cursor: grab; }",
        )
    )

from .paths import area_path, baseline_area_path, line_path
from .svg import SvgBuilder, fmt_number
from .theme import DEFAULT_THEME, ChartTheme, stylesheet, validate_theme_tokens

__all__ = [
    "ChartTheme",
    "DEFAULT_THEME",
    "SvgBuilder",
    "area_path",
    "baseline_area_path",
    "fmt_number",
    "line_path",
    "stylesheet",
    "validate_theme_tokens",
]

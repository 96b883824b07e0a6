from __future__ import annotations

from dataclasses import dataclass
import json
import math
from pathlib import Path
from typing import Any, Mapping, Sequence

from .errors import ChartDataError


# field name -> accepted keys, snake_case first
_ALIASES: dict[str, tuple[str, ...]] = {
    "episode": ("episode",),
    "title": ("title",),
    "completion_rate": ("completion_rate", "completionRate"),
    "completion_rolling": ("completion_rolling", "completionRolling"),
    "listeners_total": ("listeners_total", "listenersTotal"),
    "new_listeners": ("new_listeners", "newListeners"),
    "returning_listeners": ("returning_listeners", "returningListeners"),
    "social_media_shares": ("social_media_shares", "socialMediaShares"),
    "subscribers_gained": ("subscribers_gained", "subscribersGained"),
    "cumulative_subscribers": ("cumulative_subscribers", "cumulativeSubscribers"),
}


@dataclass(frozen=True)
class EpisodeMetrics:
    episode: int
    title: str = ""
    completion_rate: float = 0.0
    completion_rolling: float | None = None
    listeners_total: float = 0.0
    new_listeners: float = 0.0
    returning_listeners: float = 0.0
    social_media_shares: float = 0.0
    subscribers_gained: float = 0.0
    cumulative_subscribers: float = 0.0

    @property
    def rolling_completion(self) -> float:
        if self.completion_rolling is None:
            return self.completion_rate
        return self.completion_rolling

    @property
    def new_share(self) -> float:
        if self.listeners_total == 0:
            return 0.0
        return self.new_listeners / self.listeners_total

    @property
    def returning_share(self) -> float:
        if self.listeners_total == 0:
            return 0.0
        return self.returning_listeners / self.listeners_total

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "EpisodeMetrics":
        values: dict[str, Any] = {}
        for name, keys in _ALIASES.items():
            for key in keys:
                if key in raw and raw[key] is not None:
                    values[name] = raw[key]
                    break
        if "episode" not in values:
            raise ChartDataError("episode record missing required field: episode")
        episode = values.pop("episode")
        if isinstance(episode, bool) or not isinstance(episode, (int, float)) or not float(episode).is_integer():
            raise ChartDataError(f"episode must be an integer, got {episode!r}")
        title = str(values.pop("title", ""))
        numeric = {name: _coerce_number(name, value) for name, value in values.items()}
        return cls(episode=int(episode), title=title, **numeric)


def parse_episode_metrics(raw: Sequence[Mapping[str, Any]]) -> list[EpisodeMetrics]:
    records = []
    for i, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise ChartDataError(f"episodes[{i}] must be an object")
        records.append(EpisodeMetrics.from_mapping(item))
    records.sort(key=lambda r: r.episode)
    return records


def load_episode_metrics(path: str | Path) -> list[EpisodeMetrics]:
    """Load episode records from a JSON list or an object with an `episodes` list."""
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f"episode dataset not found: {data_path}")
    raw = json.loads(data_path.read_text(encoding="utf-8"))
    if isinstance(raw, Mapping):
        raw = raw.get("episodes")
    if not isinstance(raw, list):
        raise ChartDataError("episode dataset must be a list or an object with an `episodes` list")
    return parse_episode_metrics(raw)


def _coerce_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ChartDataError(f"{name} must be numeric, got {value!r}")
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"{name} must be numeric, got {value!r}") from exc
    if not math.isfinite(out):
        raise ChartDataError(f"{name} must be finite, got {value!r}")
    return out

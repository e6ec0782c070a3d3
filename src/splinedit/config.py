"""Editor settings, loadable from a YAML file."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

_INT_FIELDS = ("window_width", "window_height", "degree", "curve_samples", "u_samples", "v_samples")


@dataclass(frozen=True)
class EditorSettings:
    """Tunable values for the editor and its evaluators."""

    window_width: int = 1024
    window_height: int = 768
    pick_radius: float = 0.05
    degree: int = 3
    curve_samples: int = 100
    u_samples: int = 30
    v_samples: int = 30
    default_weight: float = 1.0
    weight_min: float = 0.01
    weight_max: float = 10.0

    def __post_init__(self) -> None:
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("window dimensions must be positive")
        if self.pick_radius <= 0.0:
            raise ValueError("pick_radius must be positive")
        if self.degree < 1:
            raise ValueError("degree must be >= 1")
        for name in ("curve_samples", "u_samples", "v_samples"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")
        if not 0.0 < self.weight_min <= self.weight_max:
            raise ValueError("weight range must satisfy 0 < weight_min <= weight_max")
        if not self.weight_min <= self.default_weight <= self.weight_max:
            raise ValueError("default_weight must lie inside the weight range")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown editor settings: {', '.join(unknown)}")
        values: Dict[str, Any] = {}
        for key, value in data.items():
            try:
                values[key] = int(value) if key in _INT_FIELDS else float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"invalid value for {key}: {value!r}") from exc
        return cls(**values)

    def to_mapping(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(path: Path | str) -> EditorSettings:
    """Read :class:`EditorSettings` from a YAML document.

    An empty document yields the defaults.
    """

    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"settings not found: {settings_path}")
    with settings_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file must hold a mapping: {settings_path}")
    return EditorSettings.from_mapping(data)


def save_settings(settings: EditorSettings, path: Path | str) -> None:
    settings_path = Path(path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with settings_path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(settings.to_mapping(), fp, sort_keys=False)


__all__ = ["EditorSettings", "load_settings", "save_settings"]

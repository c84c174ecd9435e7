"""Parameter vector for one render pass, plus config.toml resolution."""

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping

CONTROLS = (
    "oiliness",
    "soup_level",
    "salt",
    "sweet",
    "acidity",
    "spice",
    "temperature",
)
POSITIVE = ("line_length", "step_size", "resolution")


@dataclass(frozen=True)
class Params:
    # Taste controls, all in [0, 1]
    oiliness: float = 0.4  # < 0.7 => dashed strokes
    soup_level: float = 0.8  # wetness: vibration, definition, opacity
    salt: float = 0.8  # wave roughness, pressure curve, tip shape
    sweet: float = 0.2  # > 0.1 => perpendicular oscillation
    acidity: float = 0.5  # hue jitter
    spice: float = 0.9  # base hue, 0 => blue, 1 => red
    temperature: float = 0.7  # saturation, brightness, width

    num_lines: int = 100
    line_length: float = 2000.0
    step_size: float = 6.0
    resolution: float = 0.001  # noise increment per grid cell

    show_grid: bool = False
    bg_color: str = "#FFFFFF"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], **overrides: Any) -> "Params":
        """
        Build a validated Params from a config table.

        Raises ValueError for unknown keys or out-of-range values and
        TypeError for values of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        merged = {**values, **overrides}
        unknown = set(merged) - known
        if unknown:
            raise ValueError(f"Unknown params: {sorted(unknown)}")

        for name in CONTROLS:
            if name not in merged:
                continue
            value = merged[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
            merged[name] = float(value)

        if "num_lines" in merged:
            num_lines = merged["num_lines"]
            if isinstance(num_lines, bool) or not isinstance(num_lines, int):
                raise TypeError("num_lines must be an int")
            if num_lines <= 0:
                raise ValueError("num_lines must be a positive integer")

        for name in POSITIVE:
            if name not in merged:
                continue
            value = merged[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")
            merged[name] = float(value)

        if "show_grid" in merged and not isinstance(merged["show_grid"], bool):
            raise TypeError("show_grid must be a bool")
        if "bg_color" in merged and not isinstance(merged["bg_color"], str):
            raise TypeError("bg_color must be a string")

        return cls(**merged)

    @classmethod
    def from_config(cls, config: dict, **overrides: Any) -> "Params":
        table = config.get("params", {})
        if not isinstance(table, dict):
            raise TypeError("[params] must be a table in config.toml")
        colors = config.get("colors", {})
        if not isinstance(colors, dict):
            raise TypeError("[colors] must be a table in config.toml")

        values = dict(table)
        if colors.get("bg") is not None:
            values.setdefault("bg_color", colors["bg"])
        return cls.from_mapping(values, **overrides)

    @property
    def max_steps(self) -> int:
        return int(self.line_length // self.step_size)


def resolve_seed(config: dict) -> int:
    env_seed = os.getenv("GEN_SEED")
    if env_seed:
        return int(env_seed)
    style = config.get("style", {})
    if style.get("seed") is not None:
        return int(style["seed"])
    seed_list = style.get("seedlist")
    if isinstance(seed_list, list) and seed_list:
        return int(seed_list[0])
    raise ValueError("Missing [style].seed or [style].seedlist in config.toml")


def resolve_seeds(config: dict) -> list[int]:
    """All seeds a batch run should render, GEN_SEED and [style].seed win."""
    style = config.get("style", {})
    if os.getenv("GEN_SEED") or style.get("seed") is not None:
        return [resolve_seed(config)]
    seed_list = style.get("seedlist")
    if seed_list is not None and (not isinstance(seed_list, list) or not seed_list):
        raise ValueError("[style].seedlist must be a non-empty list in config.toml")
    return [int(value) for value in seed_list] if seed_list else [resolve_seed(config)]


def resolve_size(config: dict, width: int = 800, height: int = 600) -> tuple[int, int]:
    style = config.get("style", {})
    return int(style.get("width", width)), int(style.get("height", height))

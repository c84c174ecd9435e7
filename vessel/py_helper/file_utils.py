"""File helpers for the render output."""

import os
import sys
from pathlib import Path


def rename_file(source: Path, new_name: str) -> Path:
    """
    Rename a file while keeping its current suffix unless new_name has one.
    Example: rename_file(Path("output/tmp.png"), "vessel_42") -> output/vessel_42.png
    """
    if not source.exists():
        raise FileNotFoundError(source)
    if not new_name:
        raise ValueError("new_name must be a non-empty string")

    target_name = new_name if Path(new_name).suffix else f"{new_name}{source.suffix}"
    target = source.with_name(Path(target_name).name)
    return source.replace(target)


def output_name(prefix: str, seed: int) -> str:
    return f"{prefix}_{seed}"


def svg_to_png(
    source: Path, target: Path | None = None, dpi: float | None = None
) -> Path:
    """
    Convert an SVG file to PNG using cairosvg.
    """
    if not source.exists():
        raise FileNotFoundError(source)

    output_path = target or source.with_suffix(".png")
    effective_dpi = 96 if dpi is None else int(dpi)

    if sys.platform == "darwin":
        _ensure_macos_cairo_path()

    try:
        import cairosvg
    except ModuleNotFoundError as exc:
        raise ModuleNotFoundError(
            "cairosvg is required for PNG output (pip install cairosvg) "
            "or pass --svg-only."
        ) from exc

    cairosvg.svg2png(url=str(source), write_to=str(output_path), dpi=effective_dpi)
    return output_path


def _ensure_macos_cairo_path() -> None:
    if os.environ.get("DYLD_FALLBACK_LIBRARY_PATH"):
        return

    candidates = ["/opt/homebrew/lib", "/usr/local/lib"]
    existing = [path for path in candidates if Path(path).is_dir()]
    if existing:
        os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = ":".join(existing)

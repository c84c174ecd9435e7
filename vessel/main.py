"""Render one flow-field image per configured seed."""

import argparse
import logging
import tomllib
from pathlib import Path

from vessel.flow import Params, render_pass
from vessel.flow.params import resolve_seeds, resolve_size
from vessel.py_helper import variables
from vessel.py_helper.file_utils import output_name, rename_file, svg_to_png
from vessel.renderer import render_svg

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        raise FileNotFoundError(config_path)
    with config_path.open("rb") as f:
        return tomllib.load(f)


def render_seed(
    params: Params, width: int, height: int, seed: int, output_dir: Path, png: bool
) -> Path:
    ctx, placement = render_pass(params, width, height, seed)
    if len(placement) < placement.requested:
        logger.info(
            "Seed %d: placed %d of %d strokes", seed, len(placement), placement.requested
        )

    tmp_svg = output_dir / variables.TMP_SVG
    render_svg(ctx, placement, str(tmp_svg))

    name = output_name(variables.IMAGE_PREFIX, seed)
    if not png:
        return rename_file(tmp_svg, name)

    png_path = svg_to_png(tmp_svg)
    tmp_svg.unlink()
    return rename_file(png_path, name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render flow-field line art.")
    parser.add_argument("--config", type=Path, default=Path(variables.CONFIG))
    parser.add_argument("--output", type=Path, default=Path(variables.OUTPUT))
    parser.add_argument("--width", type=int, help="Canvas width override.")
    parser.add_argument("--height", type=int, help="Canvas height override.")
    parser.add_argument("--seed", type=int, help="Render only this seed.")
    parser.add_argument(
        "--show-grid", action="store_true", help="Overlay the flow field directions."
    )
    parser.add_argument(
        "--svg-only", action="store_true", help="Keep the SVG, skip PNG conversion."
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    overrides = {"show_grid": True} if args.show_grid else {}
    params = Params.from_config(config, **overrides)

    width, height = resolve_size(config)
    width = args.width or width
    height = args.height or height
    seeds = [args.seed] if args.seed is not None else resolve_seeds(config)

    args.output.mkdir(parents=True, exist_ok=True)
    for seed in seeds:
        out_path = render_seed(params, width, height, seed, args.output, not args.svg_only)
        print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()

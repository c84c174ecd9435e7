"""Paint styled strokes into an SVG document."""

from typing import Iterable

import svgwrite

from vessel.flow.context import RenderContext
from vessel.flow.stylizer import StyledStroke, TipShape

GRID_STROKE = "#000000"
GRID_STROKE_WIDTH = 2
GRID_OPACITY = 150 / 255


def _linecap(tip: TipShape) -> str:
    return "square" if tip is TipShape.RECTANGLE else "round"


def _stroke_attrs(stroke: StyledStroke) -> dict:
    style = stroke.style
    lo, hi = style.pressure_range
    cap = _linecap(style.tip.shape)
    return {
        "fill": "none",
        "stroke": style.color.to_hex(),
        "stroke_width": round(style.weight * (lo + hi) / 2, 3),
        "stroke_opacity": round(style.color.alpha / 100 * style.opacity / 255, 4),
        "stroke_linecap": cap,
        "stroke_linejoin": "round" if cap == "round" else "miter",
    }


def draw_grid(dwg: svgwrite.Drawing, ctx: RenderContext) -> None:
    group = dwg.g(
        id="field",
        stroke=GRID_STROKE,
        stroke_width=GRID_STROKE_WIDTH,
        stroke_opacity=round(GRID_OPACITY, 4),
    )
    for cell in ctx.field.cells():
        start, end = ctx.field.direction_marker(cell)
        group.add(
            dwg.line(start=ctx.frame.to_screen(*start), end=ctx.frame.to_screen(*end))
        )
    dwg.add(group)


def draw_strokes(
    dwg: svgwrite.Drawing, ctx: RenderContext, strokes: Iterable[StyledStroke]
) -> None:
    group = dwg.g(id="strokes")
    for stroke in strokes:
        attrs = _stroke_attrs(stroke)
        for segment in stroke.segments:
            pts = [
                (round(sx, 2), round(sy, 2))
                for sx, sy in (ctx.frame.to_screen(x, y) for x, y in segment)
            ]
            group.add(dwg.polyline(pts, **attrs))
    dwg.add(group)


def render_svg(
    ctx: RenderContext, strokes: Iterable[StyledStroke], out_file: str
) -> svgwrite.Drawing:
    dwg = svgwrite.Drawing(out_file, size=(ctx.frame.width, ctx.frame.height))
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=ctx.params.bg_color))

    if ctx.params.show_grid:
        draw_grid(dwg, ctx)
    draw_strokes(dwg, ctx, strokes)

    dwg.save()
    return dwg

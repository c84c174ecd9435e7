"""Flow-field stroke pipeline: field, occupancy, integrator, stylizer, placer."""

from vessel.flow.context import RenderContext
from vessel.flow.params import Params
from vessel.flow.placer import Placement, place_strokes
from vessel.flow.stylizer import StrokeStyle, StyledStroke

__all__ = [
    "Params",
    "Placement",
    "RenderContext",
    "StrokeStyle",
    "StyledStroke",
    "place_strokes",
    "render_pass",
]


def render_pass(
    params: Params, width: float, height: float, seed: int
) -> tuple[RenderContext, Placement]:
    """One full pass: fresh field and occupancy, then stroke placement."""
    ctx = RenderContext.create(params, width, height, seed)
    return ctx, place_strokes(ctx)

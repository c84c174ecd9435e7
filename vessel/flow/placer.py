"""Seed, integrate and stylize strokes until the count or budget runs out."""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator

from vessel.flow.context import RenderContext
from vessel.flow.coords import Point
from vessel.flow.integrator import integrate, is_usable
from vessel.flow.stylizer import StyledStroke, stylize

logger = logging.getLogger(__name__)

MIN_SEED_DISTANCE = 40
ATTEMPTS_PER_STROKE = 3


@dataclass
class Placement:
    requested: int
    attempts: int = 0
    strokes: list[StyledStroke] = field(default_factory=list)
    seeds: list[Point] = field(default_factory=list)

    @property
    def max_attempts(self) -> int:
        return self.requested * ATTEMPTS_PER_STROKE

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self) -> Iterator[StyledStroke]:
        return iter(self.strokes)


def _too_close(x: float, y: float, seeds: list[Point]) -> bool:
    return any(math.dist((x, y), seed) < MIN_SEED_DISTANCE for seed in seeds)


def place_strokes(ctx: RenderContext, count: int | None = None) -> Placement:
    """
    Place up to count strokes (default params.num_lines) on the canvas.

    Falling short of count once 3 * count attempts are spent is a normal,
    lower-density outcome.
    """
    requested = ctx.params.num_lines if count is None else count
    result = Placement(requested=requested)
    half_w = ctx.frame.half_width
    half_h = ctx.frame.half_height

    while len(result.strokes) < requested and result.attempts < result.max_attempts:
        result.attempts += 1

        x = ctx.rng.uniform(-half_w, half_w)
        y = ctx.rng.uniform(-half_h, half_h)
        if _too_close(x, y, result.seeds) or ctx.occupancy.is_occupied(x, y):
            continue

        path = integrate((x, y), ctx.field, ctx.occupancy, ctx.params, ctx.rng)
        if not is_usable(path):
            continue
        stroke = stylize(path, ctx.params, ctx.rng, ctx.frame)
        if stroke is None:
            continue

        result.strokes.append(stroke)
        result.seeds.append((x, y))

    if len(result.strokes) < requested:
        logger.debug(
            "Attempt budget spent: %d of %d strokes placed",
            len(result.strokes),
            requested,
        )
    logger.info("Drew %d strokes after %d attempts", len(result.strokes), result.attempts)
    return result

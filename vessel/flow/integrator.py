"""Walk the flow field from a seed point."""

import math
import random

from vessel.flow.coords import Point
from vessel.flow.field import FlowField
from vessel.flow.occupancy import Occupancy
from vessel.flow.params import Params

MIN_POINTS = 3
REDUCED_STEP = 0.25
# steps taken before collisions may end the path
COLLISION_GRACE = 20
CONTINUE_ON_COLLISION = 0.4


def _switch_interval(rng: random.Random) -> int:
    return rng.randrange(3, 8)


def integrate(
    start: Point,
    field: FlowField,
    occupancy: Occupancy,
    params: Params,
    rng: random.Random,
) -> list[Point]:
    """
    Follow the field from start, marking every visited point occupied.

    Step length alternates between step_size and a quarter of it after
    random runs of 3..7 steps. The walk stops at max_steps, when leaving
    the canvas, or (past the first steps) on landing in an occupied
    bucket with probability 0.6.
    """
    x, y = start
    frame = field.frame
    base_step = params.step_size
    reduced_step = base_step * REDUCED_STEP
    step = base_step
    counter = 0
    interval = _switch_interval(rng)

    pts: list[Point] = []
    for i in range(params.max_steps):
        pts.append((x, y))
        occupancy.mark(x, y)

        angle = field.angle_at(x, y)

        counter += 1
        if counter >= interval:
            step = reduced_step if step == base_step else base_step
            counter = 0
            interval = _switch_interval(rng)

        x += math.cos(angle) * step
        y += math.sin(angle) * step

        if not frame.contains(x, y):
            break
        if (
            i > COLLISION_GRACE
            and occupancy.is_occupied(x, y)
            and rng.random() > CONTINUE_ON_COLLISION
        ):
            break

    return pts


def is_usable(path: list[Point]) -> bool:
    return len(path) >= MIN_POINTS

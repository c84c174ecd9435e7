"""Per-pass render state."""

import random
from dataclasses import dataclass

from vessel.flow.coords import CanvasFrame
from vessel.flow.field import FlowField, build_field
from vessel.flow.noise import ValueNoise
from vessel.flow.occupancy import Occupancy
from vessel.flow.params import Params


@dataclass
class RenderContext:
    """
    Everything one render pass reads and writes.

    Built fresh for every pass; a parameter change or resize means a new
    context, never an update of an old one. Not safe to share between
    concurrent passes since the occupancy index is mutated in place.
    """

    params: Params
    frame: CanvasFrame
    field: FlowField
    occupancy: Occupancy
    rng: random.Random
    seed: int

    @classmethod
    def create(cls, params: Params, width: float, height: float, seed: int) -> "RenderContext":
        frame = CanvasFrame(width, height)
        field = build_field(frame, params.resolution, ValueNoise(seed))
        return cls(
            params=params,
            frame=frame,
            field=field,
            occupancy=Occupancy(),
            rng=random.Random(seed),
            seed=seed,
        )

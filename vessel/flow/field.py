"""Binary horizontal flow field sampled from coherent noise."""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator

import numpy as np

from vessel.flow.coords import CanvasFrame, Point

logger = logging.getLogger(__name__)

SPACING = 10
NoiseFn = Callable[[float, float], float]


@dataclass(frozen=True)
class FieldCell:
    x: float
    y: float
    angle: float


@dataclass
class FlowField:
    """
    Flow directions on a lattice over the canvas.

    angles is indexed [col, row]; every entry is either 0 or pi.
    """

    frame: CanvasFrame
    spacing: float
    angles: np.ndarray

    @property
    def cols(self) -> int:
        return self.angles.shape[0]

    @property
    def rows(self) -> int:
        return self.angles.shape[1]

    def cell(self, col: int, row: int) -> FieldCell:
        x, y = self.frame.cell_position(col, row, self.spacing)
        return FieldCell(x, y, float(self.angles[col, row]))

    def cells(self) -> Iterator[FieldCell]:
        for col in range(self.cols):
            for row in range(self.rows):
                yield self.cell(col, row)

    def angle_at(self, x: float, y: float) -> float:
        col, row = self.frame.grid_index(x, y, self.spacing)
        if 0 <= col < self.cols and 0 <= row < self.rows:
            return float(self.angles[col, row])
        return 0.0

    def direction_marker(self, cell: FieldCell) -> tuple[Point, Point]:
        """Debug overlay line for one cell, 0.75 * spacing long."""
        length = self.spacing * 0.75
        end = (
            cell.x + math.cos(cell.angle) * length,
            cell.y + math.sin(cell.angle) * length,
        )
        return (cell.x, cell.y), end


def build_field(
    frame: CanvasFrame, resolution: float, noise: NoiseFn, spacing: float = SPACING
) -> FlowField:
    cols, rows = frame.grid_shape(spacing)
    angles = np.empty((cols, rows), dtype=np.float64)

    # offsets accumulate per column / per row, both starting at 0
    x_offset = 0.0
    for col in range(cols):
        y_offset = 0.0
        for row in range(rows):
            angles[col, row] = 0.0 if noise(x_offset, y_offset) > 0.5 else math.pi
            y_offset += resolution
        x_offset += resolution

    logger.debug("Built %dx%d flow field (spacing %s)", cols, rows, spacing)
    return FlowField(frame=frame, spacing=spacing, angles=angles)

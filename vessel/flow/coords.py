"""Canvas coordinate frame.

The pipeline works in canvas-centered coordinates: origin at the canvas
center, x in [-width/2, width/2), y in [-height/2, height/2). Everything
that needs grid indices or top-left (SVG) coordinates goes through
CanvasFrame.
"""

import math
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class CanvasFrame:
    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return (-self.half_width <= x < self.half_width) and (
            -self.half_height <= y < self.half_height
        )

    def clamp(self, x: float, y: float) -> Point:
        return (
            min(max(x, -self.half_width), self.half_width),
            min(max(y, -self.half_height), self.half_height),
        )

    def grid_shape(self, spacing: float) -> tuple[int, int]:
        """(cols, rows) of a lattice with the given spacing covering the canvas."""
        return math.floor(self.width / spacing) + 1, math.floor(
            self.height / spacing
        ) + 1

    def cell_position(self, col: int, row: int, spacing: float) -> Point:
        return col * spacing - self.half_width, row * spacing - self.half_height

    def grid_index(self, x: float, y: float, spacing: float) -> tuple[int, int]:
        """Lattice cell under (x, y), clamped to the grid."""
        cols, rows = self.grid_shape(spacing)
        col = min(max(math.floor((x + self.half_width) / spacing), 0), cols - 1)
        row = min(max(math.floor((y + self.half_height) / spacing), 0), rows - 1)
        return col, row

    def to_screen(self, x: float, y: float) -> Point:
        """Canvas-centered -> top-left origin (SVG user units)."""
        return x + self.half_width, y + self.half_height

"""Coarse spatial hash of canvas regions already claimed by strokes."""

import math

BUCKET_SIZE = 8


class Occupancy:
    def __init__(self, bucket_size: float = BUCKET_SIZE) -> None:
        self.bucket_size = bucket_size
        self._keys: set[tuple[int, int]] = set()

    def key(self, x: float, y: float) -> tuple[int, int]:
        return math.floor(x / self.bucket_size), math.floor(y / self.bucket_size)

    def is_occupied(self, x: float, y: float) -> bool:
        return self.key(x, y) in self._keys

    def mark(self, x: float, y: float) -> None:
        self._keys.add(self.key(x, y))

    def reset(self) -> None:
        self._keys.clear()

    def __len__(self) -> int:
        return len(self._keys)

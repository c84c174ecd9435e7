"""Smooth 2D value noise (deterministic per seed) + fBm."""

import math
from dataclasses import dataclass

from vessel.flow.mapping import lerp


def _hash_int(n: int) -> int:
    # simple 32-bit mix
    n = (n ^ 61) ^ (n >> 16)
    n = n + (n << 3)
    n = n ^ (n >> 4)
    n = n * 0x27D4EB2D
    n = n ^ (n >> 15)
    return n & 0xFFFFFFFF


def _rand2(ix: int, iy: int, seed: int) -> float:
    h = _hash_int(ix * 374761393 + iy * 668265263 + seed * 362437)
    return h / 2**32  # [0,1)


def _fade(t: float) -> float:
    # Perlin fade curve
    return t * t * t * (t * (t * 6 - 15) + 10)


def value_noise_2d(x: float, y: float, seed: int) -> float:
    x0 = math.floor(x)
    y0 = math.floor(y)

    sx = _fade(x - x0)
    sy = _fade(y - y0)

    n00 = _rand2(x0, y0, seed)
    n10 = _rand2(x0 + 1, y0, seed)
    n01 = _rand2(x0, y0 + 1, seed)
    n11 = _rand2(x0 + 1, y0 + 1, seed)

    return lerp(lerp(n00, n10, sx), lerp(n01, n11, sx), sy)  # [0,1)


def fbm_2d(
    x: float,
    y: float,
    seed: int,
    octaves: int = 4,
    lacunarity: float = 2.0,
    gain: float = 0.5,
) -> float:
    amp = 1.0
    freq = 1.0
    total = 0.0
    norm = 0.0
    for o in range(octaves):
        total += amp * value_noise_2d(x * freq, y * freq, seed + 1013 * o)
        norm += amp
        amp *= gain
        freq *= lacunarity
    return total / max(norm, 1e-9)  # ~[0,1]


@dataclass(frozen=True)
class ValueNoise:
    """
    Coherent noise source for the field generator.

    Four octaves with gain 0.5, like the Perlin noise of sketching tools.
    Calling it with (x, y) returns a value in [0, 1].
    """

    seed: int
    octaves: int = 4
    gain: float = 0.5

    def __call__(self, x: float, y: float) -> float:
        return fbm_2d(x, y, self.seed, octaves=self.octaves, gain=self.gain)

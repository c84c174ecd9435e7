"""Scalar helpers shared by the flow pipeline."""


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def map_range(
    value: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float
) -> float:
    """
    Linearly re-map value from [in_lo, in_hi] to [out_lo, out_hi].

    No clamping: callers pass values already inside the input range.
    Example: map_range(0.5, 0, 1, 240, 0) -> 120.0
    """
    return out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)

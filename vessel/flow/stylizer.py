"""Turn raw field paths into styled strokes.

Stages run in a fixed order: dash segmentation (oiliness), perpendicular
oscillation (sweet, salt), gap splitting, then style resolution from the
remaining controls. The style record is plain data; how a tip or a
pressure curve is actually painted is up to the renderer.
"""

import colorsys
import math
import random
from dataclasses import dataclass
from enum import Enum

from vessel.flow.coords import CanvasFrame, Point
from vessel.flow.mapping import lerp, map_range
from vessel.flow.params import Params

DASH_OILINESS = 0.7
OSCILLATION_SWEET = 0.1
GAP_DISTANCE = 10.0
ALPHA = 85


class TipShape(Enum):
    ROUND = "round"
    ELLIPSE = "ellipse"
    RECTANGLE = "rectangle"


class Rotation(Enum):
    NATURAL = "natural"
    NONE = "none"


@dataclass(frozen=True)
class HSBColor:
    hue: float  # [0, 360)
    saturation: float  # [0, 100]
    brightness: float  # [0, 100]
    alpha: float  # [0, 100]

    def to_hex(self) -> str:
        r, g, b = colorsys.hsv_to_rgb(
            (self.hue % 360) / 360, self.saturation / 100, self.brightness / 100
        )
        return "#{:02x}{:02x}{:02x}".format(
            round(r * 255), round(g * 255), round(b * 255)
        )


@dataclass(frozen=True)
class TipGeometry:
    shape: TipShape
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class StrokeStyle:
    weight: float
    color: HSBColor
    vibration: float
    pressure_curve: tuple[float, float]
    pressure_range: tuple[float, float]
    definition: float
    quality: float
    opacity: float  # [0, 255]
    brush_type: str  # "standard" | "custom"
    rotate: Rotation
    tip: TipGeometry
    spacing: float = 0.5
    blend: bool = False


@dataclass(frozen=True)
class StyledStroke:
    segments: list[list[Point]]
    style: StrokeStyle

    @property
    def points(self) -> list[Point]:
        return [p for seg in self.segments for p in seg]


# -------------------------
# Path stages
# -------------------------


def dash(points: list[Point], oiliness: float) -> list[Point]:
    """Keep/drop runs along the path; identity for oiliness >= 0.7."""
    if oiliness >= DASH_OILINESS:
        return list(points)

    dash_len = math.floor(map_range(oiliness, 0, DASH_OILINESS, 5, 20))
    gap_len = math.floor(map_range(oiliness, 0, DASH_OILINESS, 3, 0))

    out: list[Point] = []
    drawing = True
    counter = 0
    for pt in points:
        counter += 1
        if drawing:
            out.append(pt)
            if counter >= dash_len:
                drawing = False
                counter = 0
        elif counter >= gap_len:
            # a gap always swallows at least the point that opened it
            drawing = True
            counter = 0
    return out


def waveform(phase: float, roughness: float) -> float:
    """Blend of sine (roughness 0) and triangle (roughness 1), in [-1, 1]."""
    sine = math.sin(phase)
    triangle = (2 / math.pi) * math.asin(sine)
    return lerp(sine, triangle, roughness)


def oscillation_amplitude(sweet: float) -> float:
    return 4 * map_range(sweet, 0, 1, 0, 3)


def oscillate(points: list[Point], sweet: float, roughness: float) -> list[Point]:
    """Displace points along the path normal; identity for sweet <= 0.1."""
    if sweet <= OSCILLATION_SWEET or len(points) < 2:
        return list(points)

    magnitude = oscillation_amplitude(sweet)
    frequency = map_range(sweet, 0, 1, 0.5, 3)
    last = len(points) - 1

    out: list[Point] = []
    for i, (x, y) in enumerate(points):
        prev_x, prev_y = points[max(i - 1, 0)]
        next_x, next_y = points[min(i + 1, last)]
        normal = math.atan2(next_y - prev_y, next_x - prev_x) + math.pi / 2

        phase = (i / last) * 2 * math.pi * frequency
        offset = waveform(phase, roughness) * magnitude
        out.append((x + math.cos(normal) * offset, y + math.sin(normal) * offset))
    return out


def split_segments(points: list[Point], gap: float = GAP_DISTANCE) -> list[list[Point]]:
    """Break the path wherever consecutive points are more than gap apart."""
    segments: list[list[Point]] = []
    current: list[Point] = []
    for pt in points:
        if current and math.dist(current[-1], pt) > gap:
            if len(current) >= 2:
                segments.append(current)
            current = []
        current.append(pt)
    if len(current) >= 2:
        segments.append(current)
    return segments


# -------------------------
# Style
# -------------------------


def base_hue(spice: float) -> float:
    return map_range(spice, 0, 1, 240, 0)


def resolve_color(params: Params, rng: random.Random) -> HSBColor:
    variance = map_range(params.acidity, 0, 1, 15, 30)
    hue = (base_hue(params.spice) + rng.uniform(-variance, variance)) % 360
    return HSBColor(
        hue=hue,
        saturation=map_range(params.temperature, 0, 1, 20, 80),
        brightness=map_range(params.temperature, 0, 1, 100, 95),
        alpha=ALPHA,
    )


def tip_for_ratio(ratio: float, salt: float) -> TipGeometry:
    """Custom tip: small ellipse below ratio 0.3, tall rectangle above."""
    if ratio < 0.3:
        size = map_range(salt, 0.4, 1, 2, 1)
        return TipGeometry(TipShape.ELLIPSE, size + ratio, size + 3 * ratio)
    return TipGeometry(TipShape.RECTANGLE, 2.0, map_range(ratio, 0.3, 1, 1, 30))


def resolve_tip(salt: float) -> TipGeometry:
    if salt <= 0.4:
        return TipGeometry(TipShape.ROUND)

    # NOTE: ratio >= 0.5 whenever salt > 0.4, so the ellipse branch never fires
    return tip_for_ratio(map_range(salt, 0.4, 1, 0.5, 1.5), salt)


def resolve_style(params: Params, rng: random.Random) -> StrokeStyle:
    dryness = map_range(params.soup_level, 0, 1, 0.8, 0)
    return StrokeStyle(
        weight=10 * map_range(params.temperature, 0, 1, 1, 2),
        color=resolve_color(params, rng),
        vibration=map_range(dryness, 0, 0.8, 0.5, 2.5),
        pressure_curve=(
            map_range(params.salt, 0, 1, 0.35, 3),
            map_range(params.salt, 0, 1, 0.25, 0.5),
        ),
        pressure_range=(0.8, 1.0),
        definition=map_range(params.soup_level, 0, 1, 0.25, 0.85),
        quality=map_range(params.soup_level, 0, 1, 0.5, 2.5),
        opacity=map_range(params.soup_level, 0, 1, 50, 220),
        brush_type="custom" if params.salt > 0.4 else "standard",
        rotate=Rotation.NONE if params.salt > 0.5 else Rotation.NATURAL,
        tip=resolve_tip(params.salt),
    )


def stylize(
    path: list[Point],
    params: Params,
    rng: random.Random,
    frame: CanvasFrame | None = None,
) -> StyledStroke | None:
    """
    Styled stroke for path, or None when nothing drawable is left.

    With a frame, oscillated points are clamped back onto the canvas.
    """
    processed = dash(path, params.oiliness)
    if len(processed) < 2:
        return None
    processed = oscillate(processed, params.sweet, params.salt)
    if frame is not None:
        processed = [frame.clamp(x, y) for x, y in processed]

    segments = split_segments(processed)
    if not segments:
        return None
    return StyledStroke(segments=segments, style=resolve_style(params, rng))

"""Shared fixtures: default params, seeded render contexts, hand-built fields."""

import math
import random

import numpy as np
import pytest

from vessel.flow.context import RenderContext
from vessel.flow.coords import CanvasFrame
from vessel.flow.field import SPACING, FlowField
from vessel.flow.occupancy import Occupancy
from vessel.flow.params import Params


@pytest.fixture(autouse=True)
def _no_env_seed(monkeypatch):
    monkeypatch.delenv("GEN_SEED", raising=False)


@pytest.fixture
def params():
    return Params()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def frame():
    return CanvasFrame(800, 600)


@pytest.fixture
def ctx(params):
    return RenderContext.create(params, 800, 600, seed=1234)


def uniform_field(frame: CanvasFrame, angle: float) -> FlowField:
    cols, rows = frame.grid_shape(SPACING)
    return FlowField(frame=frame, spacing=SPACING, angles=np.full((cols, rows), angle))


@pytest.fixture
def rightward_field(frame):
    return uniform_field(frame, 0.0)


@pytest.fixture
def leftward_field(frame):
    return uniform_field(frame, math.pi)


@pytest.fixture
def occupancy():
    return Occupancy()

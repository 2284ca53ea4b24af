import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from genes import Genetics, StrainInfo
from plant import Plant
from plant_structure import Branch, PlantStructure


@pytest.fixture
def genetics():
    return Genetics(
        yield_potential=100.0,
        growth_rate=1.0,
        resilience=0.5,
        quality_ceiling=90.0,
        thc_percent=20.0,
        cbd_percent=0.5,
    )


@pytest.fixture
def plant(genetics):
    return Plant(genetics, plant_id="6f1c2d3e-4a5b-4c6d-8e7f-0123456789ab")


@pytest.fixture
def strain():
    return StrainInfo(
        name="Test Kush",
        strain_type="Hybrid",
        genetics="A x B",
        thc_min=18.0,
        thc_max=22.0,
        cbd_min=0.2,
        cbd_max=0.4,
        flowering_time=56,
        difficulty="Easy",
        yield_potential="High",
        effects=["Relaxed", "Happy"],
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def make_branch(level=3, direction=1, start=0, max_length=6, thickness=1, curve=0,
                can_bifurcate=False, bifurcation_day=999):
    return Branch(level, direction, start, max_length, thickness, curve, False, None,
                  can_bifurcate, bifurcation_day)


def make_structure(branches=(), splits=(), max_height=10, growth_rate=1.0, foliage_density=0.0):
    return PlantStructure(0, "balanced", 0.8, foliage_density, max_height, growth_rate,
                          tuple(branches), tuple(splits))

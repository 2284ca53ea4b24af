import math

import pytest

import constants as C
import environment


def test_co2_rises_with_canopy():
    assert environment.co2_level(0.0) == 80.0
    assert environment.co2_level(50.0) == pytest.approx(90.0)
    assert environment.co2_level(100.0) == pytest.approx(100.0)


@pytest.mark.parametrize("stage,base", [
    (C.STAGE_SEEDLING, 40.0),
    (C.STAGE_VEGETATIVE, 60.0),
    (C.STAGE_PRE_FLOWER, 75.0),
    (C.STAGE_FLOWERING, 85.0),
    (C.STAGE_READY_TO_HARVEST, 85.0),
])
def test_light_absorption(stage, base):
    assert environment.light_absorption(stage, 0.0) == base
    assert environment.light_absorption(stage, 100.0) == min(base + 10.0, 100.0)


def test_temperature_oscillates_within_bounds():
    assert environment.temperature(0) == pytest.approx(24.0)
    assert environment.temperature(3) == pytest.approx(24.0 + math.sin(2.1) * 2.0)
    for day in range(200):
        assert 22.0 <= environment.temperature(day) <= 26.0


def test_humidity_is_capped():
    assert environment.humidity(50.0) == pytest.approx(60.0)
    assert environment.humidity(100.0) == pytest.approx(70.0)
    assert environment.humidity(200.0) == 80.0


def test_roots_mature_at_ninety_days():
    assert environment.root_development(45) == pytest.approx(50.0)
    assert environment.root_development(90) == pytest.approx(100.0)
    assert environment.root_development(200) == 100.0


def test_canopy_by_stage():
    assert environment.canopy_density(C.STAGE_SEEDLING, 8, 1.0) == 15.0
    assert environment.canopy_density(C.STAGE_VEGETATIVE, 20, 1.0) == pytest.approx(56.0)
    assert environment.canopy_density(C.STAGE_VEGETATIVE, 20, 1.1) == pytest.approx(61.6)
    assert environment.canopy_density(C.STAGE_FLOWERING, 80, 1.1) == 100.0


@pytest.mark.parametrize("health,resilience,factor", [
    (C.HEALTH_EXCELLENT, 0.0, 1.0),
    (C.HEALTH_GOOD, 1.0, 1.0),
    (C.HEALTH_FAIR, 0.0, 0.85),
    (C.HEALTH_FAIR, 1.0, 1.0),
    (C.HEALTH_POOR, 0.5, 0.825),
    (C.HEALTH_CRITICAL, 0.0, 0.4),
    (C.HEALTH_CRITICAL, 1.0, 1.0),
])
def test_health_canopy_factor(health, resilience, factor):
    assert environment.health_canopy_factor(health, resilience) == pytest.approx(factor)


def test_update_environment_uses_the_old_canopy(plant):
    plant.canopy_density = 50.0
    plant.days_alive = 20
    plant.stage = C.STAGE_VEGETATIVE
    environment.update_environment(plant)
    assert plant.co2_level == pytest.approx(90.0)
    assert plant.light_absorption == pytest.approx(65.0)
    assert plant.canopy_density == pytest.approx(56.0)

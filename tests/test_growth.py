import math

import pytest

import constants as C
from growth import advance_plant
from time_manager import real_seconds_to_sim_hours


def test_one_day_from_planting(plant):
    added = advance_plant(plant, 24.0)

    assert added == []
    assert plant.days_alive == 1
    assert plant.stage == C.STAGE_SEEDLING
    assert plant.water_level == pytest.approx(48.0)
    assert plant.nutrient_level == pytest.approx(50.4)
    assert plant.health == C.HEALTH_GOOD

    assert plant.co2_level == pytest.approx(81.0)
    assert plant.light_absorption == pytest.approx(40.5)
    assert plant.temperature == pytest.approx(24.0 + math.sin(0.7) * 2.0)
    assert plant.humidity == pytest.approx(59.6)
    assert plant.root_development == pytest.approx(100.0 / 90.0)
    assert plant.canopy_density == pytest.approx(15.0)

    history = plant.care_history
    assert history.total_hours == 24.0
    assert history.total_optimal_water_hours == 24.0
    assert history.total_optimal_nutrient_hours == 24.0


def test_resources_are_topped_up(plant):
    plant.water_level = 41.0
    plant.nutrient_level = 51.0
    advance_plant(plant, 24.0)
    assert plant.water_level == pytest.approx(79.0)
    assert plant.nutrient_level == pytest.approx(81.4)


def test_top_up_refills_an_empty_plant(plant):
    plant.stage = C.STAGE_VEGETATIVE
    plant.total_hours_elapsed = 15 * 24.0
    plant.water_level = 1.0
    plant.nutrient_level = 0.0
    advance_plant(plant, 1.0)
    assert plant.water_level == pytest.approx(50.0)
    assert plant.nutrient_level == pytest.approx(40.0)

    plant.water_level = 39.5
    advance_plant(plant, 0.0)
    assert plant.water_level == pytest.approx(89.5)


def test_drain_rate_follows_the_current_stage(plant):
    plant.stage = C.STAGE_VEGETATIVE
    plant.total_hours_elapsed = 15 * 24.0
    advance_plant(plant, 10.0)
    assert plant.water_level == pytest.approx(50.0)
    assert plant.nutrient_level == pytest.approx(52.0)

    plant.stage = C.STAGE_FLOWERING
    plant.total_hours_elapsed = 60 * 24.0
    plant.water_level = 60.0
    plant.nutrient_level = 60.0
    advance_plant(plant, 5.0)
    assert plant.water_level == pytest.approx(56.0)
    assert plant.nutrient_level == pytest.approx(55.0)


def test_stage_change_uses_the_previous_stage_for_the_tick(plant):
    plant.total_hours_elapsed = 10 * 24.0
    advance_plant(plant, 24.0)

    assert plant.days_alive == 11
    assert plant.stage == C.STAGE_VEGETATIVE
    # Seedling drain, light base and canopy for this tick.
    assert plant.water_level == pytest.approx(48.0)
    assert plant.light_absorption == pytest.approx(40.5)
    assert plant.canopy_density == pytest.approx(15.0)

    advance_plant(plant, 1.0)
    assert plant.health == C.HEALTH_FAIR
    assert plant.canopy_density == pytest.approx((40.0 + 11 * 0.8) * 0.925)


def test_light_cycle_switches_on_day_45(plant):
    plant.stage = C.STAGE_PRE_FLOWER
    plant.total_hours_elapsed = 43 * 24.0
    advance_plant(plant, 24.0)
    assert plant.days_alive == 44
    assert plant.light_cycle == C.LIGHT_CYCLE_VEG

    advance_plant(plant, 24.0)
    assert plant.days_alive == 45
    assert plant.light_cycle == C.LIGHT_CYCLE_FLOWER

    advance_plant(plant, 24.0)
    assert plant.light_cycle == C.LIGHT_CYCLE_FLOWER


def test_unhealthy_plants_grow_a_thinner_canopy(plant):
    plant.total_hours_elapsed = 5 * 24.0
    plant.water_level = 95.0
    added = advance_plant(plant, 1.0)

    assert plant.health == C.HEALTH_FAIR
    assert plant.canopy_density == pytest.approx(15.0 * 0.925)
    assert added == [C.STRESS_HIGH_WATER]
    assert plant.care_history.total_optimal_water_hours == 0.0
    assert plant.care_history.total_optimal_nutrient_hours == 1.0


def test_stress_events_are_recorded_and_deduplicated(plant):
    plant.total_hours_elapsed = 20 * 24.0
    plant.water_level = 100.0
    plant.nutrient_level = 100.0
    assert advance_plant(plant, 1.0) == [C.STRESS_HIGH_WATER, C.STRESS_NUTRIENT_BURN]

    events = plant.care_history.stress_events
    assert [(e.day, e.cause, e.severity) for e in events] == [
        (20, C.STRESS_HIGH_WATER, C.SEVERITY_MODERATE),
        (20, C.STRESS_NUTRIENT_BURN, C.SEVERITY_SEVERE),
    ]

    plant.total_hours_elapsed = 22 * 24.0
    plant.water_level = 100.0
    plant.nutrient_level = 60.0
    assert advance_plant(plant, 1.0) == []

    plant.total_hours_elapsed = 26 * 24.0
    plant.water_level = 100.0
    assert advance_plant(plant, 1.0) == [C.STRESS_HIGH_WATER]
    assert len(plant.care_history.stress_events) == 3


@pytest.mark.parametrize("hours", [-5.0, float("nan"), float("inf")])
def test_bad_elapsed_time_is_ignored(plant, hours):
    plant.total_hours_elapsed = 5 * 24.0
    advance_plant(plant, hours)
    assert plant.total_hours_elapsed == 5 * 24.0
    assert plant.days_alive == 5
    assert plant.water_level == 60.0


def test_a_full_cycle_stays_healthy(plant):
    for _ in range(90 * 24):
        advance_plant(plant, 1.0)
        assert plant.water_level >= 40.0
        assert plant.nutrient_level >= 50.0
        assert 0.0 <= plant.canopy_density <= 100.0
    assert plant.days_alive == 90
    assert plant.stage == C.STAGE_READY_TO_HARVEST
    assert plant.light_cycle == C.LIGHT_CYCLE_FLOWER


def test_real_time_conversion():
    assert real_seconds_to_sim_hours(3600.0) == pytest.approx(130000.0)
    assert real_seconds_to_sim_hours(1.0) == pytest.approx(130000.0 / 3600.0)
    assert real_seconds_to_sim_hours(0.0) == 0.0

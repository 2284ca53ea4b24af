import uuid

import pytest

import constants as C
from genes import Genetics
from plant import CareHistory, Plant, StressEvent, calculate_health, calculate_stage, seed_from_id


@pytest.mark.parametrize("day,stage", [
    (0, C.STAGE_READY_TO_HARVEST),
    (1, C.STAGE_SEEDLING),
    (10, C.STAGE_SEEDLING),
    (11, C.STAGE_VEGETATIVE),
    (40, C.STAGE_VEGETATIVE),
    (41, C.STAGE_PRE_FLOWER),
    (48, C.STAGE_PRE_FLOWER),
    (49, C.STAGE_FLOWERING),
    (85, C.STAGE_FLOWERING),
    (86, C.STAGE_READY_TO_HARVEST),
    (500, C.STAGE_READY_TO_HARVEST),
])
def test_calculate_stage(day, stage):
    assert calculate_stage(day) == stage


@pytest.mark.parametrize("water,nutrients,health", [
    (60, 65, C.HEALTH_EXCELLENT),
    (75, 78, C.HEALTH_GOOD),
    (48, 50.4, C.HEALTH_GOOD),
    (30, 60, C.HEALTH_FAIR),
    (60, 85, C.HEALTH_FAIR),
    (30, 40, C.HEALTH_POOR),
    (5, 60, C.HEALTH_CRITICAL),
    (96, 60, C.HEALTH_CRITICAL),
    (60, 15, C.HEALTH_CRITICAL),
    (60, 96, C.HEALTH_CRITICAL),
])
def test_calculate_health(water, nutrients, health):
    assert calculate_health(water, nutrients) == health


def test_seed_is_low_64_bits_of_the_id():
    plant_id = "ffffffff-ffff-4fff-8fff-000000000001"
    assert seed_from_id(plant_id) == uuid.UUID(plant_id).int & (2 ** 64 - 1)
    assert seed_from_id(plant_id) == seed_from_id(plant_id)


def test_new_plant_defaults(plant):
    assert plant.stage == C.STAGE_SEEDLING
    assert plant.days_alive == 1
    assert plant.total_hours_elapsed == 0.0
    assert plant.water_level == 60.0
    assert plant.nutrient_level == 60.0
    assert plant.light_cycle == C.LIGHT_CYCLE_VEG
    assert plant.health == C.HEALTH_EXCELLENT
    assert plant.strain_name == C.UNKNOWN_STRAIN_NAME
    assert plant.canopy_density == 5.0
    assert plant.seed == seed_from_id(plant.id)


def test_plant_seed_uses_strains(strain, rng):
    plant = Plant.plant_seed([strain], rng)
    assert plant.strain_name == "Test Kush"
    assert plant.genetics.strain_info is strain
    assert Plant.plant_seed([strain], rng).id != plant.id


def test_toggle_light_cycle(plant):
    plant.toggle_light_cycle()
    assert plant.light_cycle == C.LIGHT_CYCLE_FLOWER
    plant.toggle_light_cycle()
    assert plant.light_cycle == C.LIGHT_CYCLE_VEG


def test_care_percentages_default_to_full():
    history = CareHistory()
    assert history.water_percentage() == 100.0
    assert history.nutrient_percentage() == 100.0
    history.total_hours = 200.0
    history.total_optimal_water_hours = 150.0
    history.total_optimal_nutrient_hours = 50.0
    assert history.water_percentage() == 75.0
    assert history.nutrient_percentage() == 25.0


def test_stress_is_deduplicated_within_five_days():
    history = CareHistory()
    assert history.record_stress(C.STRESS_LOW_WATER, C.SEVERITY_MODERATE, 20)
    assert not history.record_stress(C.STRESS_LOW_WATER, C.SEVERITY_MODERATE, 22)
    assert len(history.stress_events) == 1
    assert history.record_stress(C.STRESS_LOW_WATER, C.SEVERITY_MODERATE, 26)
    assert len(history.stress_events) == 2


def test_stress_window_edges():
    history = CareHistory()
    history.record_stress(C.STRESS_HIGH_WATER, C.SEVERITY_MODERATE, 10)
    assert history.has_recent_stress(C.STRESS_HIGH_WATER, 15)
    assert not history.has_recent_stress(C.STRESS_HIGH_WATER, 16)
    assert not history.has_recent_stress(C.STRESS_LOW_WATER, 10)


def test_stress_window_saturates_at_day_zero():
    history = CareHistory()
    history.record_stress(C.STRESS_LOW_NUTRIENTS, C.SEVERITY_MODERATE, 0)
    assert history.has_recent_stress(C.STRESS_LOW_NUTRIENTS, 3)


def test_only_the_ten_latest_events_count():
    history = CareHistory()
    history.record_stress(C.STRESS_LOW_WATER, C.SEVERITY_MODERATE, 20)
    causes = [C.STRESS_HIGH_WATER, C.STRESS_LOW_NUTRIENTS, C.STRESS_NUTRIENT_BURN,
              C.STRESS_WRONG_LIGHT_CYCLE]
    for day in range(20, 30):
        history.stress_events.append(StressEvent(day, C.SEVERITY_MINOR, causes[day % 4]))
    assert not history.has_recent_stress(C.STRESS_LOW_WATER, 21)
    assert history.record_stress(C.STRESS_LOW_WATER, C.SEVERITY_MODERATE, 21)


def test_plant_round_trip(plant, strain):
    plant.genetics.strain_info = strain
    plant.days_alive = 33
    plant.total_hours_elapsed = 33 * 24.0
    plant.stage = C.STAGE_VEGETATIVE
    plant.water_level = 47.5
    plant.care_history.record_stress(C.STRESS_NUTRIENT_BURN, C.SEVERITY_SEVERE, 30)
    plant.care_history.total_hours = 792.0

    restored = Plant.from_dict(plant.to_dict())
    assert restored.to_dict() == plant.to_dict()
    assert restored.seed == plant.seed
    assert restored.genetics.strain_info.name == "Test Kush"
    assert restored.care_history.stress_events[0].cause == C.STRESS_NUTRIENT_BURN


def test_unknown_stage_is_rejected(plant):
    data = plant.to_dict()
    data["stage"] = "germinating"
    with pytest.raises(ValueError):
        Plant.from_dict(data)


def test_genetics_round_trip(genetics):
    assert Genetics.from_dict(genetics.to_dict()).to_dict() == genetics.to_dict()

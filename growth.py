# growth.py

import numpy as np

import constants as C
import logger as log
import environment
from plant import calculate_stage, calculate_health, is_water_optimal, is_nutrient_optimal

def _drain(level, rate_per_hour, hours):
    return max(level - rate_per_hour * hours, 0.0)

def _top_up(level, threshold, amount):
    """The room refills a resource once it falls below its threshold."""
    if level < threshold:
        return min(level + amount, C.RESOURCE_MAX)
    return level

def _detect_stress(plant):
    """Records stress events for out-of-range resources. Returns the events that were added."""
    checks = (
        (plant.water_level < C.STRESS_WATER_LOW, C.STRESS_LOW_WATER, C.SEVERITY_MODERATE),
        (plant.water_level > C.STRESS_WATER_HIGH, C.STRESS_HIGH_WATER, C.SEVERITY_MODERATE),
        (plant.nutrient_level < C.STRESS_NUTRIENT_LOW, C.STRESS_LOW_NUTRIENTS, C.SEVERITY_MODERATE),
        (plant.nutrient_level > C.STRESS_NUTRIENT_HIGH, C.STRESS_NUTRIENT_BURN, C.SEVERITY_SEVERE),
    )
    added = []
    for triggered, cause, severity in checks:
        if triggered and plant.care_history.record_stress(cause, severity, plant.days_alive):
            added.append(cause)
            log.log(f"Event: Plant {plant.id[:8]} under {severity} stress ({cause}) on day {plant.days_alive}.")
    return added

def advance_plant(plant, hours_elapsed):
    """
    Advances a plant by a number of simulated hours: ages it, drains and tops up
    its resources, recomputes its environment, stage, light cycle and health,
    updates the care counters and records stress.
    Returns the list of stress causes recorded during this step.
    """
    if not np.isfinite(hours_elapsed) or hours_elapsed < 0:
        hours_elapsed = 0.0

    previous_stage = plant.stage

    # --- Age ---
    plant.total_hours_elapsed += hours_elapsed
    plant.days_alive = int(plant.total_hours_elapsed / C.HOURS_PER_DAY)

    # --- Resources (drain by the stage the tick started in) ---
    water_rate = C.WATER_DRAIN_PER_HOUR.get(previous_stage, C.WATER_DRAIN_DEFAULT)
    nutrient_rate = C.NUTRIENT_DRAIN_PER_HOUR.get(previous_stage, C.NUTRIENT_DRAIN_DEFAULT)
    plant.water_level = _drain(plant.water_level, water_rate, hours_elapsed)
    plant.nutrient_level = _drain(plant.nutrient_level, nutrient_rate, hours_elapsed)
    plant.water_level = _top_up(plant.water_level, C.WATER_TOP_UP_THRESHOLD, C.WATER_TOP_UP_AMOUNT)
    plant.nutrient_level = _top_up(plant.nutrient_level, C.NUTRIENT_TOP_UP_THRESHOLD, C.NUTRIENT_TOP_UP_AMOUNT)

    environment.update_environment(plant)

    # --- Stage and light cycle ---
    plant.stage = calculate_stage(plant.days_alive)
    if plant.stage != previous_stage:
        log.log(f"Event: Plant {plant.id[:8]} entered {C.STAGE_DISPLAY_NAMES[plant.stage]} stage on day {plant.days_alive}.")

    if plant.days_alive >= C.LIGHT_CYCLE_SWITCH_DAY and plant.light_cycle == C.LIGHT_CYCLE_VEG:
        plant.toggle_light_cycle()
        log.log(f"Event: Light cycle switched to {C.LIGHT_CYCLE_DISPLAY_NAMES[plant.light_cycle]}.")

    # --- Health ---
    plant.health = calculate_health(plant.water_level, plant.nutrient_level)
    plant.canopy_density *= environment.health_canopy_factor(plant.health, plant.genetics.resilience)

    # --- Care history ---
    history = plant.care_history
    if is_water_optimal(plant.water_level):
        history.total_optimal_water_hours += hours_elapsed
    if is_nutrient_optimal(plant.nutrient_level):
        history.total_optimal_nutrient_hours += hours_elapsed
    history.total_hours += hours_elapsed

    return _detect_stress(plant)

# environment.py

import numpy as np
import constants as C

def co2_level(canopy_density):
    """CO2 absorption rises with canopy density."""
    return min(C.CO2_BASE + canopy_density * C.CO2_PER_CANOPY, C.METRIC_MAX)

def light_absorption(stage, canopy_density):
    base = C.LIGHT_ABSORPTION_BASE[stage]
    return min(base + canopy_density * C.LIGHT_PER_CANOPY, C.METRIC_MAX)

def temperature(days_alive):
    """A small deterministic daily oscillation around 24 C."""
    variation = np.sin(days_alive * C.TEMPERATURE_DAY_FREQUENCY) * C.TEMPERATURE_SWING_C
    low, high = C.TEMPERATURE_RANGE_C
    return float(np.clip(C.TEMPERATURE_BASE_C + variation, low, high))

def humidity(water_level):
    return min(C.HUMIDITY_BASE + water_level * C.HUMIDITY_PER_WATER, C.HUMIDITY_MAX)

def root_development(days_alive):
    return min(days_alive / C.ROOT_MATURITY_DAYS * 100.0, C.METRIC_MAX)

def canopy_density(stage, days_alive, growth_rate):
    """Canopy coverage before the health penalty, scaled by the plant's genetic growth rate."""
    base, per_day = C.CANOPY_BASE[stage]
    return min((base + days_alive * per_day) * growth_rate, C.METRIC_MAX)

def health_canopy_factor(health, resilience):
    """Unhealthy plants grow a thinner canopy; resilience recovers part of the loss."""
    base, recoverable = C.HEALTH_CANOPY_FACTORS[health]
    return base + resilience * recoverable

def update_environment(plant):
    """
    Recomputes the six environmental metrics of a plant in place.
    CO2 and light use the canopy from before this update, and the stage is the
    one the plant had when the tick started.
    """
    plant.co2_level = co2_level(plant.canopy_density)
    plant.light_absorption = light_absorption(plant.stage, plant.canopy_density)
    plant.temperature = temperature(plant.days_alive)
    plant.humidity = humidity(plant.water_level)
    plant.root_development = root_development(plant.days_alive)
    plant.canopy_density = canopy_density(plant.stage, plant.days_alive, plant.genetics.growth_rate)

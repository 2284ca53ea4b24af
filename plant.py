# plant.py

import uuid
from datetime import datetime, timezone

import constants as C
import logger as log
from genes import Genetics, random_genetics

def calculate_stage(days):
    """Growth stage from days alive. Days outside every band (86+, or 0) count as ready."""
    for stage, first_day, last_day in C.STAGE_DAY_BANDS:
        if first_day <= days <= last_day:
            return stage
    return C.STAGE_READY_TO_HARVEST

def _in_range(value, bounds):
    low, high = bounds
    return low <= value <= high

def is_water_optimal(water):
    return _in_range(water, C.WATER_OPTIMAL_RANGE)

def is_nutrient_optimal(nutrients):
    return _in_range(nutrients, C.NUTRIENT_OPTIMAL_RANGE)

def calculate_health(water, nutrients):
    """
    Health from the current resource levels. A critical level of either resource
    overrides everything else; otherwise the number of resources outside their
    optimal band decides the tier.
    """
    water_critical = water < C.WATER_CRITICAL_LOW or water > C.WATER_CRITICAL_HIGH
    nutrient_critical = nutrients < C.NUTRIENT_CRITICAL_LOW or nutrients > C.NUTRIENT_CRITICAL_HIGH
    water_optimal = is_water_optimal(water)
    nutrient_optimal = is_nutrient_optimal(nutrients)

    if water_critical or nutrient_critical:
        return C.HEALTH_CRITICAL
    if not water_optimal and not nutrient_optimal:
        return C.HEALTH_POOR
    if not water_optimal or not nutrient_optimal:
        return C.HEALTH_FAIR
    if _in_range(water, C.WATER_EXCELLENT_RANGE) and _in_range(nutrients, C.NUTRIENT_EXCELLENT_RANGE):
        return C.HEALTH_EXCELLENT
    return C.HEALTH_GOOD

def seed_from_id(plant_id):
    """The rendering seed is the low 64 bits of the plant's UUID."""
    return uuid.UUID(str(plant_id)).int & C.LCG_MASK_64

class StressEvent:
    def __init__(self, day, severity, cause):
        self.day = day
        self.severity = severity
        self.cause = cause

    def to_dict(self):
        return {"day": self.day, "severity": self.severity, "cause": self.cause}

    @classmethod
    def from_dict(cls, data):
        return cls(int(data["day"]), data["severity"], data["cause"])

class CareHistory:
    """Cumulative care counters used to grade the harvest."""
    def __init__(self):
        self.total_hours = 0.0
        self.total_optimal_water_hours = 0.0 # Hours with water in [40, 80]
        self.total_optimal_nutrient_hours = 0.0 # Hours with nutrients in [50, 80]
        self.light_cycle_correct = True
        self.stress_events = []

    def water_percentage(self):
        if self.total_hours == 0:
            return 100.0
        return self.total_optimal_water_hours / self.total_hours * 100.0

    def nutrient_percentage(self):
        if self.total_hours == 0:
            return 100.0
        return self.total_optimal_nutrient_hours / self.total_hours * 100.0

    def has_recent_stress(self, cause, current_day):
        """True if the same cause was recorded within the dedup window among the latest events."""
        window_start = max(current_day - C.STRESS_DEDUP_WINDOW_DAYS, 0)
        recent = self.stress_events[-C.STRESS_DEDUP_LOOKBACK:]
        return any(e.cause == cause and e.day >= window_start for e in recent)

    def record_stress(self, cause, severity, day):
        """Appends a stress event unless it duplicates a recent one. Returns True if recorded."""
        if self.has_recent_stress(cause, day):
            return False
        self.stress_events.append(StressEvent(day, severity, cause))
        return True

    def to_dict(self):
        return {
            "total_hours": self.total_hours,
            "total_optimal_water_hours": self.total_optimal_water_hours,
            "total_optimal_nutrient_hours": self.total_optimal_nutrient_hours,
            "light_cycle_correct": self.light_cycle_correct,
            "stress_events": [e.to_dict() for e in self.stress_events],
        }

    @classmethod
    def from_dict(cls, data):
        history = cls()
        history.total_hours = float(data.get("total_hours", 0.0))
        history.total_optimal_water_hours = float(data.get("total_optimal_water_hours", 0.0))
        history.total_optimal_nutrient_hours = float(data.get("total_optimal_nutrient_hours", 0.0))
        history.light_cycle_correct = bool(data.get("light_cycle_correct", True))
        history.stress_events = [StressEvent.from_dict(e) for e in data.get("stress_events", [])]
        return history

class Plant:
    """The one live plant in the grow room."""
    def __init__(self, genetics, plant_id=None, planted_at=None):
        self.id = str(plant_id or uuid.uuid4())
        self.genetics = genetics
        self.strain_name = genetics.strain_info.name if genetics.strain_info else C.UNKNOWN_STRAIN_NAME
        self.planted_at = planted_at or datetime.now(timezone.utc).isoformat()
        self.stage = C.STAGE_SEEDLING
        self.days_alive = C.INITIAL_DAY
        self.total_hours_elapsed = 0.0
        self.water_level = C.INITIAL_WATER_LEVEL
        self.nutrient_level = C.INITIAL_NUTRIENT_LEVEL
        self.light_cycle = C.LIGHT_CYCLE_VEG
        self.health = C.HEALTH_EXCELLENT
        self.care_history = CareHistory()

        # --- Environmental metrics ---
        self.co2_level = C.INITIAL_CO2_LEVEL
        self.light_absorption = C.INITIAL_LIGHT_ABSORPTION
        self.temperature = C.INITIAL_TEMPERATURE_C
        self.humidity = C.INITIAL_HUMIDITY
        self.root_development = C.INITIAL_ROOT_DEVELOPMENT
        self.canopy_density = C.INITIAL_CANOPY_DENSITY

    @classmethod
    def plant_seed(cls, strains, rng=None):
        """Plants a fresh seed with newly drawn genetics."""
        plant = cls(random_genetics(strains, rng))
        log.log(f"Event: Planted a new {plant.strain_name} seed (id {plant.id[:8]}).")
        return plant

    @property
    def seed(self):
        return seed_from_id(self.id)

    def toggle_light_cycle(self):
        if self.light_cycle == C.LIGHT_CYCLE_VEG:
            self.light_cycle = C.LIGHT_CYCLE_FLOWER
        else:
            self.light_cycle = C.LIGHT_CYCLE_VEG

    def to_dict(self):
        return {
            "id": self.id,
            "strain_name": self.strain_name,
            "stage": self.stage,
            "planted_at": self.planted_at,
            "days_alive": self.days_alive,
            "total_hours_elapsed": self.total_hours_elapsed,
            "water_level": self.water_level,
            "nutrient_level": self.nutrient_level,
            "light_cycle": self.light_cycle,
            "health": self.health,
            "genetics": self.genetics.to_dict(),
            "care_history": self.care_history.to_dict(),
            "co2_level": self.co2_level,
            "light_absorption": self.light_absorption,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "root_development": self.root_development,
            "canopy_density": self.canopy_density,
        }

    @classmethod
    def from_dict(cls, data):
        plant = cls(Genetics.from_dict(data["genetics"]), plant_id=data["id"], planted_at=data["planted_at"])
        plant.strain_name = data["strain_name"]
        plant.stage = data["stage"]
        plant.days_alive = int(data["days_alive"])
        plant.total_hours_elapsed = float(data["total_hours_elapsed"])
        plant.water_level = float(data["water_level"])
        plant.nutrient_level = float(data["nutrient_level"])
        plant.light_cycle = data["light_cycle"]
        plant.health = data["health"]
        plant.care_history = CareHistory.from_dict(data["care_history"])
        plant.co2_level = float(data["co2_level"])
        plant.light_absorption = float(data["light_absorption"])
        plant.temperature = float(data["temperature"])
        plant.humidity = float(data["humidity"])
        plant.root_development = float(data["root_development"])
        plant.canopy_density = float(data["canopy_density"])
        if plant.stage not in C.STAGES:
            raise ValueError(f"Unknown growth stage '{plant.stage}'")
        return plant

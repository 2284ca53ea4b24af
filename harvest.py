# harvest.py

from datetime import datetime, timezone

import constants as C

class HarvestResult:
    """The outcome of one harvest, graded from the plant's care history."""
    def __init__(self, strain_name, harvest_day, completed_at, weight_grams, quality_score, thc_percent, cbd_percent):
        self.strain_name = strain_name
        self.harvest_day = harvest_day
        self.completed_at = completed_at # ISO timestamp
        self.weight_grams = weight_grams
        self.quality_score = quality_score # 0-100
        self.thc_percent = thc_percent
        self.cbd_percent = cbd_percent

    @classmethod
    def from_plant(cls, plant):
        history = plant.care_history
        care_quality = max(C.CARE_QUALITY_FLOOR, (history.water_percentage() + history.nutrient_percentage()) / 200.0)

        # Each stress event costs 2% of the yield, up to 30%.
        stress_penalty = min(C.STRESS_PENALTY_CAP, len(history.stress_events) * C.STRESS_PENALTY_PER_EVENT)

        weight_grams = plant.genetics.yield_potential * care_quality * (1.0 - stress_penalty)
        quality_score = max(0.0, min(care_quality * 100.0 * (1.0 - stress_penalty), 100.0))

        cannabinoid_multiplier = C.CANNABINOID_BASE_MULTIPLIER + quality_score / 100.0 * C.CANNABINOID_QUALITY_SHARE
        return cls(
            strain_name=plant.strain_name,
            harvest_day=plant.days_alive,
            completed_at=datetime.now(timezone.utc).isoformat(),
            weight_grams=weight_grams,
            quality_score=quality_score,
            thc_percent=plant.genetics.thc_percent * cannabinoid_multiplier,
            cbd_percent=plant.genetics.cbd_percent * cannabinoid_multiplier,
        )

    def to_dict(self):
        return {
            "strain_name": self.strain_name,
            "harvest_day": self.harvest_day,
            "completed_at": self.completed_at,
            "weight_grams": self.weight_grams,
            "quality_score": self.quality_score,
            "thc_percent": self.thc_percent,
            "cbd_percent": self.cbd_percent,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            strain_name=data["strain_name"],
            harvest_day=int(data["harvest_day"]),
            completed_at=data["completed_at"],
            weight_grams=float(data["weight_grams"]),
            quality_score=float(data["quality_score"]),
            thc_percent=float(data["thc_percent"]),
            cbd_percent=float(data["cbd_percent"]),
        )

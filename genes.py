#genes.py

import json
import os
import numpy as np

import constants as C
import logger as log

class StrainInfo:
    """A data container for one strain record from the strain database."""
    def __init__(self, name, strain_type, genetics, thc_min, thc_max, cbd_min, cbd_max,
                 flowering_time, difficulty, yield_potential, dominant_terpenes=None,
                 aroma=None, effects=None, height="", phenotype=""):
        self.name = name
        self.strain_type = strain_type # Sativa, Indica or Hybrid
        self.genetics = genetics # Parent lineage, free text
        self.thc_min = thc_min
        self.thc_max = thc_max
        self.cbd_min = cbd_min
        self.cbd_max = cbd_max
        self.flowering_time = flowering_time # Days
        self.difficulty = difficulty # Easy, Medium or Hard
        self.yield_potential = yield_potential # Low, Medium or High
        self.dominant_terpenes = list(dominant_terpenes or [])
        self.aroma = list(aroma or [])
        self.effects = list(effects or [])
        self.height = height
        self.phenotype = phenotype

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data["name"],
            strain_type=data["type"],
            genetics=data["genetics"],
            thc_min=float(data["thc_min"]),
            thc_max=float(data["thc_max"]),
            cbd_min=float(data["cbd_min"]),
            cbd_max=float(data["cbd_max"]),
            flowering_time=int(data["flowering_time"]),
            difficulty=data["difficulty"],
            yield_potential=data["yield_potential"],
            dominant_terpenes=data.get("dominant_terpenes"),
            aroma=data.get("aroma"),
            effects=data.get("effects"),
            height=data.get("height", ""),
            phenotype=data.get("phenotype", ""),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "type": self.strain_type,
            "genetics": self.genetics,
            "thc_min": self.thc_min,
            "thc_max": self.thc_max,
            "cbd_min": self.cbd_min,
            "cbd_max": self.cbd_max,
            "flowering_time": self.flowering_time,
            "difficulty": self.difficulty,
            "yield_potential": self.yield_potential,
            "dominant_terpenes": list(self.dominant_terpenes),
            "aroma": list(self.aroma),
            "effects": list(self.effects),
            "height": self.height,
            "phenotype": self.phenotype,
        }

class Genetics:
    """The genetic traits of one plant, drawn once at planting time."""
    def __init__(self, yield_potential, growth_rate, resilience, quality_ceiling,
                 thc_percent, cbd_percent, strain_info=None):
        self.yield_potential = yield_potential # Base yield in grams
        self.growth_rate = growth_rate # Canopy growth multiplier
        self.resilience = resilience # Tolerance to care mistakes [0, 1]
        self.quality_ceiling = quality_ceiling # Maximum achievable quality (%)
        self.thc_percent = thc_percent
        self.cbd_percent = cbd_percent
        self.strain_info = strain_info

    @classmethod
    def from_dict(cls, data):
        strain_data = data.get("strain_info")
        return cls(
            yield_potential=float(data["yield_potential"]),
            growth_rate=float(data["growth_rate"]),
            resilience=float(data["resilience"]),
            quality_ceiling=float(data["quality_ceiling"]),
            thc_percent=float(data["thc_percent"]),
            cbd_percent=float(data["cbd_percent"]),
            strain_info=StrainInfo.from_dict(strain_data) if strain_data else None,
        )

    def to_dict(self):
        return {
            "yield_potential": self.yield_potential,
            "growth_rate": self.growth_rate,
            "resilience": self.resilience,
            "quality_ceiling": self.quality_ceiling,
            "strain_info": self.strain_info.to_dict() if self.strain_info else None,
            "thc_percent": self.thc_percent,
            "cbd_percent": self.cbd_percent,
        }

def strain_search_paths():
    """Where the strain database is looked up, in order."""
    paths = []
    env_path = os.environ.get(C.STRAINS_PATH_ENV_VAR)
    if env_path:
        paths.append(env_path)
    paths.append(C.STRAINS_FILE_NAME)
    paths.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), C.STRAINS_FILE_NAME))
    return paths

def load_strains(paths=None):
    """Returns the strains from the first readable, well-formed file, or an empty list."""
    if paths is None:
        paths = strain_search_paths()
    for path in paths:
        if not os.path.exists(path):
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                strains = [StrainInfo.from_dict(record) for record in json.load(f)]
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.log(f"ERROR: Could not load strain database '{path}': {e}")
            continue
        log.log(f"Loaded {len(strains)} strains from '{path}'.")
        return strains
    log.log("DEBUG: No strain database found. Plants will use generic genetics.")
    return []

def random_genetics(strains, rng=None):
    """Draws genetics for a new seed, shaped by a randomly picked strain when any are known."""
    if rng is None:
        rng = np.random.default_rng()

    if strains:
        strain = strains[int(rng.integers(len(strains)))]
        yield_range = C.YIELD_RANGE_BY_CLASS.get(strain.yield_potential, C.YIELD_RANGE_DEFAULT)
        resilience_range = C.RESILIENCE_RANGE_BY_DIFFICULTY.get(strain.difficulty, C.RESILIENCE_RANGE_DEFAULT)
        quality_range = C.QUALITY_RANGE_BY_TYPE.get(strain.strain_type, C.QUALITY_RANGE_DEFAULT)
        thc_range = (strain.thc_min, strain.thc_max)
        cbd_range = (strain.cbd_min, strain.cbd_max)
    else:
        strain = None
        yield_range = C.YIELD_RANGE_DEFAULT
        resilience_range = C.RESILIENCE_RANGE_DEFAULT
        quality_range = C.QUALITY_RANGE_DEFAULT
        thc_range = C.THC_RANGE_DEFAULT
        cbd_range = C.CBD_RANGE_DEFAULT

    return Genetics(
        yield_potential=float(rng.uniform(*yield_range)),
        growth_rate=float(rng.uniform(*C.GROWTH_RATE_RANGE)),
        resilience=float(rng.uniform(*resilience_range)),
        quality_ceiling=float(rng.uniform(*quality_range)),
        thc_percent=float(rng.uniform(*thc_range)),
        cbd_percent=float(rng.uniform(*cbd_range)),
        strain_info=strain,
    )

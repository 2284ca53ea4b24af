# plant_structure.py

import math
import threading
from typing import NamedTuple, Optional, Tuple

import constants as C
import logger as log
from lcg import LinearCongruentialGenerator

class Branch(NamedTuple):
    """A single branch attached to the trunk (or, for secondaries, near a primary branch)."""
    level: int # Attachment row above the soil
    direction: int # -1 = left, 1 = right
    growth_start_day: int
    max_length: int # Characters
    thickness: int # 1-3
    curve: int # -1, 0 or 1
    is_secondary: bool
    parent_index: Optional[int]
    can_bifurcate: bool
    bifurcation_day: int

class TrunkSplit(NamedTuple):
    split_day: int
    split_level: int
    angle: int # -2 to 2

class PlantStructure(NamedTuple):
    """The immutable skeleton of one plant. Equal seeds always produce equal structures."""
    seed: int
    phenotype: str
    branch_density: float
    foliage_density: float
    max_height: int
    growth_rate: float
    branches: Tuple[Branch, ...]
    trunk_splits: Tuple[TrunkSplit, ...]

    def trunk_height(self, day):
        """Current trunk height in rows, growing linearly until max_height."""
        return min(int(day * self.growth_rate), self.max_height)

    def branch_length(self, branch, day):
        """
        Current length of a branch using a sigmoid growth curve (slow -> fast -> slow).
        A branch reaches its full length after max_length * 3 days of growth.
        """
        if day < branch.growth_start_day:
            return 0.0
        days_growing = day - branch.growth_start_day
        total_days = branch.max_length * C.BRANCH_GROWTH_DAYS_PER_CHAR
        progress = min(days_growing / total_days, 1.0)
        sigmoid = 1.0 / (1.0 + math.exp(-C.BRANCH_SIGMOID_STEEPNESS * (progress - 0.5)))
        return branch.max_length * sigmoid

    def visible_branches(self, day):
        """Branches that have started growing by `day`, in generation order."""
        return [b for b in self.branches if b.growth_start_day <= day]

    def current_foliage_density(self, day):
        """Foliage fills in over the first 90 days."""
        progress = min(day / C.FOLIAGE_MATURITY_DAYS, 1.0)
        return self.foliage_density * progress

def generate_structure(seed):
    """
    Procedurally generates a plant structure from a 64-bit seed.
    Every draw comes from one LCG stream in a fixed order, so the order of the
    draws below must not change or existing plants would change shape.
    """
    rng = LinearCongruentialGenerator(seed)

    # --- Phenotype and body plan ---
    phenotype = C.PHENOTYPES[rng.next_below(3)]
    branch_density, foliage_density, base_height, growth_rate = C.PHENOTYPE_BODY_PLAN[phenotype]
    max_height = base_height + rng.next_below(C.MAX_HEIGHT_SPREAD)

    min_primary, primary_spread = C.PRIMARY_BRANCH_COUNT[phenotype]
    num_primary = min_primary + rng.next_below(primary_spread)

    # --- Primary branches (attached to the trunk) ---
    branches = []
    days_per_level = C.BRANCH_DAYS_PER_LEVEL[phenotype]
    min_level = C.PRIMARY_BRANCH_MIN_LEVEL[phenotype]
    min_length, length_spread = C.PRIMARY_BRANCH_LENGTH[phenotype]
    for _ in range(num_primary):
        level = min_level + rng.next_below(max(max_height - min_level, 1))

        # Branches appear shortly after the trunk reaches their row.
        level_day = C.BRANCH_BASE_START_DAY + int((max_height - level) * days_per_level)
        growth_start_day = level_day + rng.next_below(C.BRANCH_START_JITTER_DAYS)

        direction = rng.sign()
        max_length = min_length + rng.next_below(length_spread)

        if phenotype == C.PHENOTYPE_BUSHY:
            thickness = 2 if rng.one_in(2) else 1
        elif phenotype == C.PHENOTYPE_BALANCED:
            thickness = 2 if rng.one_in(3) else 1
        else:
            thickness = 1

        curve = rng.sign() if rng.one_in(3) else 0

        can_bifurcate = rng.one_in(C.PRIMARY_BIFURCATION_ODDS)
        if can_bifurcate:
            delay, delay_spread = C.PRIMARY_BIFURCATION_DELAY_DAYS
            bifurcation_day = growth_start_day + delay + rng.next_below(delay_spread)
        else:
            bifurcation_day = C.NEVER_BIFURCATES_DAY

        branches.append(Branch(level, direction, growth_start_day, max_length, thickness,
                               curve, False, None, can_bifurcate, bifurcation_day))

    # --- Secondary branches (grow near a primary branch) ---
    primary_count = len(branches)
    num_secondary = int(num_primary * C.SECONDARY_BRANCH_RATIO[phenotype])
    for _ in range(num_secondary):
        parent_index = rng.next_below(primary_count)
        parent = branches[parent_index]

        delay, delay_spread = C.SECONDARY_START_DELAY_DAYS
        growth_start_day = parent.growth_start_day + delay + rng.next_below(delay_spread)

        level_offset = rng.next_below(3) - 1
        level = max(1, min(parent.level + level_offset, max_height - 1))

        # Usually grows the opposite way for visual variety.
        direction = parent.direction if rng.one_in(3) else -parent.direction

        min_secondary, secondary_spread = C.SECONDARY_BRANCH_LENGTH
        max_length = min_secondary + rng.next_below(secondary_spread)

        curve = rng.sign() if rng.one_in(2) else 0

        can_bifurcate = rng.one_in(C.SECONDARY_BIFURCATION_ODDS)
        if can_bifurcate:
            delay, delay_spread = C.SECONDARY_BIFURCATION_DELAY_DAYS
            bifurcation_day = growth_start_day + delay + rng.next_below(delay_spread)
        else:
            bifurcation_day = C.NEVER_BIFURCATES_DAY

        branches.append(Branch(level, direction, growth_start_day, max_length, 1,
                               curve, True, parent_index, can_bifurcate, bifurcation_day))

    # --- Trunk splits ---
    if phenotype == C.PHENOTYPE_TALL:
        num_splits = 1 if rng.one_in(3) else 0
    elif phenotype == C.PHENOTYPE_BUSHY:
        num_splits = 1 if rng.one_in(2) else 2
    else:
        num_splits = 1 if rng.one_in(4) else 0

    trunk_splits = []
    for _ in range(num_splits):
        first_day, day_spread = C.TRUNK_SPLIT_DAY
        split_day = first_day + rng.next_below(day_spread)
        first_level, level_spread = C.TRUNK_SPLIT_LEVEL
        split_level = first_level + rng.next_below(level_spread)
        angle = rng.next_below(2 * C.TRUNK_SPLIT_MAX_ANGLE + 1) - C.TRUNK_SPLIT_MAX_ANGLE
        trunk_splits.append(TrunkSplit(split_day, split_level, angle))

    return PlantStructure(seed, phenotype, branch_density, foliage_density, max_height,
                          growth_rate, tuple(branches), tuple(trunk_splits))

class StructureCache:
    """
    Memoizes generated structures by seed. Lookup, generation and insertion
    happen under one lock so a background prefetch and the render loop never
    race on the same seed. Entries are never evicted.
    """
    def __init__(self):
        self._structures = {}
        self._lock = threading.Lock()

    def get_or_generate(self, seed):
        with self._lock:
            structure = self._structures.get(seed)
            if structure is None:
                structure = generate_structure(seed)
                self._structures[seed] = structure
                log.log(f"DEBUG: Generated {structure.phenotype} plant structure for seed {seed} "
                        f"({len(structure.branches)} branches, {len(structure.trunk_splits)} trunk splits).")
            return structure

    def __len__(self):
        with self._lock:
            return len(self._structures)

    def __contains__(self, seed):
        with self._lock:
            return seed in self._structures

# grow_room.py

import threading
from datetime import datetime, timezone

import constants as C
import logger as log
from growth import advance_plant
from harvest import HarvestResult
from palettes import Palette, next_visual_mode
from plant import Plant
from plant_structure import StructureCache
from renderer import get_plant_ascii
from time_manager import real_seconds_to_sim_hours

class GrowRoom:
    """
    The application state: one live plant, the harvest history and the
    display settings. Owns the structure cache used to render the plant.
    """
    def __init__(self, supports_rgb=True, strains=None, rng=None, cache=None, plant=True):
        self.current_plant = None
        self.harvest_history = []
        self.total_harvests = 0
        self.auto_harvest = False
        self.visual_mode = C.VISUAL_MODE_NORMAL
        self.last_tick = datetime.now(timezone.utc).isoformat()
        self.strains = strains if strains is not None else []
        self.rng = rng
        self.structure_cache = cache if cache is not None else StructureCache()

        # --- UI state (never persisted) ---
        self.current_screen = C.SCREEN_GROWING_ROOM
        self.running = True
        self.animation_frame = 0
        self.palette = Palette(self.visual_mode, supports_rgb)

        if plant:
            self.plant_new_seed()

    def plant_new_seed(self):
        self.current_plant = Plant.plant_seed(self.strains, self.rng)

    def harvest_and_replant(self):
        """Grades and records the current plant, then plants a fresh seed. Returns the result."""
        if self.current_plant is None:
            return None
        result = HarvestResult.from_plant(self.current_plant)
        self.harvest_history.append(result)
        self.total_harvests += 1
        log.log(f"Event: Harvested {result.strain_name} on day {result.harvest_day}: "
                f"{result.weight_grams:.1f}g at {result.quality_score:.0f}% quality "
                f"(THC {result.thc_percent:.1f}%, CBD {result.cbd_percent:.2f}%).")
        self.plant_new_seed()
        return result

    def harvest(self):
        """Manual harvest, only accepted once the plant is ready."""
        if self.current_plant is None or self.current_plant.stage != C.STAGE_READY_TO_HARVEST:
            log.log("DEBUG: Harvest ignored, the plant is not ready yet.")
            return None
        return self.harvest_and_replant()

    def toggle_auto_harvest(self):
        self.auto_harvest = not self.auto_harvest
        log.log(f"Event: Auto-harvest {'enabled' if self.auto_harvest else 'disabled'}.")

    def cycle_visual_mode(self):
        """Moves to the next visual mode. The 16 color palette stays in normal mode."""
        if not self.palette.supports_rgb:
            return
        self.visual_mode = next_visual_mode(self.visual_mode)
        self.palette = Palette(self.visual_mode, True)
        log.log(f"Event: Visual mode set to {C.VISUAL_MODE_DISPLAY_NAMES[self.visual_mode]}.")

    def set_screen(self, screen):
        self.current_screen = screen

    def quit(self):
        self.running = False

    def update_time(self, elapsed_seconds):
        """Advances the live plant by `elapsed_seconds` of real time and steps the animation."""
        plant = self.current_plant
        if plant is not None:
            advance_plant(plant, real_seconds_to_sim_hours(elapsed_seconds))
            if (self.auto_harvest and plant.stage == C.STAGE_READY_TO_HARVEST
                    and plant.days_alive >= C.AUTO_HARVEST_DAY):
                self.harvest_and_replant()

        self.last_tick = datetime.now(timezone.utc).isoformat()
        self.animation_frame += 1

    def plant_ascii(self):
        """The live plant rendered for the current animation frame."""
        plant = self.current_plant
        if plant is None:
            return []
        return get_plant_ascii(plant.stage, plant.days_alive, plant.seed, self.animation_frame, self.structure_cache)

    def prefetch_structure(self):
        """Warms the structure cache for the live plant on a background thread."""
        if self.current_plant is None:
            return None
        thread = threading.Thread(target=self.structure_cache.get_or_generate,
                                  args=(self.current_plant.seed,), daemon=True)
        thread.start()
        return thread

    def to_dict(self):
        return {
            "current_plant": self.current_plant.to_dict() if self.current_plant else None,
            "harvest_history": [h.to_dict() for h in self.harvest_history],
            "last_tick": self.last_tick,
            "total_harvests": self.total_harvests,
            "auto_harvest": self.auto_harvest,
            "visual_mode": self.visual_mode,
        }

    @classmethod
    def from_dict(cls, data, supports_rgb=True, strains=None, rng=None):
        """Restores a saved room. UI-only state starts from its defaults."""
        room = cls(supports_rgb=supports_rgb, strains=strains, rng=rng, plant=False)
        plant_data = data.get("current_plant")
        room.current_plant = Plant.from_dict(plant_data) if plant_data else None
        room.harvest_history = [HarvestResult.from_dict(h) for h in data.get("harvest_history", [])]
        room.last_tick = data.get("last_tick", room.last_tick)
        room.total_harvests = int(data.get("total_harvests", 0))
        room.auto_harvest = bool(data.get("auto_harvest", False))
        visual_mode = data.get("visual_mode", C.VISUAL_MODE_NORMAL)
        if visual_mode not in C.VISUAL_MODES:
            visual_mode = C.VISUAL_MODE_NORMAL
        room.visual_mode = visual_mode
        room.palette = Palette(visual_mode, supports_rgb)
        return room

#time_manager.py

import constants as C
import logger as log

def real_seconds_to_sim_hours(real_seconds):
    """Converts wall-clock seconds into simulated grow-room hours."""
    return real_seconds / C.SECONDS_PER_HOUR * C.TIME_DILATION

class TimeManager:
    def __init__(self):
        self.total_sim_hours = 0.0
        self.is_paused = False
        self.time_multiplier_level = 0
        self.current_multiplier = C.TIME_MULTIPLIERS[self.time_multiplier_level]

    def get_scaled_delta_time(self, real_delta_seconds):
        """Returns how many real seconds the simulation should advance by, based on speed."""
        if self.is_paused:
            return 0.0
        return real_delta_seconds * self.current_multiplier

    def update_total_time(self, scaled_delta_seconds):
        """Updates the total simulated hours counter for UI display and logging."""
        self.total_sim_hours += real_seconds_to_sim_hours(scaled_delta_seconds)

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        log.log(f"Event: Simulation {'paused' if self.is_paused else 'resumed'}.")

    def set_speed(self, level):
        if level in C.TIME_MULTIPLIERS:
            self.time_multiplier_level = level
            self.current_multiplier = C.TIME_MULTIPLIERS[level]
            log.log(f"Event: Simulation speed set to level {level} (x{self.current_multiplier}).")

    def get_display_string(self):
        if self.is_paused:
            return "Speed: PAUSED"
        return f"Speed: x{self.current_multiplier}"

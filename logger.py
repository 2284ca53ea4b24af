# logger.py

import constants as C

# This will hold a reference to the grow room's TimeManager instance.
_time_manager = None

def set_time_manager(tm):
    """Sets the global time manager for the logger to use."""
    global _time_manager
    _time_manager = tm

def format_sim_time(total_sim_hours):
    """Formats a number of simulated hours as '[Day 012 05:30]'."""
    days = int(total_sim_hours // C.HOURS_PER_DAY)
    hours = int(total_sim_hours % C.HOURS_PER_DAY)
    minutes = int((total_sim_hours * C.MINUTES_PER_HOUR) % C.MINUTES_PER_HOUR)
    return f"[Day {days:03d} {hours:02d}:{minutes:02d}]"

def log(message):
    """Prints a message with a simulation timestamp if available."""
    # Check if the time manager has been set and the simulation has started.
    if _time_manager and _time_manager.total_sim_hours > 0:
        print(f"{format_sim_time(_time_manager.total_sim_hours)} {message}")
    else:
        # For messages logged before the main loop starts.
        print(f"[Sim Start] {message}")

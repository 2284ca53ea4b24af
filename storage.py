# storage.py

import json
import os

import constants as C
import logger as log
from grow_room import GrowRoom

def get_save_path(override=None):
    """--save flag, then $GROWROOM_SAVE_PATH, then the per-user data directory."""
    if override:
        return os.path.expanduser(override)
    env_path = os.environ.get(C.SAVE_PATH_ENV_VAR)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(os.path.expanduser(C.SAVE_DIR), C.SAVE_FILE_NAME)

def save(room, path):
    """Writes the room snapshot as pretty JSON. Returns False (and logs) on failure."""
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(room.to_dict(), f, indent=C.SAVE_JSON_INDENT)
    except (OSError, TypeError, ValueError) as e:
        log.log(f"ERROR: Failed to save grow room to '{path}': {e}")
        return False
    return True

def load(path, supports_rgb=True, strains=None, rng=None):
    """
    Loads a saved room, or starts a fresh one when there is no save file.
    A save that cannot be read or parsed is logged and replaced by a fresh room.
    """
    if not os.path.exists(path):
        log.log(f"No save file at '{path}'. Starting a new grow room.")
        return GrowRoom(supports_rgb=supports_rgb, strains=strains, rng=rng)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        room = GrowRoom.from_dict(data, supports_rgb=supports_rgb, strains=strains, rng=rng)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        log.log(f"ERROR: Could not load save file '{path}': {e}. Starting a new grow room.")
        return GrowRoom(supports_rgb=supports_rgb, strains=strains, rng=rng)
    if room.current_plant is None:
        room.plant_new_seed()
    log.log(f"Loaded grow room from '{path}' ({room.total_harvests} harvests so far).")
    return room

def delete_save(path):
    if os.path.exists(path):
        os.remove(path)

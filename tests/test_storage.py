import json
import os

import numpy as np

import constants as C
import storage
from grow_room import GrowRoom


def test_save_and_load_round_trip(tmp_path, strain):
    path = str(tmp_path / "nested" / "save.json")
    room = GrowRoom(strains=[strain], rng=np.random.default_rng(5))
    room.current_plant.total_hours_elapsed = 90 * 24.0
    room.current_plant.days_alive = 90
    room.current_plant.stage = C.STAGE_READY_TO_HARVEST
    room.harvest()
    room.toggle_auto_harvest()
    room.cycle_visual_mode()
    room.set_screen(C.SCREEN_STATS)
    room.animation_frame = 12

    assert storage.save(room, path)
    loaded = storage.load(path, strains=[strain])

    assert loaded.to_dict() == room.to_dict()
    assert loaded.total_harvests == 1
    assert loaded.auto_harvest
    assert loaded.visual_mode == C.VISUAL_MODE_ZEN
    assert loaded.current_screen == C.SCREEN_GROWING_ROOM
    assert loaded.animation_frame == 0
    assert loaded.running


def test_save_is_pretty_json(tmp_path):
    path = str(tmp_path / "save.json")
    storage.save(GrowRoom(), path)
    with open(path, encoding="utf-8") as f:
        text = f.read()
    assert text.startswith("{\n  ")
    data = json.loads(text)
    assert set(data) == {"current_plant", "harvest_history", "last_tick", "total_harvests",
                         "auto_harvest", "visual_mode"}


def test_missing_save_starts_fresh(tmp_path):
    path = str(tmp_path / "missing.json")
    room = storage.load(path)
    assert room.current_plant is not None
    assert room.total_harvests == 0
    assert not os.path.exists(path)


def test_corrupt_save_starts_fresh(tmp_path, capsys):
    path = tmp_path / "save.json"
    path.write_text("{\"current_plant\": {\"id\": ", encoding="utf-8")
    room = storage.load(str(path))
    assert room.current_plant is not None
    assert room.harvest_history == []
    assert "ERROR" in capsys.readouterr().out


def test_save_with_missing_fields_starts_fresh(tmp_path):
    path = tmp_path / "save.json"
    path.write_text(json.dumps({"current_plant": {"id": "abc"}}), encoding="utf-8")
    room = storage.load(str(path))
    assert room.current_plant is not None
    assert room.current_plant.id != "abc"


def test_save_without_a_plant_gets_a_new_seed(tmp_path):
    path = str(tmp_path / "save.json")
    storage.save(GrowRoom(plant=False), path)
    room = storage.load(path)
    assert room.current_plant is not None
    assert room.current_plant.stage == C.STAGE_SEEDLING


def test_failed_save_returns_false(tmp_path, capsys):
    assert not storage.save(GrowRoom(), str(tmp_path))
    assert "ERROR" in capsys.readouterr().out


def test_save_path_precedence(monkeypatch, tmp_path):
    monkeypatch.delenv(C.SAVE_PATH_ENV_VAR, raising=False)
    default = storage.get_save_path()
    assert default.endswith(os.path.join("growroom", "save.json"))
    assert not default.startswith("~")

    env_path = str(tmp_path / "env.json")
    monkeypatch.setenv(C.SAVE_PATH_ENV_VAR, env_path)
    assert storage.get_save_path() == env_path
    assert storage.get_save_path(str(tmp_path / "flag.json")) == str(tmp_path / "flag.json")


def test_delete_save(tmp_path):
    path = str(tmp_path / "save.json")
    storage.save(GrowRoom(), path)
    storage.delete_save(path)
    assert not os.path.exists(path)
    storage.delete_save(path)

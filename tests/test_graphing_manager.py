import os

from genes import Genetics
from graphing_manager import GraphingManager
from growth import advance_plant
from plant import Plant


def grown_plant(genetics, days):
    plant = Plant(genetics)
    manager = GraphingManager()
    for _ in range(days * 24):
        advance_plant(plant, 1.0)
        manager.record(plant)
    return plant, manager


def test_one_sample_per_day(genetics):
    plant, manager = grown_plant(genetics, 5)
    assert manager.data["day"] == [0, 1, 2, 3, 4, 5]
    assert all(len(series) == 6 for series in manager.data.values())
    assert manager.data["health"][-1] in (20.0, 40.0, 60.0, 80.0, 100.0)
    assert not manager.record(plant)


def test_new_plant_clears_the_series(genetics):
    plant, manager = grown_plant(genetics, 3)
    other = Plant(Genetics.from_dict(genetics.to_dict()))
    assert manager.record(other)
    assert manager.focused_plant_id == other.id
    assert manager.data["day"] == [other.days_alive]


def test_no_data_means_no_graphs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = GraphingManager()
    assert not manager.has_data()
    assert manager.generate_and_save_graphs() == []
    assert os.listdir(tmp_path) == []


def test_graphs_are_written(tmp_path, monkeypatch, genetics):
    monkeypatch.chdir(tmp_path)
    _, manager = grown_plant(genetics, 4)
    saved = manager.generate_and_save_graphs()
    assert len(saved) == 2
    for path in saved:
        assert os.path.getsize(os.path.join(tmp_path, path)) > 0


def test_graph_paths_can_be_overridden(tmp_path, genetics):
    _, manager = grown_plant(genetics, 2)
    path = str(tmp_path / "resources.png")
    assert manager.generate_and_save_resources_graph(file_path=path) == path
    assert os.path.exists(path)


def test_unwritable_graph_is_logged(tmp_path, genetics, capsys):
    _, manager = grown_plant(genetics, 2)
    path = str(tmp_path / "missing-dir" / "env.png")
    assert manager.generate_and_save_environment_graph(file_path=path) is None
    assert "ERROR" in capsys.readouterr().out

import pytest

import logger
from time_manager import TimeManager


@pytest.fixture
def time_manager():
    tm = TimeManager()
    yield tm
    logger.set_time_manager(None)


def test_defaults(time_manager):
    assert time_manager.total_sim_hours == 0.0
    assert not time_manager.is_paused
    assert time_manager.time_multiplier_level == 0
    assert time_manager.current_multiplier == 1.0
    assert time_manager.get_display_string() == "Speed: x1.0"


def test_pause_stops_time(time_manager):
    time_manager.toggle_pause()
    assert time_manager.get_scaled_delta_time(0.05) == 0.0
    assert time_manager.get_display_string() == "Speed: PAUSED"
    time_manager.toggle_pause()
    assert time_manager.get_scaled_delta_time(0.05) == pytest.approx(0.05)


def test_speed_levels(time_manager):
    time_manager.set_speed(4)
    assert time_manager.get_scaled_delta_time(0.5) == pytest.approx(1.0)
    time_manager.set_speed(1)
    assert time_manager.get_scaled_delta_time(1.0) == pytest.approx(0.05)
    time_manager.set_speed(9)
    assert time_manager.time_multiplier_level == 1


def test_total_time_is_in_simulated_hours(time_manager):
    time_manager.update_total_time(3600.0 / 130000.0)
    assert time_manager.total_sim_hours == pytest.approx(1.0)


def test_format_sim_time():
    assert logger.format_sim_time(0.0) == "[Day 000 00:00]"
    assert logger.format_sim_time(12 * 24 + 5.5) == "[Day 012 05:30]"


def test_log_prefix_follows_the_clock(time_manager, capsys):
    logger.log("before")
    assert capsys.readouterr().out == "[Sim Start] before\n"

    logger.set_time_manager(time_manager)
    logger.log("still before")
    assert capsys.readouterr().out.startswith("[Sim Start]")

    time_manager.total_sim_hours = 49.25
    logger.log("running")
    assert capsys.readouterr().out == "[Day 002 01:15] running\n"

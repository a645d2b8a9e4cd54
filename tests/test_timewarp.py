import pytest

from orbits.constants import TIMEWARP_SCALES
from orbits.timewarp import TimewarpClock, TimewarpCommand


def test_default_table_and_initial_state():
    clock = TimewarpClock()
    assert clock.scales == (1.0, 5.0, 10.0, 100.0, 1000.0, 10000.0, 100000.0)
    assert clock.level == 0
    assert clock.factor == 1.0
    assert clock.max_level == len(TIMEWARP_SCALES) - 1


def test_decrease_at_bottom_is_noop():
    clock = TimewarpClock()
    for _ in range(5):
        assert clock.decrease() is False
    assert clock.level == 0
    assert clock.factor == clock.scales[0]


def test_increase_at_top_is_noop():
    clock = TimewarpClock(level=6)
    for _ in range(5):
        assert clock.increase() is False
    assert clock.level == 6
    assert clock.factor == 100000.0


def test_factor_always_matches_table():
    clock = TimewarpClock()
    for expected in TIMEWARP_SCALES[1:]:
        assert clock.apply(TimewarpCommand.INCREASE)
        assert clock.factor == expected
        assert clock.factor == clock.scales[clock.level]
    for expected in reversed(TIMEWARP_SCALES[:-1]):
        assert clock.apply("timewarp_decrease")
        assert clock.factor == expected


def test_no_command_changes_nothing():
    clock = TimewarpClock(level=3)
    assert clock.apply(None) is False
    assert clock.level == 3
    assert clock.factor == 100.0


def test_scale_converts_real_to_simulated_time():
    clock = TimewarpClock(level=4)
    assert clock.scale(0.5) == 500.0


def test_level_and_factor_are_read_only():
    clock = TimewarpClock()
    with pytest.raises(AttributeError):
        clock.level = 3
    with pytest.raises(AttributeError):
        clock.factor = 3.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"scales": ()},
        {"scales": (1, 0)},
        {"scales": (1, 10, 5)},
        {"scales": (5, 5)},
        {"level": -1},
        {"level": 7},
    ],
)
def test_invalid_setup(kwargs):
    with pytest.raises(ValueError):
        TimewarpClock(**kwargs)


def test_unknown_command_string():
    with pytest.raises(ValueError):
        TimewarpClock().apply("faster")

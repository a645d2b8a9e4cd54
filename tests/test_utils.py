from orbits.utils import (
    distance_to_display,
    time_to_display,
    timewarp_to_display,
)
from orbits import constants as C


def test_distance_to_display_ranges():
    assert distance_to_display(0) == "0 m"
    assert distance_to_display(C.AU) == "1.00 AU"
    assert distance_to_display(-C.AU) == "-1.00 AU"
    assert distance_to_display(2e6) == "2.00 Mm"
    assert distance_to_display(2000) == "2.00 km"
    assert distance_to_display(50) == "50.0 m"


def test_timewarp_display():
    assert timewarp_to_display(100000.0) == "100,000x"
    assert timewarp_to_display(1.0) == "1x"


def test_time_to_display_ranges():
    assert time_to_display(-1) == "N/A"
    assert time_to_display(0) == "0 sec"
    assert time_to_display(2 * 31536000) == "2.0 years"
    assert time_to_display(2 * 86400) == "2.0 days"
    assert time_to_display(7200) == "2.0 hrs"
    assert time_to_display(120) == "2.0 min"
    assert time_to_display(5) == "5.0 sec"

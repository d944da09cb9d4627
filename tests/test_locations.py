import pytest

from vicky_econ.locations import Location, army_unit_name, navy_unit_name


@pytest.mark.parametrize(
    "level,name",
    [
        (1, "Line Infantry"),
        (5, "Mechanized Infantry"),
        (10, "Heavy Tanks"),
        (15, "Light Tanks"),
        (0, "Irregular Infantry"),
        (16, "Irregular Infantry"),
        (-3, "Irregular Infantry"),
    ],
)
def test_army_unit_name(level, name):
    assert army_unit_name(level) == name


@pytest.mark.parametrize(
    "level,name",
    [
        (1, "Monitors"),
        (5, "Man-o-wars"),
        (10, "Carriers"),
        (0, "Frigates"),
        (11, "Frigates"),
    ],
)
def test_navy_unit_name(level, name):
    assert navy_unit_name(level) == name


def test_level_and_subsidy_never_negative():
    location = Location(level=-4, subsidized=-1)
    assert location.level == 0
    assert location.subsidized == 0
    location.level = 3
    location.subsidized = 2
    assert (location.level, location.subsidized) == (3, 2)


def test_method_level_round_trip_and_clamp():
    location = Location()
    location.set_method_level(2, 7)
    location.set_method_level(3, -5)
    assert location.method_level(2) == 7
    assert location.method_level(3) == 0
    assert location.method_level(0) == 0


def test_unit_types_follow_method_level():
    location = Location()
    location.set_method_level(1, 12)
    assert location.army_unit_type(1) == "Dragoons"
    assert location.navy_unit_type(1) == "Frigates"
    location.set_method_level(1, 9)
    assert location.navy_unit_type(1) == "Submarines"
    assert location.army_unit_type(0) == "Irregular Infantry"


def test_slot_out_of_range_raises():
    location = Location()
    with pytest.raises(IndexError):
        location.method_level(4)
    with pytest.raises(IndexError):
        location.set_method_level(4, 1)


def test_building_throughput_round_trip():
    location = Location(building_throughput=1.25)
    assert location.building_throughput == 1.25
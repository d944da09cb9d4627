import pytest

from vicky_econ.buildings import Building


def matrix(values=None, column=0):
    rows = [[0, 0] for _ in range(14)]
    for row, value in (values or {}).items():
        rows[row][column] = value
    return rows


def test_base_wage_is_never_negative():
    building = Building("Textile Mills", base_wage=-5.0)
    assert building.base_wage == 0.0
    building.base_wage = 3.5
    assert building.base_wage == 3.5


def test_infrastructure_usage_scales_with_levels():
    building = Building("Steel Mills", infrastructure=3)
    assert building.infrastructure_usage(4) == 12
    assert building.infrastructure_usage(0) == 0


def test_throughputs_have_seven_slots():
    building = Building()
    assert building.throughputs == [0.0] * 7


def test_wage_of_empty_workforce_is_zero():
    building = Building("Tooling Workshops", base_wage=10.0)
    assert building.wage(matrix(), matrix(), 0) == 0.0


def test_wage_full_year_of_laborers():
    building = Building("Tooling Workshops", base_wage=1.0)
    assert building.wage(matrix({1: 52}), matrix(), 0) == pytest.approx(1.0)


def test_discriminated_workers_earn_reduced_share():
    building = Building("Tooling Workshops", base_wage=2.0)
    full = building.wage(matrix({3: 10, 7: 4}), matrix(), 1 - 1)
    reduced = building.wage(matrix(), matrix({3: 10, 7: 4}), 0)
    assert reduced == pytest.approx(full * 0.66)


def test_wage_reads_only_its_column():
    building = Building("Tooling Workshops", base_wage=2.0)
    other = matrix({1: 100}, column=1)
    assert building.wage(other, other, 0) == 0.0
    assert building.wage(other, matrix(), 1) > 0


def test_capitalists_weigh_six_times_laborers():
    building = Building("Tooling Workshops", base_wage=1.0)
    laborers = building.wage(matrix({1: 10}), matrix(), 0)
    capitalists = building.wage(matrix({13: 10}), matrix(), 0)
    assert capitalists == pytest.approx(laborers * 6)


def test_wage_scales_with_base_wage():
    counts = matrix({0: 5, 5: 3, 11: 2})
    low = Building("Farms", base_wage=1.0).wage(counts, matrix(), 0)
    high = Building("Farms", base_wage=4.0).wage(counts, matrix(), 0)
    assert high == pytest.approx(low * 4)


def test_acceptance_wage_matches_plain_wage_under_equal_citizenship():
    building = Building("Tooling Workshops", base_wage=3.0)
    counts = matrix({1: 20})
    plain = building.wage(counts, matrix(), 0)
    accepted = building.wage_by_acceptance(
        [4, 4], counts, matrix(), matrix(), matrix(), matrix(), 0
    )
    assert accepted == pytest.approx(plain)


def test_acceptance_ratio_for_ethnostate():
    building = Building("Tooling Workshops", base_wage=3.0)
    counts = matrix({9: 7})
    empty = matrix()
    accepted = building.wage_by_acceptance([1, 1], counts, empty, empty, empty, empty, 0)
    citizen = building.wage_by_acceptance([1, 1], empty, counts, empty, empty, empty, 0)
    assert accepted / citizen == pytest.approx(1.2 / 0.9)


def test_unknown_citizenship_uses_default_factors():
    building = Building("Tooling Workshops", base_wage=3.0)
    counts = matrix({2: 4, 12: 6})
    empty = matrix()
    first = building.wage_by_acceptance([0, 0], counts, empty, counts, empty, counts, 0)
    second = building.wage_by_acceptance([99, 99], counts, empty, counts, empty, counts, 0)
    assert first == pytest.approx(second)
    assert first > 0


def test_acceptance_groups_are_ordered_by_pay():
    building = Building("Tooling Workshops", base_wage=1.0)
    counts = matrix({1: 10})
    empty = matrix()
    for law in (1, 2, 3, 4, 5):
        wages = [
            building.wage_by_acceptance([law, law], *groups, 0)
            for groups in (
                (counts, empty, empty, empty, empty),
                (empty, counts, empty, empty, empty),
                (empty, empty, counts, empty, empty),
                (empty, empty, empty, counts, empty),
                (empty, empty, empty, empty, counts),
            )
        ]
        assert wages == sorted(wages, reverse=True)


@pytest.mark.parametrize(
    "name",
    [
        "Subsistence Farms",
        "Subsistence Orchards",
        "Subsistence Pastures",
        "Subsistence Fishing Villages",
        "Subsistence Rice Paddies",
    ],
)
def test_subsistence_buildings(name):
    building = Building(name)
    assert building.is_subsistence()
    assert not building.is_buildable()
    assert not building.has_economies_of_scale()
    assert building.is_auto_subsidized()


@pytest.mark.parametrize("name", ["Urban Center", "Gold Fields"])
def test_unbuildable_buildings(name):
    building = Building(name)
    assert not building.is_buildable()
    assert not building.is_subsistence()


@pytest.mark.parametrize(
    "name", ["Barracks", "Naval Base", "Port", "Skyscraper", "Canals", "Construction Sector"]
)
def test_buildings_without_economies_of_scale(name):
    building = Building(name)
    assert building.is_buildable()
    assert not building.has_economies_of_scale()
    assert building.is_auto_subsidized()


@pytest.mark.parametrize("name", ["Government Administration", "University"])
def test_always_subsidized(name):
    building = Building(name)
    assert building.has_economies_of_scale()
    assert building.is_auto_subsidized()


def test_ordinary_building():
    building = Building("Textile Mills")
    assert building.is_buildable()
    assert building.has_economies_of_scale()
    assert not building.is_auto_subsidized()
    assert not building.is_subsistence()
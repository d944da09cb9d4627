"""Buildings: construction data, wages and classification."""

from __future__ import annotations

from collections.abc import Sequence

PROFESSIONS = 14
THROUGHPUT_SLOTS = 7
WEEKS_PER_YEAR = 52
DISCRIMINATED_WAGE_FACTOR = 0.66

# Wage multiplier for each profession when pay depends on discrimination only.
_PROFESSION_WEIGHTS = (0.2, 1, 1.5, 1.5, 1.5, 2, 2, 3, 3, 4, 4, 5, 6, 6)

# Wage multiplier for each profession when pay depends on acceptance.
_ACCEPTANCE_PROFESSION_WEIGHTS = (0.2, 1, 1.5, 1.5, 1.5, 2, 3, 3, 3, 4, 4, 5, 5, 6)

# Multipliers for (accepted, citizen, prejudice, erasure, hostile) by citizenship law.
_ACCEPTANCE_FACTORS = {
    1: (1.2, 0.9, 0.8, 0.7, 0.6),
    2: (1.15, 1.05, 0.9, 0.8, 0.7),
    3: (1.05, 1.0, 0.9, 0.8, 0.7),
    4: (1.0, 1.0, 0.95, 0.9, 0.8),
}
_DEFAULT_ACCEPTANCE_FACTORS = (1.25, 0.85, 0.75, 0.6, 0.5)

_SUBSISTENCE = frozenset(
    {
        "Subsistence Farms",
        "Subsistence Orchards",
        "Subsistence Pastures",
        "Subsistence Fishing Villages",
        "Subsistence Rice Paddies",
    }
)
_UNBUILDABLE = frozenset({"Urban Center", "Gold Fields"})
_NO_ECONOMIES_OF_SCALE = frozenset(
    {"Barracks", "Naval Base", "Port", "Skyscraper", "Canals", "Construction Sector"}
)
_ALWAYS_SUBSIDIZED = frozenset({"Government Administration", "University"})

Matrix = Sequence[Sequence[float]]


class Building:
    """A building type with its costs, throughputs and base wage."""

    def __init__(
        self,
        name: str = "",
        construction_cost: int = 0,
        infrastructure: int = 0,
        base_wage: float = 0.0,
        location: int = 0,
        method: int = 0,
        size: int = 0,
    ) -> None:
        self.name = name
        self.construction_cost = construction_cost
        self.infrastructure = infrastructure
        self._base_wage = 0.0
        self.base_wage = base_wage
        self.location = location
        self.method = method
        self.size = size
        self.throughputs: list[float] = [0.0] * THROUGHPUT_SLOTS

    def __repr__(self) -> str:
        return f"Building(name={self.name!r}, construction_cost={self.construction_cost!r})"

    @property
    def base_wage(self) -> float:
        return self._base_wage

    @base_wage.setter
    def base_wage(self, value: float) -> None:
        self._base_wage = max(value, 0.0)

    def infrastructure_usage(self, levels: int) -> int:
        """Infrastructure used by the given number of levels."""
        return self.infrastructure * levels

    def wage(self, undiscriminated: Matrix, discriminated: Matrix, column: int) -> float:
        """Weekly wage; discriminated workers count for a reduced share."""
        total = sum(
            weight
            * (
                undiscriminated[row][column]
                + discriminated[row][column] * DISCRIMINATED_WAGE_FACTOR
            )
            for row, weight in enumerate(_PROFESSION_WEIGHTS)
        )
        return self._base_wage * total / WEEKS_PER_YEAR

    def wage_by_acceptance(
        self,
        citizenship: Sequence[int],
        accepted: Matrix,
        citizen: Matrix,
        prejudice: Matrix,
        erasure: Matrix,
        hostile: Matrix,
        column: int,
    ) -> float:
        """Weekly wage weighted by acceptance under the column's citizenship law."""
        factors = _ACCEPTANCE_FACTORS.get(citizenship[column], _DEFAULT_ACCEPTANCE_FACTORS)
        groups = (accepted, citizen, prejudice, erasure, hostile)
        total = sum(
            weight
            * sum(factor * group[row][column] for factor, group in zip(factors, groups))
            for row, weight in enumerate(_ACCEPTANCE_PROFESSION_WEIGHTS)
        )
        return self._base_wage * total / WEEKS_PER_YEAR

    def is_subsistence(self) -> bool:
        return self.name in _SUBSISTENCE

    def is_buildable(self) -> bool:
        return not (self.name in _UNBUILDABLE or self.is_subsistence())

    def has_economies_of_scale(self) -> bool:
        return not (self.is_subsistence() or self.name in _NO_ECONOMIES_OF_SCALE)

    def is_auto_subsidized(self) -> bool:
        return not self.has_economies_of_scale() or self.name in _ALWAYS_SUBSIDIZED
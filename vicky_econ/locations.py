"""Building locations: level, subsidies and production method levels."""

from __future__ import annotations

METHOD_SLOTS = 4

_ARMY_UNITS = {
    1: "Line Infantry",
    2: "Skirmish Infantry",
    3: "Trench Infantry",
    4: "Squad Infantry",
    5: "Mechanized Infantry",
    6: "Cannon Artillery",
    7: "Mobile Artillery",
    8: "Shrapnel Artillery",
    9: "Siege Artillery",
    10: "Heavy Tanks",
    11: "Hussars",
    12: "Dragoons",
    13: "Cuirassiers",
    14: "Lancers",
    15: "Light Tanks",
}
_DEFAULT_ARMY_UNIT = "Irregular Infantry"

_NAVY_UNITS = {
    1: "Monitors",
    2: "Destroyers",
    3: "Torpedo Boats",
    4: "Scout Cruisers",
    5: "Man-o-wars",
    6: "Ironclads",
    7: "Dreadnoughts",
    8: "Battleships",
    9: "Submarines",
    10: "Carriers",
}
_DEFAULT_NAVY_UNIT = "Frigates"


def army_unit_name(level: int) -> str:
    """Name of the army unit for a production method level."""
    return _ARMY_UNITS.get(level, _DEFAULT_ARMY_UNIT)


def navy_unit_name(level: int) -> str:
    """Name of the navy unit for a production method level."""
    return _NAVY_UNITS.get(level, _DEFAULT_NAVY_UNIT)


class Location:
    """A building placed in a state, with its level and chosen methods."""

    def __init__(
        self, level: int = 0, subsidized: int = 0, building_throughput: float = 0.0
    ) -> None:
        self._level = 0
        self._subsidized = 0
        self.level = level
        self.subsidized = subsidized
        self.building_throughput = building_throughput
        self._method_levels: list[int] = [0] * METHOD_SLOTS

    def __repr__(self) -> str:
        return (
            f"Location(level={self._level!r}, subsidized={self._subsidized!r}, "
            f"building_throughput={self.building_throughput!r})"
        )

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        self._level = max(value, 0)

    @property
    def subsidized(self) -> int:
        return self._subsidized

    @subsidized.setter
    def subsidized(self, value: int) -> None:
        self._subsidized = max(value, 0)

    def set_method_level(self, slot: int, level: int) -> None:
        """Set the method level of a slot; negative levels become 0."""
        self._method_levels[slot] = max(level, 0)

    def method_level(self, slot: int) -> int:
        return self._method_levels[slot]

    def army_unit_type(self, slot: int) -> str:
        return army_unit_name(self._method_levels[slot])

    def navy_unit_type(self, slot: int) -> str:
        return navy_unit_name(self._method_levels[slot])
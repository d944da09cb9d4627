"""A file-backed store of production method data."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .goods import Good

MILITARY_UNIT_TYPE = "Military Unit Type"

PROFESSION_INDEX = {
    "Peasants": 0,
    "Laborers": 1,
    "Servicemen": 2,
    "Machinists": 3,
    "Clerks": 4,
    "Farmers": 5,
    "Shopkeepers": 6,
    "Clergymen": 7,
    "Engineers": 8,
    "Bureaucrats": 9,
    "Academics": 10,
    "Officers": 11,
    "Aristocrats": 12,
    "Capitalists": 13,
}

_BASE_MOBILIZED_PERCENTAGE = 1.6


def _format_number(value: float) -> str:
    return format(value, "g")


class ProductionMethodStore:
    """Production method data kept as one small text file per value under a root directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"ProductionMethodStore(root={str(self.root)!r})"

    # Paths.

    def _name_path(self, pm: int) -> Path:
        return self.root / "ProductionMethod" / f"name[{pm}].txt"

    def _size_path(self, pm: int) -> Path:
        return self.root / "Size" / f"size[{pm}].txt"

    def _table_path(self, folder: str, stem: str, pm: int, i: int, j: int) -> Path:
        return (
            self.root
            / folder
            / f"{stem}[i][j][{j}]"
            / f"{stem}[i][{i}][{j}]"
            / f"{stem}[{pm}][{i}][{j}].txt"
        )

    # Writing.

    @staticmethod
    def _write(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def set_name(self, pm: int, name: str) -> None:
        self._write(self._name_path(pm), name)

    def set_size(self, pm: int, size: int) -> None:
        self._write(self._size_path(pm), str(int(size)))

    def set_military_consumption(self, pm: int, amount: float, i: int, j: int) -> None:
        path = self._table_path("MilitaryConsumption", "milConsumption", pm, i, j)
        self._write(path, _format_number(amount))

    def set_input_good(self, pm: int, amount: float, i: int, j: int) -> None:
        self._write(self._table_path("InputGood", "input", pm, i, j), _format_number(amount))

    def set_output_good(self, pm: int, amount: float, i: int, j: int) -> None:
        self._write(self._table_path("OutputGood", "output", pm, i, j), _format_number(amount))

    def set_profession(self, pm: int, profession: int, i: int, j: int) -> None:
        self._write(self._table_path("Profession", "profession", pm, i, j), str(int(profession)))

    def set_profession_by_name(self, pm: int, profession: int, i: int, name: str) -> None:
        """Store a profession under the slot of a named pop type; unknown names are ignored."""
        j = PROFESSION_INDEX.get(name)
        if j is not None:
            self.set_profession(pm, profession, i, j)

    # Reading.

    @staticmethod
    def _read_token(path: Path) -> str:
        tokens = path.read_text(encoding="utf-8").split()
        if not tokens:
            raise ValueError(f"no value stored in {path}")
        return tokens[0]

    def name(self, pm: int) -> str:
        """The method's name, or an empty string when none is stored."""
        path = self._name_path(pm)
        if not path.exists():
            return ""
        lines = path.read_text(encoding="utf-8").splitlines()
        return lines[0] if lines else ""

    def size(self, pm: int) -> int:
        return int(self._read_token(self._size_path(pm)))

    def military_consumption(
        self,
        good: Good,
        building: str,
        mobilization: Sequence[Sequence[bool]],
        pm: int,
        i: int,
        j: int,
        k: int,
    ) -> float:
        """Military consumption of a unit-type method, raised by mobilization in barracks."""
        if self.name(pm) != MILITARY_UNIT_TYPE:
            return 0.0
        path = self._table_path("MilitaryConsumption", "milConsumption", pm, i, j)
        amount = float(self._read_token(path))
        if building == "Barracks" and mobilization[0][k]:
            extra, percentage = good.mobilized_consumption(mobilization, k)
            return (amount + extra) * (_BASE_MOBILIZED_PERCENTAGE + percentage)
        return amount

    def input_good(
        self,
        good: Good,
        building: str,
        mobilization: Sequence[Sequence[bool]],
        pm: int,
        i: int,
        j: int,
        k: int,
    ) -> float:
        """Input amount including any military consumption."""
        amount = float(self._read_token(self._table_path("InputGood", "input", pm, i, j)))
        return amount + self.military_consumption(good, building, mobilization, pm, i, j, k)

    def output_good(self, pm: int, i: int, j: int) -> float:
        return float(self._read_token(self._table_path("OutputGood", "output", pm, i, j)))

    def profession(self, pm: int, i: int, j: int) -> int:
        return int(self._read_token(self._table_path("Profession", "profession", pm, i, j)))
"""Tradeable goods: market orders, consumption weights and purchase shares."""

from __future__ import annotations

import math
from collections.abc import Sequence

WEIGHT_SLOTS = 14
MOBILIZATION_OPTIONS = 18
FLOW_SLOTS = 2

_LOCAL_GOODS = frozenset({"Electricity", "Services", "Transportation"})
_MILITARY_GOODS = frozenset(
    {"Ammunition", "Artillery", "Oil", "Radios", "Small Arms", "Tanks"}
)


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _non_negative(value: float) -> float:
    return max(value, 0.0)


class Good:
    """A good with its market state and per-group consumption preferences."""

    def __init__(self, name: str = "", base_price: int = 0) -> None:
        self.name = name
        self.base_price = base_price
        self._sell_orders = 0.0
        self._buy_orders = 0.0
        self._production = 0.0
        self._consumption = 0.0
        self._pop_consumption = 0.0
        self._local_pop_consumption = 0.0
        self._imports = 0.0
        self.military_consumption = 0.0
        self.throughput = 0.0
        self._obsession = 0.0
        self._taboo = 0.0
        self._local_obsession = 0.0
        self._local_taboo = 0.0
        self.defaults: list[bool] = [False] * WEIGHT_SLOTS
        self.weights: list[float] = [0.0] * WEIGHT_SLOTS
        self.min_supply_share: list[float] = [0.0] * WEIGHT_SLOTS
        self.max_supply_share: list[float] = [1.0] * WEIGHT_SLOTS
        self.inputs: list[float] = [0.0] * FLOW_SLOTS
        self.outputs: list[float] = [0.0] * FLOW_SLOTS

    def __repr__(self) -> str:
        return f"Good(name={self.name!r}, base_price={self.base_price!r})"

    # Quantities that never go below zero.

    @property
    def sell_orders(self) -> float:
        return self._sell_orders

    @sell_orders.setter
    def sell_orders(self, value: float) -> None:
        self._sell_orders = _non_negative(value)

    @property
    def buy_orders(self) -> float:
        return self._buy_orders

    @buy_orders.setter
    def buy_orders(self, value: float) -> None:
        self._buy_orders = _non_negative(value)

    @property
    def production(self) -> float:
        return self._production

    @production.setter
    def production(self, value: float) -> None:
        self._production = _non_negative(value)

    @property
    def consumption(self) -> float:
        return self._consumption

    @consumption.setter
    def consumption(self, value: float) -> None:
        self._consumption = _non_negative(value)

    @property
    def pop_consumption(self) -> float:
        return self._pop_consumption

    @pop_consumption.setter
    def pop_consumption(self, value: float) -> None:
        self._pop_consumption = _non_negative(value)

    @property
    def local_pop_consumption(self) -> float:
        return self._local_pop_consumption

    @local_pop_consumption.setter
    def local_pop_consumption(self, value: float) -> None:
        self._local_pop_consumption = _non_negative(value)

    @property
    def imports(self) -> float:
        return self._imports

    @imports.setter
    def imports(self, value: float) -> None:
        self._imports = _non_negative(value)

    # Obsession and taboo: each in [0, 1] and together at most 1.

    @property
    def obsession(self) -> float:
        return self._obsession

    @property
    def taboo(self) -> float:
        return self._taboo

    @property
    def local_obsession(self) -> float:
        return self._local_obsession

    @property
    def local_taboo(self) -> float:
        return self._local_taboo

    def set_obsession(self, value: float) -> None:
        """Set obsession, shrinking taboo so the two never exceed 1."""
        self._obsession = _clamp_unit(value)
        self._taboo = min(self._taboo, 1 - self._obsession)

    def set_taboo(self, value: float) -> None:
        """Set taboo, shrinking obsession so the two never exceed 1."""
        self._taboo = _clamp_unit(value)
        self._obsession = min(self._obsession, 1 - self._taboo)

    def set_local_obsession(self, value: float) -> None:
        """Set the local obsession, shrinking local taboo as needed."""
        self._local_obsession = _clamp_unit(value)
        self._local_taboo = min(self._local_taboo, 1 - self._local_obsession)

    def set_local_taboo(self, value: float) -> None:
        """Set the local taboo, shrinking local obsession as needed."""
        self._local_taboo = _clamp_unit(value)
        self._local_obsession = min(self._local_obsession, 1 - self._local_taboo)

    # Military consumption.

    def reset_military_consumption(self) -> None:
        self.military_consumption = 0.0

    def add_military_consumption(self, amount: float) -> None:
        self.military_consumption += amount

    def mobilized_consumption(
        self, mobilization: Sequence[Sequence[bool]], column: int
    ) -> tuple[float, float]:
        """Return (extra consumption, extra percentage) from active mobilization options."""
        name = self.name
        consumption = 0.0
        percentage = 0.0

        def active(row: int) -> bool:
            return bool(mobilization[row][column])

        if active(1):
            if name == "Grain":
                consumption += 0.5
            elif self.is_military():
                percentage += 0.25
        if active(2):
            if name == "Groceries":
                consumption += 1
            elif self.is_military():
                percentage += 0.25
        if active(3):
            if name in ("Meat", "Wine"):
                consumption += 1
            elif self.is_military():
                percentage += 0.25
        if active(4) and name == "Sugar":
            consumption += 1
        if active(5) and name == "Tobacco":
            consumption += 0.5
        if active(6) and name == "Liquor":
            consumption += 0.5
        if active(7) and name == "Opium":
            consumption += 0.5
        if active(8) and name == "Automobiles":
            consumption += 0.5
        if active(9) and name == "Engines":
            consumption += 0.5
        if active(10):
            if name == "Automobiles":
                consumption += 1
            elif name == "Oil":
                consumption += 0.5
        if active(11):
            if name == "Fabric":
                consumption += 2
            elif name == "Oil":
                consumption += 0.5
        if active(12):
            if name == "Aeroplanes":
                consumption += 1
            elif name == "Oil":
                consumption += 0.5
        if active(13) and name in ("Ammunition", "Small Arms"):
            consumption += 1
        if active(14) and name == "Fertilizer":
            consumption += 2
        if active(15) and name == "Oil":
            consumption += 1
        if active(16):
            if name == "Fabric":
                consumption += 1
            elif name == "Liquor":
                consumption += 2
        if active(17):
            if name == "Opium":
                consumption += 2
            elif name == "Tools":
                consumption += 1
        return consumption, percentage

    # Input and output flows.

    def reset_input(self, column: int) -> None:
        self.inputs[column] = 0.0

    def reset_output(self, column: int) -> None:
        self.outputs[column] = 0.0

    def add_input(self, amount: float, column: int) -> None:
        self.inputs[column] += amount

    def add_output(self, amount: float, column: int) -> None:
        self.outputs[column] += amount

    def normalize_flow(self, column: int) -> None:
        """Move a negative input to output and a negative output to input."""
        if self.inputs[column] < 0:
            self.outputs[column] -= self.inputs[column]
            self.inputs[column] = 0.0
        if self.outputs[column] < 0:
            self.inputs[column] -= self.outputs[column]
            self.outputs[column] = 0.0

    # Population consumption.

    def pop_consumption_at(self, purchase_weight: float) -> float:
        return math.trunc(self._pop_consumption * purchase_weight * 1000) / 1000

    def pop_consumption_change(self, purchase_weight: float) -> float:
        delta = self.pop_consumption_at(purchase_weight) - self._pop_consumption
        return math.trunc(delta * 10) / 10

    def local_pop_consumption_at(self, purchase_weight: float) -> float:
        return math.trunc(self._local_pop_consumption * purchase_weight * 1000) / 1000

    def local_pop_consumption_change(self, purchase_weight: float) -> float:
        delta = self.local_pop_consumption_at(purchase_weight) - self._local_pop_consumption
        return math.trunc(delta * 10) / 10

    # Consumption weights.

    def _weighted(self, gdp: float, column: int, obsession: float, taboo: float) -> float:
        base = self.weights[column]
        obsession_weight = max(base, 1.0) * 2
        taboo_weight = base * 0.5
        value = base * (1 - (obsession + taboo)) + obsession_weight * obsession + taboo_weight * taboo
        if self.is_local():
            value += 0.25 * (1 - gdp)
        return value

    def weight(self, gdp: float, column: int) -> float:
        return self._weighted(gdp, column, self._obsession, self._taboo)

    def local_weight(self, gdp: float, column: int) -> float:
        return self._weighted(gdp, column, self._local_obsession, self._local_taboo)

    # Balances, truncated toward zero.

    def balance(self, output: float | None = None) -> int:
        supply = self._sell_orders if output is None else output
        return int(supply - self._buy_orders)

    def balance_prediction(self, purchase_weight: float, output: float | None = None) -> int:
        return int(self.balance(output) - self.pop_consumption_change(purchase_weight))

    def state_balance(self, output: float | None = None) -> int:
        supply = self._production if output is None else output
        return int(supply - self._consumption)

    def state_balance_prediction(self, purchase_weight: float, output: float | None = None) -> int:
        return int(self.state_balance(output) - self.local_pop_consumption_change(purchase_weight))

    # Market shares.

    def market_share(self, column: int) -> float:
        return self.market_share_with_output(self._sell_orders, column)

    def market_share_with_output(self, output: float, column: int) -> float:
        if self.weights[column] == 0:
            return 0.0
        return max(output - (self._buy_orders - self._pop_consumption) / 2, 0.0)

    def local_market_share(self, output: float, column: int) -> float:
        return self.market_share_with_output(output - self._production + self._sell_orders, column)

    def market_share_with_flow(self, input: float, output: float, column: int) -> float:
        if self.weights[column] == 0:
            return 0.0
        return max(
            self._sell_orders + output - (self._buy_orders + input - self._pop_consumption) / 2,
            0.0,
        )

    # Purchase weights.

    def _supply_share(self, share: float, ms_sum: float, column: int) -> float:
        minimum = self.min_supply_share[column]
        if ms_sum == 0:
            supply = 1.0 if self.defaults[column] else minimum
        else:
            supply = max(share / ms_sum, minimum)
        return min(supply, self.max_supply_share[column])

    def purchase_weight(self, ms_sum: float, gdp: float, column: int) -> float:
        share = self.market_share(column)
        return self.weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def purchase_weight_with_output(self, output: float, ms_sum: float, gdp: float, column: int) -> float:
        share = self.market_share_with_output(output, column)
        return self.weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def purchase_weight_local_output(self, output: float, ms_sum: float, gdp: float, column: int) -> float:
        share = self.local_market_share(output, column)
        return self.weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def purchase_weight_with_flow(
        self, input: float, output: float, ms_sum: float, gdp: float, column: int
    ) -> float:
        share = self.market_share_with_flow(input, output, column)
        return self.weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def local_purchase_weight(self, ms_sum: float, gdp: float, column: int) -> float:
        share = self.market_share(column)
        return self.local_weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def local_purchase_weight_with_output(
        self, output: float, ms_sum: float, gdp: float, column: int
    ) -> float:
        share = self.local_market_share(output, column)
        return self.local_weight(gdp, column) * self._supply_share(share, ms_sum, column)

    def local_purchase_weight_with_flow(
        self, input: float, output: float, ms_sum: float, gdp: float, column: int
    ) -> float:
        share = self.market_share_with_flow(input, output, column)
        return self.local_weight(gdp, column) * self._supply_share(share, ms_sum, column)

    # Classification.

    def has_weight(self) -> bool:
        return any(w > 0 for w in self.weights)

    def is_local(self) -> bool:
        return self.name in _LOCAL_GOODS

    def is_tradable(self) -> bool:
        return not (self.is_local() or self.name == "Gold")

    def is_military(self) -> bool:
        return self.name in _MILITARY_GOODS
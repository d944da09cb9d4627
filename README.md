# vicky_econ

An economic model for a grand-strategy game. It covers goods and their markets, price
pressure and price predictions, buildings and their wages, the unit types that a
location's production methods stand for, and a file-backed store of
production-method tables.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `vicky_econ.goods`: `Good(name, base_price)` holds a good's sell and buy orders,
  production, consumption, population consumption, imports and military consumption
  (all kept at zero or above), its obsession and taboo (each in [0, 1], together at
  most 1, set through `set_obsession`, `set_taboo` and their local forms), and
  per-column `weights`, `defaults`, `min_supply_share` and `max_supply_share`. It
  computes market shares, purchase weights, balances, population consumption changes
  and the extra consumption that mobilization options cause
  (`mobilized_consumption`). `is_local()`, `is_tradable()` and `is_military()`
  classify a good by its name.
- `vicky_econ.prices`: functions on a `Good` that give market prices, local prices,
  their percentages and their predictions, for example `market_price(good)`,
  `local_price(good, mapi)` or
  `local_price_prediction(good, mapi, purchase_weight, local_purchase_weight)`.
  `price_pressure(good, demand, supply)` is the shared rule: a deviation in
  [-0.75, 0.75], and none at all for gold.
- `vicky_econ.locations`: `Location` with its `level`, `subsidized` count,
  `building_throughput` and per-slot production-method levels
  (`set_method_level`, `method_level`, `army_unit_type`, `navy_unit_type`), plus
  `army_unit_name(level)` and `navy_unit_name(level)`.
- `vicky_econ.buildings`: `Building` with construction cost, infrastructure, size,
  throughputs and a non-negative `base_wage`. `wage` and `wage_by_acceptance` give
  weekly wages from per-profession worker counts; `is_subsistence()`,
  `is_buildable()`, `has_economies_of_scale()` and `is_auto_subsidized()` classify
  a building by its name.
- `vicky_econ.production_methods`: `ProductionMethodStore(root)` writes and reads
  production-method names, sizes, input and output goods, military consumption and
  professions as one small text file per value below `root`. Military consumption is
  only counted for methods named `"Military Unit Type"`, and is raised when a
  barracks is mobilized.

## Example

```python
from vicky_econ.goods import Good
from vicky_econ.prices import market_price

grain = Good(name="Grain", base_price=20)
grain.sell_orders = 100
grain.buy_orders = 150
print(market_price(grain))  # 27.5: demand exceeds supply by half
```

## What it does not do

The package is a library of calculations and a small data store. It has no command,
no game loop and no reader for game data files: the caller builds `Good`, `Building`
and `Location` objects and fills a `ProductionMethodStore` itself.
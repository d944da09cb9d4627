"""Market and local price calculations for goods."""

from __future__ import annotations

from .goods import Good

PRICE_SWING = 0.75


def price_pressure(good: Good, demand: float, supply: float) -> float:
    """Return the price deviation fraction caused by a demand/supply imbalance.

    The result lies in [-0.75, 0.75]; gold always has no deviation.
    """
    if good.name == "Gold":
        percent = 0.0
    elif supply == 0:
        percent = 0.0 if demand == 0 else 1.0
    elif demand != 0:
        percent = (demand - supply) / min(demand, supply)
        percent = min(max(percent, -1.0), 1.0)
    else:
        percent = -1.0
    return percent * PRICE_SWING


def _priced(good: Good, percent: float) -> float:
    return good.base_price * (1 + percent)


def _as_percent(good: Good, price: float) -> float:
    return (price - good.base_price) / good.base_price


# Market prices.


def market_price_percent(good: Good) -> float:
    if good.is_local():
        return price_pressure(good, good.consumption, good.production)
    return price_pressure(good, good.buy_orders, good.sell_orders)


def market_price_percent_with_output(good: Good, output: float) -> float:
    demand = good.consumption if good.is_local() else good.buy_orders
    return price_pressure(good, demand, output)


def market_price_percent_with_flow(good: Good, input: float, output: float) -> float:
    if good.is_local():
        return price_pressure(good, input + good.consumption, output + good.production)
    return price_pressure(good, input + good.buy_orders, output + good.sell_orders)


def market_price(good: Good) -> float:
    return _priced(good, market_price_percent(good))


def market_price_with_output(good: Good, output: float) -> float:
    return _priced(good, market_price_percent_with_output(good, output))


def market_price_with_flow(good: Good, input: float, output: float) -> float:
    return _priced(good, market_price_percent_with_flow(good, input, output))


# Market price predictions after a change in population purchases.


def _predicted_demand(good: Good, purchase_weight: float) -> float:
    if good.is_local():
        return good.consumption + good.local_pop_consumption_change(purchase_weight)
    return good.buy_orders + good.pop_consumption_change(purchase_weight)


def market_price_percent_prediction(good: Good, purchase_weight: float) -> float:
    supply = good.production if good.is_local() else good.sell_orders
    return price_pressure(good, _predicted_demand(good, purchase_weight), supply)


def market_price_percent_prediction_with_output(
    good: Good, output: float, purchase_weight: float
) -> float:
    return price_pressure(good, _predicted_demand(good, purchase_weight), output)


def market_price_percent_prediction_with_flow(
    good: Good, input: float, output: float, purchase_weight: float
) -> float:
    supply = good.production if good.is_local() else good.sell_orders
    return price_pressure(
        good, input + _predicted_demand(good, purchase_weight), output + supply
    )


def market_price_prediction(good: Good, purchase_weight: float) -> float:
    return _priced(good, market_price_percent_prediction(good, purchase_weight))


def market_price_prediction_with_output(
    good: Good, output: float, purchase_weight: float
) -> float:
    return _priced(
        good, market_price_percent_prediction_with_output(good, output, purchase_weight)
    )


def market_price_prediction_with_flow(
    good: Good, input: float, output: float, purchase_weight: float
) -> float:
    return _priced(
        good,
        market_price_percent_prediction_with_flow(good, input, output, purchase_weight),
    )


# Local prices: a blend of the market price and the state's own balance.


def _blend(good: Good, mapi: float, market: float, local_percent: float) -> float:
    return mapi * market + (1 - mapi) * _priced(good, local_percent)


def local_price(good: Good, mapi: float) -> float:
    pressure = price_pressure(good, good.consumption, good.production)
    return _blend(good, mapi, market_price(good), pressure)


def local_price_with_output(good: Good, mapi: float, output: float) -> float:
    pressure = price_pressure(good, good.consumption, output)
    market_output = output - good.production + good.sell_orders
    return _blend(good, mapi, market_price_with_output(good, market_output), pressure)


def local_price_with_flow(
    good: Good, mapi: float, market_input: float, market_output: float
) -> float:
    pressure = price_pressure(
        good, market_input + good.consumption, market_output + good.production
    )
    market = market_price_with_flow(good, market_input, market_output)
    return _blend(good, mapi, market, pressure)


def local_price_imports_canceled(
    good: Good, mapi: float, market_input: float, market_output: float
) -> float:
    pressure = price_pressure(
        good, market_input + good.consumption, market_output + good.production
    )
    market = market_price_with_flow(good, market_input, market_output - good.imports)
    return _blend(good, mapi, market, pressure)


def local_price_percent(good: Good, mapi: float) -> float:
    return _as_percent(good, local_price(good, mapi))


def local_price_percent_with_output(good: Good, mapi: float, output: float) -> float:
    return _as_percent(good, local_price_with_output(good, mapi, output))


def local_price_percent_with_flow(
    good: Good, mapi: float, market_input: float, market_output: float
) -> float:
    return _as_percent(good, local_price_with_flow(good, mapi, market_input, market_output))


def local_price_percent_imports_canceled(
    good: Good, mapi: float, market_input: float, market_output: float
) -> float:
    return _as_percent(
        good, local_price_imports_canceled(good, mapi, market_input, market_output)
    )


# Local price predictions.


def _predicted_local_demand(good: Good, local_purchase_weight: float) -> float:
    return good.consumption + good.local_pop_consumption_change(local_purchase_weight)


def local_price_prediction(
    good: Good, mapi: float, purchase_weight: float, local_purchase_weight: float
) -> float:
    demand = _predicted_local_demand(good, local_purchase_weight)
    pressure = price_pressure(good, demand, good.production)
    return _blend(good, mapi, market_price_prediction(good, purchase_weight), pressure)


def local_price_prediction_with_output(
    good: Good,
    mapi: float,
    output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    demand = _predicted_local_demand(good, local_purchase_weight)
    pressure = price_pressure(good, demand, output)
    market_output = output - good.production + good.sell_orders
    market = market_price_prediction_with_output(good, market_output, purchase_weight)
    return _blend(good, mapi, market, pressure)


def local_price_prediction_with_flow(
    good: Good,
    mapi: float,
    market_input: float,
    market_output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    demand = market_input + _predicted_local_demand(good, local_purchase_weight)
    pressure = price_pressure(good, demand, market_output + good.production)
    market = market_price_prediction_with_flow(
        good, market_input, market_output, purchase_weight
    )
    return _blend(good, mapi, market, pressure)


def local_price_prediction_imports_canceled(
    good: Good,
    mapi: float,
    market_input: float,
    market_output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    demand = market_input + _predicted_local_demand(good, local_purchase_weight)
    pressure = price_pressure(good, demand, market_output + good.production)
    market = market_price_prediction_with_flow(
        good, market_input, market_output - good.imports, purchase_weight
    )
    return _blend(good, mapi, market, pressure)


def local_price_percent_prediction(
    good: Good, mapi: float, purchase_weight: float, local_purchase_weight: float
) -> float:
    return _as_percent(
        good, local_price_prediction(good, mapi, purchase_weight, local_purchase_weight)
    )


def local_price_percent_prediction_with_output(
    good: Good,
    mapi: float,
    output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    return _as_percent(
        good,
        local_price_prediction_with_output(
            good, mapi, output, purchase_weight, local_purchase_weight
        ),
    )


def local_price_percent_prediction_with_flow(
    good: Good,
    mapi: float,
    market_input: float,
    market_output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    return _as_percent(
        good,
        local_price_prediction_with_flow(
            good, mapi, market_input, market_output, purchase_weight, local_purchase_weight
        ),
    )


def local_price_percent_prediction_imports_canceled(
    good: Good,
    mapi: float,
    market_input: float,
    market_output: float,
    purchase_weight: float,
    local_purchase_weight: float,
) -> float:
    return _as_percent(
        good,
        local_price_prediction_imports_canceled(
            good, mapi, market_input, market_output, purchase_weight, local_purchase_weight
        ),
    )
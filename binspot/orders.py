"""Order kinds and the request parameters that describe an order."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class OrderType(str, Enum):
    """How an order is matched."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"


class OrderSide(str, Enum):
    """Whether an order buys or sells."""

    BUY = "BUY"
    SELL = "SELL"


class TimeInForce(str, Enum):
    """How long an order stays active."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


def format_number(value: float) -> str:
    """Render a number in plain decimal notation, shortest form, no exponent."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return format(Decimal(repr(number)).normalize(), "f")


@dataclass(frozen=True)
class OrderRequest:
    """An order given by its base-asset quantity."""

    symbol: str
    qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    stop_price: float | None = None
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: str | None = None

    def to_params(self) -> dict[str, str]:
        """Parameters sent to the order endpoint."""
        params = {
            "symbol": self.symbol,
            "side": OrderSide(self.order_side).value,
            "type": OrderType(self.order_type).value,
            "quantity": format_number(self.qty),
        }
        if self.stop_price is not None:
            params["stopPrice"] = format_number(self.stop_price)
        if float(self.price) != 0.0:
            params["price"] = format_number(self.price)
            params["timeInForce"] = TimeInForce(self.time_in_force).value
        if self.new_client_order_id is not None:
            params["newClientOrderId"] = self.new_client_order_id
        return params


@dataclass(frozen=True)
class QuoteOrderRequest:
    """An order given by the amount of the quote asset to spend or receive."""

    symbol: str
    quote_order_qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: str | None = None

    def to_params(self) -> dict[str, str]:
        """Parameters sent to the order endpoint."""
        params = {
            "symbol": self.symbol,
            "side": OrderSide(self.order_side).value,
            "type": OrderType(self.order_type).value,
            "quoteOrderQty": format_number(self.quote_order_qty),
        }
        if float(self.price) != 0.0:
            params["price"] = format_number(self.price)
            params["timeInForce"] = TimeInForce(self.time_in_force).value
        if self.new_client_order_id is not None:
            params["newClientOrderId"] = self.new_client_order_id
        return params
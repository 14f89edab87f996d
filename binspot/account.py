"""Signed account endpoints: balances, orders and trade history."""

from __future__ import annotations

from typing import Any

import requests

from binspot.client import Client, build_signed_request
from binspot.config import Config
from binspot.endpoints import Spot
from binspot.errors import BinanceError
from binspot.orders import (
    OrderRequest,
    OrderSide,
    OrderType,
    QuoteOrderRequest,
    TimeInForce,
)


class Account:
    """Account and order operations that need a signed request.

    Responses are returned as the decoded JSON the exchange sends. The
    ``test_*`` methods go to the test order endpoint, where orders are
    validated but never matched; they return nothing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        config: Config | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        config = config if config is not None else Config()
        self.client = Client(api_key, secret_key, config.rest_api_endpoint, session=session)
        self.recv_window = config.recv_window

    def _signed(self, parameters: dict[str, str] | None = None) -> str:
        return build_signed_request(parameters or {}, self.recv_window)

    def _submit(self, order: OrderRequest | QuoteOrderRequest) -> Any:
        return self.client.post_signed(Spot.ORDER, self._signed(order.to_params()))

    def _submit_test(self, order: OrderRequest | QuoteOrderRequest) -> None:
        self.client.post_signed(Spot.ORDER_TEST, self._signed(order.to_params()))

    def get_account(self) -> Any:
        """Account information, including every balance."""
        return self.client.get_signed(Spot.ACCOUNT, self._signed())

    def get_balance(self, asset: str) -> Any:
        """The balance of one asset; raises if the account does not hold it."""
        for balance in self.get_account()["balances"]:
            if balance["asset"] == asset:
                return balance
        raise BinanceError("Asset not found")

    def get_open_orders(self, symbol: str) -> Any:
        """Open orders for one symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._signed({"symbol": symbol}))

    def get_all_open_orders(self) -> Any:
        """Open orders for every symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._signed())

    def cancel_all_open_orders(self, symbol: str) -> Any:
        """Cancel every open order for one symbol."""
        return self.client.delete_signed(Spot.OPEN_ORDERS, self._signed({"symbol": symbol}))

    def order_status(self, symbol: str, order_id: int) -> Any:
        """The state of one order."""
        request = self._signed({"symbol": symbol, "orderId": str(order_id)})
        return self.client.get_signed(Spot.ORDER, request)

    def test_order_status(self, symbol: str, order_id: int) -> None:
        """Validate an order status query against the test endpoint."""
        request = self._signed({"symbol": symbol, "orderId": str(order_id)})
        self.client.get_signed(Spot.ORDER_TEST, request)

    def limit_buy(self, symbol: str, qty: float, price: float) -> Any:
        """Place a good-till-cancelled limit buy order."""
        return self._submit(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.LIMIT, price))

    def test_limit_buy(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit buy order without placing it."""
        self._submit_test(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.LIMIT, price))

    def limit_sell(self, symbol: str, qty: float, price: float) -> Any:
        """Place a good-till-cancelled limit sell order."""
        return self._submit(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.LIMIT, price))

    def test_limit_sell(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit sell order without placing it."""
        self._submit_test(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.LIMIT, price))

    def market_buy(self, symbol: str, qty: float) -> Any:
        """Place a market buy order for a base-asset quantity."""
        return self._submit(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.MARKET))

    def test_market_buy(self, symbol: str, qty: float) -> None:
        """Validate a market buy order without placing it."""
        self._submit_test(OrderRequest(symbol, qty, OrderSide.BUY, OrderType.MARKET))

    def market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        """Place a market buy order that spends a quote-asset amount."""
        return self._submit(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.BUY, OrderType.MARKET)
        )

    def test_market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> None:
        """Validate a quote-quantity market buy order without placing it."""
        self._submit_test(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.BUY, OrderType.MARKET)
        )

    def market_sell(self, symbol: str, qty: float) -> Any:
        """Place a market sell order for a base-asset quantity."""
        return self._submit(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.MARKET))

    def test_market_sell(self, symbol: str, qty: float) -> None:
        """Validate a market sell order without placing it."""
        self._submit_test(OrderRequest(symbol, qty, OrderSide.SELL, OrderType.MARKET))

    def market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        """Place a market sell order that receives a quote-asset amount."""
        return self._submit(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.SELL, OrderType.MARKET)
        )

    def test_market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> None:
        """Validate a quote-quantity market sell order without placing it."""
        self._submit_test(
            QuoteOrderRequest(symbol, quote_order_qty, OrderSide.SELL, OrderType.MARKET)
        )

    def stop_limit_buy_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss limit buy order."""
        return self._submit(
            OrderRequest(
                symbol, qty, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
                price, stop_price, time_in_force,
            )
        )

    def test_stop_limit_buy_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit buy order without placing it."""
        self._submit_test(
            OrderRequest(
                symbol, qty, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
                price, stop_price, time_in_force,
            )
        )

    def stop_limit_sell_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss limit sell order."""
        return self._submit(
            OrderRequest(
                symbol, qty, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
                price, stop_price, time_in_force,
            )
        )

    def test_stop_limit_sell_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit sell order without placing it."""
        self._submit_test(
            OrderRequest(
                symbol, qty, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
                price, stop_price, time_in_force,
            )
        )

    def custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float | None,
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: str | None,
    ) -> Any:
        """Place an order with every parameter given explicitly."""
        return self._submit(
            OrderRequest(
                symbol, qty, order_side, order_type,
                price, stop_price, time_in_force, new_client_order_id,
            )
        )

    def test_custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float | None,
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: str | None,
    ) -> None:
        """Validate a fully specified order without placing it."""
        self._submit_test(
            OrderRequest(
                symbol, qty, order_side, order_type,
                price, stop_price, time_in_force, new_client_order_id,
            )
        )

    def cancel_order(self, symbol: str, order_id: int) -> Any:
        """Cancel an order by its exchange id."""
        request = self._signed({"symbol": symbol, "orderId": str(order_id)})
        return self.client.delete_signed(Spot.ORDER, request)

    def cancel_order_with_client_id(self, symbol: str, orig_client_order_id: str) -> Any:
        """Cancel an order by the client id it was placed with."""
        request = self._signed({"symbol": symbol, "origClientOrderId": orig_client_order_id})
        return self.client.delete_signed(Spot.ORDER, request)

    def test_cancel_order(self, symbol: str, order_id: int) -> None:
        """Validate a cancellation against the test endpoint."""
        request = self._signed({"symbol": symbol, "orderId": str(order_id)})
        self.client.delete_signed(Spot.ORDER_TEST, request)

    def trade_history(self, symbol: str) -> Any:
        """Trades made on one symbol."""
        return self.client.get_signed(Spot.MY_TRADES, self._signed({"symbol": symbol}))
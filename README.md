# binspot

A small, blocking Python client for the Binance spot REST API. It builds and
signs requests (HMAC-SHA256 over the query string), sends them with
`requests`, and hands back the decoded JSON as plain Python dicts and lists.
Failures are raised as exceptions.

## Installation

```
pip install binspot
```

For running the test suite:

```
pip install "binspot[test]"
pytest
```

## What is in the package

| Module               | Contents                                                                      |
|----------------------|-------------------------------------------------------------------------------|
| `binspot.config`     | `Config`: REST and websocket endpoint URLs and the receive window             |
| `binspot.errors`     | `BinanceError` and `BinanceApiError` (an error body with `code` and `msg`)    |
| `binspot.endpoints`  | the `Spot`, `Sapi` and `Futures` endpoint enums and `path(endpoint)`          |
| `binspot.client`     | `Client` and the query helpers `build_request` / `build_signed_request`       |
| `binspot.orders`     | `OrderSide`, `OrderType`, `TimeInForce`, `OrderRequest`, `QuoteOrderRequest`, `format_number` |
| `binspot.account`    | `Account`: balances, open orders, order placement and cancellation            |

## Configuration

`Config` is a frozen dataclass. It defaults to the production endpoints and a
receive window of 5000 ms; a negative receive window raises `ValueError`.
`Config.testnet()` points every endpoint at the test network, and `replace`
returns a copy with the fields you name changed:

```python
from binspot.config import Config

config = Config.testnet().replace(recv_window=1234)
print(config.rest_api_endpoint)   # https://testnet.binance.vision
print(config.recv_window)         # 1234
```

## Building query strings

Parameters are sorted by name before they are joined, so the string that is
signed is always the same for the same parameters:

```python
from binspot.client import build_request

build_request({"recvWindow": "1234"})   # 'recvWindow=1234'
build_request({})                       # ''
```

`build_signed_request(parameters, recv_window, now=None)` adds `recvWindow`
(left out when the window is 0) and a millisecond `timestamp` taken from `now`,
or from the current time when `now` is not given. A naive `now` is read as
local time; a moment before the Unix epoch raises `BinanceError`.

## The client

`Client(api_key=None, secret_key=None, host=..., *, session=None, timeout=30.0)`
sends requests to one host. `get`, `post`, `put` and `delete` call public or
listen-key endpoints; `get_signed`, `post_signed` and `delete_signed` append
`&signature=<hex HMAC-SHA256>` to the query and send the API key in the
`X-MBX-APIKEY` header. Each method takes an endpoint enum member:

```python
from binspot.client import Client
from binspot.endpoints import Spot

client = Client()
client.get(Spot.TIME)                   # {'serverTime': ...}
client.get(Spot.DEPTH, "symbol=LTCBTC")
```

## Trading

`Account(api_key=None, secret_key=None, config=None, *, session=None)` wraps a
`Client` and the receive window from your `Config`:

```python
from binspot.account import Account
from binspot.config import Config
from binspot.orders import TimeInForce

account = Account(api_key="placeholder", secret_key="secret", config=Config.testnet())
account.limit_buy("LTCBTC", 1, 0.1)
account.stop_limit_sell_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)
```

Its methods cover the spot account endpoints:

- account and balances: `get_account`, `get_balance`
- open orders: `get_open_orders`, `get_all_open_orders`, `cancel_all_open_orders`
- order state: `order_status`, `cancel_order`, `cancel_order_with_client_id`
- limit orders: `limit_buy`, `limit_sell` (good till cancelled)
- market orders: `market_buy`, `market_sell`, and the quote-quantity forms
  `market_buy_using_quote_quantity`, `market_sell_using_quote_quantity`
- stop-loss limit orders: `stop_limit_buy_order`, `stop_limit_sell_order`
- anything else: `custom_order`, taking an `OrderSide`, an `OrderType`, a
  `TimeInForce` and an optional client order id
- fills: `trade_history`

Each order method has a `test_` counterpart (`test_limit_buy`,
`test_custom_order`, `test_cancel_order`, `test_order_status` and so on) that
sends the request to the test order endpoint, where it is validated but never
matched; these return `None`.

Order parameters come from `OrderRequest.to_params()` and
`QuoteOrderRequest.to_params()`. Numbers are written in plain decimal form
(`1` becomes `"1"`, `0.002` stays `"0.002"`). A price of zero leaves `price`
and `timeInForce` out of the order, which is what market orders need. A stop
price, when given, is sent as `stopPrice`.

## Errors

Every failure raised by the package is a `BinanceError`: a failed connection,
a body that is not JSON, an API key that cannot go in a header, or an HTTP
status other than 200 (`"Internal Server Error"`, `"Service Unavailable"`,
`"Unauthorized"`, or `"Received response: <status>"`). When the exchange
answers with HTTP 400 and an error body, the exception is a `BinanceApiError`
carrying the exchange's numeric `code`, its `msg`, and any other fields in
`extra`:

```python
from binspot.errors import BinanceApiError, BinanceError

try:
    balance = account.get_balance("BTC")
except BinanceApiError as err:
    print(err.code, err.msg)
except BinanceError as err:
    print("request failed:", err)
```

Asking `get_balance` for an asset the account does not hold raises
`BinanceError("Asset not found")`.

## What the package does not do

- There are no dedicated methods for market data, exchange information,
  savings or futures. The endpoint enums list those paths, and `Client.get` or
  the signed methods can call them, but the results are raw JSON.
- Responses are not turned into typed objects; you get the decoded JSON.
- There is no websocket client. `Config` holds websocket URLs, but nothing in
  the package opens a stream.
- There is no command-line program.

Keep real API keys out of source files: read them from the environment or a
secrets store, and use placeholders such as `api_key="placeholder"` in examples
and tests.
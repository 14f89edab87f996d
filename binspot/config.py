"""Endpoint and timing settings shared by the REST clients."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Config:
    """Where to send requests and how long a signed request stays valid."""

    rest_api_endpoint: str = "https://api.binance.com"
    ws_endpoint: str = "wss://stream.binance.com:9443/ws/"
    futures_rest_api_endpoint: str = "https://fapi.binance.com"
    futures_ws_endpoint: str = "wss://fstream.binance.com/ws"
    recv_window: int = 5000

    def __post_init__(self) -> None:
        if self.recv_window < 0:
            raise ValueError("recv_window must not be negative")

    @classmethod
    def testnet(cls) -> Config:
        """Settings that point every endpoint at the test network."""
        return cls(
            rest_api_endpoint="https://testnet.binance.vision",
            ws_endpoint="wss://testnet.binance.vision/ws",
            futures_rest_api_endpoint="https://testnet.binancefuture.com",
            futures_ws_endpoint="https://testnet.binancefuture.com/ws",
        )

    def replace(self, **kwargs: Any) -> Config:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)
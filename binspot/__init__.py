"""Blocking client for the Binance spot REST API: signing, account queries and orders."""

__version__ = "0.1.0"

__all__ = ["account", "client", "config", "endpoints", "errors", "orders"]
"""Exceptions raised by the REST clients."""

from __future__ import annotations

from typing import Any, Mapping

_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1


class BinanceError(Exception):
    """Base class for every error the package raises."""


class BinanceApiError(BinanceError):
    """An error the exchange reported in a response body."""

    def __init__(self, code: int, msg: str, extra: Mapping[str, Any] | None = None) -> None:
        super().__init__(f"{code}: {msg}")
        self.code = code
        self.msg = msg
        self.extra: dict[str, Any] = dict(extra or {})

    @classmethod
    def from_payload(cls, payload: Any) -> BinanceApiError:
        """Build the error from a decoded JSON error body."""
        if not isinstance(payload, Mapping):
            raise BinanceError(f"error body is not an object: {payload!r}")
        try:
            code = payload["code"]
            msg = payload["msg"]
        except KeyError as missing:
            raise BinanceError(f"error body lacks field {missing.args[0]!r}") from None
        if isinstance(code, bool) or not isinstance(code, int):
            raise BinanceError(f"error code is not an integer: {code!r}")
        if not _I16_MIN <= code <= _I16_MAX:
            raise BinanceError(f"error code out of range: {code}")
        if not isinstance(msg, str):
            raise BinanceError(f"error message is not a string: {msg!r}")
        extra = {key: value for key, value in payload.items() if key not in ("code", "msg")}
        return cls(code, msg, extra)
"""HTTP client that builds, signs and sends REST requests."""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import requests

from binspot.config import Config
from binspot.endpoints import Endpoint, path
from binspot.errors import BinanceApiError, BinanceError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_USER_AGENT = "binspot"
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_request(parameters: Mapping[str, str]) -> str:
    """Join parameters into a query string, ordered by key."""
    return "&".join(f"{key}={parameters[key]}" for key in sorted(parameters))


def build_signed_request(
    parameters: Mapping[str, str], recv_window: int, now: datetime | None = None
) -> str:
    """Add ``recvWindow`` and a millisecond ``timestamp`` and build the query.

    ``now`` defaults to the current time; a naive datetime is taken as local time.
    """
    moment = datetime.now(timezone.utc) if now is None else now.astimezone(timezone.utc)
    since_epoch = moment - _EPOCH
    if since_epoch < timedelta(0):
        raise BinanceError("timestamp lies before the Unix epoch")
    timestamp = since_epoch // timedelta(milliseconds=1)

    signed = dict(parameters)
    if recv_window > 0:
        signed["recvWindow"] = str(recv_window)
    signed["timestamp"] = str(timestamp)
    return build_request(signed)


def _check_header_value(value: str) -> None:
    for byte in value.encode("utf-8"):
        if byte == 0x09:
            continue
        if byte < 0x20 or byte == 0x7F:
            raise BinanceError(f"invalid header value: {value!r}")


class Client:
    """Sends plain and signed requests to one REST host."""

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        host: str = Config().rest_api_endpoint,
        *,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.api_key = api_key or ""
        self.secret_key = secret_key or ""
        self.host = host
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def get_signed(self, endpoint: Endpoint, request: str | None = None) -> Any:
        """GET a signed endpoint and return the decoded JSON body."""
        return self._send("GET", self._sign_request(endpoint, request), self._headers(True))

    def post_signed(self, endpoint: Endpoint, request: str) -> Any:
        """POST to a signed endpoint and return the decoded JSON body."""
        return self._send("POST", self._sign_request(endpoint, request), self._headers(True))

    def delete_signed(self, endpoint: Endpoint, request: str | None = None) -> Any:
        """DELETE on a signed endpoint and return the decoded JSON body."""
        return self._send("DELETE", self._sign_request(endpoint, request), self._headers(True))

    def get(self, endpoint: Endpoint, request: str | None = None) -> Any:
        """GET a public endpoint, with an optional query string."""
        url = f"{self.host}{path(endpoint)}"
        if request:
            url = f"{url}?{request}"
        return self._send("GET", url, None)

    def post(self, endpoint: Endpoint) -> Any:
        """POST to an endpoint that needs the API key but no signature."""
        return self._send("POST", f"{self.host}{path(endpoint)}", self._headers(False))

    def put(self, endpoint: Endpoint, listen_key: str) -> Any:
        """PUT a listen key to an endpoint."""
        return self._send(
            "PUT",
            f"{self.host}{path(endpoint)}",
            self._headers(False),
            data=f"listenKey={listen_key}",
        )

    def delete(self, endpoint: Endpoint, listen_key: str) -> Any:
        """DELETE a listen key on an endpoint."""
        return self._send(
            "DELETE",
            f"{self.host}{path(endpoint)}",
            self._headers(False),
            data=f"listenKey={listen_key}",
        )

    def _sign_request(self, endpoint: Endpoint, request: str | None) -> str:
        query = request or ""
        signature = hmac.new(
            self.secret_key.encode("utf-8"), query.encode("utf-8"), hashlib.sha256
        ).hexdigest()
        return f"{self.host}{path(endpoint)}?{query}&signature={signature}"

    def _headers(self, content_type: bool) -> dict[str, str]:
        _check_header_value(self.api_key)
        headers = {"User-Agent": _USER_AGENT}
        if content_type:
            headers["Content-Type"] = _FORM_CONTENT_TYPE
        headers["X-MBX-APIKEY"] = self.api_key
        return headers

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None,
        data: str | None = None,
    ) -> Any:
        try:
            response = self._session.request(
                method, url, headers=headers, data=data, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise BinanceError(f"request failed: {exc}") from exc
        return self._handle(response)

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BinanceError(f"response is not valid JSON: {exc}") from exc

    def _handle(self, response: requests.Response) -> Any:
        status = response.status_code
        if status == 200:
            return self._json(response)
        if status == 500:
            raise BinanceError("Internal Server Error")
        if status == 503:
            raise BinanceError("Service Unavailable")
        if status == 401:
            raise BinanceError("Unauthorized")
        if status == 400:
            raise BinanceApiError.from_payload(self._json(response))
        raise BinanceError(f"Received response: {status}")
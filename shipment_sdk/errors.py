"""
Exceptions raised by the shipment SDK.

Errors coming from the API, the transport, configuration or rate data derive
from ShipmentSDKError so callers can catch the whole family in one place.
Configuration and data errors (missing API key, unknown carrier/service tags,
unparseable amounts) are also ValueErrors; transport failures are also
ConnectionErrors. Invalid arguments to a single call (an empty rate id, an
unsupported label format, an empty URL segment) raise plain ValueError.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ShipmentSDKError(Exception):
    """Base class for all SDK errors."""


class ApiError(ShipmentSDKError):
    """The API answered with a non-2xx status or an unreadable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.payload = payload or {}

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class ApiConnectionError(ShipmentSDKError, ConnectionError):
    """The request never reached the API (DNS, TLS, timeout, ...)."""


class ConfigurationError(ShipmentSDKError, ValueError):
    """The client is missing settings it needs to make a request."""


class UnknownEnumValue(ShipmentSDKError, ValueError):
    def __init__(self, kind: str, value: Any) -> None:
        super().__init__(f"Unknown {kind} value: {value!r}")
        self.kind = kind
        self.value = value


class MalformedAmount(ShipmentSDKError, ValueError):
    def __init__(self, value: Any, *, rate_id: Optional[str] = None) -> None:
        where = f" on rate {rate_id}" if rate_id else ""
        super().__init__(f"Rate amount{where} is not a non-negative decimal: {value!r}")
        self.value = value
        self.rate_id = rate_id

"""
Request builder shared by the real HTTP client and the mock client.

A Request is a path template ("shipments/{id}/buy"), an HTTP method and a flat
set of parameters. Nested bodies are flattened into bracketed form keys, the
encoding the API expects:

    add_body({"to_address": {"zip": "94105"}}, "shipment")
    -> {"shipment[to_address][zip]": "94105"}

GET requests send parameters as the query string, everything else as a
form-encoded body.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote


class Request:
    def __init__(self, resource: str, method: str = "GET") -> None:
        self.resource = resource.lstrip("/")
        self.method = method.upper()
        self.url_segments: Dict[str, str] = {}
        self.parameters: Dict[str, str] = {}

    def add_url_segment(self, name: str, value: Any) -> "Request":
        if value is None or str(value) == "":
            raise ValueError(f"URL segment '{name}' must not be empty")
        self.url_segments[name] = str(value)
        return self

    def add_parameter(self, name: str, value: Any) -> "Request":
        self.parameters[name] = _to_wire(value)
        return self

    def add_body(self, params: Any, root: Optional[str] = None) -> "Request":
        for key, value in flatten_params(params, root):
            self.parameters[key] = value
        return self

    @property
    def path(self) -> str:
        path = self.resource
        for name, value in self.url_segments.items():
            path = path.replace("{" + name + "}", quote(value, safe=""))
        return path

    def __repr__(self) -> str:
        return f"Request({self.method} {self.path})"


def flatten_params(params: Any, prefix: Optional[str] = None) -> List[Tuple[str, str]]:
    """Flatten nested dicts/lists into (bracketed_key, value) pairs. None values are skipped."""
    items: List[Tuple[str, str]] = []

    if isinstance(params, dict):
        for key, value in params.items():
            full_key = f"{prefix}[{key}]" if prefix else str(key)
            items.extend(flatten_params(value, full_key))
    elif isinstance(params, (list, tuple)):
        if prefix is None:
            raise TypeError("A list body needs a root key")
        for index, value in enumerate(params):
            items.extend(flatten_params(value, f"{prefix}[{index}]"))
    elif params is None:
        pass
    else:
        if prefix is None:
            raise TypeError(f"Cannot send a bare {type(params).__name__} as a request body")
        items.append((prefix, _to_wire(params)))

    return items


def _to_wire(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

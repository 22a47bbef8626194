"""Per-endpoint registry of request handlers, keyed by HTTP method."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from enum import Enum
from typing import Any

__all__ = ["MethodsHandler", "RequestHandler", "EndpointList"]

RequestHandler = Callable[[Any, Any], None]
EndpointList = MutableMapping[str, "tuple[str, list[str]]"]


def _method_name(method: str | Enum) -> str:
    """Return the canonical upper-case name of an HTTP method."""
    value = method.value if isinstance(method, Enum) else method
    if not isinstance(value, str) or not value:
        raise ValueError(f"invalid HTTP method: {method!r}")
    return value.upper()


class MethodsHandler:
    """A single endpoint with one request handler per HTTP method.

    Registration methods return the handler itself so that calls can be
    chained: ``h.get(read).put(update).delete(remove)``.
    """

    def __init__(self, path: str, info: str = "") -> None:
        self.path = path
        self.info = info
        self._handlers: dict[str, RequestHandler] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, info={self.info!r}, "
            f"methods={list(self._handlers)!r})"
        )

    def get(self, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for GET requests."""
        return self.method("GET", handler)

    def post(self, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for POST requests."""
        return self.method("POST", handler)

    def head(self, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for HEAD requests."""
        return self.method("HEAD", handler)

    def put(self, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for PUT requests."""
        return self.method("PUT", handler)

    def delete(self, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for DELETE requests."""
        return self.method("DELETE", handler)

    def method(self, method: str | Enum, handler: RequestHandler) -> MethodsHandler:
        """Register the handler for an arbitrary HTTP method, replacing any earlier one."""
        self._handlers[_method_name(method)] = handler
        return self

    def method_supported(self, method: str | Enum) -> bool:
        """Return True if a handler is registered for the method."""
        return _method_name(method) in self._handlers

    def __getitem__(self, method: str | Enum) -> RequestHandler:
        """Return the handler registered for the method; KeyError if there is none."""
        return self._handlers[_method_name(method)]

    def __contains__(self, method: object) -> bool:
        if not isinstance(method, (str, Enum)):
            return False
        try:
            return self.method_supported(method)
        except ValueError:
            return False

    def propagate_endpoint(self, endpoints: EndpointList) -> None:
        """Record this endpoint's summary and supported methods in endpoints."""
        endpoints[self.path] = (self.info, list(self._handlers))
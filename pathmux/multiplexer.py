"""Routing of requests to endpoint handlers by path and HTTP method.

Requests and responses are duck-typed. A request needs ``path`` (the URL
path), ``method`` (a method name or an enum whose value is the name) and
``params`` (a mutable mapping that receives REST parameters). A response
needs ``status``, ``body`` (a string) and ``headers`` (a mutable mapping).
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, Protocol

from pathmux.matchers import SegmentMatcher, compile_to_matcher
from pathmux.methods_handler import MethodsHandler, RequestHandler

__all__ = ["RequestError", "Multiplexer", "split_path"]


class _Request(Protocol):
    path: str
    method: str | Enum
    params: MutableMapping[str, str]


class _Response(Protocol):
    status: Any
    body: str
    headers: MutableMapping[str, str]


PluginHandler = Callable[[Any, Any], None]
PluginWrapper = Callable[[Any, Any, Callable[[], None]], None]


class RequestError(Exception):
    """A request that cannot be served, carrying the HTTP status to reply with."""

    def __init__(self, status_code: HTTPStatus | int, message: str) -> None:
        super().__init__(message)
        self.status_code = HTTPStatus(status_code)
        self.message = message

    def __str__(self) -> str:
        return f"{int(self.status_code)} {self.message}"


def split_path(path: str) -> list[str]:
    """Split a path on '/' into its non-empty segments.

    A path that ends with '/' gets a trailing empty segment.
    """
    chunks = [chunk for chunk in path.split("/") if chunk]
    if path.endswith("/"):
        chunks.append("")
    return chunks


def _compile(path: str) -> list[SegmentMatcher]:
    return [compile_to_matcher(chunk) for chunk in split_path(path)]


def _matches(matchers: list[SegmentMatcher], segments: list[str]) -> bool:
    if len(matchers) > len(segments):
        return False
    return all(m.check_match(s) for m, s in zip(matchers, segments))


def _collect_params(
    matchers: list[SegmentMatcher], segments: list[str], params: MutableMapping[str, str]
) -> None:
    for matcher, segment in zip(matchers, segments):
        matcher.get_param(params, segment)


@dataclass
class _Candidate:
    segments: list[SegmentMatcher]
    handler: MethodsHandler
    raw_path: str


class Multiplexer:
    """Registry of endpoint handlers that routes each request to the first match.

    With a base path, requests must start with it; the base path is then
    stripped before the registered endpoints are tried.
    """

    def __init__(self, base_path: str = "") -> None:
        self.base_path = base_path
        self._base_segments = _compile(base_path) if base_path else []
        self._candidates: list[_Candidate] = []
        self._pre_handlers: list[PluginHandler] = []
        self._post_handlers: list[PluginHandler] = []
        self._wrappers: list[PluginWrapper] = []

    # plugin injection

    def use_before(self, plugin: PluginHandler) -> None:
        """Register a plugin called before every request is routed."""
        self._pre_handlers.append(plugin)

    def use_after(self, plugin: PluginHandler) -> None:
        """Register a plugin called by on_request_handled after every request."""
        self._post_handlers.append(plugin)

    def use_wrapper(self, plugin: PluginWrapper) -> None:
        """Register a wrapper that must call its third argument to continue.

        Wrappers nest, the first registered being the outermost.
        """
        self._wrappers.append(plugin)

    # endpoint registration

    def handle(self, path: str, info: str = "") -> MethodsHandler:
        """Register an endpoint, replacing any earlier one at the same path."""
        self._candidates = [c for c in self._candidates if c.raw_path != path]
        candidate = _Candidate(_compile(path), MethodsHandler(self.base_path + path, info), path)
        self._candidates.append(candidate)
        return candidate.handler

    # request forwarding

    def forward_to_handler(self, res: _Response, req: _Request) -> None:
        """Route the request through the wrappers to the first matching handler.

        Raises RequestError with 404 if no endpoint matches and 405 if the
        matching endpoint does not support the request method.
        """
        wrappers = list(self._wrappers)

        def step(index: int = 0) -> None:
            if index == len(wrappers):
                self._dispatch(res, req)
            else:
                wrappers[index](res, req, lambda: step(index + 1))

        step()

    def on_request_handled(self, res: _Response, req: _Request) -> None:
        """Run the plugins registered with use_after."""
        for plugin in self._post_handlers:
            plugin(res, req)

    def _dispatch(self, res: _Response, req: _Request) -> None:
        res.status = HTTPStatus.OK
        res.body = ""

        for plugin in self._pre_handlers:
            plugin(res, req)

        segments = split_path(req.path)

        if self._base_segments:
            if not _matches(self._base_segments, segments):
                raise RequestError(HTTPStatus.NOT_FOUND, "Path not found")
            _collect_params(self._base_segments, segments, req.params)
            segments = segments[len(self._base_segments):]

        for candidate in self._candidates:
            if not _matches(candidate.segments, segments):
                continue
            handler = candidate.handler
            if not handler.method_supported(req.method):
                raise RequestError(HTTPStatus.METHOD_NOT_ALLOWED, "Method not allowed")
            _collect_params(candidate.segments, segments, req.params)
            handler[req.method](res, req)
            return

        raise RequestError(HTTPStatus.NOT_FOUND, "Path not found")

    # accessors

    def get_endpoint_list(self) -> dict[str, tuple[str, list[str]]]:
        """Return every endpoint's summary and methods, ordered by endpoint path."""
        endpoints: dict[str, tuple[str, list[str]]] = {}
        for candidate in self._candidates:
            candidate.handler.propagate_endpoint(endpoints)
        return dict(sorted(endpoints.items()))

    def endpoint_list_yaml_handler(self) -> RequestHandler:
        """Return a request handler that lists all endpoints as YAML."""

        def handler(res: _Response, req: _Request) -> None:
            res.headers["Content-Type"] = "text/yaml"
            parts = ["%YAML 1.2\n---"]
            for path, (summary, methods) in self.get_endpoint_list().items():
                parts.append("\n-")
                parts.append(f"\n\tendpoint: {path}")
                if summary:
                    parts.append(f"\n\tsummary: {summary}")
                parts.append("\n\tmethods:")
                parts.extend(f"\n\t\t- {method}" for method in methods)
            res.body += "".join(parts)

        return handler
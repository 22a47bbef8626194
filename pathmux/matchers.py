"""Matchers for single segments of a request path."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass, field

__all__ = [
    "SegmentMatcher",
    "EmptyMatcher",
    "StaticMatcher",
    "VariableMatcher",
    "RegexMatcher",
    "compile_to_matcher",
]


class SegmentMatcher(ABC):
    """One segment of a handler path, used to match request path segments."""

    @abstractmethod
    def check_match(self, path_segment: str) -> bool:
        """Return True if the path segment matches this matcher."""

    @abstractmethod
    def get_param(self, params: MutableMapping[str, str], path_segment: str) -> None:
        """Store any REST parameter carried by the path segment into params."""


@dataclass(frozen=True)
class EmptyMatcher(SegmentMatcher):
    """Matches any segment; used for a path that ends with '/'."""

    def check_match(self, path_segment: str) -> bool:
        return True

    def get_param(self, params: MutableMapping[str, str], path_segment: str) -> None:
        return None


@dataclass(frozen=True)
class StaticMatcher(SegmentMatcher):
    """Matches one exact path segment."""

    pattern: str

    def check_match(self, path_segment: str) -> bool:
        return path_segment == self.pattern

    def get_param(self, params: MutableMapping[str, str], path_segment: str) -> None:
        return None


@dataclass(frozen=True)
class VariableMatcher(SegmentMatcher):
    """Matches any non-empty segment and captures it as a named parameter."""

    variable_name: str

    def check_match(self, path_segment: str) -> bool:
        # "/base/path/" must not match "/base/path/{variable}".
        return bool(path_segment)

    def get_param(self, params: MutableMapping[str, str], path_segment: str) -> None:
        if self.variable_name:
            params[self.variable_name] = path_segment


@dataclass(frozen=True)
class RegexMatcher(SegmentMatcher):
    """Matches a segment that satisfies a regular expression in full."""

    variable_name: str
    regex: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.regex))

    def check_match(self, path_segment: str) -> bool:
        return self._compiled.fullmatch(path_segment) is not None

    def get_param(self, params: MutableMapping[str, str], path_segment: str) -> None:
        if self.variable_name:
            params[self.variable_name] = path_segment


def compile_to_matcher(path_segment: str) -> SegmentMatcher:
    """Compile one segment of a handler path into a matcher.

    An empty segment matches anything, ``{name}`` captures any non-empty
    segment, ``{name:regex}`` captures a segment matching the regex, and
    anything else must match exactly.
    """
    if not path_segment:
        return EmptyMatcher()
    if path_segment.startswith("{") and path_segment.endswith("}"):
        trimmed = path_segment[1:-1]
        name, colon, regex = trimmed.partition(":")
        if not colon:
            return VariableMatcher(trimmed)
        return RegexMatcher(name, regex)
    return StaticMatcher(path_segment)
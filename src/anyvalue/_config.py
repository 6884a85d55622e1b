"""Config types for declarative matcher construction.

Lets a test fixture describe matchers as plain data (JSON/YAML) instead of
Python calls. Construction path:
  dict → parse_matcher_config() → MatcherConfig → Registry.load_matcher() → Matcher

Accepted shapes, discriminated by ``type``:

| Shape                                            | Runtime result        |
|--------------------------------------------------|-----------------------|
| {"type": "string_of_length", "args": [36]}       | string_of_length(36)  |
| {"type": "array_of", "element": {...}}           | array_of(element)     |
| {"type": "all_of", "matchers": [{...}, {...}]}   | left-folded ``^``     |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from anyvalue._matcher import MatcherError

# Config nesting limit, also enforced by Registry.load_matcher.
MAX_DEPTH = 32


@dataclass(frozen=True, slots=True)
class SingleMatcherConfig:
    """A registered constructor name plus its positional arguments."""

    type: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class ArrayOfConfig:
    """Every member of the sequence must satisfy ``element``."""

    element: MatcherConfig


@dataclass(frozen=True, slots=True)
class AllOfConfig:
    """Children combined with ``^`` in order (left fold)."""

    matchers: tuple[MatcherConfig, ...]


type MatcherConfig = SingleMatcherConfig | ArrayOfConfig | AllOfConfig


class ConfigParseError(MatcherError):
    """Error parsing a config dict into config types."""


def parse_matcher_config(data: dict[str, Any]) -> MatcherConfig:
    """Parse a dict into a MatcherConfig.

    Raises:
        ConfigParseError: If the dict is malformed or nested deeper than
            MAX_DEPTH.
    """
    return _parse(data, 1)


def _parse(data: dict[str, Any], depth: int) -> MatcherConfig:
    if depth > MAX_DEPTH:
        msg = f"config depth {depth} exceeds maximum allowed depth {MAX_DEPTH}"
        raise ConfigParseError(msg)
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    matcher_type = data.get("type")
    if matcher_type is None:
        msg = "matcher missing required field 'type'"
        raise ConfigParseError(msg)
    if not isinstance(matcher_type, str):
        msg = f"'type' must be a string, got {type(matcher_type).__name__}"
        raise ConfigParseError(msg)

    if matcher_type == "array_of":
        if "element" not in data:
            msg = "array_of matcher missing required field 'element'"
            raise ConfigParseError(msg)
        return ArrayOfConfig(element=_parse(data["element"], depth + 1))

    if matcher_type == "all_of":
        children = data.get("matchers")
        if not isinstance(children, list):
            msg = "all_of matcher requires a 'matchers' list"
            raise ConfigParseError(msg)
        if not children:
            msg = "all_of matcher requires at least one child"
            raise ConfigParseError(msg)
        return AllOfConfig(matchers=tuple(_parse(c, depth + 1) for c in children))

    args = data.get("args", [])
    if not isinstance(args, list):
        msg = f"'args' must be a list, got {type(args).__name__}"
        raise ConfigParseError(msg)
    return SingleMatcherConfig(type=matcher_type, args=tuple(args))

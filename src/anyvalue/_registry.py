"""Constructor registry for config-driven matcher construction.

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (*args) → Matcher
- load_matcher() walks the config tree and constructs runtime matchers

Example::

    builder = register_core_matchers(RegistryBuilder(), scope=MatcherScope())
    registry = builder.build()

    config = parse_matcher_config(yaml.safe_load(text))
    matcher = registry.load_matcher(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from anyvalue._collection_matchers import ArrayOf
from anyvalue._config import MAX_DEPTH, AllOfConfig, ArrayOfConfig, SingleMatcherConfig
from anyvalue._factory import STATELESS_CONSTRUCTORS, all_of, any_unique, increasing
from anyvalue._matcher import Matcher, MatcherError

if TYPE_CHECKING:
    from collections.abc import Callable

    from anyvalue._config import MatcherConfig
    from anyvalue._factory import MatcherScope

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_COMPOSITE_WIDTH = 256
MAX_PATTERN_LENGTH = 4096

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownMatcherTypeError(MatcherError):
    """A matcher type name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher type: {name!r} (registered: {registered})"
        else:
            msg = f"unknown matcher type: {name!r} (no matcher types are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyMatchersError(MatcherError):
    """An all_of config has too many children (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many matchers in all_of: {count} exceeds maximum {max_}")


class TooDeepError(MatcherError):
    """Config nesting exceeds the depth limit."""

    def __init__(self, depth: int, max_: int) -> None:
        self.depth = depth
        self.max = max_
        super().__init__(f"matcher depth {depth} exceeds maximum allowed depth {max_}")


class PatternTooLongError(MatcherError):
    """A string_matching pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[..., Matcher]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register matcher factories by name, then call build() to produce an
    immutable Registry. Registering a name twice replaces the earlier
    factory.
    """

    def __init__(self) -> None:
        self._factories: dict[str, MatcherFactory] = {}

    def matcher(self, name: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a matcher factory under a type name."""
        self._factories[name] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(_factories=MappingProxyType(dict(self._factories)))


def register_core_matchers(
    builder: RegistryBuilder, scope: MatcherScope | None = None
) -> RegistryBuilder:
    """Register every built-in constructor under its function name.

    array_of and all_of are structural config shapes and are not registered.
    When ``scope`` is given, any_unique and increasing resolve to the scope's
    memoized instances, so every config that names them shares history.
    """
    for constructor in STATELESS_CONSTRUCTORS:
        if constructor.__name__ == "array_of":
            continue
        builder.matcher(constructor.__name__, constructor)
    if scope is None:
        builder.matcher("any_unique", any_unique)
        builder.matcher("increasing", increasing)
    else:
        builder.matcher("any_unique", scope.any_unique)
        builder.matcher("increasing", scope.increasing)
    return builder


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable mapping of type names to matcher factories.

    Constructed via RegistryBuilder. Use load_matcher() to turn config into
    a runtime Matcher.
    """

    _factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: MatcherConfig) -> Matcher:
        """Load a Matcher from configuration.

        Raises:
            UnknownMatcherTypeError: type name not registered
            InvalidConfigError: a factory rejected its arguments
            TooManyMatchersError: all_of has too many children
            TooDeepError: config nesting exceeds MAX_DEPTH
            PatternTooLongError: string_matching pattern exceeds the limit
        """
        matcher = self._load(config, 1)
        logger.debug("loaded matcher %r", matcher)
        return matcher

    @property
    def matcher_count(self) -> int:
        """Number of registered matcher types."""
        return len(self._factories)

    def contains_matcher(self, name: str) -> bool:
        """Check if a matcher type name is registered."""
        return name in self._factories

    def matcher_names(self) -> list[str]:
        """Return all registered matcher type names (sorted)."""
        return sorted(self._factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load(self, config: MatcherConfig, depth: int) -> Matcher:
        if depth > MAX_DEPTH:
            raise TooDeepError(depth, MAX_DEPTH)

        match config:
            case SingleMatcherConfig():
                return self._load_single(config)
            case ArrayOfConfig(element=element):
                return ArrayOf(self._load(element, depth + 1))
            case AllOfConfig(matchers=children):
                if len(children) > MAX_COMPOSITE_WIDTH:
                    raise TooManyMatchersError(len(children), MAX_COMPOSITE_WIDTH)
                return all_of(*(self._load(c, depth + 1) for c in children))
            case _:  # pragma: no cover
                msg = f"unknown matcher config type: {type(config).__name__}"
                raise InvalidConfigError(msg)

    def _load_single(self, config: SingleMatcherConfig) -> Matcher:
        factory = self._factories.get(config.type)
        if factory is None:
            raise UnknownMatcherTypeError(config.type, list(self._factories.keys()))

        if config.type == "string_matching":
            _check_pattern_length(config.args)

        try:
            return factory(*config.args)
        except Exception as e:
            source = f"{config.type}: {e}"
            raise InvalidConfigError(source) from e


def _check_pattern_length(args: tuple[Any, ...]) -> None:
    if args and isinstance(args[0], str) and len(args[0]) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(args[0]), MAX_PATTERN_LENGTH)

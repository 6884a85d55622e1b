"""anyvalue — placeholder values for equality-based test assertions.

Substitute a matcher for an expected value and the assertion checks the
*shape* of the actual value rather than its exact contents:

    from anyvalue import any_integer, any_time, string_of_length

    assert response == {"id": any_integer(), "token": string_of_length(36),
                        "created_at": any_time()}

All public names are exported from this module for flat imports.
"""

__version__ = "0.1.0"

from anyvalue._collection_matchers import ArrayOf, SortedArray
from anyvalue._config import (
    AllOfConfig,
    ArrayOfConfig,
    ConfigParseError,
    MatcherConfig,
    SingleMatcherConfig,
    parse_matcher_config,
)

# Constructors
from anyvalue._factory import (
    MatcherScope,
    all_of,
    any_date,
    any_date_string,
    any_datetime_string,
    any_http_uri,
    any_integer,
    any_number,
    any_string,
    any_time,
    any_time_string,
    any_unique,
    anything,
    array_of,
    even_number,
    increasing,
    odd_number,
    one_of,
    sorted_array,
    string_matching,
    string_of_length,
    upcase_string,
)

# Core contract
from anyvalue._matcher import (
    Composite,
    IncomparableValueError,
    InvalidArgumentError,
    Matcher,
    MatcherError,
    combine,
)

# Registry (see anyvalue._registry)
from anyvalue._registry import (
    MAX_COMPOSITE_WIDTH,
    MAX_DEPTH,
    MAX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooDeepError,
    TooManyMatchersError,
    UnknownMatcherTypeError,
    register_core_matchers,
)
from anyvalue._stateful import UNSET, AnyUnique, Increasing
from anyvalue._string_matchers import (
    AnyDateString,
    AnyDateTimeString,
    AnyHTTPURI,
    AnyString,
    AnyTimeString,
    StringMatching,
    StringOfLength,
    UpcaseString,
)
from anyvalue._type_matchers import (
    AnyDate,
    AnyInteger,
    AnyNumber,
    AnyTime,
    Anything,
    EvenNumber,
    OddNumber,
    OneOf,
)

__all__ = [
    # Core contract
    "Matcher",
    "Composite",
    "combine",
    "MatcherError",
    "InvalidArgumentError",
    "IncomparableValueError",
    # Constructors
    "anything",
    "any_integer",
    "any_number",
    "even_number",
    "odd_number",
    "any_string",
    "one_of",
    "string_of_length",
    "string_matching",
    "upcase_string",
    "sorted_array",
    "array_of",
    "any_unique",
    "increasing",
    "any_time",
    "any_date",
    "any_time_string",
    "any_date_string",
    "any_datetime_string",
    "any_http_uri",
    "all_of",
    "MatcherScope",
    # Matcher types
    "Anything",
    "AnyInteger",
    "AnyNumber",
    "EvenNumber",
    "OddNumber",
    "AnyString",
    "OneOf",
    "StringOfLength",
    "StringMatching",
    "UpcaseString",
    "SortedArray",
    "ArrayOf",
    "AnyUnique",
    "Increasing",
    "UNSET",
    "AnyTime",
    "AnyDate",
    "AnyTimeString",
    "AnyDateString",
    "AnyDateTimeString",
    "AnyHTTPURI",
    # Config types
    "SingleMatcherConfig",
    "ArrayOfConfig",
    "AllOfConfig",
    "MatcherConfig",
    "ConfigParseError",
    "parse_matcher_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "register_core_matchers",
    "UnknownMatcherTypeError",
    "InvalidConfigError",
    "TooManyMatchersError",
    "TooDeepError",
    "PatternTooLongError",
    "MAX_DEPTH",
    "MAX_COMPOSITE_WIDTH",
    "MAX_PATTERN_LENGTH",
]

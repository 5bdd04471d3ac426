"""Feature Support Matrix — minimum runtime versions for each JS syntax feature.

Invariants:
    - Read-only after import: exposed as MappingProxyType, never mutated
    - Every version is a full (major, minor, patch) triplet
    - An empty mapping means no tracked runtime supports the feature yet
    - The "ES" row is the spec year that introduced the feature; it feeds the
      baseline table, not any real client

Design Decisions:
    - Mirrors esbuild's internal/compat/js_table.go so resolved targets agree
      with what the bundler will down-level
    - Absent runtime rows are looked up via minimum_version() → None, which
      callers treat as "never supported" rather than a KeyError
"""

from types import MappingProxyType
from typing import Mapping

from esm_target.core.domain_types import VersionTriplet


def _v(major: int, minor: int, patch: int) -> VersionTriplet:
    return VersionTriplet((major, minor, patch))


_JS_TABLE: dict[str, dict[str, VersionTriplet]] = {
    "ArbitraryModuleNamespaceNames": {
        "Chrome": _v(90, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(87, 0, 0),
        "Node": _v(16, 0, 0),
    },
    "ArraySpread": {
        "Chrome": _v(46, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(36, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(5, 0, 0),
        "Opera": _v(33, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "Arrow": {
        "Chrome": _v(49, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(45, 0, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(36, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "AsyncAwait": {
        "Chrome": _v(55, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(15, 0, 0),
        "ES": _v(2017, 0, 0),
        "Firefox": _v(52, 0, 0),
        "IOS": _v(11, 0, 0),
        "Node": _v(7, 6, 0),
        "Opera": _v(42, 0, 0),
        "Safari": _v(11, 0, 0),
    },
    "AsyncGenerator": {
        "Chrome": _v(63, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(57, 0, 0),
        "IOS": _v(12, 0, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(50, 0, 0),
        "Safari": _v(12, 0, 0),
    },
    "Bigint": {
        "Chrome": _v(67, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(68, 0, 0),
        "Hermes": _v(0, 12, 0),
        "IOS": _v(14, 0, 0),
        "Node": _v(10, 4, 0),
        "Opera": _v(54, 0, 0),
        "Rhino": _v(1, 7, 14),
        "Safari": _v(14, 0, 0),
    },
    "Class": {
        "Chrome": _v(49, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(45, 0, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(36, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "ClassField": {
        "Chrome": _v(73, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(69, 0, 0),
        "IOS": _v(14, 0, 0),
        "Node": _v(12, 0, 0),
        "Opera": _v(60, 0, 0),
        "Safari": _v(14, 0, 0),
    },
    "ClassPrivateAccessor": {
        "Chrome": _v(84, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(84, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 6, 0),
        "Opera": _v(70, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "ClassPrivateBrandCheck": {
        "Chrome": _v(91, 0, 0),
        "Deno": _v(1, 9, 0),
        "Edge": _v(91, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(16, 4, 0),
        "Opera": _v(77, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "ClassPrivateField": {
        "Chrome": _v(84, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(84, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 6, 0),
        "Opera": _v(70, 0, 0),
        "Safari": _v(14, 1, 0),
    },
    "ClassPrivateMethod": {
        "Chrome": _v(84, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(84, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 6, 0),
        "Opera": _v(70, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "ClassPrivateStaticAccessor": {
        "Chrome": _v(84, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(84, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 6, 0),
        "Opera": _v(70, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "ClassPrivateStaticField": {
        "Chrome": _v(74, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(12, 0, 0),
        "Opera": _v(62, 0, 0),
        "Safari": _v(14, 1, 0),
    },
    "ClassPrivateStaticMethod": {
        "Chrome": _v(84, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(84, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(90, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 6, 0),
        "Opera": _v(70, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "ClassStaticBlocks": {
        "Chrome": _v(91, 0, 0),
        "Edge": _v(94, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(93, 0, 0),
        "Node": _v(16, 11, 0),
        "Opera": _v(80, 0, 0),
    },
    "ClassStaticField": {
        "Chrome": _v(73, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(75, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(12, 0, 0),
        "Opera": _v(60, 0, 0),
        "Safari": _v(14, 1, 0),
    },
    "ConstAndLet": {
        "Chrome": _v(49, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(14, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(51, 0, 0),
        "IOS": _v(11, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(36, 0, 0),
        "Safari": _v(11, 0, 0),
    },
    "Decorators": {},
    "DefaultArgument": {
        "Chrome": _v(49, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(14, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(53, 0, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(36, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "Destructuring": {
        "Chrome": _v(51, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(18, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(53, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 5, 0),
        "Opera": _v(38, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "DynamicImport": {
        "Chrome": _v(63, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(67, 0, 0),
        "IOS": _v(11, 0, 0),
        "Node": _v(13, 2, 0),
        "Opera": _v(50, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "ExponentOperator": {
        "Chrome": _v(52, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(14, 0, 0),
        "ES": _v(2016, 0, 0),
        "Firefox": _v(52, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 3, 0),
        "Node": _v(7, 0, 0),
        "Opera": _v(39, 0, 0),
        "Rhino": _v(1, 7, 14),
        "Safari": _v(10, 1, 0),
    },
    "ExportStarAs": {
        "Chrome": _v(72, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(80, 0, 0),
        "Node": _v(12, 0, 0),
        "Opera": _v(60, 0, 0),
    },
    "ForAwait": {
        "Chrome": _v(63, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(57, 0, 0),
        "IOS": _v(12, 0, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(50, 0, 0),
        "Safari": _v(12, 0, 0),
    },
    "ForOf": {
        "Chrome": _v(51, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(15, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(53, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 5, 0),
        "Opera": _v(38, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "Generator": {
        "Chrome": _v(50, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(53, 0, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(37, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "Hashbang": {
        "Chrome": _v(74, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "Firefox": _v(67, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(13, 4, 0),
        "Node": _v(12, 5, 0),
        "Opera": _v(62, 0, 0),
        "Safari": _v(13, 1, 0),
    },
    "ImportAssertions": {
        "Chrome": _v(91, 0, 0),
        "Node": _v(16, 14, 0),
    },
    "ImportMeta": {
        "Chrome": _v(64, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(62, 0, 0),
        "IOS": _v(12, 0, 0),
        "Node": _v(10, 4, 0),
        "Opera": _v(51, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "InlineScript": {},
    "LogicalAssignment": {
        "Chrome": _v(85, 0, 0),
        "Deno": _v(1, 2, 0),
        "Edge": _v(85, 0, 0),
        "ES": _v(2021, 0, 0),
        "Firefox": _v(79, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(14, 0, 0),
        "Node": _v(15, 0, 0),
        "Opera": _v(71, 0, 0),
        "Safari": _v(14, 0, 0),
    },
    "NestedRestBinding": {
        "Chrome": _v(49, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(14, 0, 0),
        "ES": _v(2016, 0, 0),
        "Firefox": _v(47, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 3, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(36, 0, 0),
        "Safari": _v(10, 1, 0),
    },
    "NewTarget": {
        "Chrome": _v(46, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(14, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(41, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(5, 0, 0),
        "Opera": _v(33, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "NodeColonPrefixImport": {
        "Node": _v(14, 13, 1),
    },
    "NodeColonPrefixRequire": {
        "Node": _v(16, 0, 0),
    },
    "NullishCoalescing": {
        "Chrome": _v(80, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(80, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(72, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(13, 4, 0),
        "Node": _v(14, 0, 0),
        "Opera": _v(67, 0, 0),
        "Safari": _v(13, 1, 0),
    },
    "ObjectAccessors": {
        "Chrome": _v(5, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(12, 0, 0),
        "ES": _v(5, 0, 0),
        "Firefox": _v(2, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IE": _v(9, 0, 0),
        "IOS": _v(6, 0, 0),
        "Node": _v(0, 4, 0),
        "Opera": _v(10, 10, 0),
        "Rhino": _v(1, 7, 13),
        "Safari": _v(3, 1, 0),
    },
    "ObjectExtensions": {
        "Chrome": _v(44, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(12, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(34, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(4, 0, 0),
        "Opera": _v(31, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "ObjectRestSpread": {
        "Chrome": _v(60, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(55, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(11, 3, 0),
        "Node": _v(8, 3, 0),
        "Opera": _v(47, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "OptionalCatchBinding": {
        "Chrome": _v(66, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2019, 0, 0),
        "Firefox": _v(58, 0, 0),
        "Hermes": _v(0, 12, 0),
        "IOS": _v(11, 3, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(53, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "OptionalChain": {
        "Chrome": _v(91, 0, 0),
        "Deno": _v(1, 9, 0),
        "Edge": _v(91, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(74, 0, 0),
        "Hermes": _v(0, 12, 0),
        "IOS": _v(13, 4, 0),
        "Node": _v(16, 1, 0),
        "Opera": _v(77, 0, 0),
        "Safari": _v(13, 1, 0),
    },
    "RegexpDotAllFlag": {
        "Chrome": _v(62, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(78, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(11, 3, 0),
        "Node": _v(8, 10, 0),
        "Opera": _v(49, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "RegexpLookbehindAssertions": {
        "Chrome": _v(62, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(78, 0, 0),
        "Hermes": _v(0, 7, 0),
        "Node": _v(8, 10, 0),
        "Opera": _v(49, 0, 0),
    },
    "RegexpMatchIndices": {
        "Chrome": _v(90, 0, 0),
        "Edge": _v(90, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(88, 0, 0),
        "IOS": _v(15, 0, 0),
        "Opera": _v(76, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "RegexpNamedCaptureGroups": {
        "Chrome": _v(64, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(78, 0, 0),
        "IOS": _v(11, 3, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(51, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "RegexpSetNotation": {},
    "RegexpStickyAndUnicodeFlags": {
        "Chrome": _v(50, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(46, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(12, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(37, 0, 0),
        "Safari": _v(12, 0, 0),
    },
    "RegexpUnicodePropertyEscapes": {
        "Chrome": _v(64, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(79, 0, 0),
        "ES": _v(2018, 0, 0),
        "Firefox": _v(78, 0, 0),
        "IOS": _v(11, 3, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(51, 0, 0),
        "Safari": _v(11, 1, 0),
    },
    "RestArgument": {
        "Chrome": _v(47, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(12, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(43, 0, 0),
        "IOS": _v(10, 0, 0),
        "Node": _v(6, 0, 0),
        "Opera": _v(34, 0, 0),
        "Safari": _v(10, 0, 0),
    },
    "TemplateLiteral": {
        "Chrome": _v(41, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(13, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(34, 0, 0),
        "IOS": _v(9, 0, 0),
        "Node": _v(10, 0, 0),
        "Opera": _v(28, 0, 0),
        "Safari": _v(9, 0, 0),
    },
    "TopLevelAwait": {
        "Chrome": _v(89, 0, 0),
        "Edge": _v(89, 0, 0),
        "ES": _v(2022, 0, 0),
        "Firefox": _v(89, 0, 0),
        "IOS": _v(15, 0, 0),
        "Node": _v(14, 8, 0),
        "Opera": _v(75, 0, 0),
        "Safari": _v(15, 0, 0),
    },
    "TypeofExoticObjectIsObject": {
        "Chrome": _v(0, 0, 0),
        "Edge": _v(0, 0, 0),
        "ES": _v(2020, 0, 0),
        "Firefox": _v(0, 0, 0),
        "IOS": _v(0, 0, 0),
        "Node": _v(0, 0, 0),
        "Opera": _v(0, 0, 0),
        "Safari": _v(0, 0, 0),
    },
    "UnicodeEscapes": {
        "Chrome": _v(44, 0, 0),
        "Deno": _v(1, 0, 0),
        "Edge": _v(12, 0, 0),
        "ES": _v(2015, 0, 0),
        "Firefox": _v(53, 0, 0),
        "Hermes": _v(0, 7, 0),
        "IOS": _v(9, 0, 0),
        "Node": _v(4, 0, 0),
        "Opera": _v(31, 0, 0),
        "Safari": _v(9, 0, 0),
    },
}

JS_FEATURES: Mapping[str, Mapping[str, VersionTriplet]] = MappingProxyType({
    feature: MappingProxyType(runtimes)
    for feature, runtimes in _JS_TABLE.items()
})

# Pseudo-runtime used to compute the per-spec-level baselines
ES_RUNTIME = "ES"


def minimum_version(feature: str, runtime: str) -> VersionTriplet | None:
    """First version of runtime supporting feature. None = never supported."""
    runtimes = JS_FEATURES.get(feature)
    if runtimes is None:
        return None
    return runtimes.get(runtime)


def known_runtimes() -> frozenset[str]:
    """Every runtime name that appears in at least one feature row."""
    return frozenset(
        runtime for runtimes in JS_FEATURES.values() for runtime in runtimes
    )

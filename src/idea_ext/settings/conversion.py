"""Conversion of extension values into JSON-ready maps.

The decision is driven by the DECLARED type of an extension, not its
runtime type:

    declared type           value         result
    ----------------------  ------------  ---------------------------------------
    any                     None          NotConvertible
    MapConvertible          any           SingleMap(value.to_map())
    iterable (not str/map)  iterable      MapSequence of convertible elements,
                                          NotConvertible if none convert
    anything else           any           NotConvertible

Inside an iterable, each ELEMENT is tested individually; non-convertible
elements are dropped. That keeps type-erased or heterogeneous collections
useful without ever failing the render. Mismatches are not errors.

A declared type that is too general to be proven convertible (e.g.
``object``) is not converted, even when its value would be.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, get_origin

from idea_ext.contracts.protocols import MapConvertible


@dataclass(frozen=True)
class NotConvertible:
    """Value is absent or has no map representation."""

    def payload(self) -> None:
        return None


@dataclass(frozen=True)
class SingleMap:
    """Declared type is map-convertible."""

    value: dict[str, Any]

    def payload(self) -> dict[str, Any]:
        return self.value


@dataclass(frozen=True)
class MapSequence:
    """Declared type is iterable and at least one element converted."""

    values: list[dict[str, Any]] = field(default_factory=list)

    def payload(self) -> list[dict[str, Any]]:
        return self.values


ConversionResult = NotConvertible | SingleMap | MapSequence

NOT_CONVERTIBLE = NotConvertible()


@dataclass(frozen=True)
class CapabilityFlags:
    """What a declared type promises about its values."""

    map_convertible: bool
    iterable: bool


def capability_flags(declared_type: Any) -> CapabilityFlags:
    """Inspect a declared type (class or parameterised generic like list[X]).

    str, bytes and mappings are iterable in Python but are never treated as
    collections of sections.
    """
    origin = get_origin(declared_type) or declared_type
    if not isinstance(origin, type):
        return CapabilityFlags(map_convertible=False, iterable=False)
    map_convertible = issubclass(origin, MapConvertible)
    iterable = issubclass(origin, Iterable) and not issubclass(origin, (str, bytes, Mapping))
    return CapabilityFlags(map_convertible=map_convertible, iterable=iterable)


def convert(declared_type: Any, value: Any) -> ConversionResult:
    """Convert an extension value according to its declared type."""
    if value is None:
        return NOT_CONVERTIBLE

    flags = capability_flags(declared_type)
    if flags.map_convertible:
        return SingleMap(value.to_map())

    if flags.iterable:
        converted = [element.to_map() for element in value if isinstance(element, MapConvertible)]
        if converted:
            return MapSequence(converted)
        return NOT_CONVERTIBLE

    return NOT_CONVERTIBLE

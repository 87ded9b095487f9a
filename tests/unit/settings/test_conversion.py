"""Tests for declared-type-driven conversion of extension values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import pytest

from idea_ext.settings.conversion import (
    NOT_CONVERTIBLE,
    MapSequence,
    NotConvertible,
    SingleMap,
    capability_flags,
    convert,
)
from tests.conftest import _NotASection, _TestSection


class TestCapabilityFlags:
    def test_map_convertible_class(self) -> None:
        flags = capability_flags(_TestSection)

        assert flags.map_convertible
        assert not flags.iterable

    @pytest.mark.parametrize("declared", [list, tuple, set, list[_TestSection], Sequence[_TestSection], Iterable[Any]])
    def test_iterable_declared_types(self, declared: Any) -> None:
        flags = capability_flags(declared)

        assert flags.iterable
        assert not flags.map_convertible

    @pytest.mark.parametrize("declared", [str, bytes, dict, dict[str, Any]])
    def test_text_and_mappings_are_not_collections_of_sections(self, declared: Any) -> None:
        assert not capability_flags(declared).iterable

    @pytest.mark.parametrize("declared", [object, int, _NotASection, Any, None])
    def test_other_declared_types(self, declared: Any) -> None:
        flags = capability_flags(declared)

        assert not flags.map_convertible
        assert not flags.iterable


class TestConvert:
    def test_none_value_not_convertible(self) -> None:
        assert convert(_TestSection, None) is NOT_CONVERTIBLE

    def test_single_map(self) -> None:
        result = convert(_TestSection, _TestSection(a=1))

        assert result == SingleMap({"a": 1})
        assert result.payload() == {"a": 1}

    def test_heterogeneous_sequence_keeps_convertible_elements_in_order(self) -> None:
        value = [_TestSection(n=1), _NotASection(), _TestSection(n=2), "text", _TestSection(n=3)]

        result = convert(list, value)

        assert result == MapSequence([{"n": 1}, {"n": 2}, {"n": 3}])

    def test_sequence_without_convertible_elements(self) -> None:
        result = convert(list[_NotASection], [_NotASection(), _NotASection()])

        assert isinstance(result, NotConvertible)
        assert result.payload() is None

    def test_empty_sequence(self) -> None:
        assert convert(list, []) is NOT_CONVERTIBLE

    def test_generator_is_consumed_once(self) -> None:
        value = (s for s in [_TestSection(n=1), _TestSection(n=2)])

        assert convert(Iterable[_TestSection], value) == MapSequence([{"n": 1}, {"n": 2}])

    def test_general_declared_type_is_not_converted_even_if_value_could_be(self) -> None:
        # Declared type decides; the runtime type is never consulted
        assert convert(object, _TestSection(a=1)) is NOT_CONVERTIBLE

    def test_non_iterable_non_convertible(self) -> None:
        assert convert(int, 5) is NOT_CONVERTIBLE

from __future__ import annotations

from decimal import Decimal
from enum import Enum

import pytest

from compverify.contracts import ConversionError, ValueConverter
from compverify.conversion import DefaultValueConverter


class Colour(Enum):
    RED = "red"
    BLUE = "blue"


class Opaque:
    pass


def test_default_converter_satisfies_protocol():
    assert isinstance(DefaultValueConverter(), ValueConverter)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.5, "1.5"),
        (Decimal("2.50"), "2.50"),
        (Colour.RED, "red"),
        (b"bytes", "bytes"),
    ],
)
def test_to_string_renders_catalog_friendly_values(value, expected):
    assert DefaultValueConverter().to_string(value) == expected


def test_to_string_rejects_none_and_undecodable_bytes():
    converter = DefaultValueConverter()

    with pytest.raises(ConversionError):
        converter.to_string(None)
    with pytest.raises(ConversionError):
        converter.to_string(b"\xff\xfe")


def test_convert_coerces_strings():
    converter = DefaultValueConverter()

    assert converter.convert(int, "8080") == 8080
    assert converter.convert(float, "2.5") == 2.5
    assert converter.convert(bool, "false") is False
    assert converter.convert(Colour, "blue") is Colour.BLUE
    assert converter.convert(str, 7) == "7"


def test_convert_passes_through_instances_of_opaque_types():
    converter = DefaultValueConverter()
    opaque = Opaque()

    assert converter.convert(Opaque, opaque) is opaque
    assert converter.convert(Opaque | None, opaque) is opaque
    with pytest.raises(ConversionError):
        converter.convert(Opaque, "not opaque")


def test_convert_failure_names_target_and_value():
    with pytest.raises(ConversionError, match="Cannot convert 'abc' to int") as excinfo:
        DefaultValueConverter().convert(int, "abc")

    assert excinfo.value.target is int
    assert excinfo.value.value == "abc"

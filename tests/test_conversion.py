from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

import pytest

from appconfig.core.conversion import convert, default_for
from appconfig.core.ports import Converter
from appconfig.errors import TypeConversionError


class _Level(Enum):
    LOW = "low"
    HIGH = "high"


@dataclass
class _Inner:
    count: int
    ratio: float = 1.0


@dataclass
class _Outer:
    name: str
    inner: _Inner
    label: Optional[str] = None
    items: list[_Inner] = field(default_factory=list)
    limits: dict[str, int] = field(default_factory=dict)
    level: _Level = _Level.LOW


@dataclass(frozen=True)
class _Aliased:
    display_name: str = field(default="", metadata={"key": "Display Name"})


@dataclass
class _Node:
    name: str
    child: "_Node"


class _Upper:
    def convert(self, value):
        return str(value).upper()


def test_any_shape_returns_copy():
    value = {"a": [1, 2]}

    result = convert(value)
    result["a"].append(3)

    assert value == {"a": [1, 2]}


def test_nested_dataclass_conversion():
    value = {
        "Name": "svc",
        "Inner": {"Count": 2},
        "Items": [{"count": 1, "ratio": 0.5}],
        "Limits": {"cpu": "4"},
        "Level": "HIGH",
        "Unknown": "ignored",
    }

    result = convert(value, _Outer)

    assert result == _Outer(
        name="svc",
        inner=_Inner(count=2),
        items=[_Inner(count=1, ratio=0.5)],
        limits={"cpu": 4},
        level=_Level.HIGH,
    )


def test_snake_case_fields_match_pascal_case_keys():
    assert convert({"Count": 3, "Ratio": 2}, _Inner) == _Inner(count=3, ratio=2.0)


def test_metadata_key_alias():
    assert convert({"Display Name": "Box"}, _Aliased) == _Aliased(display_name="Box")
    assert convert({"display_name": "Box"}, _Aliased) == _Aliased()


def test_error_path_points_at_nested_field():
    value = {"name": "svc", "inner": {"count": 1}, "items": [{"count": "many"}]}

    with pytest.raises(TypeConversionError) as excinfo:
        convert(value, _Outer, path="Service")

    assert excinfo.value.path == "Service.items[0].count"
    assert excinfo.value.shape is int


def test_dataclass_requires_object():
    with pytest.raises(TypeConversionError, match="cannot convert array"):
        convert([1], _Inner)


def test_optional_accepts_null():
    assert convert(None, Optional[int]) is None
    assert convert("5", int | None) == 5


def test_null_for_plain_scalar_fails():
    with pytest.raises(TypeConversionError):
        convert(None, str)


def test_union_tries_each_member():
    assert convert("abc", int | str) == "abc"
    assert convert("12", int | str) == 12


def test_sequences_and_tuples():
    assert convert([1, 2, 2], set[int]) == {1, 2}
    assert convert([1, "2"], tuple[int, ...]) == (1, 2)
    assert convert([1, "x"], tuple[int, str]) == (1, "x")
    with pytest.raises(TypeConversionError, match="expected 2 items"):
        convert([1], tuple[int, str])


def test_decimal_keeps_decimal_text():
    assert convert(2.5, Decimal) == Decimal("2.5")
    assert convert(0.1, Decimal) == Decimal("0.1")
    assert convert("10.25", Decimal) == Decimal("10.25")


def test_enum_by_value_or_name():
    assert convert("low", _Level) is _Level.LOW
    assert convert("high", _Level) is _Level.HIGH
    with pytest.raises(TypeConversionError):
        convert("medium", _Level)


def test_converter_protocol_and_callables():
    upper = _Upper()

    assert isinstance(upper, Converter)
    assert convert("abc", upper) == "ABC"
    assert convert([1, 2, 3], sum) == 6


def test_callable_failure_is_wrapped():
    def explode(value):
        raise ValueError("boom")

    with pytest.raises(TypeConversionError, match="boom") as excinfo:
        convert(1, explode, path="Section")

    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.path == "Section"


def test_default_for_dataclass_fills_zero_values():
    result = default_for(_Outer)

    assert result == _Outer(name="", inner=_Inner(count=0))


def test_default_for_self_referencing_dataclass_stops_at_none():
    assert default_for(_Node) == _Node(name="", child=None)


def test_default_for_other_shapes_is_none():
    assert default_for(int) is None
    assert default_for(str) is None
    assert default_for(list[int]) is None
    assert default_for(None) is None

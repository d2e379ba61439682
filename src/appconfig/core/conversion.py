"""Structural conversion of JSON values into caller-declared shapes.

A shape is anything that describes the expected result:

- builtin scalars (str, int, float, bool) and decimal.Decimal
- typing constructs: Optional/Union, list/tuple/set/frozenset, dict/Mapping,
  Literal, Annotated
- dataclasses, mapped field-by-field from JSON objects
- Enum subclasses, matched by value then by member name
- a Converter, or any other callable, which receives the raw value

Dataclass fields are matched against JSON keys by an explicit
``field(metadata={"key": "JsonName"})`` alias, then by exact name, then
ignoring case and underscores, so ``some_value`` picks up ``SomeValue``.
"""

from __future__ import annotations

import collections.abc
import copy
import dataclasses
import decimal
import functools
import types
import typing
from enum import Enum
from typing import Any, Union, get_args, get_origin

from ..errors import TypeConversionError
from .ports import Converter

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
    collections.abc.Collection,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_ANY_SHAPES = (None, Any, object)


def convert(value: Any, shape: Any = None, *, path: str = "") -> Any:
    """Convert a JSON value into ``shape``.

    Args:
        value: Parsed JSON value (dict, list, str, int, float, bool or None)
        shape: Target shape; None or Any returns a copy of the value
        path: Dotted location of the value, used in error messages

    Returns:
        The converted value

    Raises:
        TypeConversionError: if the value cannot be represented as ``shape``
    """
    if shape in _ANY_SHAPES:
        return copy.deepcopy(value)

    origin = get_origin(shape)
    if origin is typing.Annotated:
        return convert(value, get_args(shape)[0], path=path)
    if origin is Union or origin is types.UnionType:
        return _convert_union(value, shape, path)
    if origin is typing.Literal:
        if value in get_args(shape):
            return value
        raise TypeConversionError(f"{value!r} is not one of {get_args(shape)!r}", path, shape)
    if origin in _SEQUENCE_ORIGINS or shape in (list, tuple, set, frozenset):
        return _convert_sequence(value, shape, origin or shape, path)
    if origin in _MAPPING_ORIGINS or shape is dict:
        return _convert_mapping(value, shape, path)

    if shape is bool:
        return _to_bool(value, path)
    if shape is int:
        return _to_int(value, path)
    if shape is float:
        return _to_float(value, path)
    if shape is str:
        return _to_str(value, path)
    if shape is decimal.Decimal:
        return _to_decimal(value, path)

    if isinstance(shape, type):
        if dataclasses.is_dataclass(shape):
            return _convert_dataclass(value, shape, path)
        if issubclass(shape, Enum):
            return _convert_enum(value, shape, path)
    elif isinstance(shape, Converter):
        return _call(shape.convert, value, shape, path)

    if callable(shape):
        return _call(shape, value, shape, path)
    raise TypeConversionError(f"unsupported target shape {shape!r}", path, shape)


def default_for(shape: Any = None) -> Any:
    """Return the value a lenient lookup yields when the key is absent.

    Dataclasses produce an instance with every field at its declared default,
    or at the zero value of its type when it has none. Every other shape
    yields None so that a missing scalar is never mistaken for a zero.
    """
    if isinstance(shape, type) and dataclasses.is_dataclass(shape):
        return _zero_dataclass(shape, frozenset())
    return None


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _join(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else str(key)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def _mismatch(value: Any, shape: Any, path: str) -> TypeConversionError:
    return TypeConversionError(
        f"cannot convert {json_type_name(value)} {value!r} to {_shape_name(shape)}", path, shape
    )


def _call(func, value: Any, shape: Any, path: str) -> Any:
    try:
        return func(copy.deepcopy(value))
    except TypeConversionError:
        raise
    except Exception as exc:
        raise TypeConversionError(
            f"conversion to {_shape_name(shape)} failed: {exc}", path, shape
        ) from exc


# Scalars


def _to_bool(value: Any, path: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise _mismatch(value, bool, path)


def _to_int(value: Any, path: str) -> int:
    if isinstance(value, bool):
        raise _mismatch(value, int, path)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            number = float(value)
        except ValueError:
            raise _mismatch(value, int, path) from None
        if number.is_integer():
            return int(number)
    raise _mismatch(value, int, path)


def _to_float(value: Any, path: str) -> float:
    if isinstance(value, bool):
        raise _mismatch(value, float, path)
    if isinstance(value, (int, float, str)):
        try:
            return float(value)
        except (ValueError, OverflowError):
            raise _mismatch(value, float, path) from None
    raise _mismatch(value, float, path)


def _to_str(value: Any, path: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise _mismatch(value, str, path)


def _to_decimal(value: Any, path: str) -> decimal.Decimal:
    if isinstance(value, bool):
        raise _mismatch(value, decimal.Decimal, path)
    if isinstance(value, int):
        return decimal.Decimal(value)
    if isinstance(value, (float, str)):
        # str() keeps 2.5 as Decimal("2.5") instead of the binary expansion
        try:
            return decimal.Decimal(str(value).strip())
        except decimal.InvalidOperation:
            raise _mismatch(value, decimal.Decimal, path) from None
    raise _mismatch(value, decimal.Decimal, path)


# Containers


def _convert_union(value: Any, shape: Any, path: str) -> Any:
    args = get_args(shape)
    if value is None and type(None) in args:
        return None
    last_error: TypeConversionError | None = None
    for arg in args:
        if arg is type(None):
            continue
        try:
            return convert(value, arg, path=path)
        except TypeConversionError as exc:
            last_error = exc
    if last_error is None:
        raise _mismatch(value, shape, path)
    raise last_error


def _convert_sequence(value: Any, shape: Any, container: Any, path: str) -> Any:
    if not isinstance(value, list):
        raise _mismatch(value, shape, path)
    args = get_args(shape)

    if container is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        if len(args) != len(value):
            raise TypeConversionError(
                f"expected {len(args)} items, got {len(value)}", path, shape
            )
        return tuple(
            convert(item, arg, path=_join(path, i)) for i, (arg, item) in enumerate(zip(args, value))
        )

    item_shape = args[0] if args else None
    items = [convert(item, item_shape, path=_join(path, i)) for i, item in enumerate(value)]
    if container is tuple:
        return tuple(items)
    if container in (set, collections.abc.Set, collections.abc.MutableSet):
        return _hashable(set, items, shape, path)
    if container is frozenset:
        return _hashable(frozenset, items, shape, path)
    return items


def _hashable(factory, items: list, shape: Any, path: str):
    try:
        return factory(items)
    except TypeError as exc:
        raise TypeConversionError(f"items are not hashable: {exc}", path, shape) from exc


def _convert_mapping(value: Any, shape: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise _mismatch(value, shape, path)
    args = get_args(shape)
    key_shape, item_shape = args if len(args) == 2 else (None, None)
    return {
        convert(key, key_shape, path=_join(path, key)): convert(item, item_shape, path=_join(path, key))
        for key, item in value.items()
    }


def _convert_enum(value: Any, shape: type[Enum], path: str) -> Enum:
    try:
        return shape(value)
    except (ValueError, TypeError):
        pass
    if isinstance(value, str):
        for member in shape:
            if member.name.lower() == value.lower():
                return member
    raise _mismatch(value, shape, path)


# Dataclasses


@functools.lru_cache(maxsize=None)
def _field_types(shape: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(shape, include_extras=True)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to whatever is not a string
        return {
            f.name: (Any if isinstance(f.type, str) else f.type) for f in dataclasses.fields(shape)
        }


def _normalize_key(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def _match_key(field: dataclasses.Field, obj: dict) -> str | None:
    alias = field.metadata.get("key")
    if alias is not None:
        return alias if alias in obj else None
    if field.name in obj:
        return field.name
    wanted = _normalize_key(field.name)
    for key in obj:
        if isinstance(key, str) and _normalize_key(key) == wanted:
            return key
    return None


def _has_default(field: dataclasses.Field) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


def _convert_dataclass(value: Any, shape: type, path: str) -> Any:
    if not isinstance(value, dict):
        raise _mismatch(value, shape, path)
    types_by_field = _field_types(shape)
    kwargs = {}
    for field in dataclasses.fields(shape):
        if not field.init:
            continue
        key = _match_key(field, value)
        if key is None:
            if not _has_default(field):
                raise TypeConversionError(
                    f"missing required field '{field.metadata.get('key', field.name)}' "
                    f"for {shape.__name__}",
                    path,
                    shape,
                )
            continue
        kwargs[field.name] = convert(
            value[key], types_by_field.get(field.name, Any), path=_join(path, key)
        )
    try:
        return shape(**kwargs)
    except (TypeError, ValueError) as exc:
        raise TypeConversionError(f"cannot build {shape.__name__}: {exc}", path, shape) from exc


def _zero(shape: Any, building: frozenset) -> Any:
    origin = get_origin(shape)
    if origin is typing.Annotated:
        return _zero(get_args(shape)[0], building)
    if origin in _SEQUENCE_ORIGINS or shape in (list, tuple, set, frozenset):
        container = origin or shape
        if container in (tuple, set, frozenset):
            return container()
        return []
    if origin in _MAPPING_ORIGINS or shape is dict:
        return {}
    if shape is bool:
        return False
    if shape in (int, float, str, decimal.Decimal):
        return shape()
    if isinstance(shape, type) and dataclasses.is_dataclass(shape):
        # self-referencing shapes stop at None
        if shape in building:
            return None
        return _zero_dataclass(shape, building)
    return None


def _zero_dataclass(shape: type, building: frozenset) -> Any:
    types_by_field = _field_types(shape)
    building = building | {shape}
    kwargs = {
        field.name: _zero(types_by_field.get(field.name, Any), building)
        for field in dataclasses.fields(shape)
        if field.init and not _has_default(field)
    }
    return shape(**kwargs)

"""Map dataclasses to InstantDB entities and build InstaQL queries.

An InstantDB value is represented with plain Python data: ``None``,
``bool``, ``int``, ``float``, ``str``, ``list`` and ``dict`` with string keys.
"""

from __future__ import annotations

import dataclasses
import enum
import math
import types
import typing
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

Value = Union[None, bool, int, float, str, list["Value"], dict[str, "Value"]]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_NONE_TYPE = type(None)

_NAMED_HINTS: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "None": _NONE_TYPE,
    "NoneType": _NONE_TYPE,
    "Any": Any,
    "typing.Any": Any,
    "object": object,
    "list": list,
    "List": list,
    "typing.List": list,
    "dict": dict,
    "Dict": dict,
    "typing.Dict": dict,
}


@dataclass(frozen=True)
class ColumnDef:
    """How one dataclass field maps to an InstantDB attribute."""

    name: str
    type_name: str
    value_type: str
    is_optional: bool = False
    is_primary_key: bool = False
    is_unique: bool = False
    is_indexed: bool = False


def json_to_value(json_value: Any) -> Value:
    """Convert JSON-like data into an InstantDB value.

    Integers outside the signed 64-bit range become floats; tuples become
    lists. Anything that has no JSON form raises ``TypeError``.
    """
    if json_value is None or isinstance(json_value, (bool, str)):
        return json_value
    if isinstance(json_value, int):
        if _I64_MIN <= json_value <= _I64_MAX:
            return json_value
        return float(json_value)
    if isinstance(json_value, float):
        return json_value
    if isinstance(json_value, (list, tuple)):
        return [json_to_value(item) for item in json_value]
    if isinstance(json_value, dict):
        result: dict[str, Value] = {}
        for key, item in json_value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {key!r}")
            result[key] = json_to_value(item)
        return result
    raise TypeError(f"cannot convert {type(json_value).__name__} to a value")


def value_to_json(value: Value) -> Any:
    """Convert an InstantDB value into JSON-compatible data.

    Non-finite floats have no JSON form and become ``None``.
    """
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (list, tuple)):
        return [value_to_json(item) for item in value]
    if isinstance(value, dict):
        return {str(key): value_to_json(item) for key, item in value.items()}
    raise TypeError(f"not a value: {type(value).__name__}")


def _split_top(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` where it is not nested in brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return parts


def _parse_hint(text: str) -> Any:
    """Turn a string annotation into a type hint; unknown names become ``Any``."""
    text = text.strip().strip("'\"")
    alternatives = _split_top(text, "|")
    if len(alternatives) > 1:
        return Union[tuple(_parse_hint(part) for part in alternatives)]
    if text.endswith("]") and "[" in text:
        name, inner = text.split("[", 1)
        name = name.strip()
        args = [_parse_hint(arg) for arg in _split_top(inner[:-1], ",")]
        if name in ("Optional", "typing.Optional") and len(args) == 1:
            return Optional[args[0]]
        if name in ("Union", "typing.Union"):
            return Union[tuple(args)]
        if name in ("list", "List", "typing.List") and len(args) == 1:
            return list[args[0]]
        if name in ("dict", "Dict", "typing.Dict") and len(args) == 2:
            return dict[args[0], args[1]]
        return Any
    return _NAMED_HINTS.get(text, Any)


def _field_hint(fld: dataclasses.Field) -> Any:
    hint = fld.type
    if isinstance(hint, str):
        return _parse_hint(hint)
    return hint


def _is_union(hint: Any) -> bool:
    return typing.get_origin(hint) in (Union, types.UnionType)


def _is_optional(hint: Any) -> bool:
    return _is_union(hint) and _NONE_TYPE in typing.get_args(hint)


def _coerce(value: Any, hint: Any, path: str) -> Any:
    if hint is Any or hint is object:
        return value
    if _is_union(hint):
        args = typing.get_args(hint)
        if value is None and _NONE_TYPE in args:
            return None
        for arg in args:
            if arg is _NONE_TYPE:
                continue
            try:
                return _coerce(value, arg, path)
            except ValueError:
                continue
        raise ValueError(f"{path}: unexpected value {value!r}")
    if hint is _NONE_TYPE:
        if value is None:
            return None
        raise ValueError(f"{path}: expected null, got {value!r}")

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)
    if hint is list or origin is list:
        if not isinstance(value, list):
            raise ValueError(f"{path}: expected an array, got {value!r}")
        item_hint = args[0] if args else Any
        return [_coerce(item, item_hint, f"{path}[{i}]") for i, item in enumerate(value)]
    if hint is dict or origin is dict:
        if not isinstance(value, dict):
            raise ValueError(f"{path}: expected an object, got {value!r}")
        item_hint = args[1] if len(args) == 2 else Any
        return {key: _coerce(item, item_hint, f"{path}.{key}") for key, item in value.items()}
    if hint is bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"{path}: expected a boolean, got {value!r}")
    if hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise ValueError(f"{path}: expected an integer, got {value!r}")
    if hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise ValueError(f"{path}: expected a number, got {value!r}")
    if hint is str:
        if isinstance(value, str):
            return value
        raise ValueError(f"{path}: expected a string, got {value!r}")
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return _from_mapping(hint, value, path)
    return value


def _from_mapping(cls: type, data: Any, path: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected an object, got {data!r}")
    kwargs: dict[str, Any] = {}
    for fld in dataclasses.fields(cls):
        if not fld.init:
            continue
        hint = _field_hint(fld)
        if fld.name in data:
            kwargs[fld.name] = _coerce(data[fld.name], hint, f"{path}.{fld.name}")
        elif fld.default is not dataclasses.MISSING or fld.default_factory is not dataclasses.MISSING:
            continue
        elif _is_optional(hint):
            kwargs[fld.name] = None
        else:
            raise ValueError(f"{path}: missing field `{fld.name}`")
    return cls(**kwargs)


class Table:
    """Base for dataclasses stored as InstantDB entities.

    Subclasses are dataclasses that set ``TABLE_NAME`` and may list their
    column metadata in ``COLUMNS``.
    """

    TABLE_NAME: ClassVar[str]
    COLUMNS: ClassVar[tuple[ColumnDef, ...]] = ()

    @classmethod
    def columns(cls) -> tuple[ColumnDef, ...]:
        """Column definitions describing the fields."""
        return tuple(cls.COLUMNS)

    def to_value(self) -> Value:
        """Convert this record to an InstantDB value."""
        if not dataclasses.is_dataclass(self):
            raise TypeError(f"{type(self).__name__} is not a dataclass")
        return json_to_value(dataclasses.asdict(self))

    @classmethod
    def from_value(cls, value: Value):
        """Build a record from an InstantDB value; raise ``ValueError`` if it does not fit.

        Unknown attributes are ignored and missing optional fields become ``None``.
        """
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} is not a dataclass")
        return _from_mapping(cls, value_to_json(value), cls.__name__)

    @classmethod
    def query(cls) -> QueryBuilder:
        """Start a query on this table."""
        return QueryBuilder(cls.TABLE_NAME)


class WhereOp(enum.Enum):
    """Comparison operator of a filter condition."""

    EQ = "eq"
    GT = "$gt"
    LT = "$lt"
    GTE = "$gte"
    LTE = "$lte"
    IN = "$in"
    IS_NULL = "$isNull"


@dataclass(frozen=True)
class WhereClause:
    """One filter condition in a query."""

    op: WhereOp
    value: Any

    def _to_json(self) -> Any:
        if self.op is WhereOp.EQ:
            return value_to_json(self.value)
        if self.op is WhereOp.IN:
            return {self.op.value: [value_to_json(v) for v in self.value]}
        if self.op is WhereOp.IS_NULL:
            return {self.op.value: bool(self.value)}
        return {self.op.value: value_to_json(self.value)}


def _check_count(n: int, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{what} must be an integer")
    if n < 0:
        raise ValueError(f"{what} must not be negative")
    return n


@dataclass(frozen=True)
class QueryBuilder:
    """Immutable fluent builder producing an InstaQL query.

    Every method returns a new builder, leaving the original untouched.
    """

    table_name: str
    wheres: tuple[tuple[str, WhereClause], ...] = ()
    order_key: str | None = None
    order_dir: str | None = None
    limit_count: int | None = None
    offset_count: int | None = None

    def _with_where(self, field_name: str, clause: WhereClause) -> QueryBuilder:
        return dataclasses.replace(self, wheres=self.wheres + ((field_name, clause),))

    def where_eq(self, field: str, value: Any) -> QueryBuilder:
        """Filter ``field = value``."""
        return self._with_where(field, WhereClause(WhereOp.EQ, json_to_value(value)))

    def where_gt(self, field: str, value: Any) -> QueryBuilder:
        """Filter ``field > value``."""
        return self._with_where(field, WhereClause(WhereOp.GT, json_to_value(value)))

    def where_lt(self, field: str, value: Any) -> QueryBuilder:
        """Filter ``field < value``."""
        return self._with_where(field, WhereClause(WhereOp.LT, json_to_value(value)))

    def where_gte(self, field: str, value: Any) -> QueryBuilder:
        """Filter ``field >= value``."""
        return self._with_where(field, WhereClause(WhereOp.GTE, json_to_value(value)))

    def where_lte(self, field: str, value: Any) -> QueryBuilder:
        """Filter ``field <= value``."""
        return self._with_where(field, WhereClause(WhereOp.LTE, json_to_value(value)))

    def where_in(self, field: str, values: Any) -> QueryBuilder:
        """Filter ``field IN values``."""
        converted = tuple(json_to_value(v) for v in values)
        return self._with_where(field, WhereClause(WhereOp.IN, converted))

    def where_is_null(self, field: str, is_null: bool) -> QueryBuilder:
        """Filter on whether ``field`` is null."""
        return self._with_where(field, WhereClause(WhereOp.IS_NULL, bool(is_null)))

    def order(self, field: str, direction: str) -> QueryBuilder:
        """Order by ``field`` in ``direction`` ("asc" or "desc")."""
        return dataclasses.replace(self, order_key=field, order_dir=direction)

    def limit(self, n: int) -> QueryBuilder:
        """Return at most ``n`` results."""
        return dataclasses.replace(self, limit_count=_check_count(n, "limit"))

    def offset(self, n: int) -> QueryBuilder:
        """Skip the first ``n`` results."""
        return dataclasses.replace(self, offset_count=_check_count(n, "offset"))

    def build(self) -> Value:
        """Produce ``{table: {"$": {where, order, limit, offset}}}``."""
        options: dict[str, Any] = {}
        if self.wheres:
            options["where"] = {name: clause._to_json() for name, clause in self.wheres}
        if self.order_key is not None and self.order_dir is not None:
            options["order"] = {"field": self.order_key, "direction": self.order_dir}
        if self.limit_count is not None:
            options["limit"] = self.limit_count
        if self.offset_count is not None:
            options["offset"] = self.offset_count
        entity: dict[str, Any] = {"$": options} if options else {}
        return json_to_value({self.table_name: entity})


__all__ = [
    "ColumnDef",
    "QueryBuilder",
    "Table",
    "Value",
    "WhereClause",
    "WhereOp",
    "json_to_value",
    "value_to_json",
]
from __future__ import annotations

import math
from typing import Any, Mapping

from ..outcome import Failure, Ok, validation_failure


_NOT_COERCIBLE = object()


def validate_tool_args(
    schema: Mapping[str, Any],
    args: Any,
    *,
    coerce_numeric_strings: bool = False,
) -> Ok[dict[str, Any]] | Failure:
    """Validate tool args against a JSON Schema subset and coerce them.

    Supported:
    - type=object with properties + required (recursively for nested objects)
    - primitive types: string/integer/number/boolean/object/array
    - enum membership

    `number` values come back as float and `integer` values as int. Properties
    the schema does not declare are ignored and left out of the result.
    Numeric-looking strings are rejected unless `coerce_numeric_strings` is set.
    """
    if not isinstance(schema, Mapping):
        return validation_failure("inputSchema must be an object")
    if schema.get("type", "object") != "object":
        return validation_failure("only type=object schema is supported")
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        return validation_failure("arguments must be an object")
    return _validate_object(schema, args, prefix="", coerce=coerce_numeric_strings)


def _validate_object(
    schema: Mapping[str, Any], args: Mapping[str, Any], *, prefix: str, coerce: bool
) -> Ok[dict[str, Any]] | Failure:
    props = schema.get("properties") or {}
    required = schema.get("required") or []

    for k in required:
        if k not in args:
            return validation_failure(f"missing required argument {prefix}{k}")

    out: dict[str, Any] = {}
    for key, prop_schema in props.items():
        if key not in args:
            continue
        res = _validate_value(f"{prefix}{key}", args[key], prop_schema, coerce=coerce)
        if isinstance(res, Failure):
            return res
        out[key] = res.value
    return Ok(out)


def _validate_value(name: str, value: Any, prop_schema: Any, *, coerce: bool) -> Ok[Any] | Failure:
    if not isinstance(prop_schema, Mapping):
        return Ok(value)

    t = prop_schema.get("type")
    coerced = _coerce(t, value, coerce=coerce) if t else value
    if coerced is _NOT_COERCIBLE:
        return validation_failure(f"invalid value for {name}: {_show(value)} (expected {t})")

    if t == "object" and ("properties" in prop_schema or "required" in prop_schema):
        nested = _validate_object(prop_schema, coerced, prefix=f"{name}.", coerce=coerce)
        if isinstance(nested, Failure):
            return nested
        coerced = nested.value

    allowed = prop_schema.get("enum")
    if allowed is not None and coerced not in allowed:
        return validation_failure(f"invalid value for {name}: {_show(value)}")

    return Ok(coerced)


def _coerce(t: str, value: Any, *, coerce: bool) -> Any:
    if t == "string":
        return value if isinstance(value, str) else _NOT_COERCIBLE
    if t == "number":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                # JSON integers are unbounded; floats are not.
                return _NOT_COERCIBLE
        if coerce and isinstance(value, str):
            return _parse_number(value)
        return _NOT_COERCIBLE
    if t == "integer":
        if isinstance(value, bool):
            return _NOT_COERCIBLE
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else _NOT_COERCIBLE
        if coerce and isinstance(value, str):
            num = _parse_number(value)
            if num is _NOT_COERCIBLE or not num.is_integer():
                return _NOT_COERCIBLE
            return int(num)
        return _NOT_COERCIBLE
    if t == "boolean":
        return value if isinstance(value, bool) else _NOT_COERCIBLE
    if t == "object":
        return value if isinstance(value, Mapping) else _NOT_COERCIBLE
    if t == "array":
        return value if isinstance(value, list) else _NOT_COERCIBLE
    # Unknown type: do not reject (forward-compatible).
    return value


def _parse_number(text: str) -> Any:
    try:
        num = float(text.strip())
    except ValueError:
        return _NOT_COERCIBLE
    return num if math.isfinite(num) else _NOT_COERCIBLE


def _show(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

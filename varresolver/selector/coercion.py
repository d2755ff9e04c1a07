"""Filter value coercion and type-aware equality."""

import json
import re

from ..values import (
    Scalar,
    Value,
    VBool,
    VFloat,
    VInt,
    VMapping,
    VSequence,
    VString,
    to_native,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce(raw: str) -> Scalar:
    """Turn a raw filter value into a typed scalar.

    Tries integer, then float, then ``true``/``false`` (case-insensitive),
    and falls back to the string itself. Integers are tried before
    booleans so ``"1"`` and ``"0"`` stay numeric.
    """
    if _INT_PATTERN.fullmatch(raw):
        return VInt(int(raw))

    # float() is more lenient than a plain numeric literal
    if raw and raw == raw.strip() and "_" not in raw:
        try:
            return VFloat(float(raw))
        except ValueError:
            pass

    lowered = raw.lower()
    if lowered in ("true", "false"):
        return VBool(lowered == "true")

    return VString(raw)


def render(value: Value) -> str:
    """Decimal-string rendering used for the last-resort comparison."""
    if isinstance(value, (VMapping, VSequence)):
        return json.dumps(to_native(value), sort_keys=True)
    return str(value)


def equal_coerced(got: Value, want: Scalar) -> bool:
    """Compare a tree value with an already coerced filter value.

    Same-type pairs compare directly. An integer filter also matches a
    float tree value with no fractional part, since adapters may decode
    integer literals as floats. Any other pairing compares the textual
    renderings of both sides.
    """
    if isinstance(want, VBool):
        if isinstance(got, VBool):
            return got.value == want.value
    elif isinstance(want, VInt):
        if isinstance(got, VInt):
            return got.value == want.value
        if isinstance(got, VFloat):
            return got.value.is_integer() and int(got.value) == want.value
    elif isinstance(want, VFloat):
        if isinstance(got, VFloat):
            return got.value == want.value
    elif isinstance(want, VString):
        if isinstance(got, VString):
            return got.value == want.value

    return render(got) == render(want)

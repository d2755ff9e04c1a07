"""Value types for the generic tree navigated by the selector.

Format adapters (JSON, YAML, TOML, ...) produce plain Python data; ``from_native``
turns that into the tagged tree below and ``to_native`` turns a (sub)tree back
into plain data for re-encoding.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VFloat:
    value: float

    def __str__(self) -> str:
        v = self.value
        if v.is_integer() and abs(v) < 1e21:
            return str(int(v))
        return repr(v)


@dataclass(frozen=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VNull:
    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class VMapping:
    """Mapping node. Holds a dict, so instances are not hashable."""

    items: Dict[str, "Value"] = field(default_factory=dict)

    def get(self, key: str) -> "Value | None":
        return self.items.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.items

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class VSequence:
    """Sequence node. Holds a list, so instances are not hashable."""

    items: List["Value"] = field(default_factory=list)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


Null = VNull()

Scalar = Union[VString, VInt, VFloat, VBool, VNull]
Value = Union[VString, VInt, VFloat, VBool, VNull, VMapping, VSequence]


def from_native(obj: Any) -> Value:
    """Convert data decoded by a format adapter into a Value tree.

    Mapping keys are stringified. Dates and times become ISO-8601 strings;
    any other unknown leaf is stored as its ``str()`` form.
    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInt(obj)
    if isinstance(obj, float):
        return VFloat(obj)
    if isinstance(obj, str):
        return VString(obj)
    if obj is None:
        return Null
    if isinstance(obj, dict):
        return VMapping({str(k): from_native(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return VSequence([from_native(v) for v in obj])
    if isinstance(obj, (datetime, date, time)):
        return VString(obj.isoformat())
    return VString(str(obj))


def to_native(value: Value) -> Any:
    """Convert a Value tree back into plain Python data."""
    if isinstance(value, VMapping):
        return {k: to_native(v) for k, v in value.items.items()}
    if isinstance(value, VSequence):
        return [to_native(v) for v in value.items]
    if isinstance(value, VNull):
        return None
    return value.value

"""Parameter accessors and narrowing functions.

A narrowing function takes a ParameterValue and returns a typed value or
raises a DecodeError subclass. Narrowing never coerces between atom kinds:
an int is not accepted where a double is expected, and a string is never
read as a number. ``required`` and ``optional`` attach the group and
parameter name to any error raised while narrowing.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from fdsdecode.errors import (
    ArityMismatch,
    DecodeError,
    IndexGap,
    MissingRequiredParameter,
    TypeMismatch,
    ValueOutOfRange,
)
from fdsdecode.geometry import IJK, RGB, XB, XYZ
from fdsdecode.namelist import (
    Atom,
    AtomKind,
    Namelist,
    ParameterArray,
    ParameterValue,
    atom_kind,
    describe_value,
)

T = TypeVar("T")
Narrow = Callable[[ParameterValue], T]


def required(namelist: Namelist, name: str, narrow: Narrow[T]) -> T:
    """Read and narrow a parameter that must be present."""
    value = namelist.parameters.get(name)
    if value is None:
        raise MissingRequiredParameter(name, group=namelist.name)
    return _narrow(namelist, name, value, narrow)


def optional(namelist: Namelist, name: str, narrow: Narrow[T], default: T | None = None) -> T | None:
    """Read and narrow a parameter, substituting ``default`` when absent."""
    value = namelist.parameters.get(name)
    if value is None:
        return default
    return _narrow(namelist, name, value, narrow)


def _narrow(namelist: Namelist, name: str, value: ParameterValue, narrow: Narrow[T]) -> T:
    try:
        return narrow(value)
    except DecodeError as e:
        e.group = namelist.name
        e.parameter = name
        raise


# --- atoms ---


def _atom(value: ParameterValue, kind: AtomKind) -> Atom:
    if isinstance(value, ParameterArray):
        raise TypeMismatch(f"{kind.value} atom", describe_value(value))
    if atom_kind(value) is not kind:
        raise TypeMismatch(f"{kind.value} atom", describe_value(value))
    return value


def to_bool(value: ParameterValue) -> bool:
    return _atom(value, AtomKind.BOOL)


def to_int(value: ParameterValue) -> int:
    return _atom(value, AtomKind.INT)


def to_float(value: ParameterValue) -> float:
    return _atom(value, AtomKind.DOUBLE)


def to_str(value: ParameterValue) -> str:
    return _atom(value, AtomKind.STRING)


# --- fixed-arity arrays ---


def _fixed(value: ParameterValue, length: int, kind: AtomKind) -> tuple:
    """Decode a 1-D array that must hold exactly ``length`` atoms of ``kind``."""
    if not isinstance(value, ParameterArray):
        raise TypeMismatch(f"array of {length} {kind.value} values", describe_value(value))
    if len(value) != length:
        raise ArityMismatch(length, len(value))
    items = []
    for i in range(1, length + 1):
        item = value.get((i,))
        if item is None:
            raise IndexGap(i, length)
        if atom_kind(item) is not kind:
            raise TypeMismatch(
                f"{kind.value} atom at position {i}", describe_value(item)
            )
        items.append(item)
    return tuple(items)


def to_xb(value: ParameterValue) -> XB:
    return XB.from_tuple(_fixed(value, 6, AtomKind.DOUBLE))


def to_xyz(value: ParameterValue) -> XYZ:
    x, y, z = _fixed(value, 3, AtomKind.DOUBLE)
    return XYZ(x=x, y=y, z=z)


def to_ijk(value: ParameterValue) -> IJK:
    i, j, k = _fixed(value, 3, AtomKind.INT)
    for count in (i, j, k):
        if count < 1:
            raise ValueOutOfRange(count, "a cell count of at least 1")
    return IJK(i=i, j=j, k=k)


def to_rgb(value: ParameterValue) -> RGB:
    r, g, b = _fixed(value, 3, AtomKind.INT)
    return RGB(r=r, g=g, b=b)


def to_float_pair(value: ParameterValue) -> tuple[float, float]:
    return _fixed(value, 2, AtomKind.DOUBLE)


def to_str_triple(value: ParameterValue) -> tuple[str, str, str]:
    return _fixed(value, 3, AtomKind.STRING)


def to_str_sextuple(value: ParameterValue) -> tuple[str, str, str, str, str, str]:
    return _fixed(value, 6, AtomKind.STRING)


# --- variable-length arrays ---


def _listed(value: ParameterValue, kind: AtomKind) -> list:
    if not isinstance(value, ParameterArray):
        raise TypeMismatch(f"array of {kind.value} values", describe_value(value))
    items = value.ordered_values()
    for item in items:
        if atom_kind(item) is not kind:
            raise TypeMismatch(f"array of {kind.value} values", describe_value(item))
    return items


def to_bool_list(value: ParameterValue) -> list[bool]:
    return _listed(value, AtomKind.BOOL)


def to_int_list(value: ParameterValue) -> list[int]:
    return _listed(value, AtomKind.INT)


def to_float_list(value: ParameterValue) -> list[float]:
    return _listed(value, AtomKind.DOUBLE)


def to_str_list(value: ParameterValue) -> list[str]:
    return _listed(value, AtomKind.STRING)

"""Untyped parameter model handed over by the namelist tokenizer.

A namelist group is a name plus a mapping from parameter name to either an
atom (bool, int, float or str) or a sparse array of atoms addressed by
1-based index tuples, one index per dimension.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

Atom = Union[bool, int, float, str]
Index = tuple[int, ...]


class AtomKind(enum.Enum):
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"


def atom_kind(value: object) -> AtomKind:
    """Return the kind of an atom, using exact types (a bool is never an int)."""
    kind = _KIND_BY_TYPE.get(type(value))
    if kind is None:
        raise TypeError(f"Not a namelist atom: {value!r} ({type(value).__name__})")
    return kind


_KIND_BY_TYPE: dict[type, AtomKind] = {
    bool: AtomKind.BOOL,
    int: AtomKind.INT,
    float: AtomKind.DOUBLE,
    str: AtomKind.STRING,
}


def _check_index(index: object) -> Index:
    if not isinstance(index, tuple) or not index:
        raise ValueError(f"Array index must be a non-empty tuple, got {index!r}")
    for i in index:
        if type(i) is not int or i < 1:
            raise ValueError(f"Array indices must be positive integers, got {index!r}")
    return index


@dataclass(frozen=True)
class ParameterArray:
    """Sparse array of atoms keyed by 1-based index tuples."""

    values: Mapping[Index, Atom] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked: dict[Index, Atom] = {}
        for index, value in self.values.items():
            atom_kind(value)
            checked[_check_index(index)] = value
        object.__setattr__(self, "values", checked)

    @classmethod
    def from_sequence(cls, values: Iterable[Atom]) -> ParameterArray:
        """Build a dense 1-D array with indices 1..n."""
        return cls({(i,): v for i, v in enumerate(values, start=1)})

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Index]:
        return iter(self.values)

    def get(self, index: Index) -> Atom | None:
        return self.values.get(index)

    def with_value(self, index: Index, value: Atom) -> ParameterArray:
        """Return a copy with ``index`` set to ``value`` (overwrites)."""
        updated = dict(self.values)
        updated[index] = value
        return ParameterArray(updated)

    def ordered_values(self) -> list[Atom]:
        """Values in index order (first index varies slowest)."""
        return [self.values[index] for index in sorted(self.values)]

    @property
    def ndim(self) -> int:
        if not self.values:
            return 0
        return max(len(index) for index in self.values)


ParameterValue = Union[Atom, ParameterArray]


@dataclass(frozen=True)
class Namelist:
    """One ``&NAME ... /`` group: a case-sensitive name and its parameters."""

    name: str
    parameters: dict[str, ParameterValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name, value in self.parameters.items():
            if not isinstance(value, ParameterArray):
                try:
                    atom_kind(value)
                except TypeError as e:
                    raise TypeError(f"&{self.name} {name}: {e}") from e

    def get(self, parameter: str) -> ParameterValue | None:
        return self.parameters.get(parameter)

    def __contains__(self, parameter: object) -> bool:
        return parameter in self.parameters


def describe_value(value: ParameterValue) -> str:
    """Human-readable rendering of a parameter value for diagnostics."""
    if isinstance(value, ParameterArray):
        count = len(value)
        return f"array of {count} element{'s' if count != 1 else ''}"
    try:
        kind = atom_kind(value)
    except TypeError:
        return f"unsupported value {value!r}"
    return f"{kind.value} atom {value!r}"

"""Custom exception hierarchy for the FDS namelist decoder."""

from __future__ import annotations


def format_location(group: str | None, position: int | None) -> str:
    """Render ``namelist #N &GROUP`` with absent parts left out."""
    parts: list[str] = []
    if position is not None:
        parts.append(f"namelist #{position}")
    if group is not None:
        parts.append(f"&{group}")
    return " ".join(parts)


class FdsDecodeError(Exception):
    """Base exception for all fdsdecode errors."""


class LoadError(FdsDecodeError):
    """Raised when a serialized namelist stream cannot be read or is malformed."""


class PolicyError(FdsDecodeError):
    """Raised when a warning code is escalated to an error by a WarningPolicy.

    Carries the warning's code and the location of the group that raised it.
    """

    def __init__(
        self,
        code: str,
        detail: str,
        *,
        group: str | None = None,
        position: int | None = None,
    ) -> None:
        self.code = code
        self.detail = detail
        self.group = group
        self.position = position
        location = format_location(group, position)
        super().__init__(f"[{code}] {location}: {detail}" if location else f"[{code}] {detail}")


class DecodeError(FdsDecodeError):
    """Raised when one namelist group cannot be decoded into its record.

    ``group`` and ``parameter`` are filled in by the accessor that read the
    offending value; ``position`` (1-based input order) is filled in by the
    document that dispatched the group.
    """

    def __init__(
        self,
        detail: str,
        *,
        group: str | None = None,
        parameter: str | None = None,
        position: int | None = None,
    ) -> None:
        self.detail = detail
        self.group = group
        self.parameter = parameter
        self.position = position
        super().__init__(detail)

    def reason(self) -> str:
        """The failure without its group and position."""
        if self.parameter is None:
            return self.detail
        return f"parameter {self.parameter!r}: {self.detail}"

    def __str__(self) -> str:
        location = format_location(self.group, self.position)
        if not location:
            return self.reason()
        return f"{location}: {self.reason()}"


class MissingRequiredParameter(DecodeError):
    """A required parameter is absent from the namelist."""

    def __init__(self, parameter: str, *, group: str | None = None) -> None:
        super().__init__("missing required parameter", group=group, parameter=parameter)


class TypeMismatch(DecodeError):
    """A parameter value has the wrong shape or atom kind."""

    def __init__(self, expected: str, actual: str, **kwargs) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected}, found {actual}", **kwargs)


class ArityMismatch(DecodeError):
    """A fixed-arity array parameter has the wrong number of elements."""

    def __init__(self, expected: int, actual: int, **kwargs) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} values in array, found {actual}", **kwargs)


class IndexGap(DecodeError):
    """A fixed-arity array is missing one of its required index positions."""

    def __init__(self, ordinal: int, length: int, **kwargs) -> None:
        self.ordinal = ordinal
        self.length = length
        super().__init__(f"no value at position {ordinal} of {length}", **kwargs)


class DuplicateSingleton(DecodeError):
    """A singleton group (HEAD, TIME, DUMP, MISC) appears more than once."""

    def __init__(self, group: str, **kwargs) -> None:
        super().__init__("group may only appear once", group=group, **kwargs)


class ValueOutOfRange(DecodeError):
    """A numeric parameter value lies outside the range the group allows."""

    def __init__(self, value: object, allowed: str, **kwargs) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(f"value {value!r} out of range, expected {allowed}", **kwargs)

"""Warning policy controls for decode diagnostics.

Every diagnostic the document raises while inserting records is an
``FdsWarning`` with a W-code and the location of the group it concerns.
A ``WarningPolicy`` can drop individual codes or escalate them to
``PolicyError``.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from fdsdecode.errors import PolicyError, format_location

KNOWN_CODES: frozenset[str] = frozenset({"W01", "W02", "W03"})

# W01: singleton group redeclared
# W02: namelist skipped after a decode failure
# W03: bounding box with unordered bounds


class FdsWarning(UserWarning):
    """Warning with a machine-readable code and the group it concerns.

    ``group`` is the namelist group name and ``position`` its 1-based place
    in the input; either is None when unknown.
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


@dataclass(frozen=True)
class WarningPolicy:
    """Controls how individual warning codes are handled."""

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()


def emit_warning(
    code: str,
    detail: str,
    *,
    group: str | None = None,
    position: int | None = None,
    policy: WarningPolicy | None = None,
) -> None:
    """Emit a located warning, respecting the active policy.

    - If code is in ``policy.suppress``, the warning is silently dropped.
    - If code is in ``policy.warn_as_error``, a ``PolicyError`` carrying the
      same code and location is raised.
    - Otherwise an ``FdsWarning`` is issued via ``warnings.warn``.
    """
    if code not in KNOWN_CODES:
        raise ValueError(f"Unknown warning code: {code!r}")
    if policy is not None:
        if code in policy.suppress:
            return
        if code in policy.warn_as_error:
            raise PolicyError(code, detail, group=group, position=position)

    warnings.warn(FdsWarning(code, detail, group=group, position=position), stacklevel=2)


def parse_code_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated string of W-codes and validate them.

    Raises ``ValueError`` for unknown codes.
    """
    codes: set[str] = set()
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token not in KNOWN_CODES:
            raise ValueError(f"Unknown warning code: {token!r} (known: {sorted(KNOWN_CODES)})")
        codes.add(token)
    return frozenset(codes)

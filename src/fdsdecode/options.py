"""Decode policy options."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdsdecode.warning_policy import WarningPolicy

ON_ERROR_CHOICES = ("abort", "skip")
SINGLETON_CHOICES = ("last", "first", "error")


@dataclass(frozen=True)
class DecodeOptions:
    """How a document reacts to failures and repeated singleton groups.

    - ``on_error="abort"`` raises the first decode error; ``"skip"`` records
      it in ``FDSFile.decode_errors`` and moves on.
    - ``singleton`` picks which of several HEAD/TIME/DUMP/MISC groups wins,
      or ``"error"`` to reject the repeat.
    - ``max_workers`` above 1 decodes groups on a thread pool.
    """

    on_error: str = "abort"
    singleton: str = "last"
    warning_policy: WarningPolicy = field(default_factory=WarningPolicy)
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"on_error must be one of {ON_ERROR_CHOICES}, got {self.on_error!r}"
            )
        if self.singleton not in SINGLETON_CHOICES:
            raise ValueError(
                f"singleton must be one of {SINGLETON_CHOICES}, got {self.singleton!r}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

"""The FDSFile document and whole-input decoding."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Union

from fdsdecode.decode import SINGLETON_SLOTS, Record, decode_record
from fdsdecode.errors import DecodeError, DuplicateSingleton, format_location
from fdsdecode.geometry import HasXB
from fdsdecode.models import (
    Bndf,
    Devc,
    Dump,
    Head,
    Hole,
    Hvac,
    Isof,
    Matl,
    Mesh,
    Misc,
    Obst,
    Part,
    Prop,
    Ramp,
    Reac,
    Slcf,
    Surf,
    Time,
    Trnx,
    Trny,
    Trnz,
    Vent,
)
from fdsdecode.namelist import Namelist
from fdsdecode.options import DecodeOptions
from fdsdecode.warning_policy import emit_warning

logger = logging.getLogger(__name__)

# Surfaces FDS predefines, in the order it defines them.
DEFAULT_SURF_IDS: tuple[str, ...] = ("INERT", "OPEN", "HVAC")

# Field values of the predefined surfaces; anything not listed keeps the SURF
# default.
_DEFAULT_SURF_FIELDS: dict[str, dict[str, object]] = {
    surf_id: {"adiabatic": True} for surf_id in DEFAULT_SURF_IDS
}

# Result of decoding one group off the document: (slot, record), None for an
# unrecognized group, or the error that stopped it.
_Outcome = Union[tuple[str, Record], None, DecodeError]


@dataclass
class FDSFile:
    """Typed view of one FDS input deck.

    Singleton groups are ``None`` until seen. Every list keeps input order.
    """

    head: Head | None = None
    time: Time | None = None
    dump: Dump | None = None
    misc: Misc | None = None
    meshes: list[Mesh] = field(default_factory=list)
    reacs: list[Reac] = field(default_factory=list)
    devcs: list[Devc] = field(default_factory=list)
    matls: list[Matl] = field(default_factory=list)
    surfs: list[Surf] = field(default_factory=list)
    obsts: list[Obst] = field(default_factory=list)
    holes: list[Hole] = field(default_factory=list)
    hvacs: list[Hvac] = field(default_factory=list)
    vents: list[Vent] = field(default_factory=list)
    bndfs: list[Bndf] = field(default_factory=list)
    isofs: list[Isof] = field(default_factory=list)
    slcfs: list[Slcf] = field(default_factory=list)
    ramps: list[Ramp] = field(default_factory=list)
    props: list[Prop] = field(default_factory=list)
    parts: list[Part] = field(default_factory=list)
    trnxs: list[Trnx] = field(default_factory=list)
    trnys: list[Trny] = field(default_factory=list)
    trnzs: list[Trnz] = field(default_factory=list)
    unknown_namelists: list[Namelist] = field(default_factory=list)
    decode_errors: list[DecodeError] = field(default_factory=list)
    _ramp_index: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def decode_namelist(
        self,
        namelist: Namelist,
        position: int | None = None,
        options: DecodeOptions | None = None,
    ) -> None:
        """Decode one group and insert it into the document.

        ``position`` is the 1-based place of the group in the input, used in
        error messages and warnings.
        """
        self._apply(namelist, _try_decode(namelist), position, options or DecodeOptions())

    def records_with_xb(self) -> Iterator[HasXB]:
        """Yield every record that carries a bounding box, grouped by kind."""
        for records in (self.meshes, self.obsts, self.holes, self.vents, self.slcfs, self.devcs):
            for record in records:
                if record.try_xb() is not None:
                    yield record

    def _apply(
        self,
        namelist: Namelist,
        outcome: _Outcome,
        position: int | None,
        options: DecodeOptions,
    ) -> None:
        if isinstance(outcome, DecodeError):
            outcome.position = position
            self._fail(outcome, options)
            return
        if outcome is None:
            logger.debug("%s: unrecognized group kept verbatim", format_location(namelist.name, position))
            self.unknown_namelists.append(copy.deepcopy(namelist))
            return

        slot, record = outcome
        logger.debug("%s: decoded into %s", format_location(namelist.name, position), slot)
        _check_bounds(record, namelist.name, position, options)
        if slot in SINGLETON_SLOTS:
            try:
                self._set_singleton(slot, record, namelist.name, position, options)
            except DuplicateSingleton as e:
                self._fail(e, options)
        elif slot == "ramps":
            self._merge_ramp(record)
        else:
            getattr(self, slot).append(record)

    def _set_singleton(
        self,
        slot: str,
        record: Record,
        name: str,
        position: int | None,
        options: DecodeOptions,
    ) -> None:
        if getattr(self, slot) is None:
            setattr(self, slot, record)
            return
        if options.singleton == "error":
            raise DuplicateSingleton(name, position=position)
        if options.singleton == "first":
            emit_warning(
                "W01",
                "repeated group ignored, keeping the first",
                group=name,
                position=position,
                policy=options.warning_policy,
            )
            return
        emit_warning(
            "W01",
            "repeated group replaces the earlier one",
            group=name,
            position=position,
            policy=options.warning_policy,
        )
        setattr(self, slot, record)

    def _merge_ramp(self, ramp: Ramp) -> None:
        if len(self._ramp_index) != len(self.ramps):
            self._ramp_index = {r.id: n for n, r in enumerate(self.ramps)}
        i = self._ramp_index.get(ramp.id)
        if i is None:
            self._ramp_index[ramp.id] = len(self.ramps)
            self.ramps.append(ramp)
            return
        existing = self.ramps[i]
        self.ramps[i] = existing.model_copy(update={"entries": [*existing.entries, *ramp.entries]})

    def _fail(self, error: DecodeError, options: DecodeOptions) -> None:
        if options.on_error == "abort":
            raise error
        self.decode_errors.append(error)
        emit_warning(
            "W02",
            f"group skipped: {error.reason()}",
            group=error.group,
            position=error.position,
            policy=options.warning_policy,
        )


def new_fds_file() -> FDSFile:
    """Return an empty document holding only the predefined surfaces."""
    fds = FDSFile()
    for surf_id, fields in _DEFAULT_SURF_FIELDS.items():
        fds.surfs.append(Surf(id=surf_id, **fields))
    return fds


def decode_fds_file(
    namelists: Iterable[Namelist],
    options: DecodeOptions | None = None,
) -> FDSFile:
    """Decode a whole input deck, group by group, in input order.

    With ``options.max_workers > 1`` the groups are decoded on a thread pool;
    the results are still inserted one at a time in input order, so the
    document is identical to a sequential decode.
    """
    options = options or DecodeOptions()
    namelists = list(namelists)
    fds = new_fds_file()

    if options.max_workers > 1 and len(namelists) > 1:
        logger.info(
            "Decoding %d namelists in parallel (%d threads).",
            len(namelists),
            options.max_workers,
        )
        with ThreadPoolExecutor(max_workers=options.max_workers) as executor:
            outcomes = list(executor.map(_try_decode, namelists))
    else:
        outcomes = map(_try_decode, namelists)

    for position, (namelist, outcome) in enumerate(zip(namelists, outcomes), start=1):
        fds._apply(namelist, outcome, position, options)
    return fds


def _try_decode(namelist: Namelist) -> _Outcome:
    try:
        return decode_record(namelist)
    except DecodeError as e:
        return e


def _check_bounds(record: Record, name: str, position: int | None, options: DecodeOptions) -> None:
    if not isinstance(record, HasXB):
        return
    xb = record.try_xb()
    if xb is not None and not xb.is_ordered():
        emit_warning(
            "W03",
            f"XB bounds are not ordered {xb.as_tuple()}",
            group=name,
            position=position,
            policy=options.warning_policy,
        )

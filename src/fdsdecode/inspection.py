"""Inspection diagnostics for decoded FDS documents."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations

import numpy as np

from fdsdecode.document import FDSFile
from fdsdecode.geometry import XB, intersection_matrix
from fdsdecode.models import Mesh

# (group name, FDSFile attribute) for every collection whose records may
# carry a bounding box.
_BOXED_COLLECTIONS: tuple[tuple[str, str], ...] = (
    ("MESH", "meshes"),
    ("OBST", "obsts"),
    ("HOLE", "holes"),
    ("VENT", "vents"),
    ("SLCF", "slcfs"),
    ("DEVC", "devcs"),
)

_COUNTED_COLLECTIONS: tuple[str, ...] = (
    "meshes", "reacs", "devcs", "matls", "surfs", "obsts", "holes", "hvacs",
    "vents", "bndfs", "isofs", "slcfs", "ramps", "props", "parts", "trnxs",
    "trnys", "trnzs", "unknown_namelists",
)


@dataclass(frozen=True)
class BoxedRecord:
    label: str
    xb: XB

    def try_xb(self) -> XB:
        return self.xb


def boxed_records(fds: FDSFile) -> list[BoxedRecord]:
    """Every record with a bounding box, labelled ``GROUP id`` or ``GROUP #n``."""
    entries: list[BoxedRecord] = []
    for group, attribute in _BOXED_COLLECTIONS:
        for n, record in enumerate(getattr(fds, attribute), start=1):
            xb = record.try_xb()
            if xb is None:
                continue
            label = f"{group} {record.id}" if record.id is not None else f"{group} #{n}"
            entries.append(BoxedRecord(label=label, xb=xb))
    return entries


def inspect_document(fds: FDSFile, *, intersections: bool = False) -> dict[str, object]:
    """Inspect a decoded document and return deterministic diagnostics."""
    summary: dict[str, object] = {
        "chid": fds.head.chid if fds.head is not None else None,
        "title": fds.head.title if fds.head is not None else None,
        "t_begin": fds.time.t_begin if fds.time is not None else None,
        "t_end": fds.time.t_end if fds.time is not None else None,
        "counts": {name: len(getattr(fds, name)) for name in _COUNTED_COLLECTIONS},
        "total_cells": sum(mesh.cells() for mesh in fds.meshes),
        "bounds": _domain_bounds(list(fds.records_with_xb())),
    }

    result: dict[str, object] = {
        "inspect_schema_version": 1,
        "summary": summary,
        "meshes": [_mesh_payload(n, mesh) for n, mesh in enumerate(fds.meshes, start=1)],
        "ramps": [{"id": ramp.id, "entries": len(ramp.entries)} for ramp in fds.ramps],
        "unknown_namelists": [namelist.name for namelist in fds.unknown_namelists],
        "decode_errors": [str(error) for error in fds.decode_errors],
    }

    if intersections:
        result["intersections"] = _intersection_payloads(boxed_records(fds))
    return result


def render_text(payload: dict[str, object]) -> str:
    """Render human-readable text output for inspect diagnostics."""
    lines: list[str] = []

    isv = payload.get("inspect_schema_version")
    if isv is not None:
        lines.append(f"inspect_schema_version: {isv}")

    summary = payload["summary"]
    bounds = summary["bounds"]
    lines.append("summary:")
    lines.append(f"  chid: {summary['chid']}")
    lines.append(f"  title: {summary['title']}")
    lines.append(f"  t_begin: {_fmt_num(summary['t_begin'])}")
    lines.append(f"  t_end: {_fmt_num(summary['t_end'])}")
    lines.append(f"  total_cells: {summary['total_cells']}")
    lines.append(f"  bounds.min: {_fmt_vec(bounds['min'])}")
    lines.append(f"  bounds.max: {_fmt_vec(bounds['max'])}")
    lines.append("  counts:")
    for name, count in summary["counts"].items():
        if count:
            lines.append(f"    {name}: {count}")

    lines.append("meshes:")
    meshes = payload.get("meshes", [])
    if isinstance(meshes, list) and meshes:
        for mesh in meshes:
            lines.append(f"  - id: {mesh['id']}")
            lines.append(f"    ijk: {mesh['ijk']}")
            lines.append(f"    xb: {_fmt_vec(mesh['xb'])}")
            lines.append(f"    cells: {mesh['cells']}")
            lines.append(f"    dimensions: {_fmt_vec(mesh['dimensions'])}")
            lines.append(f"    resolution: {_fmt_vec(mesh['resolution'])}")
    else:
        lines.append("  []")

    ramps = payload.get("ramps", [])
    if ramps:
        lines.append("ramps:")
        for ramp in ramps:
            lines.append(f"  - id: {ramp['id']} entries: {ramp['entries']}")

    unknown = payload.get("unknown_namelists", [])
    if unknown:
        lines.append("unknown_namelists:")
        for name in unknown:
            lines.append(f"  - {name}")

    errors = payload.get("decode_errors", [])
    if errors:
        lines.append("decode_errors:")
        for error in errors:
            lines.append(f"  - {error}")

    pairs = payload.get("intersections")
    if isinstance(pairs, list):
        lines.append("intersections:")
        if pairs:
            for pair in pairs:
                lines.append(f"  - a: {pair['a']} b: {pair['b']}")
        else:
            lines.append("  []")

    return "\n".join(lines) + "\n"


def _mesh_payload(n: int, mesh: Mesh) -> dict[str, object]:
    return {
        "id": mesh.id if mesh.id is not None else f"#{n}",
        "ijk": list(mesh.ijk.as_tuple()),
        "xb": list(mesh.xb.as_tuple()),
        "cells": mesh.cells(),
        "dimensions": list(mesh.dimensions()),
        "resolution": list(mesh.resolution()),
    }


def _domain_bounds(records: list) -> dict[str, list[float]]:
    if not records:
        zeros = [0.0, 0.0, 0.0]
        return {"min": zeros, "max": zeros}

    boxes = np.array([record.try_xb().sorted().as_tuple() for record in records], dtype=np.float64)
    min_bounds = boxes[:, 0::2].min(axis=0)
    max_bounds = boxes[:, 1::2].max(axis=0)
    return {
        "min": _to_list(min_bounds),
        "max": _to_list(max_bounds),
    }


def _intersection_payloads(entries: list[BoxedRecord]) -> list[dict[str, str]]:
    overlaps = intersection_matrix(entries, entries)
    pairs: list[dict[str, str]] = []
    for a, b in combinations(range(len(entries)), 2):
        if overlaps[a, b]:
            pairs.append({"a": entries[a].label, "b": entries[b].label})
    return pairs


def _to_list(vec: np.ndarray) -> list[float]:
    return [float(v) for v in vec.tolist()]


def _fmt_num(value: object) -> str:
    if value is None:
        return "None"
    return f"{float(value):.6g}"


def _fmt_vec(vec: object) -> str:
    if not isinstance(vec, list):
        return str(vec)
    return "[" + ", ".join(f"{float(v):.6g}" for v in vec) + "]"

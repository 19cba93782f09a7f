"""Loading of tokenized namelist streams serialized as YAML or JSON.

The tokenizer that reads raw ``.fds`` text hands its output over in this
shape::

    format_version: 1
    namelists:
      - name: MESH
        parameters:
          ID: coarse
          IJK: [10, 10, 10]
          XB: [0.0, 1.0, 0.0, 1.0, 0.0, 1.0]
      - name: SURF
        parameters:
          ID: wall
          MATL_ID: {"1": STEEL, "3": BRICK}

A bare list of namelist entries is accepted too. JSON input is read by the
same loader.
"""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fdsdecode.errors import LoadError
from fdsdecode.namelist import Atom, Index, Namelist, ParameterArray, ParameterValue

_SUPPORTED_FORMAT_VERSIONS = frozenset({1})
_ATOM_TYPES = (bool, int, float, str)


def _make_yaml() -> YAML:
    """Create a ruamel.yaml safe loader that errors on duplicate keys."""
    yml = YAML(typ="safe")
    yml.allow_duplicate_keys = False
    return yml


def _read_source_text(source: str | Path) -> str:
    """Read content from a path, or treat a string as the document itself."""
    if isinstance(source, Path):
        try:
            return source.read_text(encoding="utf-8")
        except OSError as e:
            raise LoadError(f"Cannot read file: {e}") from e
    return source


def load_namelists(source: str | Path) -> list[Namelist]:
    """Load a serialized namelist stream into ``Namelist`` values, in order."""
    text = _read_source_text(source)
    try:
        data = _make_yaml().load(text)
    except YAMLError as e:
        raise LoadError(f"Invalid YAML/JSON: {e}") from e

    if isinstance(data, dict):
        version = data.get("format_version", 1)
        if type(version) is not int or version not in _SUPPORTED_FORMAT_VERSIONS:
            raise LoadError(
                f"Unsupported format_version: {version!r} "
                f"(supported: {sorted(_SUPPORTED_FORMAT_VERSIONS)})"
            )
        entries = data.get("namelists")
        if entries is None:
            raise LoadError("Missing required field: namelists")
    elif data is None:
        entries = []
    else:
        entries = data

    if not isinstance(entries, list):
        raise LoadError("namelists must be a list")
    return [_namelist_from_entry(entry, position) for position, entry in enumerate(entries, start=1)]


def _namelist_from_entry(entry: object, position: int) -> Namelist:
    where = f"namelist #{position}"
    if not isinstance(entry, dict):
        raise LoadError(f"{where}: entry must be a mapping with 'name' and 'parameters'")
    unknown = set(entry) - {"name", "parameters"}
    if unknown:
        raise LoadError(f"{where}: unknown fields {sorted(unknown)}")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise LoadError(f"{where}: 'name' must be a non-empty string")
    parameters = entry.get("parameters") or {}
    if not isinstance(parameters, dict):
        raise LoadError(f"{where} &{name}: 'parameters' must be a mapping")

    where = f"{where} &{name}"
    values: dict[str, ParameterValue] = {}
    for key, raw in parameters.items():
        if not isinstance(key, str):
            raise LoadError(f"{where}: parameter names must be strings, got {key!r}")
        values[key] = _parameter_value(raw, f"{where} {key}")
    return Namelist(name, values)


def _parameter_value(raw: object, where: str) -> ParameterValue:
    if isinstance(raw, list):
        return ParameterArray.from_sequence(_atom(item, where) for item in raw)
    if isinstance(raw, dict):
        return ParameterArray({_index(key, where): _atom(value, where) for key, value in raw.items()})
    return _atom(raw, where)


def _atom(raw: object, where: str) -> Atom:
    if raw is None:
        raise LoadError(f"{where}: null is not a namelist value")
    if isinstance(raw, (list, dict)):
        raise LoadError(f"{where}: nested arrays must be written as index mappings")
    if type(raw) not in _ATOM_TYPES:
        raise LoadError(f"{where}: unsupported value {raw!r}")
    return raw


def _index(key: object, where: str) -> Index:
    """Parse an array index key: ``3``, ``"3"`` or ``"1,2"``."""
    if type(key) is int:
        parts = [key]
    elif isinstance(key, str):
        try:
            parts = [int(part) for part in key.split(",")]
        except ValueError:
            raise LoadError(f"{where}: invalid array index {key!r}") from None
    else:
        raise LoadError(f"{where}: invalid array index {key!r}")
    if any(part < 1 for part in parts):
        raise LoadError(f"{where}: array indices start at 1, got {key!r}")
    return tuple(parts)

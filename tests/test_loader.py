"""Tests for loading serialized namelist streams."""

from __future__ import annotations

import json

import pytest

from fdsdecode.errors import LoadError
from fdsdecode.loader import load_namelists
from fdsdecode.namelist import Namelist, ParameterArray


class TestLoadNamelists:
    def test_small_deck(self, small_deck_yaml):
        namelists = load_namelists(small_deck_yaml)
        assert [n.name for n in namelists] == [
            "HEAD", "TIME", "MESH", "OBST", "OBST", "RAMP", "RAMP", "CATF",
        ]
        mesh = namelists[2]
        assert mesh.get("IJK") == ParameterArray.from_sequence([10, 10, 10])
        assert mesh.get("XB").get((4,)) == 2.0

    def test_atom_kinds_preserved(self):
        namelists = load_namelists(
            "- name: SURF\n"
            "  parameters: {ADIABATIC: true, N: 3, X: 3.0, ID: '3'}\n"
        )
        params = namelists[0].parameters
        assert params["ADIABATIC"] is True
        assert type(params["N"]) is int
        assert type(params["X"]) is float
        assert params["ID"] == "3"

    def test_sparse_mapping(self):
        namelists = load_namelists(
            "- name: SURF\n"
            "  parameters:\n"
            "    MATL_ID: {'1,1': A, '2,3': B}\n"
            "    THICKNESS: {1: 0.1, 3: 0.3}\n"
        )
        matl = namelists[0].get("MATL_ID")
        assert matl.get((1, 1)) == "A"
        assert matl.get((2, 3)) == "B"
        thickness = namelists[0].get("THICKNESS")
        assert len(thickness) == 2
        assert thickness.get((2,)) is None

    def test_json(self, tmp_path):
        path = tmp_path / "deck.json"
        path.write_text(
            json.dumps(
                {
                    "format_version": 1,
                    "namelists": [{"name": "OBST", "parameters": {"XB": [0.0, 1.0, 0.0, 1.0, 0.0, 1.0]}}],
                }
            )
        )
        namelists = load_namelists(path)
        assert namelists[0].name == "OBST"
        assert len(namelists[0].get("XB")) == 6

    def test_empty_document(self):
        assert load_namelists("") == []
        assert load_namelists("namelists: []\n") == []

    def test_parameters_optional(self):
        assert load_namelists("- name: TAIL\n") == [Namelist("TAIL")]


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="Cannot read file"):
            load_namelists(tmp_path / "missing.yaml")

    def test_invalid_yaml(self):
        with pytest.raises(LoadError, match="Invalid YAML"):
            load_namelists("namelists: [\n")

    def test_duplicate_keys(self):
        with pytest.raises(LoadError):
            load_namelists("- name: A\n  name: B\n")

    def test_unsupported_version(self):
        with pytest.raises(LoadError, match="format_version"):
            load_namelists("format_version: 2\nnamelists: []\n")

    def test_missing_namelists_field(self):
        with pytest.raises(LoadError, match="namelists"):
            load_namelists("format_version: 1\n")

    def test_null_value(self):
        with pytest.raises(LoadError, match="null"):
            load_namelists("- name: SURF\n  parameters: {ID: null}\n")

    def test_nested_sequence(self):
        with pytest.raises(LoadError, match="nested arrays"):
            load_namelists("- name: SURF\n  parameters: {MATL_ID: [[A, B]]}\n")

    def test_bad_index(self):
        with pytest.raises(LoadError, match="invalid array index"):
            load_namelists("- name: SURF\n  parameters: {MATL_ID: {x: A}}\n")
        with pytest.raises(LoadError, match="start at 1"):
            load_namelists("- name: SURF\n  parameters: {MATL_ID: {0: A}}\n")

    def test_missing_name(self):
        with pytest.raises(LoadError, match="'name'"):
            load_namelists("- parameters: {ID: A}\n")

    def test_unknown_entry_field(self):
        with pytest.raises(LoadError, match="unknown fields"):
            load_namelists("- name: A\n  params: {}\n")

    def test_error_names_position(self):
        with pytest.raises(LoadError, match="namelist #2 &SURF ID"):
            load_namelists("- name: HEAD\n- name: SURF\n  parameters: {ID: null}\n")

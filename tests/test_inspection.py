"""Tests for inspection diagnostics."""

from __future__ import annotations

import json

from fdsdecode.document import decode_fds_file, new_fds_file
from fdsdecode.inspection import boxed_records, inspect_document, render_text
from fdsdecode.loader import load_namelists


class TestInspectDocument:
    def test_summary(self, small_deck_yaml):
        fds = decode_fds_file(load_namelists(small_deck_yaml))
        payload = inspect_document(fds)
        summary = payload["summary"]
        assert summary["chid"] == "room"
        assert summary["t_end"] == 60.0
        assert summary["total_cells"] == 1000
        assert summary["counts"]["obsts"] == 2
        assert summary["counts"]["surfs"] == 3
        assert summary["counts"]["ramps"] == 1
        assert summary["bounds"] == {"min": [0.0, 0.0, 0.0], "max": [1.0, 2.0, 3.0]}
        assert payload["ramps"] == [{"id": "fire", "entries": 2}]
        assert payload["unknown_namelists"] == ["CATF"]
        assert "intersections" not in payload

    def test_mesh_payload(self, small_deck_yaml):
        payload = inspect_document(decode_fds_file(load_namelists(small_deck_yaml)))
        mesh = payload["meshes"][0]
        assert mesh["id"] == "m1"
        assert mesh["cells"] == 1000
        assert mesh["dimensions"] == [1.0, 2.0, 3.0]

    def test_intersections(self, small_deck_yaml):
        payload = inspect_document(
            decode_fds_file(load_namelists(small_deck_yaml)), intersections=True
        )
        pairs = payload["intersections"]
        assert {"a": "MESH m1", "b": "OBST table"} in pairs
        assert {"a": "MESH m1", "b": "OBST shelf"} in pairs
        # table ends at x=0.8 where shelf begins
        assert {"a": "OBST table", "b": "OBST shelf"} not in pairs

    def test_empty_document(self):
        payload = inspect_document(new_fds_file(), intersections=True)
        assert payload["summary"]["bounds"]["min"] == [0.0, 0.0, 0.0]
        assert payload["summary"]["total_cells"] == 0
        assert payload["intersections"] == []

    def test_json_serializable(self, small_deck_yaml):
        payload = inspect_document(
            decode_fds_file(load_namelists(small_deck_yaml)), intersections=True
        )
        assert json.loads(json.dumps(payload)) == payload


class TestBoxedRecords:
    def test_labels(self, small_deck_yaml):
        labels = [e.label for e in boxed_records(decode_fds_file(load_namelists(small_deck_yaml)))]
        assert labels == ["MESH m1", "OBST table", "OBST shelf"]


class TestRenderText:
    def test_sections(self, small_deck_yaml):
        payload = inspect_document(
            decode_fds_file(load_namelists(small_deck_yaml)), intersections=True
        )
        text = render_text(payload)
        assert text.startswith("inspect_schema_version: 1\n")
        assert "  chid: room" in text
        assert "  total_cells: 1000" in text
        assert "  bounds.max: [1, 2, 3]" in text
        assert "    obsts: 2" in text
        assert "  - id: fire entries: 2" in text
        assert "unknown_namelists:\n  - CATF" in text
        assert "  - a: MESH m1 b: OBST table" in text
        assert text.endswith("\n")

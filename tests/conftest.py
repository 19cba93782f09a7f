"""Shared fixtures for fdsdecode tests."""

from __future__ import annotations

import pytest

from fdsdecode.namelist import Namelist, ParameterArray


def arr(*values) -> ParameterArray:
    """Dense 1-D array helper."""
    return ParameterArray.from_sequence(values)


@pytest.fixture
def mesh_namelist() -> Namelist:
    return Namelist(
        "MESH",
        {
            "ID": "coarse",
            "IJK": arr(10, 10, 10),
            "XB": arr(0.0, 1.0, 0.0, 2.0, 0.0, 3.0),
        },
    )


@pytest.fixture
def small_deck_yaml() -> str:
    return """\
format_version: 1
namelists:
  - name: HEAD
    parameters:
      CHID: room
      TITLE: Single room fire
  - name: TIME
    parameters:
      T_END: 60.0
  - name: MESH
    parameters:
      ID: m1
      IJK: [10, 10, 10]
      XB: [0.0, 1.0, 0.0, 2.0, 0.0, 3.0]
  - name: OBST
    parameters:
      ID: table
      XB: [0.2, 0.8, 0.2, 0.8, 0.0, 0.5]
  - name: OBST
    parameters:
      ID: shelf
      XB: [0.8, 1.0, 0.0, 2.0, 0.0, 3.0]
  - name: RAMP
    parameters:
      ID: fire
      T: 0.0
      F: 0.0
  - name: RAMP
    parameters:
      ID: fire
      T: 30.0
      F: 1.0
  - name: CATF
    parameters:
      OTHER_FILES: [a.fds, b.fds]
"""

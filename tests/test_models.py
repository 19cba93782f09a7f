"""Tests for the record models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from fdsdecode.geometry import IJK, XB
from fdsdecode.models import Devc, Mesh, Obst, Part, Ramp, RampEntry, Slcf, Surf, Time, Trnx, Trnz


class TestMesh:
    def test_defaults(self):
        mesh = Mesh()
        assert mesh.xb == XB(x1=0.0, x2=1.0, y1=0.0, y2=1.0, z1=0.0, z2=1.0)
        assert mesh.ijk == IJK(i=10, j=10, k=10)
        assert mesh.cells() == 1000

    def test_derived_values(self):
        mesh = Mesh(
            ijk=IJK(i=10, j=10, k=10),
            xb=XB(x1=0.0, x2=1.0, y1=0.0, y2=2.0, z1=0.0, z2=3.0),
        )
        assert mesh.cells() == 1000
        assert mesh.dimensions() == (1.0, 2.0, 3.0)
        assert mesh.resolution() == pytest.approx((0.1, 0.2, 0.3))

    def test_resolution_is_float_division(self):
        mesh = Mesh(ijk=IJK(i=3, j=1, k=1))
        assert mesh.resolution()[0] == pytest.approx(1.0 / 3.0)

    def test_try_xb(self):
        assert Mesh().try_xb() == Mesh().xb


class TestBoxCapability:
    def test_optional_boxes(self):
        assert Devc().try_xb() is None
        assert Slcf().try_xb() is None
        xb = XB(x1=0.0, x2=1.0, y1=0.0, y2=1.0, z1=0.0, z2=1.0)
        assert Devc(xb=xb).try_xb() == xb

    def test_obst_requires_xb(self):
        with pytest.raises(ValidationError):
            Obst()


class TestDefaults:
    def test_surf(self):
        surf = Surf()
        assert surf.adiabatic is False
        assert surf.auto_ignition_temperature == -273.0
        assert surf.backing == "EXPOSED"
        assert surf.rgb.as_tuple() == (255, 204, 102)
        assert surf.matl_id == []

    def test_time(self):
        assert Time().t_begin == 0.0
        assert Time().t_end == 1.0

    def test_part(self):
        part = Part()
        assert math.isinf(part.maximum_diameter)
        assert part.breakup_ratio == pytest.approx(3.0 / 7.0)
        assert part.drag_law == "SPHERE"

    def test_list_defaults_not_shared(self):
        a = Surf()
        b = Surf()
        assert a.matl_id is not b.matl_id

    def test_trn_groups_share_shape(self):
        assert Trnx(cc=1.0, pc=2.0).mesh_number == 1
        assert Trnz(cc=1.0, pc=2.0).ideriv == 0


class TestFrozen:
    def test_assignment_rejected(self):
        with pytest.raises(ValidationError):
            Surf().adiabatic = True

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            Surf(not_a_field=1)


class TestRamp:
    def test_entries(self):
        ramp = Ramp(id="fire", entries=[RampEntry(t=0.0, f=0.0), RampEntry(t=10.0, f=1.0)])
        assert [entry.f for entry in ramp.entries] == [0.0, 1.0]
        assert ramp.entries[0].number_interpolation_points == 5000

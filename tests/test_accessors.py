"""Tests for parameter accessors and narrowing."""

from __future__ import annotations

import pytest

from conftest import arr
from fdsdecode.accessors import (
    optional,
    required,
    to_bool,
    to_bool_list,
    to_float,
    to_float_list,
    to_float_pair,
    to_ijk,
    to_int,
    to_int_list,
    to_rgb,
    to_str,
    to_str_list,
    to_str_sextuple,
    to_str_triple,
    to_xb,
    to_xyz,
)
from fdsdecode.errors import (
    ArityMismatch,
    DecodeError,
    IndexGap,
    MissingRequiredParameter,
    TypeMismatch,
    ValueOutOfRange,
)
from fdsdecode.geometry import IJK, RGB, XB, XYZ
from fdsdecode.namelist import Namelist, ParameterArray


class TestAtomNarrowing:
    def test_exact_kinds(self):
        assert to_bool(True) is True
        assert to_int(4) == 4
        assert to_float(4.5) == 4.5
        assert to_str("FIRE") == "FIRE"

    def test_no_int_to_double_coercion(self):
        with pytest.raises(TypeMismatch, match="expected double atom, found int atom 4"):
            to_float(4)

    def test_no_bool_to_int_coercion(self):
        with pytest.raises(TypeMismatch):
            to_int(True)

    def test_no_string_to_number(self):
        with pytest.raises(TypeMismatch):
            to_float("1.0")

    def test_array_where_atom_expected(self):
        with pytest.raises(TypeMismatch, match="array of 2 elements"):
            to_str(arr("A", "B"))


class TestFixedArity:
    def test_xb_in_order(self):
        xb = to_xb(arr(1.0, 2.0, 3.0, 4.0, 5.0, 6.0))
        assert xb == XB(x1=1.0, x2=2.0, y1=3.0, y2=4.0, z1=5.0, z2=6.0)

    def test_xb_sparse_but_complete(self):
        value = ParameterArray({(6,): 6.0, (5,): 5.0, (4,): 4.0, (3,): 3.0, (2,): 2.0, (1,): 1.0})
        assert to_xb(value).as_tuple() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)

    @pytest.mark.parametrize("count", [0, 5, 7])
    def test_xb_wrong_length(self, count):
        with pytest.raises(ArityMismatch) as exc:
            to_xb(arr(*([1.0] * count)))
        assert exc.value.expected == 6
        assert exc.value.actual == count

    def test_xb_wrong_length_regardless_of_indices(self):
        value = ParameterArray({(10,): 1.0, (20,): 2.0})
        with pytest.raises(ArityMismatch):
            to_xb(value)

    def test_xb_index_gap(self):
        value = ParameterArray({(1,): 0.0, (2,): 1.0, (3,): 0.0, (4,): 1.0, (5,): 0.0, (7,): 1.0})
        with pytest.raises(IndexGap, match="no value at position 6 of 6") as exc:
            to_xb(value)
        assert exc.value.ordinal == 6

    def test_xb_element_kind(self):
        with pytest.raises(TypeMismatch, match="position 3"):
            to_xb(arr(0.0, 1.0, 0, 1.0, 0.0, 1.0))

    def test_xb_atom(self):
        with pytest.raises(TypeMismatch, match="array of 6 double values"):
            to_xb(1.0)

    def test_xyz(self):
        assert to_xyz(arr(1.0, 2.0, 3.0)) == XYZ(x=1.0, y=2.0, z=3.0)

    def test_ijk_requires_ints(self):
        assert to_ijk(arr(10, 20, 30)) == IJK(i=10, j=20, k=30)
        with pytest.raises(TypeMismatch):
            to_ijk(arr(10.0, 20.0, 30.0))

    @pytest.mark.parametrize("counts", [(0, 10, 10), (10, -1, 10), (10, 10, 0)])
    def test_ijk_counts_at_least_one(self, counts):
        with pytest.raises(ValueOutOfRange, match="out of range") as exc:
            to_ijk(arr(*counts))
        assert exc.value.value < 1

    def test_rgb(self):
        assert to_rgb(arr(255, 204, 102)) == RGB(r=255, g=204, b=102)

    def test_pairs_and_string_tuples(self):
        assert to_float_pair(arr(0.0, 1.5)) == (0.0, 1.5)
        assert to_str_triple(arr("A", "B", "C")) == ("A", "B", "C")
        assert to_str_sextuple(arr(*"ABCDEF")) == ("A", "B", "C", "D", "E", "F")
        with pytest.raises(ArityMismatch):
            to_str_triple(arr("A", "B"))


class TestLists:
    def test_in_index_order(self):
        value = ParameterArray({(2,): "B", (1,): "A"})
        assert to_str_list(value) == ["A", "B"]

    def test_kinds_checked(self):
        assert to_float_list(arr(1.0, 2.0)) == [1.0, 2.0]
        assert to_int_list(arr(1, 2)) == [1, 2]
        assert to_bool_list(arr(True, False)) == [True, False]
        with pytest.raises(TypeMismatch):
            to_float_list(arr(1.0, 2))
        with pytest.raises(TypeMismatch):
            to_bool_list(arr(True, 1))

    def test_atom_not_promoted(self):
        with pytest.raises(TypeMismatch):
            to_str_list("A")


class TestRequiredOptional:
    def test_required_present(self):
        nml = Namelist("MATL", {"ID": "STEEL"})
        assert required(nml, "ID", to_str) == "STEEL"

    def test_required_missing(self):
        nml = Namelist("OBST", {})
        with pytest.raises(MissingRequiredParameter) as exc:
            required(nml, "XB", to_xb)
        assert exc.value.parameter == "XB"
        assert exc.value.group == "OBST"
        assert str(exc.value) == "&OBST: parameter 'XB': missing required parameter"

    def test_optional_default(self):
        nml = Namelist("SURF", {})
        assert optional(nml, "ADIABATIC", to_bool) is None
        assert optional(nml, "ADIABATIC", to_bool, default=False) is False

    def test_optional_present_narrowed(self):
        nml = Namelist("SURF", {"ADIABATIC": True})
        assert optional(nml, "ADIABATIC", to_bool, default=False) is True

    def test_errors_carry_group_and_parameter(self):
        nml = Namelist("MESH", {"IJK": arr(10, 10)})
        with pytest.raises(DecodeError) as exc:
            required(nml, "IJK", to_ijk)
        assert exc.value.group == "MESH"
        assert exc.value.parameter == "IJK"
        assert "&MESH: parameter 'IJK': expected 3 values in array, found 2" == str(exc.value)

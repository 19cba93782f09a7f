"""Record decoders: one pure function per recognized namelist group.

Each decoder reads the parameters present in a group through the accessor
layer and builds the matching record model; absent optional parameters fall
back to the model's field defaults. Decoders do not know about the document.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from fdsdecode.accessors import (
    Narrow,
    optional,
    required,
    to_bool,
    to_bool_list,
    to_float,
    to_float_list,
    to_float_pair,
    to_ijk,
    to_int,
    to_rgb,
    to_str,
    to_str_list,
    to_str_sextuple,
    to_str_triple,
    to_xb,
    to_xyz,
)
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
    RampEntry,
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

Record = Union[
    Head, Time, Dump, Misc, Mesh, Reac, Devc, Matl, Surf, Obst, Hole, Hvac,
    Vent, Bndf, Isof, Slcf, Ramp, Prop, Part, Trnx, Trny, Trnz,
]

HEAD_PARAMETERS: dict[str, Narrow] = {
    "CHID": to_str,
    "FYI": to_str,
    "TITLE": to_str,
}

TIME_PARAMETERS: dict[str, Narrow] = {
    "DT": to_float,
    "FYI": to_str,
    "LIMITING_DT_RATIO": to_float,
    "LOCK_TIME_STEP": to_bool,
    "RESTRICT_TIME_STEP": to_bool,
    "T_BEGIN": to_float,
    "T_END": to_float,
    "TIME_SHRINK_FACTOR": to_float,
    "WALL_INCREMENT": to_int,
}

DUMP_PARAMETERS: dict[str, Narrow] = {
    "CLIP_RESTART_FILES": to_bool,
    "COLUMN_DUMP_LIMIT": to_bool,
    "CTRL_COLUMN_LIMIT": to_int,
    "DEVC_COLUMN_LIMIT": to_int,
    "DT_BNDF": to_float,
    "DT_CTRL": to_float,
    "DT_DEVC": to_float,
    "DT_HRR": to_float,
    "DT_ISOF": to_float,
    "DT_MASS": to_float,
    "DT_PART": to_float,
    "DT_PL3D": to_float,
    "DT_PROF": to_float,
    "DT_RESTART": to_float,
    "DT_SL3D": to_float,
    "DT_SLCF": to_float,
    "FLUSH_FILE_BUFFERS": to_bool,
    "MASS_FILE": to_bool,
    "MAXIMUM_PARTICLES": to_int,
    "NFRAMES": to_int,
    "PLOT3D_QUANTITY": to_str_list,
    "RENDER_FILE": to_str,
    "SIG_FIGS": to_int,
    "SIG_FIGS_EXP": to_int,
    "SMOKE3D": to_bool,
    "SMOKE3D_QUANTITY": to_str,
    "STATUS_FILES": to_bool,
    "SUPPRESS_DIAGNOSTICS": to_bool,
    "WRITE_XYZ": to_bool,
}

MISC_PARAMETERS: dict[str, Narrow] = {
    "ALLOW_SURFACE_PARTICLES": to_bool,
    "ALLOW_UNDERSIDE_PARTICLES": to_bool,
    "BNDF_DEFAULT": to_bool,
    "CFL_MAX": to_float,
    "CFL_MIN": to_float,
    "CHECK_HT": to_bool,
    "CHECK_VN": to_bool,
    "DNS": to_bool,
    "FYI": to_str,
    "GVEC": to_xyz,
    "HUMIDITY": to_float,
    "MAXIMUM_VISIBILITY": to_float,
    "NOISE": to_bool,
    "P_INF": to_float,
    "RESTART": to_bool,
    "RESTART_CHID": to_str,
    "SOLID_PHASE_ONLY": to_bool,
    "STRATIFICATION": to_bool,
    "SUPPRESSION": to_bool,
    "TMPA": to_float,
    "TURBULENCE_MODEL": to_str,
    "VISIBILITY_FACTOR": to_float,
}

MESH_PARAMETERS: dict[str, Narrow] = {
    "ID": to_str,
    "XB": to_xb,
    "IJK": to_ijk,
    "COLOR": to_str,
    "CYLINDRICAL": to_bool,
    "EVACUATION": to_bool,
    "EVAC_HUMANS": to_bool,
    "EVAC_Z_OFFSET": to_float,
    "FYI": to_str,
    "LEVEL": to_int,
    "MPI_PROCESS": to_int,
    "MULT_ID": to_str,
    "N_THREADS": to_int,
    "RGB": to_rgb,
}

REAC_PARAMETERS: dict[str, Narrow] = {
    "A": to_float,
    "AUTO_IGNITION_TEMPERATURE": to_float,
    "C": to_float,
    "CHECK_ATOM_BALANCE": to_bool,
    "CO_YIELD": to_float,
    "CRITICAL_FLAME_TEMPERATURE": to_float,
    "E": to_float,
    "EPUMO2": to_float,
    "EQUATION": to_str,
    "FORMULA": to_str,
    "FUEL": to_str,
    "FUEL_RADCAL_ID": to_str,
    "FYI": to_str,
    "H": to_float,
    "HEAT_OF_COMBUSTION": to_float,
    "ID": to_str,
    "IDEAL": to_bool,
    "N": to_float,
    "NU": to_float_list,
    "O": to_float,
    "RADIATIVE_FRACTION": to_float,
    "RAMP_CHI_R": to_str,
    "SOOT_H_FRACTION": to_float,
    "SOOT_YIELD": to_float,
    "SPEC_ID_NU": to_str_list,
}

DEVC_PARAMETERS: dict[str, Narrow] = {
    "CONVERSION_ADDEND": to_float,
    "CONVERSION_FACTOR": to_float,
    "CTRL_ID": to_str,
    "DELAY": to_float,
    "DEVC_ID": to_str,
    "DUCT_ID": to_str,
    "FYI": to_str,
    "HIDE_COORDINATES": to_bool,
    "ID": to_str,
    "INITIAL_STATE": to_bool,
    "IOR": to_int,
    "LATCH": to_bool,
    "MATL_ID": to_str,
    "NODE_ID": to_str_list,
    "ORIENTATION": to_xyz,
    "OUTPUT": to_bool,
    "PART_ID": to_str,
    "POINTS": to_int,
    "PROP_ID": to_str,
    "QUANTITY": to_str,
    "QUANTITY2": to_str,
    "QUANTITY_RANGE": to_float_pair,
    "REAC_ID": to_str,
    "RELATIVE": to_bool,
    "ROTATION": to_float,
    "SETPOINT": to_float,
    "SMOOTHING_FACTOR": to_float,
    "SPEC_ID": to_str,
    "STATISTICS": to_str,
    "STATISTICS_START": to_float,
    "SURF_ID": to_str,
    "TIME_AVERAGED": to_bool,
    "TIME_HISTORY": to_bool,
    "TRIP_DIRECTION": to_int,
    "UNITS": to_str,
    "VELO_INDEX": to_int,
    "XB": to_xb,
    "XYZ": to_xyz,
}

MATL_PARAMETERS: dict[str, Narrow] = {
    "A": to_float_list,
    "ABSORPTION_COEFFICIENT": to_float,
    "ALLOW_SHRINKING": to_bool,
    "ALLOW_SWELLING": to_bool,
    "BOILING_TEMPERATURE": to_float,
    "COLOR": to_str,
    "CONDUCTIVITY": to_float,
    "CONDUCTIVITY_RAMP": to_str,
    "DENSITY": to_float,
    "E": to_float_list,
    "EMISSIVITY": to_float,
    "FYI": to_str,
    "HEAT_OF_COMBUSTION": to_float_list,
    "HEAT_OF_REACTION": to_float_list,
    "HEATING_RATE": to_float_list,
    "MATL_ID": to_str_list,
    "N_REACTIONS": to_int,
    "N_S": to_float_list,
    "NU_MATL": to_float_list,
    "NU_SPEC": to_float_list,
    "PCR": to_bool_list,
    "PYROLYSIS_RANGE": to_float_list,
    "REFERENCE_RATE": to_float_list,
    "REFERENCE_TEMPERATURE": to_float_list,
    "RGB": to_rgb,
    "SPEC_ID": to_str_list,
    "SPECIFIC_HEAT": to_float,
    "SPECIFIC_HEAT_RAMP": to_str,
}

SURF_PARAMETERS: dict[str, Narrow] = {
    "ADIABATIC": to_bool,
    "AUTO_IGNITION_TEMPERATURE": to_float,
    "BACKING": to_str,
    "BURN_AWAY": to_bool,
    "C_FORCED_CONSTANT": to_float,
    "C_FORCED_PR_EXP": to_float,
    "C_FORCED_RE": to_float,
    "C_FORCED_RE_EXP": to_float,
    "C_HORIZONTAL": to_float,
    "C_VERTICAL": to_float,
    "CELL_SIZE_FACTOR": to_float,
    "COLOR": to_str,
    "CONVECTIVE_HEAT_FLUX": to_float,
    "DEFAULT": to_bool,
    "EMISSIVITY": to_float,
    "EXTERNAL_FLUX": to_float,
    "FREE_SLIP": to_bool,
    "FYI": to_str,
    "GEOMETRY": to_str,
    "HEAT_OF_VAPORIZATION": to_float,
    "HRRPUA": to_float,
    "ID": to_str,
    "IGNITION_TEMPERATURE": to_float,
    "MASS_FLUX_TOTAL": to_float,
    "MASS_FLUX_VAR": to_float,
    "MATL_ID": to_str_list,
    "MATL_MASS_FRACTION": to_float_list,
    "MLRPUA": to_float,
    "NET_HEAT_FLUX": to_float,
    "NO_SLIP": to_bool,
    "PART_ID": to_str,
    "RAMP_Q": to_str,
    "RAMP_T": to_str,
    "RGB": to_rgb,
    "TAU_Q": to_float,
    "TAU_T": to_float,
    "THICKNESS": to_float_list,
    "TMP_FRONT": to_float,
    "TRANSPARENCY": to_float,
    "VEL": to_float,
    "VEL_T": to_float_pair,
    "VOLUME_FLOW": to_float,
}

OBST_PARAMETERS: dict[str, Narrow] = {
    "ALLOW_VENT": to_bool,
    "BNDF_OBST": to_bool,
    "BULK_DENSITY": to_float,
    "COLOR": to_str,
    "CTRL_ID": to_str,
    "DEVC_ID": to_str,
    "EVACUATION": to_bool,
    "FYI": to_str,
    "ID": to_str,
    "MATL_ID": to_str,
    "MESH_ID": to_str,
    "MULT_ID": to_str,
    "OUTLINE": to_bool,
    "OVERLAY": to_bool,
    "PERMIT_HOLE": to_bool,
    "PROP_ID": to_str,
    "REMOVABLE": to_bool,
    "RGB": to_rgb,
    "SURF_ID": to_str,
    "SURF_ID6": to_str_sextuple,
    "SURF_IDS": to_str_triple,
    "TEXTURE_ORIGIN": to_xyz,
    "THICKEN": to_bool,
    "TRANSPARENCY": to_float,
}

HOLE_PARAMETERS: dict[str, Narrow] = {
    "COLOR": to_str,
    "CTRL_ID": to_str,
    "DEVC_ID": to_str,
    "EVACUATION": to_bool,
    "FYI": to_str,
    "ID": to_str,
    "MESH_ID": to_str,
    "MULT_ID": to_str,
    "RGB": to_rgb,
    "TRANSPARENCY": to_float,
}

HVAC_PARAMETERS: dict[str, Narrow] = {
    "AIRCOIL_ID": to_str,
    "AMBIENT": to_bool,
    "AREA": to_float,
    "CLEAN_LOSS": to_float,
    "CTRL_ID": to_str,
    "DAMPER": to_bool,
    "DEVC_ID": to_str,
    "DIAMETER": to_float,
    "DUCT_ID": to_str_list,
    "EFFICIENCY": to_float_list,
    "FAN_ID": to_str,
    "FILTER_ID": to_str,
    "FYI": to_str,
    "LEAK_ENTHALPY": to_bool,
    "LENGTH": to_float,
    "LOSS": to_float_list,
    "MASS_FLOW": to_float,
    "MAX_FLOW": to_float,
    "MAX_PRESSURE": to_float,
    "N_CELLS": to_int,
    "NODE_ID": to_str_list,
    "PERIMETER": to_float,
    "RAMP_ID": to_str,
    "RAMP_LOSS": to_str,
    "REVERSE": to_bool,
    "ROUGHNESS": to_float,
    "SPEC_ID": to_str,
    "TAU_FAN": to_float,
    "TAU_VF": to_float,
    "VENT_ID": to_str,
    "VENT2_ID": to_str,
    "VOLUME_FLOW": to_float,
    "XYZ": to_xyz,
}

VENT_PARAMETERS: dict[str, Narrow] = {
    "COLOR": to_str,
    "CTRL_ID": to_str,
    "DEVC_ID": to_str,
    "DYNAMIC_PRESSURE": to_float,
    "EVACUATION": to_bool,
    "FYI": to_str,
    "ID": to_str,
    "IOR": to_int,
    "L_EDDY": to_float,
    "MB": to_str,
    "MESH_ID": to_str,
    "MULT_ID": to_str,
    "N_EDDY": to_int,
    "OUTLINE": to_bool,
    "PBX": to_float,
    "PBY": to_float,
    "PBZ": to_float,
    "PRESSURE_RAMP": to_str,
    "RADIUS": to_float,
    "RGB": to_rgb,
    "SPREAD_RATE": to_float,
    "SURF_ID": to_str,
    "TMP_EXTERIOR": to_float,
    "TMP_EXTERIOR_RAMP": to_str,
    "TRANSPARENCY": to_float,
    "UVW": to_xyz,
    "VEL_RMS": to_float,
    "XB": to_xb,
    "XYZ": to_xyz,
}

BNDF_PARAMETERS: dict[str, Narrow] = {
    "CELL_CENTERED": to_bool,
    "FYI": to_str,
    "PART_ID": to_str,
    "PROP_ID": to_str,
    "QUANTITY": to_str,
    "RECOUNT_DRIP": to_bool,
    "SPEC_ID": to_str,
    "STATISTICS": to_str,
}

ISOF_PARAMETERS: dict[str, Narrow] = {
    "FYI": to_str,
    "QUANTITY": to_str,
    "SPEC_ID": to_str,
    "VALUE": to_float_list,
    "VELO_INDEX": to_int,
}

SLCF_PARAMETERS: dict[str, Narrow] = {
    "AGL_SLICE": to_float,
    "CELL_CENTERED": to_bool,
    "EVACUATION": to_bool,
    "FYI": to_str,
    "ID": to_str,
    "MAXIMUM_VALUE": to_float,
    "MESH_NUMBER": to_int,
    "MINIMUM_VALUE": to_float,
    "PART_ID": to_str,
    "PBX": to_float,
    "PBY": to_float,
    "PBZ": to_float,
    "QUANTITY": to_str,
    "QUANTITY2": to_str,
    "REAC_ID": to_str,
    "SPEC_ID": to_str,
    "VECTOR": to_bool,
    "VELO_INDEX": to_int,
    "XB": to_xb,
}

RAMP_ENTRY_PARAMETERS: dict[str, Narrow] = {
    "CTRL_ID": to_str,
    "DEVC_ID": to_str,
    "FYI": to_str,
    "NUMBER_INTERPOLATION_POINTS": to_int,
    "T": to_float,
    "X": to_float,
    "Z": to_float,
}

PROP_PARAMETERS: dict[str, Narrow] = {
    "ACTIVATION_OBSCURATION": to_float,
    "ACTIVATION_TEMPERATURE": to_float,
    "ALPHA_C": to_float,
    "ALPHA_E": to_float,
    "BETA_C": to_float,
    "BETA_E": to_float,
    "C_FACTOR": to_float,
    "FLOW_RATE": to_float,
    "FYI": to_str,
    "ID": to_str,
    "K_FACTOR": to_float,
    "OFFSET": to_float,
    "OPERATING_PRESSURE": to_float,
    "ORIFICE_DIAMETER": to_float,
    "PART_ID": to_str,
    "PARTICLE_VELOCITY": to_float,
    "QUANTITY": to_str,
    "RTI": to_float,
    "SMOKEVIEW_ID": to_str_list,
    "SPRAY_ANGLE": to_float_list,
}

PART_PARAMETERS: dict[str, Narrow] = {
    "AGE": to_float,
    "BREAKUP": to_bool,
    "BREAKUP_CNF_RAMP_ID": to_str,
    "BREAKUP_DISTRIBUTION": to_str,
    "BREAKUP_GAMMA_D": to_float,
    "BREAKUP_RATIO": to_float,
    "BREAKUP_SIGMA_D": to_float,
    "CHECK_DISTRIBUTION": to_bool,
    "CNF_RAMP_ID": to_str,
    "COLOR": to_str,
    "COMPLEX_REFRACTIVE_INDEX": to_float,
    "CTRL_ID": to_str,
    "DENSE_VOLUME_FRACTION": to_float,
    "DEVC_ID": to_str,
    "DIAMETER": to_float,
    "DISTRIBUTION": to_str,
    "DRAG_COEFFICIENT": to_float_list,
    "DRAG_LAW": to_str,
    "FREE_AREA_FRACTION": to_float,
    "FYI": to_str,
    "GAMMA_D": to_float,
    "HEAT_OF_COMBUSTION": to_float,
    "HORIZONTAL_VELOCITY": to_float,
    "ID": to_str,
    "INITIAL_TEMPERATURE": to_float,
    "MASSLESS": to_bool,
    "MAXIMUM_DIAMETER": to_float,
    "MINIMUM_DIAMETER": to_float,
    "MONODISPERSE": to_bool,
    "N_STRATA": to_int,
    "PERIODIC_X": to_bool,
    "PERIODIC_Y": to_bool,
    "PERIODIC_Z": to_bool,
    "POROUS_VOLUME_FRACTION": to_float,
    "PROP_ID": to_str,
    "QUANTITIES": to_str_list,
    "QUANTITIES_SPEC_ID": to_str_list,
    "REAL_REFRACTIVE_INDEX": to_float,
    "RGB": to_rgb,
    "RUNNING_AVERAGE_FACTOR": to_float,
    "SAMPLING_FACTOR": to_int,
    "SECOND_ORDER_PARTICLE_TRANSPORT": to_bool,
    "SIGMA_D": to_float,
    "SPEC_ID": to_str,
    "STATIC": to_bool,
    "SURFACE_TENSION": to_float,
    "SURF_ID": to_str,
    "TARGET_ONLY": to_bool,
    "TURBULENT_DISPERSION": to_bool,
    "VERTICAL_VELOCITY": to_float,
}

TRN_PARAMETERS: dict[str, Narrow] = {
    "FYI": to_str,
    "IDERIV": to_int,
    "MESH_NUMBER": to_int,
}


def read_parameters(namelist: Namelist, parameters: dict[str, Narrow]) -> dict[str, Any]:
    """Narrow every listed parameter present in ``namelist``.

    Returns keyword arguments for a record model, keyed by the lower-cased
    parameter name. Absent parameters are left out so the model default
    applies. Parameters not listed are ignored.
    """
    values: dict[str, Any] = {}
    for name, narrow in parameters.items():
        value = optional(namelist, name, narrow)
        if value is not None:
            values[name.lower()] = value
    return values


def decode_head(namelist: Namelist) -> Head:
    return Head(**read_parameters(namelist, HEAD_PARAMETERS))


def decode_time(namelist: Namelist) -> Time:
    return Time(**read_parameters(namelist, TIME_PARAMETERS))


def decode_dump(namelist: Namelist) -> Dump:
    return Dump(**read_parameters(namelist, DUMP_PARAMETERS))


def decode_misc(namelist: Namelist) -> Misc:
    return Misc(**read_parameters(namelist, MISC_PARAMETERS))


def decode_mesh(namelist: Namelist) -> Mesh:
    return Mesh(**read_parameters(namelist, MESH_PARAMETERS))


def decode_reac(namelist: Namelist) -> Reac:
    return Reac(**read_parameters(namelist, REAC_PARAMETERS))


def decode_devc(namelist: Namelist) -> Devc:
    return Devc(**read_parameters(namelist, DEVC_PARAMETERS))


def decode_matl(namelist: Namelist) -> Matl:
    return Matl(
        id=required(namelist, "ID", to_str),
        **read_parameters(namelist, MATL_PARAMETERS),
    )


def decode_surf(namelist: Namelist) -> Surf:
    return Surf(**read_parameters(namelist, SURF_PARAMETERS))


def decode_obst(namelist: Namelist) -> Obst:
    return Obst(
        xb=required(namelist, "XB", to_xb),
        **read_parameters(namelist, OBST_PARAMETERS),
    )


def decode_hole(namelist: Namelist) -> Hole:
    return Hole(
        xb=required(namelist, "XB", to_xb),
        **read_parameters(namelist, HOLE_PARAMETERS),
    )


def decode_hvac(namelist: Namelist) -> Hvac:
    return Hvac(
        id=required(namelist, "ID", to_str),
        type_id=required(namelist, "TYPE_ID", to_str),
        **read_parameters(namelist, HVAC_PARAMETERS),
    )


def decode_vent(namelist: Namelist) -> Vent:
    return Vent(**read_parameters(namelist, VENT_PARAMETERS))


def decode_bndf(namelist: Namelist) -> Bndf:
    return Bndf(**read_parameters(namelist, BNDF_PARAMETERS))


def decode_isof(namelist: Namelist) -> Isof:
    return Isof(**read_parameters(namelist, ISOF_PARAMETERS))


def decode_slcf(namelist: Namelist) -> Slcf:
    return Slcf(**read_parameters(namelist, SLCF_PARAMETERS))


def decode_ramp(namelist: Namelist) -> Ramp:
    """Decode one RAMP group as a ramp holding a single entry.

    The document merges entries of groups that share an ID.
    """
    ramp_id = required(namelist, "ID", to_str)
    entry = RampEntry(
        f=required(namelist, "F", to_float),
        **read_parameters(namelist, RAMP_ENTRY_PARAMETERS),
    )
    return Ramp(id=ramp_id, entries=[entry])


def decode_prop(namelist: Namelist) -> Prop:
    return Prop(**read_parameters(namelist, PROP_PARAMETERS))


def decode_part(namelist: Namelist) -> Part:
    return Part(**read_parameters(namelist, PART_PARAMETERS))


def _decode_trn(namelist: Namelist, model: type) -> Any:
    return model(
        cc=required(namelist, "CC", to_float),
        pc=required(namelist, "PC", to_float),
        **read_parameters(namelist, TRN_PARAMETERS),
    )


def decode_trnx(namelist: Namelist) -> Trnx:
    return _decode_trn(namelist, Trnx)


def decode_trny(namelist: Namelist) -> Trny:
    return _decode_trn(namelist, Trny)


def decode_trnz(namelist: Namelist) -> Trnz:
    return _decode_trn(namelist, Trnz)


# Group name -> (FDSFile attribute, decoder). Singletons use the singular
# attribute; everything else appends to a list.
DECODERS: dict[str, tuple[str, Callable[[Namelist], Record]]] = {
    "HEAD": ("head", decode_head),
    "TIME": ("time", decode_time),
    "DUMP": ("dump", decode_dump),
    "MISC": ("misc", decode_misc),
    "MESH": ("meshes", decode_mesh),
    "REAC": ("reacs", decode_reac),
    "DEVC": ("devcs", decode_devc),
    "MATL": ("matls", decode_matl),
    "SURF": ("surfs", decode_surf),
    "OBST": ("obsts", decode_obst),
    "HOLE": ("holes", decode_hole),
    "HVAC": ("hvacs", decode_hvac),
    "VENT": ("vents", decode_vent),
    "BNDF": ("bndfs", decode_bndf),
    "ISOF": ("isofs", decode_isof),
    "SLCF": ("slcfs", decode_slcf),
    "RAMP": ("ramps", decode_ramp),
    "PROP": ("props", decode_prop),
    "PART": ("parts", decode_part),
    "TRNX": ("trnxs", decode_trnx),
    "TRNY": ("trnys", decode_trny),
    "TRNZ": ("trnzs", decode_trnz),
}

SINGLETON_SLOTS = frozenset({"head", "time", "dump", "misc"})


def decode_record(namelist: Namelist) -> tuple[str, Record] | None:
    """Decode a group into ``(slot, record)``, or None if the name is unknown.

    Group names are matched case-sensitively.
    """
    entry = DECODERS.get(namelist.name)
    if entry is None:
        return None
    slot, decoder = entry
    return slot, decoder(namelist)

"""Pydantic v2 record models, one per recognized FDS namelist group.

Field names are the lower-cased FDS parameter names. Field defaults are the
values FDS itself assumes when a parameter is omitted; parameters with no
universal default are ``None``.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from fdsdecode.geometry import IJK, RGB, XB, XYZ


class Head(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    chid: str | None = None
    fyi: str | None = None
    title: str | None = None


class Time(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    dt: float | None = None
    fyi: str | None = None
    limiting_dt_ratio: float = 1e-4
    lock_time_step: bool = False
    restrict_time_step: bool = True
    t_begin: float = 0.0
    t_end: float = 1.0
    time_shrink_factor: float = 1.0
    wall_increment: int = 2


class Dump(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    clip_restart_files: bool = True
    column_dump_limit: bool = False
    ctrl_column_limit: int = 254
    devc_column_limit: int = 254
    dt_bndf: float | None = None
    dt_ctrl: float | None = None
    dt_devc: float | None = None
    dt_hrr: float | None = None
    dt_isof: float | None = None
    dt_mass: float | None = None
    dt_part: float | None = None
    dt_pl3d: float | None = None
    dt_prof: float | None = None
    dt_restart: float = 1000000.0
    dt_sl3d: float | None = None
    dt_slcf: float | None = None
    flush_file_buffers: bool = True
    mass_file: bool = False
    maximum_particles: int = 1000000
    nframes: int = 1000
    plot3d_quantity: list[str] = []
    render_file: str | None = None
    sig_figs: int = 8
    sig_figs_exp: int = 3
    smoke3d: bool = True
    smoke3d_quantity: str | None = None
    status_files: bool = False
    suppress_diagnostics: bool = False
    write_xyz: bool = False


class Misc(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_surface_particles: bool = False
    allow_underside_particles: bool = False
    bndf_default: bool = True
    cfl_max: float = 1.0
    cfl_min: float = 0.8
    check_ht: bool = False
    check_vn: bool = True
    dns: bool = False
    fyi: str | None = None
    gvec: XYZ = XYZ(x=0.0, y=0.0, z=-9.81)
    humidity: float = 40.0
    maximum_visibility: float = 30.0
    noise: bool = True
    p_inf: float = 101325.0
    restart: bool = False
    restart_chid: str | None = None
    solid_phase_only: bool = False
    stratification: bool = True
    suppression: bool = True
    tmpa: float = 20.0
    turbulence_model: str = "DEARDORFF"
    visibility_factor: float = 3.0


class Mesh(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str | None = None
    xb: XB = XB(x1=0.0, x2=1.0, y1=0.0, y2=1.0, z1=0.0, z2=1.0)
    ijk: IJK = IJK(i=10, j=10, k=10)
    color: str = "BLACK"
    cylindrical: bool = False
    evacuation: bool = False
    evac_humans: bool = False
    evac_z_offset: float = 1.0
    fyi: str | None = None
    level: int = 1
    mpi_process: int | None = None
    mult_id: str | None = None
    n_threads: int | None = None
    rgb: RGB = RGB(r=0, g=0, b=0)

    def try_xb(self) -> XB:
        return self.xb

    def cells(self) -> int:
        return self.ijk.i * self.ijk.j * self.ijk.k

    def dimensions(self) -> tuple[float, float, float]:
        xb = self.xb
        return (xb.x2 - xb.x1, xb.y2 - xb.y1, xb.z2 - xb.z1)

    def resolution(self) -> tuple[float, float, float]:
        """Cell size along each axis."""
        dx, dy, dz = self.dimensions()
        return (dx / float(self.ijk.i), dy / float(self.ijk.j), dz / float(self.ijk.k))


class Reac(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    a: float | None = None
    auto_ignition_temperature: float = -273.0
    c: float = 0.0
    check_atom_balance: bool = True
    co_yield: float = 0.0
    critical_flame_temperature: float = 1427.0
    e: float | None = None
    epumo2: float = 13100.0
    equation: str | None = None
    formula: str | None = None
    fuel: str | None = None
    fuel_radcal_id: str | None = None
    fyi: str | None = None
    h: float = 0.0
    heat_of_combustion: float | None = None
    id: str | None = None
    ideal: bool = False
    n: float = 0.0
    nu: list[float] = []
    o: float = 0.0
    radiative_fraction: float = 0.35
    ramp_chi_r: str | None = None
    soot_h_fraction: float = 0.1
    soot_yield: float = 0.0
    spec_id_nu: list[str] = []


class Devc(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    conversion_addend: float = 0.0
    conversion_factor: float = 1.0
    ctrl_id: str | None = None
    delay: float = 0.0
    devc_id: str | None = None
    duct_id: str | None = None
    fyi: str | None = None
    hide_coordinates: bool = False
    id: str | None = None
    initial_state: bool = False
    ior: int | None = None
    latch: bool = True
    matl_id: str | None = None
    node_id: list[str] = []
    orientation: XYZ = XYZ(x=0.0, y=0.0, z=-1.0)
    output: bool = True
    part_id: str | None = None
    points: int = 1
    prop_id: str | None = None
    quantity: str | None = None
    quantity2: str | None = None
    quantity_range: tuple[float, float] = (-1e50, 1e50)
    reac_id: str | None = None
    relative: bool = False
    rotation: float = 0.0
    setpoint: float | None = None
    smoothing_factor: float = 0.0
    spec_id: str | None = None
    statistics: str | None = None
    statistics_start: float | None = None
    surf_id: str | None = None
    time_averaged: bool = True
    time_history: bool = False
    trip_direction: int = 1
    units: str | None = None
    velo_index: int = 0
    xb: XB | None = None
    xyz: XYZ | None = None

    def try_xb(self) -> XB | None:
        return self.xb


class Matl(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    a: list[float] = []
    absorption_coefficient: float = 50000.0
    allow_shrinking: bool = True
    allow_swelling: bool = True
    boiling_temperature: float = 5000.0
    color: str | None = None
    conductivity: float = 0.0
    conductivity_ramp: str | None = None
    density: float = 0.0
    e: list[float] = []
    emissivity: float = 0.9
    fyi: str | None = None
    heat_of_combustion: list[float] = []
    heat_of_reaction: list[float] = []
    heating_rate: list[float] = []
    matl_id: list[str] = []
    n_reactions: int = 0
    n_s: list[float] = []
    nu_matl: list[float] = []
    nu_spec: list[float] = []
    pcr: list[bool] = []
    pyrolysis_range: list[float] = []
    reference_rate: list[float] = []
    reference_temperature: list[float] = []
    rgb: RGB | None = None
    spec_id: list[str] = []
    specific_heat: float = 0.0
    specific_heat_ramp: str | None = None


class Surf(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    adiabatic: bool = False
    auto_ignition_temperature: float = -273.0
    backing: str = "EXPOSED"
    burn_away: bool = False
    c_forced_constant: float = 0.0
    c_forced_pr_exp: float = 0.0
    c_forced_re: float = 0.0
    c_forced_re_exp: float = 0.0
    c_horizontal: float = 1.52
    c_vertical: float = 1.31
    cell_size_factor: float = 1.0
    color: str | None = None
    convective_heat_flux: float | None = None
    default: bool = False
    emissivity: float = 0.9
    external_flux: float | None = None
    free_slip: bool = False
    fyi: str | None = None
    geometry: str = "CARTESIAN"
    heat_of_vaporization: float | None = None
    hrrpua: float | None = None
    id: str | None = None
    ignition_temperature: float = 5000.0
    mass_flux_total: float | None = None
    mass_flux_var: float | None = None
    matl_id: list[str] = []
    matl_mass_fraction: list[float] = []
    mlrpua: float | None = None
    net_heat_flux: float | None = None
    no_slip: bool = False
    part_id: str | None = None
    ramp_q: str | None = None
    ramp_t: str | None = None
    rgb: RGB = RGB(r=255, g=204, b=102)
    tau_q: float = 1.0
    tau_t: float = 1.0
    thickness: list[float] = []
    tmp_front: float | None = None
    transparency: float = 1.0
    vel: float | None = None
    vel_t: tuple[float, float] | None = None
    volume_flow: float | None = None


class Obst(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    xb: XB
    allow_vent: bool = True
    bndf_obst: bool = True
    bulk_density: float | None = None
    color: str | None = None
    ctrl_id: str | None = None
    devc_id: str | None = None
    evacuation: bool = False
    fyi: str | None = None
    id: str | None = None
    matl_id: str | None = None
    mesh_id: str | None = None
    mult_id: str | None = None
    outline: bool = False
    overlay: bool = True
    permit_hole: bool = True
    prop_id: str | None = None
    removable: bool = True
    rgb: RGB | None = None
    surf_id: str | None = None
    surf_id6: tuple[str, str, str, str, str, str] | None = None
    surf_ids: tuple[str, str, str] | None = None
    texture_origin: XYZ | None = None
    thicken: bool = False
    transparency: float = 1.0

    def try_xb(self) -> XB:
        return self.xb


class Hole(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    xb: XB
    color: str | None = None
    ctrl_id: str | None = None
    devc_id: str | None = None
    evacuation: bool = False
    fyi: str | None = None
    id: str | None = None
    mesh_id: str | None = None
    mult_id: str | None = None
    rgb: RGB | None = None
    transparency: float = 1.0

    def try_xb(self) -> XB:
        return self.xb


class Hvac(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    type_id: str
    aircoil_id: str | None = None
    ambient: bool = False
    area: float | None = None
    clean_loss: float | None = None
    ctrl_id: str | None = None
    damper: bool = False
    devc_id: str | None = None
    diameter: float | None = None
    duct_id: list[str] = []
    efficiency: list[float] = []
    fan_id: str | None = None
    filter_id: str | None = None
    fyi: str | None = None
    leak_enthalpy: bool = False
    length: float | None = None
    loss: list[float] = []
    mass_flow: float | None = None
    max_flow: float | None = None
    max_pressure: float | None = None
    n_cells: int = 10
    node_id: list[str] = []
    perimeter: float | None = None
    ramp_id: str | None = None
    ramp_loss: str | None = None
    reverse: bool = False
    roughness: float = 0.0
    spec_id: str | None = None
    tau_fan: float = 1.0
    tau_vf: float = 1.0
    vent_id: str | None = None
    vent2_id: str | None = None
    volume_flow: float | None = None
    xyz: XYZ | None = None


class Vent(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    color: str | None = None
    ctrl_id: str | None = None
    devc_id: str | None = None
    dynamic_pressure: float = 0.0
    evacuation: bool = False
    fyi: str | None = None
    id: str | None = None
    ior: int | None = None
    l_eddy: float = 0.0
    mb: str | None = None
    mesh_id: str | None = None
    mult_id: str | None = None
    n_eddy: int = 0
    outline: bool = False
    pbx: float | None = None
    pby: float | None = None
    pbz: float | None = None
    pressure_ramp: str | None = None
    radius: float | None = None
    rgb: RGB | None = None
    spread_rate: float | None = None
    surf_id: str | None = None
    tmp_exterior: float | None = None
    tmp_exterior_ramp: str | None = None
    transparency: float = 1.0
    uvw: XYZ | None = None
    vel_rms: float = 0.0
    xb: XB | None = None
    xyz: XYZ | None = None

    def try_xb(self) -> XB | None:
        return self.xb


class Bndf(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    cell_centered: bool = False
    fyi: str | None = None
    part_id: str | None = None
    prop_id: str | None = None
    quantity: str | None = None
    recount_drip: bool = False
    spec_id: str | None = None
    statistics: str | None = None


class Isof(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    fyi: str | None = None
    quantity: str | None = None
    spec_id: str | None = None
    value: list[float] = []
    velo_index: int = 0


class Slcf(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    agl_slice: float | None = None
    cell_centered: bool = False
    evacuation: bool = False
    fyi: str | None = None
    id: str | None = None
    maximum_value: float | None = None
    mesh_number: int | None = None
    minimum_value: float | None = None
    part_id: str | None = None
    pbx: float | None = None
    pby: float | None = None
    pbz: float | None = None
    quantity: str | None = None
    quantity2: str | None = None
    reac_id: str | None = None
    spec_id: str | None = None
    vector: bool = False
    velo_index: int = 0
    xb: XB | None = None

    def try_xb(self) -> XB | None:
        return self.xb


class RampEntry(BaseModel):
    """One ``&RAMP`` line: a single (T or X or Z, F) point of a ramp."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    f: float
    ctrl_id: str | None = None
    devc_id: str | None = None
    fyi: str | None = None
    number_interpolation_points: int = 5000
    t: float | None = None
    x: float | None = None
    z: float | None = None


class Ramp(BaseModel):
    """All entries sharing one ramp ID, in input order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    entries: list[RampEntry] = []


class Prop(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    activation_obscuration: float = 3.24
    activation_temperature: float = 74.0
    alpha_c: float = 1.8
    alpha_e: float = 0.0
    beta_c: float = 1.0
    beta_e: float = 0.0
    c_factor: float = 0.0
    flow_rate: float | None = None
    fyi: str | None = None
    id: str | None = None
    k_factor: float = 1.0
    offset: float = 0.05
    operating_pressure: float = 1.0
    orifice_diameter: float = 0.0
    part_id: str | None = None
    particle_velocity: float = 0.0
    quantity: str | None = None
    rti: float = 100.0
    smokeview_id: list[str] = []
    spray_angle: list[float] = []


class Part(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    age: float = 1e5
    breakup: bool = False
    breakup_cnf_ramp_id: str | None = None
    breakup_distribution: str = "ROSIN-RAMMLER-LOGNORMAL"
    breakup_gamma_d: float = 2.4
    breakup_ratio: float = 3.0 / 7.0
    breakup_sigma_d: float | None = None
    check_distribution: bool = False
    cnf_ramp_id: str | None = None
    color: str = "BLACK"
    complex_refractive_index: float = 0.01
    ctrl_id: str | None = None
    dense_volume_fraction: float = 1e-5
    devc_id: str | None = None
    diameter: float | None = None
    distribution: str = "ROSIN-RAMMLER-LOGNORMAL"
    drag_coefficient: list[float] = []
    drag_law: str = "SPHERE"
    free_area_fraction: float | None = None
    fyi: str | None = None
    gamma_d: float = 2.4
    heat_of_combustion: float | None = None
    horizontal_velocity: float = 0.2
    id: str | None = None
    initial_temperature: float | None = None
    massless: bool = False
    maximum_diameter: float = math.inf
    minimum_diameter: float = 20.0
    monodisperse: bool = False
    n_strata: int = 6
    periodic_x: bool = False
    periodic_y: bool = False
    periodic_z: bool = False
    porous_volume_fraction: float | None = None
    prop_id: str | None = None
    quantities: list[str] = []
    quantities_spec_id: list[str] = []
    real_refractive_index: float = 1.33
    rgb: RGB | None = None
    running_average_factor: float = 0.5
    sampling_factor: int = 1
    second_order_particle_transport: bool = False
    sigma_d: float | None = None
    spec_id: str | None = None
    static: bool = False
    surface_tension: float = 7.28e-2
    surf_id: str | None = None
    target_only: bool = False
    turbulent_dispersion: bool = False
    vertical_velocity: float = 0.5


class _GridTransformation(BaseModel):
    """Shared shape of the TRNX/TRNY/TRNZ mesh-stretching groups."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cc: float
    pc: float
    fyi: str | None = None
    ideriv: int = 0
    mesh_number: int = 1


class Trnx(_GridTransformation):
    pass


class Trny(_GridTransformation):
    pass


class Trnz(_GridTransformation):
    pass

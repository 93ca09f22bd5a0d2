"""Engine design pipeline for Oilfire.

:func:`design_engine` turns a :class:`DesignRequest` (imperial inputs)
into a :class:`DesignResult` (SI outputs).  The stages run in a fixed
order, each using only the request, the static tables and earlier stage
results:

1. combustion and propellant flows
2. nozzle throat and exit
3. chamber volume, diameter, length and wall
4. cooling jacket
5. injector orifices
6. SI conversion and nozzle cone lengths

The pipeline is a pure function of its request.  Persisting a result is
left to an optional sink (see :mod:`oilfire.core.records`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Iterator

from oilfire.core.chamber import size_chamber
from oilfire.core.cooling import size_cooling_jacket
from oilfire.core.fuels import Fuel, get_fuel_profile
from oilfire.core.injector import size_injector
from oilfire.core.nozzle import convergent_length, divergent_length, size_nozzle
from oilfire.core.thermo import compute_combustion
from oilfire.utils.units import (
    btu_s_to_w,
    ft2_to_m2,
    ft3_to_m3,
    ft_to_mm,
    in_to_mm,
    lbm_s_to_kg_s,
    psi_to_pa,
    rankine_to_kelvin,
)
from oilfire.utils.validation import InvalidDesignRequest, validate_design_request

if TYPE_CHECKING:
    from oilfire.core.records import ResultSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignRequest:
    """Top-level engine requirements.

    Defaults reproduce the reference 200 lbf GOX/gasoline engine.  *fuel*
    may also be given as a :class:`~oilfire.core.fuels.Fuel` member; it is
    stored as its string identifier.
    """

    fuel: str = "gasoline"
    thrust: float = 200.0  # lbf
    chamber_pressure: float = 500.0  # psi
    mixture_ratio: float = 2.5  # O/F
    l_star: float = 60.0  # in
    coolant_velocity: float = 30.0  # ft/s
    fuel_holes: int = 12
    oxidizer_holes: int = 12
    contraction_ratio: float = 3.0  # Dc/Dt

    def __post_init__(self) -> None:
        if isinstance(self.fuel, Fuel):
            object.__setattr__(self, "fuel", self.fuel.value)


def _si(unit: str):
    return field(metadata={"unit": unit})


@dataclass(frozen=True)
class DesignResult:
    """Dimensioned engine design, SI units.

    Every field carries its unit in the dataclass field metadata; the
    field order is the order results are reported and persisted in.
    """

    total_propellant_flow_rate: float = _si("kg/s")
    fuel_flow_rate: float = _si("kg/s")
    oxidizer_flow_rate: float = _si("kg/s")
    chamber_temperature: float = _si("K")
    throat_temperature: float = _si("K")
    throat_pressure: float = _si("Pa")
    throat_area: float = _si("m^2")
    throat_diameter: float = _si("mm")
    exit_area: float = _si("m^2")
    exit_diameter: float = _si("mm")
    chamber_volume: float = _si("m^3")
    chamber_diameter: float = _si("mm")
    chamber_area: float = _si("m^2")
    chamber_length: float = _si("mm")
    wall_thickness: float = _si("mm")
    heat_transfer_area: float = _si("m^2")
    total_heat_transfer: float = _si("W")
    coolant_flow_rate: float = _si("kg/s")
    inner_coolant_diameter: float = _si("mm")
    outer_coolant_diameter: float = _si("mm")
    coolant_gap: float = _si("mm")
    fuel_flow_area: float = _si("m^2")
    fuel_hole_area: float = _si("m^2")
    fuel_hole_diameter: float = _si("mm")
    oxidizer_flow_area: float = _si("m^2")
    oxidizer_hole_area: float = _si("m^2")
    oxidizer_hole_diameter: float = _si("mm")
    specific_impulse: float = _si("s")
    convergent_length: float = _si("mm")
    divergent_length: float = _si("mm")

    @classmethod
    def units(cls) -> dict[str, str]:
        """Field name -> SI unit."""
        return {f.name: f.metadata["unit"] for f in fields(cls)}

    def items(self) -> Iterator[tuple[str, float, str]]:
        """Yield ``(name, value, unit)`` in field order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name), f.metadata["unit"]

    def as_dict(self) -> dict[str, float]:
        """Flat mapping keyed ``<name>_<unit>``."""
        return {f"{name}_{unit}": value for name, value, unit in self.items()}


def design_engine(request: DesignRequest, sink: ResultSink | None = None) -> DesignResult:
    """Size a complete engine from top-level requirements.

    Args:
        request: Engine requirements (imperial units).
        sink: Optional persistence target, called once with the result.

    Returns:
        DesignResult with every field populated.

    Raises:
        InvalidDesignRequest: If the request fails validation; no stage
            runs in that case.
    """
    check = validate_design_request(request)
    if not check.is_valid:
        raise InvalidDesignRequest(check)
    for msg in check.warnings:
        # unknown fuels are reported by the resolver below
        if msg.parameter != "fuel":
            logger.warning("%s", msg.message)
    profile = get_fuel_profile(request.fuel)

    comb = compute_combustion(
        profile, request.thrust, request.chamber_pressure, request.mixture_ratio
    )
    noz = size_nozzle(comb.total_flow, comb.chamber_temperature, request.chamber_pressure)
    ch = size_chamber(
        noz.throat_area,
        noz.throat_diameter,
        request.l_star,
        request.contraction_ratio,
        request.chamber_pressure,
    )
    jacket = size_cooling_jacket(ch, request.coolant_velocity)
    inj = size_injector(
        comb.fuel_flow,
        comb.oxidizer_flow,
        profile.density,
        request.fuel_holes,
        request.oxidizer_holes,
    )

    throat_d_mm = ft_to_mm(noz.throat_diameter)
    exit_d_mm = ft_to_mm(noz.exit_diameter)
    chamber_d_mm = ft_to_mm(ch.diameter)

    result = DesignResult(
        total_propellant_flow_rate=lbm_s_to_kg_s(comb.total_flow),
        fuel_flow_rate=lbm_s_to_kg_s(comb.fuel_flow),
        oxidizer_flow_rate=lbm_s_to_kg_s(comb.oxidizer_flow),
        chamber_temperature=rankine_to_kelvin(comb.chamber_temperature),
        throat_temperature=rankine_to_kelvin(noz.throat_temperature),
        throat_pressure=psi_to_pa(noz.throat_pressure),
        throat_area=ft2_to_m2(noz.throat_area),
        throat_diameter=throat_d_mm,
        exit_area=ft2_to_m2(noz.exit_area),
        exit_diameter=exit_d_mm,
        chamber_volume=ft3_to_m3(ch.volume),
        chamber_diameter=chamber_d_mm,
        chamber_area=ft2_to_m2(ch.area),
        chamber_length=ft_to_mm(ch.length),
        wall_thickness=in_to_mm(ch.wall_thickness),
        heat_transfer_area=ft2_to_m2(jacket.heat_transfer_area),
        total_heat_transfer=btu_s_to_w(jacket.total_heat),
        coolant_flow_rate=lbm_s_to_kg_s(jacket.coolant_flow),
        inner_coolant_diameter=in_to_mm(jacket.inner_diameter),
        outer_coolant_diameter=in_to_mm(jacket.outer_diameter),
        coolant_gap=in_to_mm(jacket.gap),
        fuel_flow_area=ft2_to_m2(inj.fuel.flow_area),
        fuel_hole_area=ft2_to_m2(inj.fuel.hole_area),
        fuel_hole_diameter=ft_to_mm(inj.fuel.hole_diameter),
        oxidizer_flow_area=ft2_to_m2(inj.oxidizer.flow_area),
        oxidizer_hole_area=ft2_to_m2(inj.oxidizer.hole_area),
        oxidizer_hole_diameter=ft_to_mm(inj.oxidizer.hole_diameter),
        specific_impulse=comb.specific_impulse,
        convergent_length=convergent_length(chamber_d_mm, throat_d_mm),
        divergent_length=divergent_length(exit_d_mm, throat_d_mm),
    )

    logger.debug(
        "Designed %s engine: F=%s lbf, Pc=%s psi, Dt=%.2f mm",
        profile.name,
        request.thrust,
        request.chamber_pressure,
        result.throat_diameter,
    )

    if sink is not None:
        sink.write(request, result)
    return result

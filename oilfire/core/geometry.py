"""Geometry hand-off for Oilfire.

A solid modeller builds three parts from a
:class:`~oilfire.core.design.DesignResult`: the chamber/nozzle body, the
injector face and the flange joining them.  For the body this module
extracts seven dimensions and lays out the axisymmetric wall profile: a
cylindrical chamber followed by conical convergent and divergent
sections, with a constant wall thickness.  The injector face sits at
x = 0 and the nozzle extends towards +x.  All lengths in millimetres.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from oilfire.core.design import DesignResult
from oilfire.utils.constants import (
    FLANGE_BOLT_COUNT,
    FLANGE_BOLT_DIAMETER,
    FLANGE_DRILL_SPACE,
    FLANGE_GROOVE_DEPTH,
    FLANGE_GROOVE_WIDTH,
    FUEL_MANIFOLD_HEIGHT,
    FUEL_RING_FRACTION,
    OXIDIZER_MANIFOLD_HEIGHT,
    OXIDIZER_RING_FRACTION,
)


@dataclass(frozen=True)
class GeometryInputs:
    """Dimensions consumed by the geometry builder [mm]."""

    chamber_diameter: float
    throat_diameter: float
    exit_diameter: float
    chamber_length: float
    convergent_length: float
    divergent_length: float
    wall_thickness: float

    @classmethod
    def from_result(cls, result: DesignResult) -> GeometryInputs:
        return cls(
            chamber_diameter=result.chamber_diameter,
            throat_diameter=result.throat_diameter,
            exit_diameter=result.exit_diameter,
            chamber_length=result.chamber_length,
            convergent_length=result.convergent_length,
            divergent_length=result.divergent_length,
            wall_thickness=result.wall_thickness,
        )


@dataclass(frozen=True)
class EngineProfile:
    """Axial stations and wall radii of the chamber/nozzle body [mm]."""

    length_to_chamber_end: float
    length_to_throat: float
    length_to_exit: float
    chamber_inner_radius: float
    chamber_outer_radius: float
    throat_inner_radius: float
    throat_outer_radius: float
    exit_inner_radius: float
    exit_outer_radius: float


def engine_profile(inputs: GeometryInputs) -> EngineProfile:
    """Derive stations and radii from the builder inputs."""
    l_chamber = inputs.chamber_length
    l_throat = l_chamber + inputs.convergent_length
    l_exit = l_throat + inputs.divergent_length
    t = inputs.wall_thickness
    rc = inputs.chamber_diameter / 2.0
    rt = inputs.throat_diameter / 2.0
    re = inputs.exit_diameter / 2.0
    return EngineProfile(
        length_to_chamber_end=l_chamber,
        length_to_throat=l_throat,
        length_to_exit=l_exit,
        chamber_inner_radius=rc,
        chamber_outer_radius=rc + t,
        throat_inner_radius=rt,
        throat_outer_radius=rt + t,
        exit_inner_radius=re,
        exit_outer_radius=re + t,
    )


def profile_contour(profile: EngineProfile) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Inner and outer wall polylines.

    Returns:
        ``(x, r_inner, r_outer)`` arrays at the four stations: injector
        face, chamber end, throat, exit.
    """
    x = np.array(
        [0.0, profile.length_to_chamber_end, profile.length_to_throat, profile.length_to_exit]
    )
    r_inner = np.array(
        [
            profile.chamber_inner_radius,
            profile.chamber_inner_radius,
            profile.throat_inner_radius,
            profile.exit_inner_radius,
        ]
    )
    r_outer = np.array(
        [
            profile.chamber_outer_radius,
            profile.chamber_outer_radius,
            profile.throat_outer_radius,
            profile.exit_outer_radius,
        ]
    )
    return x, r_inner, r_outer


def wall_volume(profile: EngineProfile) -> float:
    """Volume of wall material [mm³] between the outer and inner profiles.

    Each section is a conical frustum; the wall is the outer frustum
    minus the inner one.
    """
    x, r_in, r_out = profile_contour(profile)
    dx = np.diff(x)

    def frustums(r: np.ndarray) -> float:
        r1, r2 = r[:-1], r[1:]
        return float(np.sum(np.pi * dx / 3.0 * (r1**2 + r1 * r2 + r2**2)))

    return frustums(r_out) - frustums(r_in)


def hole_angles(count: int) -> np.ndarray:
    """Angular positions [deg] of *count* holes evenly spaced on a circle."""
    if count <= 0:
        raise ValueError(f"Hole count must be positive, got {count}")
    return np.linspace(0.0, 360.0, count, endpoint=False)


def hole_centres(radius: float, angles: np.ndarray) -> np.ndarray:
    """(x, y) centres of holes on a circle of *radius*, shape ``(n, 2)``."""
    theta = np.radians(angles)
    return np.column_stack((radius * np.cos(theta), radius * np.sin(theta)))


# --- Injector face ---


@dataclass(frozen=True)
class InjectorLayout:
    """Injector face plate and hole pattern [mm].

    Oxidizer holes sit on the inner circle and fuel holes on the outer
    one.  The plate is one wall thickness deep; the fuel manifold wall
    runs around the plate rim and the oxidizer manifold wall encloses
    the oxidizer circle.
    """

    face_radius: float
    plate_thickness: float
    oxidizer_ring_radius: float
    fuel_ring_radius: float
    oxidizer_hole_radius: float
    fuel_hole_radius: float
    oxidizer_angles: np.ndarray
    fuel_angles: np.ndarray
    fuel_manifold_height: float
    oxidizer_manifold_height: float

    @property
    def oxidizer_manifold_radius(self) -> float:
        """Inner radius of the oxidizer manifold wall."""
        return self.oxidizer_ring_radius + self.oxidizer_hole_radius

    @property
    def oxidizer_centres(self) -> np.ndarray:
        return hole_centres(self.oxidizer_ring_radius, self.oxidizer_angles)

    @property
    def fuel_centres(self) -> np.ndarray:
        return hole_centres(self.fuel_ring_radius, self.fuel_angles)


def injector_layout(result: DesignResult, fuel_holes: int, oxidizer_holes: int) -> InjectorLayout:
    """Lay out the injector face for a finished design.

    The face covers the chamber bore plus the wall; hole sizes come from
    the injector stage of *result*.

    Raises:
        ValueError: If either hole count is not positive.
    """
    radius = result.chamber_diameter / 2.0 + result.wall_thickness
    return InjectorLayout(
        face_radius=radius,
        plate_thickness=result.wall_thickness,
        oxidizer_ring_radius=OXIDIZER_RING_FRACTION * radius,
        fuel_ring_radius=FUEL_RING_FRACTION * radius,
        oxidizer_hole_radius=result.oxidizer_hole_diameter / 2.0,
        fuel_hole_radius=result.fuel_hole_diameter / 2.0,
        oxidizer_angles=hole_angles(oxidizer_holes),
        fuel_angles=hole_angles(fuel_holes),
        fuel_manifold_height=FUEL_MANIFOLD_HEIGHT,
        oxidizer_manifold_height=OXIDIZER_MANIFOLD_HEIGHT,
    )


# --- Flange ---


@dataclass(frozen=True)
class FlangeLayout:
    """Bolted flange between chamber and injector [mm].

    The chamber-side half carries an O-ring groove cut into its face;
    the injector-side half is flat.
    """

    bore_radius: float
    groove_radius: float
    outer_radius: float
    groove_depth: float
    depth_with_groove: float
    depth_without_groove: float
    bolt_circle_radius: float
    bolt_radius: float
    bolt_angles: np.ndarray

    @property
    def bolt_centres(self) -> np.ndarray:
        return hole_centres(self.bolt_circle_radius, self.bolt_angles)


def flange_layout(
    result: DesignResult,
    bolt_count: int = FLANGE_BOLT_COUNT,
    bolt_diameter: float = FLANGE_BOLT_DIAMETER,
) -> FlangeLayout:
    """Lay out the flange for a finished design.

    Bolts sit midway across the drill band outside the groove.
    """
    bore = result.chamber_diameter / 2.0
    t = result.wall_thickness
    groove = bore + t + FLANGE_GROOVE_WIDTH
    outer = groove + FLANGE_DRILL_SPACE
    return FlangeLayout(
        bore_radius=bore,
        groove_radius=groove,
        outer_radius=outer,
        groove_depth=FLANGE_GROOVE_DEPTH,
        depth_with_groove=FLANGE_GROOVE_DEPTH + t,
        depth_without_groove=t,
        bolt_circle_radius=(groove + outer) / 2.0,
        bolt_radius=bolt_diameter / 2.0,
        bolt_angles=hole_angles(bolt_count),
    )

"""Design request validation for Oilfire."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from oilfire.core.fuels import AREA_RATIO_TABLE, DEFAULT_FUEL, get_fuel_profile, is_known_fuel
from oilfire.utils.interpolation import in_table_range

if TYPE_CHECKING:
    from oilfire.core.design import DesignRequest


class Severity(Enum):
    """Severity level for validation messages."""

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)



class InvalidDesignRequest(ValueError):
    """Raised when a design request fails validation.

    The full :class:`ValidationResult` is kept on ``result`` so callers can
    report every finding, not just the first.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        detail = "; ".join(m.message for m in result.errors)
        super().__init__(f"Invalid design request: {detail}")


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is finite and strictly positive."""
    if not math.isfinite(value) or value <= 0:
        result.error(name, f"{name} must be finite and positive, got {value}", value=value, limit=0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
    note: str = "",
) -> None:
    """Validate that a value falls within [low, high].

    *note* is appended to the message, e.g. to say what happens instead.
    """
    if value < low or value > high:
        message = f"{name} = {value} is outside [{low}, {high}]"
        if note:
            message += f", {note}"
        result.add(
            severity,
            name,
            message,
            value=value,
            limit=(low, high),
        )


def validate_hole_count(name: str, value: Any, result: ValidationResult) -> None:
    """Validate that an injector hole count is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        result.error(name, f"{name} must be an integer, got {value!r}", value=value)
    elif value <= 0:
        result.error(name, f"{name} must be at least 1, got {value}", value=value, limit=1)


def validate_design_request(request: DesignRequest) -> ValidationResult:
    """Run validation checks on a design request.

    Errors mark requests the pipeline cannot evaluate (non-physical or
    zero inputs).  Warnings mark requests that evaluate but fall outside
    the tabulated fuel data, where table lookups clamp to the nearest
    endpoint.
    """
    result = ValidationResult()

    validate_positive("thrust", request.thrust, result)
    validate_positive("chamber_pressure", request.chamber_pressure, result)
    validate_positive("l_star", request.l_star, result)
    validate_positive("coolant_velocity", request.coolant_velocity, result)
    validate_hole_count("fuel_holes", request.fuel_holes, result)
    validate_hole_count("oxidizer_holes", request.oxidizer_holes, result)

    if not math.isfinite(request.mixture_ratio) or request.mixture_ratio <= -1.0:
        result.error(
            "mixture_ratio",
            f"mixture_ratio must be finite and greater than -1, got {request.mixture_ratio}",
            value=request.mixture_ratio,
            limit=-1.0,
        )

    if not math.isfinite(request.contraction_ratio) or request.contraction_ratio <= 1.0:
        result.error(
            "contraction_ratio",
            f"contraction_ratio must be finite and greater than 1, got {request.contraction_ratio}",
            value=request.contraction_ratio,
            limit=1.0,
        )

    fuel = request.fuel
    if not is_known_fuel(fuel):
        result.warning(
            "fuel",
            f"Unknown fuel '{fuel}', {DEFAULT_FUEL.value} data will be used",
            value=fuel,
        )
        fuel = DEFAULT_FUEL

    profile = get_fuel_profile(fuel)
    envelope = (
        ("mixture_ratio", request.mixture_ratio, profile.flame_temperature, "flame temperature"),
        ("chamber_pressure", request.chamber_pressure, profile.specific_impulse, "specific impulse"),
        ("chamber_pressure", request.chamber_pressure, AREA_RATIO_TABLE, "area ratio"),
    )
    for name, value, table, quantity in envelope:
        if not in_table_range(table, value):
            validate_range(
                name,
                value,
                table[0][0],
                table[-1][0],
                result,
                Severity.WARNING,
                note=f"{quantity} clamped",
            )

    return result

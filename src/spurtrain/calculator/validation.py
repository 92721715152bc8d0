"""
Spur Gear Calculator - Validation Rules

Checks gear parameters against the stock tables. Out-of-range values are
never fatal: each one is replaced by its default, logged at WARNING level and
recorded as a ValidationMessage so callers can inspect what was changed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from .constants import (
    VALID_DIAMETRAL_PITCHES,
    VALID_PRESSURE_ANGLES_DEG,
    DEFAULT_DIAMETRAL_PITCH,
    DEFAULT_NUMBER_OF_TEETH,
    DEFAULT_PRESSURE_ANGLE_DEG,
)
from .core import is_valid_pitch, is_valid_teeth, is_valid_pressure_angle, valid_teeth_for

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]

    @property
    def codes(self) -> List[str]:
        return [m.code for m in self.messages]


class GearParameters(NamedTuple):
    """Effective (validated) gear parameters"""
    diametral_pitch: int
    number_of_teeth: int
    pressure_angle: float


def _format_choices(values) -> str:
    return ", ".join(str(v) for v in sorted(values))


def _validate_pitch(pitch: int) -> Tuple[int, List[ValidationMessage]]:
    if is_valid_pitch(pitch):
        return int(pitch), []

    logger.warning(
        f"Invalid diametral pitch {pitch!r}, using default {DEFAULT_DIAMETRAL_PITCH}"
    )
    return DEFAULT_DIAMETRAL_PITCH, [ValidationMessage(
        severity=Severity.WARNING,
        code="PITCH_NOT_STANDARD",
        message=f"Diametral pitch {pitch!r} is not a stock pitch; "
                f"using {DEFAULT_DIAMETRAL_PITCH}",
        suggestion=f"Use one of: {_format_choices(VALID_DIAMETRAL_PITCHES)}"
    )]


def _validate_teeth(pitch: int, teeth: int) -> Tuple[int, List[ValidationMessage]]:
    """Check tooth count against the table for the (already validated) pitch."""
    if is_valid_teeth(pitch, teeth):
        return int(teeth), []

    logger.warning(
        f"Invalid number of teeth {teeth!r} for pitch {pitch}, "
        f"using default {DEFAULT_NUMBER_OF_TEETH}"
    )
    return DEFAULT_NUMBER_OF_TEETH, [ValidationMessage(
        severity=Severity.WARNING,
        code="TEETH_NOT_STANDARD",
        message=f"{teeth!r} teeth is not stocked at {pitch} DP; "
                f"using {DEFAULT_NUMBER_OF_TEETH}",
        suggestion=f"Use one of: {_format_choices(valid_teeth_for(pitch))}"
    )]


def _validate_pressure_angle(angle: float) -> Tuple[float, List[ValidationMessage]]:
    if is_valid_pressure_angle(angle):
        return float(angle), []

    logger.warning(
        f"Invalid pressure angle {angle!r}, using default {DEFAULT_PRESSURE_ANGLE_DEG}"
    )
    return DEFAULT_PRESSURE_ANGLE_DEG, [ValidationMessage(
        severity=Severity.WARNING,
        code="PRESSURE_ANGLE_NOT_STANDARD",
        message=f"Pressure angle {angle!r}° is not standard; "
                f"using {DEFAULT_PRESSURE_ANGLE_DEG}°",
        suggestion=f"Use one of: {_format_choices(VALID_PRESSURE_ANGLES_DEG)}"
    )]


def validate_gear_parameters(
    pitch: int,
    teeth: int,
    pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG
) -> Tuple[GearParameters, ValidationResult]:
    """
    Validate spur gear parameters, substituting defaults for bad values.

    Teeth are checked against the table of the *effective* pitch, so a bad
    pitch combined with a tooth count that only exists at the default pitch
    still yields a legal gear.

    Args:
        pitch: Diametral pitch
        teeth: Number of teeth
        pressure_angle: Pressure angle in degrees

    Returns:
        (effective parameters, ValidationResult). The result is always
        valid - substitutions are reported as warnings.
    """
    messages: List[ValidationMessage] = []

    effective_pitch, found = _validate_pitch(pitch)
    messages.extend(found)

    effective_teeth, found = _validate_teeth(effective_pitch, teeth)
    messages.extend(found)

    effective_angle, found = _validate_pressure_angle(pressure_angle)
    messages.extend(found)

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return (
        GearParameters(effective_pitch, effective_teeth, effective_angle),
        ValidationResult(valid=not has_errors, messages=messages),
    )

"""
Spur Gear Calculator - stock tables, validation and geometry.

This module provides the stateless side of spurtrain: table lookups,
parameter validation with defaulting, geometry formulas and formatters.

Example:
    >>> from spurtrain.calculator import valid_teeth_for, calculate_geometry
    >>> 36 in valid_teeth_for(16)
    True
    >>> calculate_geometry(20, 20).pitch_diameter
    1.0
"""

from .constants import (
    VALID_DIAMETRAL_PITCHES,
    TEETH_BY_PITCH,
    VALID_PRESSURE_ANGLES_DEG,
    DEFAULT_DIAMETRAL_PITCH,
    DEFAULT_NUMBER_OF_TEETH,
    DEFAULT_PRESSURE_ANGLE_DEG,
    MAX_TRAIN_LENGTH,
)

from .core import (
    GearGeometry,
    valid_teeth_for,
    is_valid_pitch,
    is_valid_teeth,
    is_valid_pressure_angle,
    calculate_pitch_diameter,
    calculate_geometry,
    calculate_driven_rpm,
)

from .validation import (
    validate_gear_parameters,
    GearParameters,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    to_report,
    to_json,
    to_markdown,
)


__all__ = [
    # Tables and defaults
    "VALID_DIAMETRAL_PITCHES",
    "TEETH_BY_PITCH",
    "VALID_PRESSURE_ANGLES_DEG",
    "DEFAULT_DIAMETRAL_PITCH",
    "DEFAULT_NUMBER_OF_TEETH",
    "DEFAULT_PRESSURE_ANGLE_DEG",
    "MAX_TRAIN_LENGTH",

    # Lookups and formulas
    "GearGeometry",
    "valid_teeth_for",
    "is_valid_pitch",
    "is_valid_teeth",
    "is_valid_pressure_angle",
    "calculate_pitch_diameter",
    "calculate_geometry",
    "calculate_driven_rpm",

    # Validation
    "validate_gear_parameters",
    "GearParameters",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_report",
    "to_json",
    "to_markdown",
]

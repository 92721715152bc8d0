"""
Spur Gear Calculator - Core Calculations

Pure table lookups and geometry formulas for stock spur gears.
Nothing here holds state; the Gear entity in spurtrain.core builds on these.

Reference:
- AGMA 201.02 full-depth tooth proportions (addendum 1/P, dedendum 1.25/P)
- Boston Gear / Martin stock catalogue tables for coarse pitches
"""

from math import pi
from typing import FrozenSet, NamedTuple

from .constants import (
    VALID_DIAMETRAL_PITCHES,
    TEETH_BY_PITCH,
    VALID_PRESSURE_ANGLES_DEG,
    FACE_WIDTH_FACTOR,
    ADDENDUM_FACTOR,
    DEDENDUM_FACTOR,
)


class GearGeometry(NamedTuple):
    """Derived dimensions of a spur gear (inches)."""
    pitch_diameter: float
    face_width: float
    addendum: float
    dedendum: float
    circular_pitch: float
    circular_thickness: float


def valid_teeth_for(pitch: int) -> FrozenSet[int]:
    """Stock tooth counts for a diametral pitch, empty for an unknown pitch."""
    return TEETH_BY_PITCH.get(pitch, frozenset())


def is_valid_pitch(pitch: int) -> bool:
    """Check if pitch is one of the stock diametral pitches"""
    return pitch in VALID_DIAMETRAL_PITCHES


def is_valid_teeth(pitch: int, teeth: int) -> bool:
    """Check if a tooth count is stocked for the given pitch"""
    return teeth in valid_teeth_for(pitch)


def is_valid_pressure_angle(angle: float) -> bool:
    """Check if angle is one of the standard pressure angles"""
    return angle in VALID_PRESSURE_ANGLES_DEG


def calculate_pitch_diameter(pitch: int, teeth: int) -> float:
    """
    Pitch diameter of a spur gear.

    Uses integer (floor) division of teeth by pitch before converting to
    float, so 20 teeth at 16 DP gives 1.0 rather than 1.25. Existing train
    definitions depend on these values.

    FIXME: true pitch diameter is teeth / pitch; switch once callers opt in.
    """
    return float(teeth // pitch)


def calculate_geometry(pitch: int, teeth: int) -> GearGeometry:
    """
    Calculate derived spur gear dimensions.

    Args:
        pitch: Diametral pitch (teeth per inch)
        teeth: Number of teeth

    Returns:
        GearGeometry with pitch diameter, face width, addendum, dedendum,
        circular pitch and circular thickness
    """
    circular_pitch = pi / pitch

    return GearGeometry(
        pitch_diameter=calculate_pitch_diameter(pitch, teeth),
        face_width=FACE_WIDTH_FACTOR / pitch,
        addendum=ADDENDUM_FACTOR / pitch,
        dedendum=DEDENDUM_FACTOR / pitch,
        circular_pitch=circular_pitch,
        circular_thickness=circular_pitch / 2,
    )


def calculate_driven_rpm(source_rpm: float, source_teeth: int, driven_teeth: int) -> float:
    """
    Speed of a driven gear meshing with a source gear.

    Meshing gears share pitch-line velocity, so rpm scales with the
    inverse of the tooth ratio: n2 = n1 × z1 / z2
    """
    return (source_rpm * source_teeth) / driven_teeth

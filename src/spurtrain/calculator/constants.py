"""
Engineering constants for spur gear train calculations.

This module centralizes the lookup tables and defaults used by the calculator,
validation and gear modules. The tables describe the stock coarse-pitch spur
gears (14.5°/20°/25° pressure angle) carried in common gear catalogues.

MODIFICATION GUIDELINES:
- The tables are shared by every Gear instance and must stay immutable
- Add new constants here rather than hardcoding in functions
- Include units in constant names where they have one (_DEG)

Constants are grouped by category:
- Stock tables: diametral pitches, tooth counts, pressure angles
- Defaults: values substituted for out-of-range input
- Geometry: AGMA full-depth tooth proportions
- Limits: train traversal guards
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# =============================================================================
# Stock Tables
# =============================================================================

# Coarse diametral pitches (teeth per inch of pitch diameter)
VALID_DIAMETRAL_PITCHES: Tuple[int, ...] = (32, 24, 20, 16, 12, 10, 8, 6, 5)

# Stock tooth counts available for each diametral pitch
TEETH_BY_PITCH: Mapping[int, FrozenSet[int]] = MappingProxyType({
    32: frozenset((12, 14, 16, 18, 20, 24, 28, 32, 36, 40, 48, 56, 64, 72, 80, 96,
                   112, 128)),
    24: frozenset((12, 15, 18, 21, 24, 27, 30, 36, 42, 48, 54, 60, 72, 84, 96, 120,
                   144)),
    20: frozenset((12, 14, 15, 16, 18, 20, 24, 25, 30, 35, 40, 45, 50, 60, 70, 80,
                   84, 90, 100, 120, 140, 160, 180, 200)),
    16: frozenset((12, 14, 15, 16, 18, 20, 24, 28, 30, 32, 36, 40, 48, 56, 60, 64,
                   72, 80, 96, 128, 144, 160, 192)),
    12: frozenset((12, 13, 14, 15, 16, 18, 20, 21, 24, 28, 30, 36, 42, 48, 54, 60,
                   66, 72, 84, 96, 108, 120, 132, 144, 168, 192, 216)),
    10: frozenset((12, 14, 15, 16, 18, 20, 24, 25, 28, 30, 35, 40, 45, 48, 50, 55,
                   60, 70, 80, 90, 100, 120, 140, 160, 200)),
    8: frozenset((12, 14, 15, 16, 18, 20, 22, 24, 28, 32, 36, 40, 44, 48, 56, 60,
                  64, 72, 80, 88, 96, 112, 120, 128)),
    6: frozenset((12, 14, 15, 16, 18, 21, 24, 27, 30, 33, 36, 42, 48, 54, 60, 66,
                  72, 84, 96, 108, 120)),
    5: frozenset((12, 14, 15, 16, 18, 20, 24, 25, 28, 30, 35, 40, 45, 50, 60, 70,
                  80, 100, 110, 120, 140, 160, 180)),
})

# Standard pressure angles
VALID_PRESSURE_ANGLES_DEG: Tuple[float, ...] = (14.5, 20.0, 25.0)

# =============================================================================
# Defaults (substituted for out-of-range input)
# =============================================================================

DEFAULT_DIAMETRAL_PITCH: int = 16
DEFAULT_NUMBER_OF_TEETH: int = 18
DEFAULT_PRESSURE_ANGLE_DEG: float = 20.0  # Most common in industry

# =============================================================================
# Geometry (AGMA full-depth teeth, all divided by diametral pitch)
# =============================================================================

FACE_WIDTH_FACTOR: float = 12.0
ADDENDUM_FACTOR: float = 1.0
DEDENDUM_FACTOR: float = 1.25

# =============================================================================
# Limits
# =============================================================================

# Longest train the drive walk will follow before assuming a cycle
MAX_TRAIN_LENGTH: int = 1000

# Decimal places in the text report
REPORT_DECIMALS: int = 2

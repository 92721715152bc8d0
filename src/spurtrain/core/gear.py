"""
Spur gear entity with drive propagation.

A Gear holds validated parameters, its derived geometry, its current speed
and a non-owning link to the next gear in the train. Driving a gear walks
the links iteratively to the tail, so long trains do not hit the recursion
limit and a looped train fails with CyclicTrainError.
"""

import logging
from math import isfinite
from numbers import Real
from typing import List, Optional

from ..calculator.constants import DEFAULT_PRESSURE_ANGLE_DEG, MAX_TRAIN_LENGTH
from ..calculator.core import calculate_geometry, calculate_driven_rpm
from ..calculator.validation import validate_gear_parameters, ValidationResult
from ..exceptions import BrokenChainError, CyclicTrainError

logger = logging.getLogger(__name__)


class Gear:
    """
    One spur gear in a train.

    Out-of-range parameters are replaced by their defaults (pitch 16,
    18 teeth, 20° pressure angle) with a logged warning; construction
    never fails. Parameters and geometry are read-only afterwards.

    Example:
        >>> driver = Gear(16, 36)
        >>> driven = Gear(16, 18)
        >>> driver.set_next_gear(driven)
        >>> driver.drive(100.0)
        >>> driven.rpm
        200.0
    """

    def __init__(
        self,
        diametral_pitch: int,
        number_of_teeth: int,
        pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG
    ):
        params, self._validation = validate_gear_parameters(
            diametral_pitch, number_of_teeth, pressure_angle
        )
        self._diametral_pitch = params.diametral_pitch
        self._number_of_teeth = params.number_of_teeth
        self._pressure_angle = params.pressure_angle
        self._geometry = calculate_geometry(self._diametral_pitch, self._number_of_teeth)

        self._rpm: Optional[float] = None
        self._next_gear: Optional["Gear"] = None

    # -- parameters --------------------------------------------------------

    @property
    def diametral_pitch(self) -> int:
        return self._diametral_pitch

    @property
    def number_of_teeth(self) -> int:
        return self._number_of_teeth

    @property
    def pressure_angle(self) -> float:
        return self._pressure_angle

    @property
    def validation(self) -> ValidationResult:
        """Findings recorded while validating the constructor arguments."""
        return self._validation

    # -- derived geometry --------------------------------------------------

    @property
    def pitch_diameter(self) -> float:
        return self._geometry.pitch_diameter

    @property
    def face_width(self) -> float:
        return self._geometry.face_width

    @property
    def addendum(self) -> float:
        return self._geometry.addendum

    @property
    def dedendum(self) -> float:
        return self._geometry.dedendum

    @property
    def circular_pitch(self) -> float:
        return self._geometry.circular_pitch

    @property
    def circular_thickness(self) -> float:
        return self._geometry.circular_thickness

    # -- train -------------------------------------------------------------

    @property
    def rpm(self) -> Optional[float]:
        """Speed from the most recent drive, None until driven."""
        return self._rpm

    def reset(self) -> None:
        """Forget the current speed (this gear only)."""
        self._rpm = None

    @property
    def next_gear(self) -> Optional["Gear"]:
        return self._next_gear

    def set_next_gear(self, next_gear: Optional["Gear"]) -> None:
        """
        Link the gear this one meshes with.

        If this gear is already turning, the new gear (and anything linked
        after it) is driven immediately so the train stays consistent.
        """
        self._next_gear = next_gear
        logger.debug(f"Linked {self!r} -> {next_gear!r}")

        if self.rpm is not None and next_gear is not None:
            propagate(next_gear, self.rpm, self._number_of_teeth, upstream=1)

    def drive(self, input_rpm: float) -> None:
        """
        Turn this gear as the driver of the train and propagate to the tail.

        The speed is stored before the link is checked, so a gear driven
        while unlinked passes its speed on as soon as a next gear is set.

        Raises:
            TypeError, ValueError: If input_rpm is not a finite real number
            BrokenChainError: If no next gear is linked
            CyclicTrainError: If the links loop back on themselves
        """
        self._rpm = check_rpm(input_rpm)
        if self._next_gear is None:
            raise BrokenChainError(
                f"Cannot drive {self!r}: no next gear linked. "
                "Use GearTrain to drive a single gear."
            )
        propagate(self._next_gear, self._rpm, self._number_of_teeth, upstream=1)

    def drive_from(self, source_rpm: float, source_teeth: int) -> None:
        """
        Turn this gear from a meshing source gear and propagate to the tail.

        Args:
            source_rpm: Speed of the gear driving this one
            source_teeth: Tooth count of the gear driving this one

        Raises:
            TypeError, ValueError: If source_rpm is not a finite real number
            CyclicTrainError: If the links loop back on themselves
        """
        propagate(self, source_rpm, source_teeth)

    def iter_train(self):
        """Yield this gear and every gear linked after it."""
        seen = set()
        gear = self
        while gear is not None:
            if id(gear) in seen:
                raise CyclicTrainError(f"Gear train loops back to {gear!r}")
            seen.add(id(gear))
            yield gear
            gear = gear._next_gear

    # -- display -----------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Gear(diametral_pitch={self._diametral_pitch}, "
            f"number_of_teeth={self._number_of_teeth}, "
            f"pressure_angle={self._pressure_angle})"
        )

    def __str__(self) -> str:
        from ..calculator.output import to_report
        return to_report(self)


def check_rpm(value: float) -> float:
    """
    Return a speed as float, rejecting anything but a finite real number.

    Raises:
        TypeError: If value is not a real number (strings, bools, None)
        ValueError: If value is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Speed must be a real number, got {type(value).__name__}")
    value = float(value)
    if not isfinite(value):
        raise ValueError(f"Speed must be finite, got {value}")
    return value


def propagate(
    first: Gear,
    source_rpm: float,
    source_teeth: int,
    upstream: int = 0
) -> List[Gear]:
    """
    Drive ``first`` from a source gear and walk the links to the tail.

    Each gear's speed is set from the gear before it. Gears driven before
    a loop is detected keep their new speed.

    Args:
        first: First gear to drive
        source_rpm: Speed of the gear driving ``first``
        source_teeth: Tooth count of the gear driving ``first``
        upstream: Gears already turning ahead of ``first``; they count
            towards MAX_TRAIN_LENGTH

    Returns:
        The gears that were driven, in order

    Raises:
        TypeError, ValueError: If source_rpm is not a finite real number
        CyclicTrainError: If a gear is reached twice or the whole train is
            longer than MAX_TRAIN_LENGTH
    """
    driven: List[Gear] = []
    seen = set()
    gear: Optional[Gear] = first
    rpm, teeth = check_rpm(source_rpm), source_teeth

    while gear is not None:
        if id(gear) in seen:
            raise CyclicTrainError(f"Gear train loops back to {gear!r}")
        if upstream + len(driven) >= MAX_TRAIN_LENGTH:
            raise CyclicTrainError(
                f"Gear train longer than {MAX_TRAIN_LENGTH} gears"
            )
        seen.add(id(gear))

        gear._rpm = calculate_driven_rpm(rpm, teeth, gear.number_of_teeth)
        logger.debug(f"{gear!r} driven at {gear.rpm:.4f} rpm")
        driven.append(gear)

        rpm, teeth = gear.rpm, gear.number_of_teeth
        gear = gear.next_gear

    return driven

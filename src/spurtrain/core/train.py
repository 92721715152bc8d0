"""
Gear train assembly and driving.

GearTrain separates building a train from turning it: assembling only
links gears (no speeds change), and drive() sets the head speed and
propagates it to the tail. Unlike Gear.drive, a one-gear train can be
driven.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..calculator.constants import MAX_TRAIN_LENGTH
from ..exceptions import TrainAssemblyError
from .gear import Gear, check_rpm, propagate

logger = logging.getLogger(__name__)


class GearTrain:
    """
    An ordered chain of meshing spur gears.

    The train owns the ordering; each gear keeps only a reference to the
    gear after it. Assembling a train replaces the existing links of the
    gears passed in.

    Example:
        >>> train = GearTrain.assemble([Gear(16, 36), Gear(16, 18), Gear(16, 72)])
        >>> train.drive(100.0)
        [100.0, 200.0, 50.0]
    """

    def __init__(self, gears: Iterable[Gear]):
        gears = list(gears)

        if not gears:
            raise TrainAssemblyError("A gear train needs at least one gear")
        if len(gears) > MAX_TRAIN_LENGTH:
            raise TrainAssemblyError(
                f"Gear train has {len(gears)} gears, limit is {MAX_TRAIN_LENGTH}"
            )
        if len({id(g) for g in gears}) != len(gears):
            raise TrainAssemblyError("The same gear appears more than once in the train")

        # Plain link assignment: set_next_gear would re-drive gears already turning
        for gear, following in zip(gears, gears[1:]):
            gear._next_gear = following
        gears[-1]._next_gear = None

        self._gears: List[Gear] = gears
        logger.debug(f"Assembled gear train of {len(gears)} gears")

    @classmethod
    def assemble(cls, gears: Iterable[Gear]) -> "GearTrain":
        """Link gears in order into a new train."""
        return cls(gears)

    @property
    def gears(self) -> List[Gear]:
        return list(self._gears)

    @property
    def head(self) -> Gear:
        """Driving gear (the one the motor turns)."""
        return self._gears[0]

    @property
    def tail(self) -> Gear:
        """Final driven gear."""
        return self._gears[-1]

    @property
    def ratio(self) -> float:
        """
        Output speed per unit input speed.

        Idler gears cancel out, so only the head and tail tooth counts matter.
        """
        return self.head.number_of_teeth / self.tail.number_of_teeth

    @property
    def output_rpm(self) -> Optional[float]:
        return self.tail.rpm

    def drive(self, input_rpm: float) -> List[float]:
        """
        Turn the head gear at input_rpm and propagate down the train.

        Returns:
            Speed of every gear, head first

        Raises:
            TypeError, ValueError: If input_rpm is not a finite real number
        """
        head = self.head
        head._rpm = check_rpm(input_rpm)
        if head.next_gear is not None:
            propagate(head.next_gear, head.rpm, head.number_of_teeth, upstream=1)

        logger.debug(f"Drove train at {input_rpm} rpm, output {self.output_rpm} rpm")
        return [g.rpm for g in self._gears]

    def reset(self) -> None:
        """Clear the speed of every gear."""
        for gear in self._gears:
            gear.reset()

    def __len__(self) -> int:
        return len(self._gears)

    def __iter__(self) -> Iterator[Gear]:
        return iter(self._gears)

    def __getitem__(self, index: int) -> Gear:
        return self._gears[index]

    def __repr__(self) -> str:
        teeth = " -> ".join(str(g.number_of_teeth) for g in self._gears)
        return f"GearTrain({teeth})"

"""
Spurtrain core - gear entity and gear train.

Example:
    >>> from spurtrain.core import Gear, GearTrain
    >>> train = GearTrain.assemble([Gear(16, 36), Gear(16, 18)])
    >>> train.drive(100.0)
    [100.0, 200.0]
"""

from .gear import Gear, check_rpm, propagate
from .train import GearTrain

__all__ = [
    "Gear",
    "GearTrain",
    "check_rpm",
    "propagate",
]

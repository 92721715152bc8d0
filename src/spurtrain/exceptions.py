"""Exceptions raised by gear trains.

Out-of-range gear parameters are not errors (they are defaulted and
reported through ValidationResult); these cover misuse of the train itself.
"""


class GearTrainError(Exception):
    """Base class for gear train errors."""


class BrokenChainError(GearTrainError, ValueError):
    """A head gear was driven without a next gear to pass the drive to."""


class CyclicTrainError(GearTrainError, RuntimeError):
    """Drive propagation revisited a gear or exceeded the train length limit."""


class TrainAssemblyError(GearTrainError, ValueError):
    """A gear train could not be assembled from the given gears."""

"""
Spurtrain - spur gear train validation and speed propagation.

Gears are checked against stock coarse-pitch tables (bad values fall back
to defaults with a warning), get their standard geometry, and pass speed
down a train by the tooth-ratio law.

Example:
    >>> from spurtrain import Gear, GearTrain
    >>>
    >>> train = GearTrain.assemble([Gear(16, 36), Gear(16, 18)])
    >>> train.drive(100.0)
    [100.0, 200.0]

Note: All imports are lazy-loaded. The calculator can be imported without
triggering IO (Pydantic) imports.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_EXCEPTIONS = {"GearTrainError", "BrokenChainError", "CyclicTrainError", "TrainAssemblyError"}

_CALCULATOR = {
    "VALID_DIAMETRAL_PITCHES",
    "TEETH_BY_PITCH",
    "VALID_PRESSURE_ANGLES_DEG",
    "valid_teeth_for",
    "calculate_geometry",
    "validate_gear_parameters",
    "Severity",
    "ValidationResult",
    "to_report",
    "to_json",
    "to_markdown",
}

_CORE = {"Gear", "GearTrain"}

_IO = {
    "load_train_json",
    "save_train_json",
    "GearSpec",
    "GearTrainSpec",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _EXCEPTIONS:
        if "exceptions" not in _modules:
            from . import exceptions
            _modules["exceptions"] = exceptions
        return getattr(_modules["exceptions"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'spurtrain' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Entities (lazy loaded from core)
    "Gear",
    "GearTrain",

    # Exceptions
    "GearTrainError",
    "BrokenChainError",
    "CyclicTrainError",
    "TrainAssemblyError",

    # Calculator (lazy loaded from calculator)
    "VALID_DIAMETRAL_PITCHES",
    "TEETH_BY_PITCH",
    "VALID_PRESSURE_ANGLES_DEG",
    "valid_teeth_for",
    "calculate_geometry",
    "validate_gear_parameters",
    "Severity",
    "ValidationResult",
    "to_report",
    "to_json",
    "to_markdown",

    # IO (lazy loaded from io)
    "load_train_json",
    "save_train_json",
    "GearSpec",
    "GearTrainSpec",
]

"""
Spurtrain IO - train definition models, JSON loading and saving.

Example:
    >>> from spurtrain.io import load_train_json, save_train_json
    >>> train = load_train_json("train.json")
    >>> save_train_json(train, "copy.json")
"""

from .loaders import (
    load_train_json,
    save_train_json,
    GearSpec,
    GearDetails,
    GearTrainSpec,
)

from .schema import (
    SCHEMA_VERSION,
    get_schema_v1,
    validate_json_schema,
    create_example_schema_v1,
)

__all__ = [
    "load_train_json",
    "save_train_json",
    "GearSpec",
    "GearDetails",
    "GearTrainSpec",
    "SCHEMA_VERSION",
    "get_schema_v1",
    "validate_json_schema",
    "create_example_schema_v1",
]

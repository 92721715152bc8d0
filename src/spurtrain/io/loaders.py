"""
JSON input/output for gear trains.

Train definitions are parsed with Pydantic models. The models only check
types; table validation (with defaulting) happens when gears are built.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..calculator.constants import DEFAULT_PRESSURE_ANGLE_DEG
from ..core.gear import Gear
from ..core.train import GearTrain
from .schema import SCHEMA_VERSION

logger = logging.getLogger(__name__)


class GearSpec(BaseModel):
    """Constructor parameters for one gear."""
    model_config = ConfigDict(extra='ignore')

    diametral_pitch: int
    number_of_teeth: int
    pressure_angle_deg: float = DEFAULT_PRESSURE_ANGLE_DEG

    def to_gear(self) -> Gear:
        return Gear(self.diametral_pitch, self.number_of_teeth, self.pressure_angle_deg)

    @classmethod
    def from_gear(cls, gear: Gear) -> "GearSpec":
        return cls(
            diametral_pitch=gear.diametral_pitch,
            number_of_teeth=gear.number_of_teeth,
            pressure_angle_deg=gear.pressure_angle,
        )


class GearDetails(GearSpec):
    """Gear parameters plus derived geometry and current speed (output only)."""
    pitch_diameter: float
    face_width: float
    addendum: float
    dedendum: float
    circular_pitch: float
    circular_thickness: float
    rpm: Optional[float] = None

    @classmethod
    def from_gear(cls, gear: Gear) -> "GearDetails":
        return cls(
            diametral_pitch=gear.diametral_pitch,
            number_of_teeth=gear.number_of_teeth,
            pressure_angle_deg=gear.pressure_angle,
            pitch_diameter=gear.pitch_diameter,
            face_width=gear.face_width,
            addendum=gear.addendum,
            dedendum=gear.dedendum,
            circular_pitch=gear.circular_pitch,
            circular_thickness=gear.circular_thickness,
            rpm=gear.rpm,
        )


class GearTrainSpec(BaseModel):
    """Complete gear train definition, head gear first."""
    model_config = ConfigDict(extra='ignore')

    schema_version: str = SCHEMA_VERSION
    gears: List[GearSpec] = Field(min_length=1)
    input_rpm: Optional[float] = Field(default=None, allow_inf_nan=False)

    def to_train(self) -> GearTrain:
        """Build and assemble the gears; drive the train if input_rpm is set."""
        train = GearTrain.assemble(spec.to_gear() for spec in self.gears)
        if self.input_rpm is not None:
            train.drive(self.input_rpm)
        return train

    @classmethod
    def from_train(cls, train: GearTrain) -> "GearTrainSpec":
        return cls(
            gears=[GearSpec.from_gear(g) for g in train],
            input_rpm=train.head.rpm,
        )


def load_train_json(filepath: Union[str, Path]) -> GearTrain:
    """
    Load a gear train from a JSON definition file.

    Args:
        filepath: Path to JSON file

    Returns:
        Assembled GearTrain, already driven if the file has input_rpm

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the 'gears' section is missing
        ValidationError: If fields have the wrong types
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Train file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Check for 'train' wrapper
    if 'train' in data:
        data = data['train']

    if 'gears' not in data:
        raise ValueError("Invalid train JSON - must contain a 'gears' section")

    spec = GearTrainSpec.model_validate(data)
    if spec.schema_version != SCHEMA_VERSION:
        logger.warning(
            f"Train file schema {spec.schema_version} != current {SCHEMA_VERSION}"
        )

    train = spec.to_train()
    logger.info(f"Loaded {len(train)}-gear train from {filepath}")
    return train


def save_train_json(train: GearTrain, filepath: Union[str, Path]) -> None:
    """
    Save a gear train definition to a JSON file.

    Only constructor parameters and the head speed are written; geometry
    and downstream speeds are recomputed on load.
    """
    filepath = Path(filepath)
    data = GearTrainSpec.from_train(train).model_dump(mode='json')

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved {len(train)}-gear train to {filepath}")

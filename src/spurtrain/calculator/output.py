"""Output formatters for gears and gear trains.

to_report() renders the fixed labelled field dump of a single gear;
to_json() and to_markdown() describe whole trains. JSON goes through the
Pydantic models in spurtrain.io so the field names match train files.
"""

import json
from typing import Union, TYPE_CHECKING

from .constants import REPORT_DECIMALS

if TYPE_CHECKING:
    from ..core.gear import Gear
    from ..core.train import GearTrain


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def to_report(gear: "Gear", decimals: int = REPORT_DECIMALS) -> str:
    """
    Labelled dump of a gear's parameters and geometry.

    Field order is fixed: diametral pitch, number of teeth, pressure angle,
    pitch diameter, face width, addendum, dedendum, circular pitch. The
    tooth count is an integer; every other value is shown with ``decimals``
    places.
    """
    fields = [
        ("Diametral Pitch", f"{gear.diametral_pitch:.{decimals}f}"),
        ("Number of Teeth", f"{gear.number_of_teeth:d}"),
        ("Pressure Angle", f"{gear.pressure_angle:.{decimals}f}"),
        ("Pitch Diameter", f"{gear.pitch_diameter:.{decimals}f}"),
        ("Face Width", f"{gear.face_width:.{decimals}f}"),
        ("Addendum", f"{gear.addendum:.{decimals}f}"),
        ("Dedendum", f"{gear.dedendum:.{decimals}f}"),
        ("Circular Pitch", f"{gear.circular_pitch:.{decimals}f}"),
    ]
    return "".join(f"{label}: [{value}]\n" for label, value in fields)


def to_json(item: Union["Gear", "GearTrain"], indent: int = 2) -> str:
    """Convert a gear or gear train to a JSON string.

    A single gear becomes an object with its parameters, geometry and rpm.
    A train becomes a train document (schema version, gears, input and
    output rpm, ratio) with full details for every gear.
    """
    from ..core.gear import Gear
    from ..io.loaders import GearDetails
    from ..io.schema import SCHEMA_VERSION

    if isinstance(item, Gear):
        return json.dumps(_model_to_dict(GearDetails.from_gear(item)), indent=indent)

    train = item
    data = {
        'schema_version': SCHEMA_VERSION,
        'gears': [_model_to_dict(GearDetails.from_gear(g)) for g in train],
        'input_rpm': train.head.rpm,
        'output_rpm': train.output_rpm,
        'ratio': train.ratio,
    }
    return json.dumps(data, indent=indent)


def to_markdown(train: "GearTrain") -> str:
    """Convert a gear train to a markdown summary with one table row per gear."""
    md = "# Spur Gear Train\n\n"

    md += "## Overview\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Gears | {len(train)} |\n"
    md += f"| Overall Ratio | {train.ratio:.4f} |\n"
    if train.head.rpm is not None:
        md += f"| Input Speed | {train.head.rpm:.2f} rpm |\n"
    if train.output_rpm is not None:
        md += f"| Output Speed | {train.output_rpm:.2f} rpm |\n"
    md += "\n"

    md += "## Gears\n\n"
    md += "| # | DP | Teeth | PA | Pitch Dia | Face Width | Addendum | Dedendum | Circ. Pitch | RPM |\n"
    md += "|---|----|-------|----|-----------|------------|----------|----------|-------------|-----|\n"
    for index, gear in enumerate(train, start=1):
        rpm = f"{gear.rpm:.2f}" if gear.rpm is not None else "-"
        md += (
            f"| {index} | {gear.diametral_pitch} | {gear.number_of_teeth} "
            f"| {gear.pressure_angle:.1f}° | {gear.pitch_diameter:.3f} "
            f"| {gear.face_width:.3f} | {gear.addendum:.4f} | {gear.dedendum:.4f} "
            f"| {gear.circular_pitch:.4f} | {rpm} |\n"
        )
    md += "\n"

    warnings = [
        (index, msg)
        for index, gear in enumerate(train, start=1)
        for msg in gear.validation.warnings
    ]
    if warnings:
        md += "## Substituted Parameters\n\n"
        for index, msg in warnings:
            md += f"- Gear {index}: {msg.message}\n"
            if msg.suggestion:
                md += f"  - *{msg.suggestion}*\n"
        md += "\n"

    return md

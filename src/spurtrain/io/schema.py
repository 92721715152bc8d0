"""
JSON schema definition and validation for gear train definitions.

A train file lists gears head first. Parameter values are not checked
against the stock tables here: out-of-range values are accepted and
defaulted when the gears are built, exactly like direct construction.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

GEAR_REQUIRED_FIELDS = ("diametral_pitch", "number_of_teeth")
GEAR_OPTIONAL_FIELDS = ("pressure_angle_deg",)


def get_schema_v1() -> Dict:
    """Get JSON schema version 1.0 for gear train files."""
    return {
        "schema_version": "1.0",
        "required_sections": ["gears"],
        "optional_sections": ["input_rpm"],
        "gear_fields": {
            "required": list(GEAR_REQUIRED_FIELDS),
            "optional": list(GEAR_OPTIONAL_FIELDS),
        },
    }


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate JSON data against schema.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors: List[str] = []
    warnings: List[str] = []

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming 1.0)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    gears = data.get("gears")
    if gears is None:
        errors.append("Missing required section: 'gears'")
    elif not isinstance(gears, list) or not gears:
        errors.append("'gears' must be a non-empty list")
    else:
        for index, gear in enumerate(gears):
            if not isinstance(gear, dict):
                errors.append(f"gears[{index}] must be an object")
                continue
            for name in GEAR_REQUIRED_FIELDS:
                if name not in gear:
                    errors.append(f"gears[{index}] missing required field '{name}'")

    input_rpm = data.get("input_rpm")
    if input_rpm is not None and not isinstance(input_rpm, (int, float)):
        errors.append(f"input_rpm must be a number, got {type(input_rpm).__name__}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }


def create_example_schema_v1() -> Dict:
    """Example train file: 36T driver, 18T idler, 72T output at 16 DP."""
    return {
        "schema_version": SCHEMA_VERSION,
        "gears": [
            {"diametral_pitch": 16, "number_of_teeth": 36, "pressure_angle_deg": 20.0},
            {"diametral_pitch": 16, "number_of_teeth": 18, "pressure_angle_deg": 20.0},
            {"diametral_pitch": 16, "number_of_teeth": 72, "pressure_angle_deg": 20.0},
        ],
        "input_rpm": 100.0,
    }

"""
Pytest configuration and shared fixtures for spurtrain tests.
"""

import json
import pytest

from spurtrain.core import Gear, GearTrain


# ─── Gears ────────────────────────────────────────────────────────────────


@pytest.fixture
def driver_gear():
    """36T 16DP driver."""
    return Gear(16, 36, 20.0)


@pytest.fixture
def driven_gear():
    """18T 16DP driven gear."""
    return Gear(16, 18, 20.0)


@pytest.fixture
def output_gear():
    """72T 16DP output gear."""
    return Gear(16, 72, 20.0)


@pytest.fixture
def three_gear_train(driver_gear, driven_gear, output_gear):
    """36T -> 18T -> 72T train, not yet driven."""
    return GearTrain.assemble([driver_gear, driven_gear, output_gear])


# ─── Train files ──────────────────────────────────────────────────────────


def _train_dict():
    """Return raw train definition dict."""
    return {
        "schema_version": "1.0",
        "gears": [
            {"diametral_pitch": 16, "number_of_teeth": 36, "pressure_angle_deg": 20.0},
            {"diametral_pitch": 16, "number_of_teeth": 18, "pressure_angle_deg": 20.0},
            {"diametral_pitch": 16, "number_of_teeth": 72, "pressure_angle_deg": 14.5},
        ],
        "input_rpm": 100.0,
    }


@pytest.fixture
def sample_train_dict():
    """Fresh copy of the sample train definition."""
    return _train_dict()


@pytest.fixture
def temp_train_file(tmp_path, sample_train_dict):
    """Create a temporary JSON file with the sample train."""
    json_file = tmp_path / "train.json"
    with open(json_file, 'w') as f:
        json.dump(sample_train_dict, f)
    return json_file

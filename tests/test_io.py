"""
Tests for the IO module - train JSON loading, saving and schema checks.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from spurtrain import load_train_json, save_train_json, GearSpec, GearTrainSpec
from spurtrain.core import Gear, GearTrain
from spurtrain.io import (
    SCHEMA_VERSION,
    GearDetails,
    get_schema_v1,
    validate_json_schema,
    create_example_schema_v1,
)


class TestLoadTrainJson:

    def test_load_valid_json(self, temp_train_file):
        train = load_train_json(temp_train_file)

        assert isinstance(train, GearTrain)
        assert [g.number_of_teeth for g in train] == [36, 18, 72]
        assert train.tail.pressure_angle == 14.5

    def test_load_drives_train(self, temp_train_file):
        train = load_train_json(temp_train_file)

        assert train.head.rpm == 100.0
        assert train.output_rpm == pytest.approx(50.0)

    def test_load_without_input_rpm(self, tmp_path, sample_train_dict):
        del sample_train_dict["input_rpm"]
        path = tmp_path / "idle.json"
        path.write_text(json.dumps(sample_train_dict))

        train = load_train_json(path)

        assert train.output_rpm is None

    def test_train_wrapper(self, tmp_path, sample_train_dict):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"train": sample_train_dict}))

        assert len(load_train_json(path)) == 3

    def test_out_of_range_values_defaulted(self, tmp_path, caplog):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "gears": [
                {"diametral_pitch": 7, "number_of_teeth": 36},
                {"diametral_pitch": 16, "number_of_teeth": 17, "pressure_angle_deg": 30},
            ]
        }))

        with caplog.at_level(logging.WARNING):
            train = load_train_json(path)

        assert train.head.diametral_pitch == 16
        assert train.tail.number_of_teeth == 18
        assert train.tail.pressure_angle == 20.0
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_train_json(tmp_path / "missing.json")

    def test_missing_gears_section(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"input_rpm": 10.0}))

        with pytest.raises(ValueError, match="'gears'"):
            load_train_json(path)

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "typo.json"
        path.write_text(json.dumps({"gears": [{"diametral_pitch": "coarse", "number_of_teeth": 18}]}))

        with pytest.raises(ValidationError):
            load_train_json(path)

    def test_empty_gear_list(self, tmp_path):
        path = tmp_path / "nogears.json"
        path.write_text(json.dumps({"gears": []}))

        with pytest.raises(ValidationError):
            load_train_json(path)

    def test_schema_mismatch_warns(self, tmp_path, sample_train_dict, caplog):
        sample_train_dict["schema_version"] = "0.9"
        path = tmp_path / "old.json"
        path.write_text(json.dumps(sample_train_dict))

        with caplog.at_level(logging.WARNING, logger="spurtrain.io.loaders"):
            load_train_json(path)

        assert "schema 0.9" in caplog.text


class TestSaveTrainJson:

    def test_save_and_reload(self, tmp_path, three_gear_train):
        three_gear_train.drive(30.0)
        path = tmp_path / "saved.json"

        save_train_json(three_gear_train, path)
        loaded = load_train_json(path)

        assert [g.number_of_teeth for g in loaded] == [36, 18, 72]
        assert [g.rpm for g in loaded] == pytest.approx([g.rpm for g in three_gear_train])

    def test_saved_content(self, tmp_path, three_gear_train):
        path = tmp_path / "saved.json"
        save_train_json(three_gear_train, path)

        data = json.loads(path.read_text())

        assert data["schema_version"] == SCHEMA_VERSION
        assert data["input_rpm"] is None
        assert data["gears"][0] == {
            "diametral_pitch": 16,
            "number_of_teeth": 36,
            "pressure_angle_deg": 20.0,
        }


class TestModels:

    def test_gear_spec_defaults(self):
        spec = GearSpec(diametral_pitch=12, number_of_teeth=13)
        assert spec.pressure_angle_deg == 20.0
        assert spec.to_gear().number_of_teeth == 13

    def test_gear_spec_ignores_extra(self):
        spec = GearSpec.model_validate({"diametral_pitch": 12, "number_of_teeth": 13, "colour": "red"})
        assert not hasattr(spec, "colour")

    def test_gear_spec_from_gear(self):
        spec = GearSpec.from_gear(Gear(24, 30, 25.0))
        assert spec == GearSpec(diametral_pitch=24, number_of_teeth=30, pressure_angle_deg=25.0)

    def test_gear_details(self):
        details = GearDetails.from_gear(Gear(20, 20))
        assert details.pitch_diameter == 1.0
        assert details.rpm is None

    def test_train_spec_round_trip(self, three_gear_train):
        spec = GearTrainSpec.from_train(three_gear_train)
        rebuilt = spec.to_train()

        assert repr(rebuilt) == repr(three_gear_train)
        assert rebuilt.head is not three_gear_train.head


class TestSchema:

    def test_example_is_valid(self):
        result = validate_json_schema(create_example_schema_v1())

        assert result["valid"]
        assert result["errors"] == []
        assert result["warnings"] == []

    def test_example_loads(self, tmp_path):
        path = tmp_path / "example.json"
        path.write_text(json.dumps(create_example_schema_v1()))

        assert load_train_json(path).output_rpm == pytest.approx(50.0)

    def test_missing_version_warns(self, sample_train_dict):
        del sample_train_dict["schema_version"]
        result = validate_json_schema(sample_train_dict)

        assert result["valid"]
        assert result["schema_version"] == "unknown"
        assert len(result["warnings"]) == 1

    def test_missing_gears(self):
        result = validate_json_schema({"schema_version": SCHEMA_VERSION})
        assert not result["valid"]
        assert "Missing required section: 'gears'" in result["errors"]

    def test_missing_gear_field(self, sample_train_dict):
        del sample_train_dict["gears"][1]["number_of_teeth"]
        result = validate_json_schema(sample_train_dict)

        assert result["errors"] == ["gears[1] missing required field 'number_of_teeth'"]

    def test_bad_input_rpm(self, sample_train_dict):
        sample_train_dict["input_rpm"] = "fast"
        assert not validate_json_schema(sample_train_dict)["valid"]

    def test_schema_v1_fields(self):
        schema = get_schema_v1()
        assert schema["required_sections"] == ["gears"]
        assert "diametral_pitch" in schema["gear_fields"]["required"]


class TestNonFiniteInput:

    def test_nan_input_rpm_rejected(self, tmp_path, sample_train_dict):
        sample_train_dict["input_rpm"] = float("nan")
        path = tmp_path / "nan.json"
        path.write_text(json.dumps(sample_train_dict))

        with pytest.raises(ValidationError):
            load_train_json(path)

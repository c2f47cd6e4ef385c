"""Unit tests for job file schema, loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sheetcut.application.config import (
    ConfigError,
    CutPlanConfiguration,
    OutputFormat,
    config_to_inputs,
    load_config,
    load_config_from_dict,
    validate_config,
)
from sheetcut.domain import Piece, Unit


def _minimal(**overrides: object) -> dict:
    data: dict = {
        "schema_version": "1.0",
        "sheet": {"width": 100, "height": 100},
        "pieces": [{"width": 60, "height": 40}],
    }
    data.update(overrides)
    return data


# =============================================================================
# Schema
# =============================================================================


class TestSchema:
    """Tests for CutPlanConfiguration."""

    def test_defaults(self) -> None:
        config = CutPlanConfiguration.model_validate(_minimal())

        assert config.unit == Unit.CM
        assert config.pieces[0].quantity == 1
        assert config.output.format == OutputFormat.INSTRUCTIONS
        assert config.output.svg.max_width == 600
        assert config.output.svg.max_height == 400

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(_minimal(kerf=0.3))

    def test_unsupported_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            CutPlanConfiguration.model_validate(_minimal(schema_version="2.0"))

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(_minimal(schema_version="one"))

    def test_empty_pieces_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(_minimal(pieces=[]))

    def test_non_positive_sheet_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(_minimal(sheet={"width": 0, "height": 10}))

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_dimensions_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(_minimal(sheet={"width": value, "height": 10}))
        with pytest.raises(ValidationError):
            CutPlanConfiguration.model_validate(
                _minimal(pieces=[{"width": 1, "height": value}])
            )

    def test_unit_parsed(self) -> None:
        config = CutPlanConfiguration.model_validate(_minimal(unit="mm"))

        assert config.unit == Unit.MM


# =============================================================================
# Loading
# =============================================================================


class TestLoadConfig:
    """Tests for load_config and load_config_from_dict."""

    def test_valid_file(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_job.json")

        assert config.sheet.width == 100
        assert len(config.pieces) == 2
        assert config.pieces[1].quantity == 2
        assert config.output.format == OutputFormat.TABLE
        assert config.output.svg.max_width == 800

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "job.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "file_read_error"
        assert "not valid UTF-8" in str(error)
        assert error.details[0]["position"] == 0

    def test_unknown_field(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "sheet.thickness"
        assert str(error).startswith("Job file validation failed:")

    def test_nested_path_for_piece_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                _minimal(pieces=[{"width": 1, "height": 1}, {"width": -1, "height": 1}])
            )

        assert exc_info.value.details[0]["path"] == "pieces[1].width"

    def test_from_dict(self) -> None:
        config = load_config_from_dict(_minimal())

        assert config.pieces[0].width == 60


# =============================================================================
# Conversion and semantic validation
# =============================================================================


class TestConfigToInputs:
    """Tests for config_to_inputs."""

    def test_conversion(self, fixtures_path: Path) -> None:
        sheet, pieces, unit = config_to_inputs(load_config(fixtures_path / "valid_job.json"))

        assert (sheet.width, sheet.height) == (100, 100)
        assert [(p.width, p.height, p.quantity) for p in pieces] == [(60, 40, 1), (30, 20, 2)]
        assert unit == Unit.CM


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self) -> None:
        result = validate_config(load_config_from_dict(_minimal()))

        assert result.is_valid
        assert result.exit_code == 0

    def test_oversized_piece(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "oversized_piece.json"))

        assert not result.is_valid
        assert result.exit_code == 1
        assert len(result.errors) == 1
        assert result.errors[0].path == "pieces[1]"
        assert "exceeds sheet" in result.errors[0].message

    def test_rotated_fit_accepted(self) -> None:
        data = _minimal(sheet={"width": 5, "height": 10}, pieces=[{"width": 8, "height": 3}])

        assert validate_config(load_config_from_dict(data)).is_valid

    @pytest.mark.parametrize("width,height", [(10, 5), (5, 10), (10, 10), (11, 4), (6, 6)])
    def test_agrees_with_piece_fit(self, width: float, height: float) -> None:
        data = _minimal(
            sheet={"width": 10, "height": 5}, pieces=[{"width": width, "height": height}]
        )
        piece = Piece(width=width, height=height, id=1)

        result = validate_config(load_config_from_dict(data))

        assert result.is_valid == piece.fits_within(10, 5)

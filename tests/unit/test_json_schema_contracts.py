"""
Tests for JSON Schema Contract Validators

Тестирование контракта записи Point3D:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Запрет лишних полей
- Интеграция с Pydantic моделью
"""

import math

import pytest
from jsonschema import ValidationError

from spatial_hasher import Point3D
from spatial_hasher.core.contracts import (
    ContractValidator,
    Point3DValidator,
    SchemaLoader,
    validate_point3d,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_point_record():
    """Валидная запись точки."""
    return {"x": 1.0, "y": 2.0, "z": 3.0}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_point3d_schema(self) -> None:
        schema = SchemaLoader().load_schema("point3d")
        assert schema["type"] == "object"
        assert schema["required"] == ["x", "y", "z"]
        assert schema["additionalProperties"] is False

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("point3d") is loader.load_schema("point3d")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATION
# =============================================================================


class TestPoint3DValidator:
    """Тесты валидатора записи точки"""

    def test_valid_record(self, valid_point_record) -> None:
        validate_point3d(valid_point_record)  # Должно пройти без исключений

    def test_integer_coordinates(self) -> None:
        validate_point3d({"x": 1, "y": 0, "z": -5})

    def test_special_values(self) -> None:
        """NaN и ±inf являются числами"""
        validate_point3d({"x": math.nan, "y": math.inf, "z": -math.inf})

    @pytest.mark.parametrize("field", ["x", "y", "z"])
    def test_missing_field(self, valid_point_record, field: str) -> None:
        del valid_point_record[field]
        with pytest.raises(ValidationError, match="required"):
            validate_point3d(valid_point_record)

    @pytest.mark.parametrize("bad_value", ["1.0", None, True, [1.0], {"v": 1.0}])
    def test_non_numeric(self, valid_point_record, bad_value) -> None:
        valid_point_record["x"] = bad_value
        with pytest.raises(ValidationError):
            validate_point3d(valid_point_record)

    def test_extra_field(self, valid_point_record) -> None:
        valid_point_record["w"] = 4.0
        with pytest.raises(ValidationError):
            validate_point3d(valid_point_record)

    def test_not_an_object(self) -> None:
        with pytest.raises(ValidationError):
            validate_point3d([1.0, 2.0, 3.0])  # type: ignore

    def test_is_valid(self, valid_point_record) -> None:
        validator = Point3DValidator()
        assert validator.is_valid(valid_point_record)
        assert not validator.is_valid({"x": 1.0})

    def test_iter_errors_reports_each_missing_field(self) -> None:
        errors = list(Point3DValidator().iter_errors({}))
        assert len(errors) == 3

    def test_is_contract_validator(self) -> None:
        validator = Point3DValidator()
        assert isinstance(validator, ContractValidator)
        assert validator.schema_name == "point3d"


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


def test_model_record_matches_contract():
    """Запись модели проходит контракт"""
    for point in (
        Point3D(x=1.0, y=2.0, z=3.0),
        Point3D(x=-0.0, y=math.inf, z=math.nan),
    ):
        validate_point3d(point.to_record())


def test_contract_valid_record_builds_model(valid_point_record):
    validate_point3d(valid_point_record)
    assert Point3D.from_record(valid_point_record) == Point3D(x=1.0, y=2.0, z=3.0)

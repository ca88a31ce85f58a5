"""
Contract Validation Module

Модуль для валидации структурированных записей spatial-hasher.
"""

from .validators import (
    ContractValidator,
    Point3DValidator,
    SchemaLoader,
    validate_point3d,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Point3DValidator",
    # Functions
    "validate_point3d",
]

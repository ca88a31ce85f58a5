"""
Point3D — Точка в трёхмерном пространстве

Immutable Pydantic модель из трёх координат IEEE-754 double.

Хеширование определено над сырыми битами координат (x, затем y, затем z),
а не над их численными значениями:
- +0.0 и -0.0 дают разные хеши
- NaN с разным payload дают разные хеши
- Один и тот же набор битов даёт один и тот же хеш в любом процессе

Равенство согласовано с хешем: точки равны тогда и только тогда,
когда совпадают биты всех трёх координат.
"""

from typing import Any, Mapping, Protocol, Tuple

from pydantic import BaseModel, Field

from spatial_hasher.core.math.float_bits import (
    ByteOrder,
    bits_to_float,
    float_to_bits,
    float_to_bytes,
)


class HashAccumulator(Protocol):
    """Внешнее состояние хеша: любой объект с методом update(bytes)."""

    def update(self, data: bytes, /) -> None: ...


# =============================================================================
# POINT3D MODEL
# =============================================================================


class Point3D(BaseModel):
    """
    Точка в 3D пространстве.

    Координаты не валидируются по диапазону: принимаются конечные значения,
    ±inf и NaN. Строки и bool отклоняются (strict режим).

    Immutable модель (frozen=True): изменение координаты выражается
    созданием копии через model_copy(update=...).
    """

    x: float = Field(..., description="Координата по оси X")
    y: float = Field(..., description="Координата по оси Y")
    z: float = Field(..., description="Координата по оси Z")

    model_config = {
        "frozen": True,  # Immutable
        "strict": True,
        "extra": "forbid",
        "ser_json_inf_nan": "constants",
    }

    # -------------------------------------------------------------------------
    # Биты
    # -------------------------------------------------------------------------

    def to_bits(self) -> Tuple[int, int, int]:
        """
        Сырые 64-битные паттерны координат в порядке x, y, z.

        Returns:
            (x_bits, y_bits, z_bits), каждое в [0, 2**64)
        """
        return (float_to_bits(self.x), float_to_bits(self.y), float_to_bits(self.z))

    @classmethod
    def from_bits(cls, x_bits: int, y_bits: int, z_bits: int) -> "Point3D":
        """
        Построение точки из битовых паттернов (обратная операция к to_bits).

        Raises:
            ValueError: Если какой-либо паттерн вне диапазона u64
        """
        return cls(x=bits_to_float(x_bits), y=bits_to_float(y_bits), z=bits_to_float(z_bits))

    # -------------------------------------------------------------------------
    # Хеширование
    # -------------------------------------------------------------------------

    def hash_into(self, accumulator: HashAccumulator, byte_order: ByteOrder = "little") -> None:
        """
        Передача битов координат во внешний аккумулятор хеша.

        Пишет три слова по 8 байт строго в порядке x, y, z.
        Алгоритм хеширования определяется аккумулятором (например, любой
        объект hashlib).

        Args:
            accumulator: Объект с методом update(bytes)
            byte_order: Порядок байт внутри слова (default: "little")
        """
        for value in (self.x, self.y, self.z):
            accumulator.update(float_to_bytes(value, byte_order))

    def __hash__(self) -> int:
        return hash(self.to_bits())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.to_bits() == other.to_bits()

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_record(self) -> dict:
        """
        Структурированное представление {x, y, z}.

        Значения передаются без преобразований: биты сохраняются точно,
        включая payload у NaN.
        """
        return self.model_dump()

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Point3D":
        """
        Построение точки из записи {x, y, z}.

        Raises:
            ValidationError: Если поле отсутствует, лишнее или не число
        """
        return cls.model_validate(data)

    def to_json(self) -> str:
        """
        JSON представление.

        NaN, Infinity и -Infinity выводятся как JSON-константы. В текстовом
        JSON один токен NaN, поэтому payload у NaN здесь не сохраняется;
        для точного round-trip используйте to_record().
        """
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str) -> "Point3D":
        """
        Построение точки из JSON.

        Raises:
            ValidationError: Если JSON невалиден или запись некорректна
        """
        return cls.model_validate_json(text)

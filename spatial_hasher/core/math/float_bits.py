"""
Float Bits — битовое представление IEEE-754 double

Примитивы для работы с сырым 64-битным представлением float:
- float -> u64 (реинтерпретация битов, без численного преобразования)
- u64 -> float (обратная реинтерпретация)
- Сравнение по битам (различает +0.0 / -0.0 и payload у NaN)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bits_to_float(float_to_bits(v)) воспроизводит те же биты для любого v
2. Никакой арифметики над значением: только перенос битов
3. Порядок байт фиксирован явно и не зависит от платформы
"""

import struct
from typing import Final, Literal

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина слова одной координаты
FLOAT_BITS_WIDTH: Final[int] = 64
FLOAT_BYTES_WIDTH: Final[int] = FLOAT_BITS_WIDTH // 8

# Верхняя граница (исключительно) для u64
U64_LIMIT: Final[int] = 1 << FLOAT_BITS_WIDTH

ByteOrder = Literal["little", "big"]

_STRUCT_PREFIX: Final[dict] = {"little": "<", "big": ">"}


# =============================================================================
# РЕИНТЕРПРЕТАЦИЯ
# =============================================================================


def float_to_bits(value: float) -> int:
    """
    Сырое 64-битное представление float как беззнаковое целое.

    Args:
        value: Любой float (включая NaN, ±inf, ±0.0)

    Returns:
        Целое в диапазоне [0, 2**64)

    Examples:
        >>> float_to_bits(1.0)
        4607182418800017408
        >>> hex(float_to_bits(-0.0))
        '0x8000000000000000'
    """
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def bits_to_float(bits: int) -> float:
    """
    Обратная реинтерпретация: u64 -> float.

    Args:
        bits: Битовый паттерн в диапазоне [0, 2**64)

    Returns:
        float с ровно этими битами

    Raises:
        ValueError: Если bits вне диапазона u64
    """
    validate_u64(bits)
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def float_to_bytes(value: float, byte_order: ByteOrder = "little") -> bytes:
    """
    8 байт битового представления float в заданном порядке байт.

    Args:
        value: Любой float
        byte_order: "little" или "big"

    Returns:
        bytes длиной FLOAT_BYTES_WIDTH
    """
    try:
        prefix = _STRUCT_PREFIX[byte_order]
    except KeyError:
        raise ValueError(f"byte_order must be 'little' or 'big', got {byte_order!r}")
    return struct.pack(f"{prefix}d", value)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def same_bits(a: float, b: float) -> bool:
    """
    Побитовое равенство двух float.

    В отличие от ==:
    - same_bits(0.0, -0.0) is False
    - same_bits(nan, nan) is True, если payload совпадает
    """
    return float_to_bits(a) == float_to_bits(b)


def validate_u64(bits: int) -> None:
    """
    Проверка, что целое помещается в u64.

    Raises:
        ValueError: Если bits < 0 или bits >= 2**64
    """
    if not 0 <= bits < U64_LIMIT:
        raise ValueError(f"bit pattern {bits} out of u64 range")

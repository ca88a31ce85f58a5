"""
Point Hashing — подача точек во внешний аккумулятор хеша

Точка определяет только ЧТО и в КАКОМ ПОРЯДКЕ подаётся в хеш:
три слова по 64 бита (x, y, z). Сам алгоритм выбирает вызывающий код.

- feed_point: запись битов точки в любой объект с update(bytes)
- point_digest: hex-дайджест через hashlib (детерминирован между процессами)
"""

import hashlib
import logging
from dataclasses import dataclass
from typing import Final, Optional

from spatial_hasher.core.domain.point3d import HashAccumulator, Point3D
from spatial_hasher.core.math.float_bits import ByteOrder

logger = logging.getLogger(__name__)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

DEFAULT_ALGORITHM: Final[str] = "blake2b"
DEFAULT_DIGEST_SIZE: Final[int] = 16

# Алгоритмы hashlib с настраиваемым digest_size
_VARIABLE_DIGEST_ALGORITHMS: Final[frozenset] = frozenset({"blake2b", "blake2s"})


@dataclass(frozen=True)
class PointHashConfig:
    """Конфигурация хеширования точек.

    - algorithm: имя алгоритма hashlib
    - digest_size: размер дайджеста в байтах (только blake2b/blake2s)
    - byte_order: порядок байт внутри 64-битного слова
    """

    algorithm: str = DEFAULT_ALGORITHM
    digest_size: Optional[int] = DEFAULT_DIGEST_SIZE
    byte_order: ByteOrder = "little"

    def __post_init__(self) -> None:
        if self.byte_order not in ("little", "big"):
            raise ValueError(
                f"byte_order must be 'little' or 'big', got {self.byte_order!r}"
            )
        if self.digest_size is not None:
            if self.algorithm not in _VARIABLE_DIGEST_ALGORITHMS:
                raise ValueError(
                    f"digest_size is only supported for "
                    f"{sorted(_VARIABLE_DIGEST_ALGORITHMS)}, got algorithm {self.algorithm!r}"
                )
            if self.digest_size <= 0:
                raise ValueError(f"digest_size must be positive, got {self.digest_size}")


_DEFAULT_CONFIG = PointHashConfig()


# =============================================================================
# ПОДАЧА В АККУМУЛЯТОР
# =============================================================================


def feed_point(
    point: Point3D,
    accumulator: HashAccumulator,
    config: Optional[PointHashConfig] = None,
) -> None:
    """
    Запись битов точки в аккумулятор: x, затем y, затем z (3 x 8 байт).

    Args:
        point: Точка
        accumulator: Объект с методом update(bytes), например hashlib.sha256()
        config: Конфигурация (используется byte_order)
    """
    cfg = config or _DEFAULT_CONFIG
    point.hash_into(accumulator, cfg.byte_order)


def new_accumulator(config: Optional[PointHashConfig] = None):
    """
    Новый аккумулятор hashlib по конфигурации.

    Raises:
        ValueError: Если алгоритм не поддерживается hashlib
    """
    cfg = config or _DEFAULT_CONFIG
    logger.debug(
        "Creating %s accumulator (digest_size=%s)", cfg.algorithm, cfg.digest_size
    )
    if cfg.digest_size is not None:
        return hashlib.new(cfg.algorithm, digest_size=cfg.digest_size)
    return hashlib.new(cfg.algorithm)


def point_digest(point: Point3D, config: Optional[PointHashConfig] = None) -> str:
    """
    Hex-дайджест битов точки.

    Не зависит от PYTHONHASHSEED и платформы: одинаковые биты дают
    одинаковый дайджест в любом процессе.

    Args:
        point: Точка
        config: Конфигурация (default: blake2b, 16 байт, little-endian)

    Returns:
        Дайджест в hex
    """
    cfg = config or _DEFAULT_CONFIG
    accumulator = new_accumulator(cfg)
    feed_point(point, accumulator, cfg)
    return accumulator.hexdigest()

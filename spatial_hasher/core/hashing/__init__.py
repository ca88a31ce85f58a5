"""
Хеширование точек во внешние аккумуляторы.
"""

from spatial_hasher.core.domain.point3d import HashAccumulator
from spatial_hasher.core.hashing.accumulator import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGEST_SIZE,
    PointHashConfig,
    feed_point,
    new_accumulator,
    point_digest,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_DIGEST_SIZE",
    "HashAccumulator",
    "PointHashConfig",
    "feed_point",
    "new_accumulator",
    "point_digest",
]

"""
spatial-hasher: точка в 3D пространстве с детерминированным битовым хешем.
"""

from spatial_hasher.core.domain import HashAccumulator, Point3D
from spatial_hasher.core.hashing import PointHashConfig, feed_point, point_digest

__all__ = [
    "HashAccumulator",
    "Point3D",
    "PointHashConfig",
    "feed_point",
    "point_digest",
]

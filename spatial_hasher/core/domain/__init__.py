"""
Domain models и value objects.

Contains the Point3D value type.
"""

from spatial_hasher.core.domain.point3d import HashAccumulator, Point3D

__all__ = [
    "HashAccumulator",
    "Point3D",
]

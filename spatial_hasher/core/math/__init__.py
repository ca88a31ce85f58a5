"""
Core math modules для spatial-hasher

Примитивы битового представления float.
"""

from spatial_hasher.core.math.float_bits import (
    FLOAT_BITS_WIDTH,
    FLOAT_BYTES_WIDTH,
    U64_LIMIT,
    ByteOrder,
    bits_to_float,
    float_to_bits,
    float_to_bytes,
    same_bits,
    validate_u64,
)

__all__ = [
    # Constants
    "FLOAT_BITS_WIDTH",
    "FLOAT_BYTES_WIDTH",
    "U64_LIMIT",
    # Types
    "ByteOrder",
    # Functions
    "bits_to_float",
    "float_to_bits",
    "float_to_bytes",
    "same_bits",
    "validate_u64",
]

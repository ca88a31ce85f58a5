"""
Core domain models, bit-level primitives, hashing and contracts.

This module contains the foundational building blocks that are independent
of external systems (containers, storage, transport).
"""

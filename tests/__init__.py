"""
Test suite for spatial-hasher

Contains:
- tests/unit/          : Unit tests for individual modules
"""

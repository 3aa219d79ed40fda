"""External adapters for pyspec.

This package provides implementations of the core port interfaces on
top of third-party or optional libraries.

Adapter Organization:

- doubles/: Adapters for creating test doubles (unittest.mock)
"""

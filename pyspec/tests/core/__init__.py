"""Unit tests for the core kernel.

These tests exercise kernel logic without external dependencies.
Collaborator ports are replaced with in-memory fakes from tests/fakes/.
"""

"""Doubles adapters implementing DoublerPort."""

from .unittest_mock import UnittestMockDoubler

__all__ = ["UnittestMockDoubler"]

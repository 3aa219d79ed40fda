"""Test suite for pyspec.

Organized into three categories:

1. core/: Unit tests for the kernel
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Exercise the real unittest.mock library

3. fakes/: Port implementations for testing
   - In-memory DoublerPort, simple matchers, recording shared examples
"""

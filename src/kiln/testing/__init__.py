"""Testing utilities for kiln applications."""

from kiln.testing.client import TestClient

__all__ = ["TestClient"]

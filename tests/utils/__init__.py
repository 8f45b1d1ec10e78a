"""
Test utilities for ccachekit testing.

This package provides fakes for external collaborators so the save flow can
be exercised without real cache tools.
"""

from .mocks import FakeRunner, RecordingStore

__all__ = ["FakeRunner", "RecordingStore"]

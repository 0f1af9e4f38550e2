"""Exports for test fakes."""

from .clock import FixedClock
from .filesystem import InMemoryFileSystem
from .gateway import RecordingGateway

__all__ = [
    "FixedClock",
    "InMemoryFileSystem",
    "RecordingGateway",
]

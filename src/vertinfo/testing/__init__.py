"""Testing utilities for the vertinfo request pipeline."""

from .fakes import FailingStore, FakeClock, FakeStore

__all__ = ["FailingStore", "FakeClock", "FakeStore"]

"""Elimination backends."""

from pyechelon.elimination.backends.cpu import CPUEliminationBackend

__all__ = ["CPUEliminationBackend"]

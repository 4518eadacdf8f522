"""Exceptions raised by the hexagonal grid engine."""

from __future__ import annotations


class HexLatticeError(Exception):
    """Base class for errors raised by :mod:`hexlattice`."""


class InvalidSnappingMode(HexLatticeError, ValueError):
    """The snapping mode or resolution cannot be resolved to a snapped point."""


__all__ = ["HexLatticeError", "InvalidSnappingMode"]

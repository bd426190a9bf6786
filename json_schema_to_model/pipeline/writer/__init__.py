"""
Writer module.

Persists generated files atomically after validating them.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = [
    "AtomicWriter",
]

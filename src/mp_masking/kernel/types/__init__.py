"""Kernel value types — public re-export surface.

Modules:
  unsigned.py — UInt
"""

from mp_masking.kernel.types.unsigned import UInt

__all__ = ["UInt"]

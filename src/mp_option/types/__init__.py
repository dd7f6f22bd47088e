"""Option types — public re-export surface.

Modules:
  option.py      — Option, Some, Nothing
  destructure.py — Slot, let_some
"""

from mp_option.types.destructure import Slot, let_some
from mp_option.types.option import Nothing, Option, Some

__all__ = ["Nothing", "Option", "Slot", "Some", "let_some"]

"""Testing helpers – Hypothesis strategies for Option values."""
from mp_option.testing.strategies import options, somes

__all__ = ["options", "somes"]

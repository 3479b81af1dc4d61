from .default import value_or_default
from .indexing import clamp_index

__all__ = ["value_or_default", "clamp_index"]

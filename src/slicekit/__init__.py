"""
Generic slice utilities: functional, search, ordering and in-place editing helpers
for Python sequences
"""
from .lib import slices
from .types import Pair, Slice
from .core.errors import SliceBoundsError, EmptySliceError

__all__ = ['slices', 'Pair', 'Slice', 'SliceBoundsError', 'EmptySliceError']

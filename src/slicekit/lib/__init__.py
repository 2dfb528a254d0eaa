"""
Builtin library of slicekit
"""
from . import log, slices

__all__ = ['log', 'slices']

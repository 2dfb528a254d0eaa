from .pair import Pair
from .slice import Slice

__all__ = ['Pair', 'Slice']

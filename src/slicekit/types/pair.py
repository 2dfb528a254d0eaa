from typing import TypeVar, Generic, NamedTuple

__all__ = ['Pair']

T = TypeVar('T')
R = TypeVar('R')


class Pair(NamedTuple, Generic[T, R]):
    """
    Two values taken from the same position of two sequences
    """
    first: T
    second: R

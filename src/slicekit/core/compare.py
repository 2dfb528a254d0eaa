"""
Element ordering used by the plain (non-func) slice operations.

NaN values are ordered before everything else and are equal to each other,
so sorting and searching stay well-defined on float data.
"""
from typing import Any

__all__ = ['is_nan', 'less', 'compare']


def is_nan(value: Any) -> bool:
    """
    Check if the value is a NaN (not equal to itself).

    :param value: Value to check
    :return: True if the value is NaN
    """
    return value != value


def less(x: Any, y: Any) -> bool:
    """
    Returns true if x orders before y. NaN is less than any non-NaN value.

    :param x: First value
    :param y: Second value
    :return: True if x < y
    """
    return (is_nan(x) and not is_nan(y)) or x < y


def compare(x: Any, y: Any) -> int:
    """
    Three-way comparison of two values.

    :param x: First value
    :param y: Second value
    :return: -1 if x < y, 0 if x == y, +1 if x > y
    """
    x_nan = is_nan(x)
    y_nan = is_nan(y)
    if x_nan:
        return 0 if y_nan else -1
    if y_nan:
        return 1
    if x < y:
        return -1
    if x > y:
        return 1
    return 0

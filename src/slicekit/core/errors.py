__all__ = ['SliceBoundsError', 'EmptySliceError']


class SliceBoundsError(IndexError):
    """
    Raised when an index or an index range does not fit the sequence.
    """


class EmptySliceError(ValueError):
    """
    Raised when an operation needs at least one element but got an empty sequence.
    """

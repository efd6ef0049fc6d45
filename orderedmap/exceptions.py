class NotCallableError(TypeError):
    """
    Raised when a predicate handed to a search or filter is not callable
    """


class FractionalIndexWarning(UserWarning):
    """
    Emitted when a positional index with a fractional part is truncated
    """

"""Exceptions raised by numframe.

Errors are few and coarse on purpose: callers mostly need to know
whether they passed something wrong (:class:`InvalidArgumentError`),
whether a raw position fell outside a column (:class:`OutOfRangeError`)
or whether an object was used before being prepared for it
(:class:`IllegalStateError`).

Each error also derives from the closest builtin exception,
so code that only knows about ``ValueError`` or ``IndexError``
keeps working.
"""


class NumframeError(Exception):
    """Base class for all the errors raised by numframe."""

    pass


class InvalidArgumentError(NumframeError, ValueError):
    """Raised for malformed dimensions, unknown names or indices out of range."""

    pass


class OutOfRangeError(NumframeError, IndexError):
    """Raised on positional access beyond the length of a column."""

    pass


class IllegalStateError(NumframeError, RuntimeError):
    """Raised when an operation needs a state the object is not in yet.

    For example transforming data with a scaler that was never fitted.
    """

    pass

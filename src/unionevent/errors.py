"""
UnionEvent Errors

Exception taxonomy for the event registration and dispatch layer.

A missing record or missing metadata is never an error. Only wiring
mistakes and payload values outside the supported union raise.
"""


class UnionEventError(Exception):
    """Base class for all UnionEvent errors."""


class UsageFault(UnionEventError, AssertionError):
    """
    Programmer error: a one-time setup step is missing.

    Raised when the controller is asked to register or send before an
    ``EventRegistry`` has been attached. Not meant to be caught.
    """


class PayloadError(UnionEventError, ValueError):
    """A payload key or value is outside the supported value types."""


class DeepLinkError(UnionEventError, ValueError):
    """A string could not be read as a deep-link URL."""

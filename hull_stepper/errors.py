"""
Module: errors
Description: Exceptions raised by the hull engine, the step navigator and the session.
"""


class HullError(Exception):
    """Base class for every error raised by hull_stepper."""


class InvalidInputError(HullError, ValueError):
    """The point-count text is not a usable non-negative integer."""

    def __init__(self, text: str, reason: str = "expected a non-negative integer"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid point amount {text!r}: {reason}")


class NonFiniteCoordinateError(HullError, ValueError):
    """A point handed to calculate() has a NaN or infinite coordinate."""

    def __init__(self, index: int, point):
        self.index = index
        self.point = point
        super().__init__(f"Point #{index} has a non-finite coordinate: {point!r}")


class NoTimelineError(HullError, LookupError):
    """The cursor was queried before a hull was calculated (or the timeline is empty)."""

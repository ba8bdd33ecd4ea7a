"""Exception hierarchy for tripview.

Every error raised by the library derives from :class:`TripviewError` and
from the builtin it refines, so callers can catch either.
INVARIANT: the core never catches these; only the service layer turns them
into failed results.
"""

from __future__ import annotations


class TripviewError(Exception):
    """Base class for all tripview errors."""

    code = "TRIPVIEW_ERROR"


class InvalidInstantError(TripviewError, ValueError):
    """A value could not be interpreted as a point in time."""

    code = "INVALID_INSTANT"


class NegativeDurationError(TripviewError, ValueError):
    """A duration was requested whose end precedes its start."""

    code = "NEGATIVE_DURATION"


class TemplateError(TripviewError, ValueError):
    """A fragment template is malformed."""

    code = "INVALID_TEMPLATE"


class TemplateArityError(TemplateError):
    """The number of values does not match the number of template slots."""

    code = "TEMPLATE_ARITY"

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Template has {expected} slot(s) but received {received} value(s)")


class CyclicValueError(TripviewError, ValueError):
    """A container refers back to itself and cannot be sanitized."""

    code = "CYCLIC_VALUE"


class InvalidTimezoneError(TripviewError, ValueError):
    """A timezone name is not known to the IANA database."""

    code = "INVALID_TIMEZONE"


class InvalidPayloadError(TripviewError, ValueError):
    """Serialized input could not be decoded."""

    code = "INVALID_PAYLOAD"


class ValueDepthError(TripviewError, ValueError):
    """A value nests containers deeper than the supported limit."""

    code = "VALUE_TOO_DEEP"

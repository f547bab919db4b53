"""
Error types for SeTeuk Master.

Routes map these to HTTP status codes; the generation thread maps
ServiceError and SchemaError to the ERROR state with a generic message.
"""


class SeTeukError(Exception):
    """Base class for all SeTeuk Master errors."""


class ValidationError(SeTeukError):
    """Submission rejected before any network call (empty or malformed form)."""


class DecodeError(SeTeukError):
    """A text-classified upload could not be decoded to text."""


class ServiceError(SeTeukError):
    """The Gemini call failed or returned no text."""


class SchemaError(SeTeukError):
    """The Gemini response text is not the expected JSON shape."""


class InvalidTransitionError(SeTeukError):
    """A status transition was requested from a state that does not allow it."""


class SubmissionInProgressError(InvalidTransitionError):
    """A new submission was attempted while one is still loading."""

"""zsmith exception hierarchy.

All zsmith-specific exceptions inherit from ZSmithError.
"""


class ZSmithError(Exception):
    """Base exception for all zsmith errors."""


class ContentValidationError(ZSmithError):
    """Raised when a message or content block does not match the wire format."""


class ToolExecutionError(ZSmithError):
    """Raised by a tool when it cannot produce a result.

    The dispatcher catches it and reports the message back to the model
    as an error-flagged tool result.
    """

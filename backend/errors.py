"""Failure kinds raised while decoding rendering requests.

Every error is a ``ValueError`` so pydantic validators can raise them
directly and have them reported as validation errors.
"""


class RequestDecodeError(ValueError):
    """Base class for all request decoding failures."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    @property
    def kind(self) -> str:
        return type(self).__name__

    def with_field(self, field: str) -> "RequestDecodeError":
        """Return the same error annotated with the offending field path."""
        self.field = field
        return self

    def to_dict(self) -> dict:
        return {"error": self.kind, "field": self.field, "detail": str(self)}


class MalformedPosition(RequestDecodeError):
    pass


class MalformedMove(RequestDecodeError):
    pass


class MalformedSquare(RequestDecodeError):
    pass


class NameTooLong(RequestDecodeError):
    pass


class MissingRequiredField(RequestDecodeError):
    pass


class EmptyFrameSequence(RequestDecodeError):
    pass


class InvalidRequest(RequestDecodeError):
    """Any shape or type problem not covered by a more specific kind."""

"""Domain layer errors.

Each error carries the ErrorKind reported at the pipeline boundary.
"""

from buzz.domain.value import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class EmptyContentError(ValidationError):
    """Raised when a draft is empty after trimming."""

    kind = ErrorKind.EMPTY_CONTENT

    def __init__(self) -> None:
        super().__init__("Comment cannot be empty")


class ContentTooLongError(ValidationError):
    """Raised when a draft exceeds the maximum comment length."""

    kind = ErrorKind.CONTENT_TOO_LONG

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Comment is {length} characters, maximum is {max_length}"
        )


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AlreadySubmittingError(BusinessRuleViolationError):
    """Raised when a submission is attempted while another is in flight."""

    kind = ErrorKind.ALREADY_SUBMITTING

    def __init__(self) -> None:
        super().__init__("A comment is already being submitted")

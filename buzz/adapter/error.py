"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class CommentApiError(ProviderError):
    """Comment API call failed.

    Covers transport errors, non-2xx responses, envelopes reporting
    success=false and payloads that do not map to domain models.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class PayloadMappingError(AdapterError):
    """API payload could not be mapped to a domain model."""

    pass

"""Comment API infrastructure providers."""

from dishka import Scope, provide

from buzz.adapter.api.client import HttpCommentRepository
from buzz.config import APISettings
from buzz.domain.repository import CommentRepository
from buzz.util.di.base import ProviderBase
from buzz.util.error import ConfigurationError


class ApiProvider(ProviderBase):
    """Comment API component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production comment API provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_repository(self, api_settings: APISettings) -> CommentRepository:
        """Provide HTTP comment repository.

        Raises:
            ConfigurationError: If the API base URL is not configured
        """
        if not api_settings.base_url:
            raise ConfigurationError("API base URL must be configured")

        return HttpCommentRepository(
            base_url=api_settings.base_url,
            timeout=api_settings.timeout_seconds,
            auth_token=api_settings.auth_token,
        )

"""Dependency injection module.

Every provider base in PROVIDERS is resolved through get_provider(): concrete
providers are used as they are, mockable components pick their production
or mock subclass.
"""

from typing import Type

from buzz.util.di.application import ProdApplicationProvider
from buzz.util.di.base import Component, ProviderBase
from buzz.util.di.core import ProdConfigProvider
from buzz.util.di.infrastructure import ApiProvider, ProdApiProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdApplicationProvider,
    # Mockable: HTTP API in production, in-memory API in tests
    ApiProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Select the provider class to instantiate for a base.

    Args:
        base: Entry of PROVIDERS
        use_mock: Whether a mockable component should use its mock

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdApplicationProvider",
    "ApiProvider",
    "ProdApiProvider",
]

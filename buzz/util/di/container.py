"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from buzz.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component gets its production implementation; Settings
    come from the environment and .env when first resolved.
    """
    return make_async_container(*(get_provider(base)() for base in PROVIDERS))

"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a mock and a production implementation
Component = Literal["api"]


class ProviderBase(Provider):
    """Base for all buzz providers.

    Concrete providers (config, application) have no subclasses and are
    always used as-is. A mockable component is a base class naming its
    component, with one production and one mock subclass.

    Attributes:
        __mock_component__: Component this provider implements, None if concrete
        __is_mock__: Whether this is the mock implementation
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()

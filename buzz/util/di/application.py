"""Application layer DI providers."""

from dishka import Scope, provide

from buzz.application.overlay import CommentOverlay, TimedTransition, Transition
from buzz.config import CommentSettings
from buzz.domain.repository import CommentRepository
from buzz.domain.service import SignalBus
from buzz.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    REQUEST scope corresponds to one hosting screen: it gets its own signal
    bus and overlay.
    """

    scope = Scope.REQUEST

    @provide
    def get_signal_bus(self) -> SignalBus:
        """Provide the view signal bus."""
        return SignalBus()

    @provide
    def get_transition(self, settings: CommentSettings) -> Transition:
        """Provide the overlay transition timed by settings."""
        return TimedTransition(
            entrance_seconds=settings.entrance_seconds,
            exit_seconds=settings.exit_seconds,
        )

    @provide
    def get_comment_overlay(
        self,
        comment_repository: CommentRepository,
        signals: SignalBus,
        settings: CommentSettings,
        transition: Transition,
    ) -> CommentOverlay:
        """Provide the comment overlay controller."""
        return CommentOverlay(
            comment_repository=comment_repository,
            signals=signals,
            settings=settings,
            transition=transition,
        )

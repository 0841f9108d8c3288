"""Outbound view signals.

The engine asks the view layer to focus the input, dismiss the keyboard or
show/hide the emoji picker. Signals are fire-and-forget: listeners return
nothing and a failing listener never affects the engine.
"""

from typing import Callable

import logfire

from buzz.domain.value import ViewSignal

from .base import Service

SignalListener = Callable[[ViewSignal], None]


class SignalBus(Service):
    """Delivers view signals to subscribed listeners in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[SignalListener] = []

    def subscribe(self, listener: SignalListener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            Callable that unsubscribes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, signal: ViewSignal) -> None:
        """Send a signal to every listener."""
        for listener in list(self._listeners):
            try:
                listener(signal)
            except Exception:
                logfire.exception("View signal listener failed", signal=signal.value)

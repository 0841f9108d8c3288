"""Entrance and exit transitions of the overlay.

Transitions are opaque async steps with no data dependency on the comment
store; the lifecycle controller only waits for them to finish.
"""

import asyncio
from abc import ABC, abstractmethod


class Transition(ABC):
    """Animation facility driving the overlay slide-in and slide-out."""

    @abstractmethod
    async def enter(self) -> None:
        """Run the entrance transition to completion."""
        pass

    @abstractmethod
    async def exit(self) -> None:
        """Run the exit transition to completion."""
        pass


class TimedTransition(Transition):
    """Transition that simply takes a fixed amount of time."""

    def __init__(self, entrance_seconds: float, exit_seconds: float) -> None:
        self.entrance_seconds = entrance_seconds
        self.exit_seconds = exit_seconds

    async def enter(self) -> None:
        await asyncio.sleep(self.entrance_seconds)

    async def exit(self) -> None:
        await asyncio.sleep(self.exit_seconds)

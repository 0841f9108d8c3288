"""Visibility and lifecycle controller of the comment overlay."""

import asyncio
from typing import Awaitable, Optional

import logfire

from buzz.config import CommentSettings
from buzz.domain.repository import CommentRepository
from buzz.domain.service import SignalBus
from buzz.domain.value import OverlayPhase, SubjectId

from .session import CommentSession
from .transition import TimedTransition, Transition


class CommentOverlay:
    """Drives the overlay through closed, opening, open and closing.

    The hosting screen supplies a visibility flag and a subject ID via
    set_visible(). Opening starts the entrance transition and a fetch side
    by side; closing tears the session down at once and then runs the exit
    transition. Transitions and fetches run as tasks on the current event
    loop, so set_visible() never blocks.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        signals: SignalBus,
        settings: CommentSettings,
        transition: Optional[Transition] = None,
    ) -> None:
        """Initialize a closed overlay.

        Args:
            comment_repository: Remote comment repository
            signals: Bus for view signals
            settings: Comment overlay settings
            transition: Animation facility (timed by settings if omitted)
        """
        self.comment_repository = comment_repository
        self.signals = signals
        self.settings = settings
        self.transition = transition or TimedTransition(
            settings.entrance_seconds, settings.exit_seconds
        )
        self._phase = OverlayPhase.CLOSED
        self._phase_epoch = 0
        self._session: Optional[CommentSession] = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def phase(self) -> OverlayPhase:
        return self._phase

    @property
    def session(self) -> Optional[CommentSession]:
        """Session of the current open, None while closing or closed."""
        return self._session

    def set_visible(self, visible: bool, subject_id: Optional[SubjectId] = None) -> None:
        """Apply the hosting screen's visibility flag.

        Args:
            visible: Whether the overlay should be shown
            subject_id: Subject to show comments for (required when visible)

        Raises:
            ValueError: If visible without a subject ID
        """
        if visible:
            if subject_id is None:
                raise ValueError("A subject ID is required to open the overlay")
            self._show(subject_id)
        else:
            self._hide()

    def _show(self, subject_id: SubjectId) -> None:
        if self._phase in (OverlayPhase.OPENING, OverlayPhase.OPEN):
            if self._session is not None and self._session.subject_id == subject_id:
                return
            # Subject changed while visible: fresh session, no new entrance
            logfire.info(
                "Comment overlay subject changed",
                previous_subject_id=self._session.subject_id if self._session else None,
                subject_id=subject_id,
            )
            self._start_session(subject_id)
            return

        self._enter_phase(OverlayPhase.OPENING)
        logfire.info("Comment overlay opening", subject_id=subject_id)
        self._start_session(subject_id)
        self._spawn(
            self._run_transition(
                self.transition.enter(), OverlayPhase.OPEN, self._phase_epoch
            )
        )

    def _hide(self) -> None:
        if self._phase not in (OverlayPhase.OPENING, OverlayPhase.OPEN):
            return

        self._enter_phase(OverlayPhase.CLOSING)
        logfire.info(
            "Comment overlay closing",
            subject_id=self._session.subject_id if self._session else None,
        )
        self._end_session()
        self._spawn(
            self._run_transition(
                self.transition.exit(), OverlayPhase.CLOSED, self._phase_epoch
            )
        )

    def _start_session(self, subject_id: SubjectId) -> None:
        self._end_session()
        self._session = CommentSession(
            subject_id=subject_id,
            comment_repository=self.comment_repository,
            signals=self.signals,
            settings=self.settings,
        )
        self._spawn(self._session.fetch())

    def _end_session(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _enter_phase(self, phase: OverlayPhase) -> None:
        self._phase = phase
        self._phase_epoch += 1

    async def _run_transition(
        self, transition: Awaitable[None], target: OverlayPhase, epoch: int
    ) -> None:
        """Await a transition, then settle into target if still current."""
        try:
            await transition
        except Exception:
            logfire.exception("Overlay transition failed", target=target.value)

        if epoch != self._phase_epoch:
            # Superseded by a later open/close
            return
        self._phase = target
        logfire.info("Comment overlay settled", phase=target.value)

    def _spawn(self, coro: Awaitable) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_idle(self) -> None:
        """Wait until every pending transition and fetch has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

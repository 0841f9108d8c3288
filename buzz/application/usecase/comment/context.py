"""Per-session context shared by the comment use cases."""

from typing import Optional

import logfire

from buzz.domain.service import CommentStore, ReplyTargetController, SignalBus
from buzz.domain.value import OperationError, SubjectId


class CommentContext:
    """State owned by one open overlay session.

    Created when the overlay opens and closed when it closes. Use cases
    check `active` before applying a completion: a call that finishes after
    its session was closed must not touch anything.

    Attributes:
        subject_id: Subject (post) whose comments are shown
        store: Top-level comments of the subject
        reply_target: Reply target and draft text
        signals: Bus for view signals
        last_error: Most recent collaborator failure, for a dismissible notice
    """

    def __init__(
        self,
        subject_id: SubjectId,
        store: CommentStore,
        reply_target: ReplyTargetController,
        signals: SignalBus,
    ) -> None:
        self.subject_id = subject_id
        self.store = store
        self.reply_target = reply_target
        self.signals = signals
        self.last_error: Optional[OperationError] = None
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        """Tear down: reset the composer and stop accepting completions."""
        self._active = False
        self.reply_target.reset()
        logfire.info("Comment session closed", subject_id=self.subject_id)

    def report(self, error: OperationError) -> None:
        """Record a collaborator failure for display."""
        if self._active:
            self.last_error = error

    def dismiss_error(self) -> None:
        self.last_error = None

"""Comment session: everything one open overlay owns."""

from typing import Optional

from buzz.application.usecase.comment import (
    CommentContext,
    DeleteCommentRequest,
    DeleteCommentResult,
    DeleteCommentUseCase,
    FetchCommentsResult,
    FetchCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResult,
    SubmitCommentUseCase,
)
from buzz.config import CommentSettings
from buzz.domain.model import Comment
from buzz.domain.repository import CommentRepository
from buzz.domain.service import CommentStore, ReplyTargetController, SignalBus
from buzz.domain.value import CommentId, OperationError, SubjectId


class CommentSession:
    """Comment store, composer and pipelines for one open overlay.

    A session is created fresh on every open and closed on close, so a
    reply target or draft never survives a close/open cycle.
    """

    def __init__(
        self,
        subject_id: SubjectId,
        comment_repository: CommentRepository,
        signals: SignalBus,
        settings: CommentSettings,
    ) -> None:
        self.context = CommentContext(
            subject_id=subject_id,
            store=CommentStore(),
            reply_target=ReplyTargetController(signals, settings.max_length),
            signals=signals,
        )
        self._fetch = FetchCommentsUseCase(comment_repository, self.context)
        self._submit = SubmitCommentUseCase(
            comment_repository, self.context, self._fetch, settings.max_length
        )
        self._delete = DeleteCommentUseCase(comment_repository, self.context)

    @property
    def subject_id(self) -> SubjectId:
        return self.context.subject_id

    @property
    def active(self) -> bool:
        return self.context.active

    @property
    def store(self) -> CommentStore:
        return self.context.store

    @property
    def reply_target(self) -> ReplyTargetController:
        return self.context.reply_target

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self.context.store.comments

    @property
    def draft(self) -> str:
        return self.context.reply_target.draft

    @property
    def loading(self) -> bool:
        return self._fetch.loading

    @property
    def submitting(self) -> bool:
        return self._submit.submitting

    @property
    def can_submit(self) -> bool:
        """Whether the post button is enabled."""
        return bool(self.draft.strip()) and not self.submitting

    @property
    def last_error(self) -> Optional[OperationError]:
        return self.context.last_error

    def dismiss_error(self) -> None:
        self.context.dismiss_error()

    # Composer

    def set_draft(self, text: str) -> None:
        self.context.reply_target.set_draft(text)

    def append_emoji(self, emoji: str) -> None:
        self.context.reply_target.append_emoji(emoji)

    def begin_reply(self, comment: Comment, username: Optional[str] = None) -> None:
        self.context.reply_target.begin_reply(comment, username)

    def cancel_reply(self) -> None:
        self.context.reply_target.cancel_reply()

    def toggle_emoji_picker(self) -> None:
        self.context.reply_target.toggle_emoji_picker()

    def on_input_focus(self) -> None:
        self.context.reply_target.on_input_focus()

    # Pipelines

    async def fetch(self) -> FetchCommentsResult:
        """Reload every comment of the subject."""
        return await self._fetch.execute()

    async def submit(self) -> SubmitCommentResult:
        """Submit the current draft to the current reply target."""
        return await self._submit.execute(
            SubmitCommentRequest(
                draft_text=self.draft,
                reply_target=self.context.reply_target.target,
            )
        )

    async def delete_comment(self, comment_id: CommentId) -> DeleteCommentResult:
        return await self._delete.execute(DeleteCommentRequest(comment_id=comment_id))

    def close(self) -> None:
        self.context.close()

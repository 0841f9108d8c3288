"""Submit comment use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from buzz.adapter.error import CommentApiError
from buzz.domain.error import (
    AlreadySubmittingError,
    ContentTooLongError,
    DomainError,
    EmptyContentError,
)
from buzz.domain.model import Comment
from buzz.domain.repository import CommentRepository
from buzz.domain.value import ErrorKind, OperationResult, ViewSignal

from .context import CommentContext
from .fetch_comments import FetchCommentsUseCase

SubmitCommentResult = OperationResult[Comment]


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    draft_text: str
    reply_target: Optional[Comment] = None  # Comment being replied to


class SubmitCommentUseCase:
    """Use case for posting a new comment or a reply.

    Top-level comments are prepended to the store as soon as the server
    confirms them. Replies trigger a full re-fetch: the store is a flat
    top-level list, so the server's nesting stays authoritative.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        context: CommentContext,
        fetch_comments: FetchCommentsUseCase,
        max_length: int,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_repository: Remote comment repository
            context: Session the new comment is reconciled into
            fetch_comments: Fetch use case used to refresh after a reply
            max_length: Maximum comment length after trimming
        """
        self.comment_repository = comment_repository
        self.context = context
        self.fetch_comments = fetch_comments
        self.max_length = max_length
        self._submitting = False

    @property
    def submitting(self) -> bool:
        """Whether a submission is in flight."""
        return self._submitting

    def _validate(self, draft_text: str) -> str:
        """Trim and validate the draft.

        Raises:
            AlreadySubmittingError: If a submission is in flight
            EmptyContentError: If nothing is left after trimming
            ContentTooLongError: If the trimmed draft is over max_length
        """
        if self._submitting:
            raise AlreadySubmittingError()
        content = draft_text.strip()
        if not content:
            raise EmptyContentError()
        if len(content) > self.max_length:
            raise ContentTooLongError(len(content), self.max_length)
        return content

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResult:
        """Execute submit comment flow.

        Steps:
        1. Validate the draft (no network call on failure)
        2. Create the comment, as a reply if a target is set
        3. Prepend a top-level comment, or re-fetch after a reply
        4. Clear the draft and return the composer to idle

        On a create failure the draft, reply target and store are left
        exactly as they were. Nothing is retried.

        Args:
            request: Draft text and optional reply target

        Returns:
            Result with the created comment or the failure kind
        """
        try:
            content = self._validate(request.draft_text)
        except DomainError as e:
            logfire.info("Submission rejected", kind=e.kind.value, reason=str(e))
            return SubmitCommentResult.failure(e.kind, str(e))

        subject_id = self.context.subject_id
        parent_id = request.reply_target.id if request.reply_target else None

        self._submitting = True
        try:
            with logfire.span(
                "submit_comment",
                subject_id=subject_id,
                parent_id=parent_id,
                content_length=len(content),
            ):
                try:
                    comment = await self.comment_repository.create_comment(
                        subject_id, content, parent_id
                    )
                except CommentApiError as e:
                    if not self.context.active:
                        logfire.info(
                            "Create failed after session closed",
                            subject_id=subject_id,
                            error=str(e),
                        )
                        return SubmitCommentResult.success(discarded=True)
                    logfire.warn(
                        "Creating comment failed",
                        subject_id=subject_id,
                        parent_id=parent_id,
                        error=str(e),
                    )
                    result = SubmitCommentResult.failure(
                        ErrorKind.CREATE_FAILED, str(e)
                    )
                    self.context.report(result.error)
                    return result

                if not self.context.active:
                    logfire.info(
                        "Comment created after session closed",
                        comment_id=comment.id,
                        subject_id=subject_id,
                    )
                    return SubmitCommentResult.success(comment, discarded=True)

                if parent_id is None:
                    self.context.store.prepend(comment)

                self.context.reply_target.consume_on_submit()
                self.context.reply_target.hide_emoji_picker()
                self.context.signals.emit(ViewSignal.DISMISS_KEYBOARD)

                logfire.info(
                    "Comment created",
                    comment_id=comment.id,
                    subject_id=subject_id,
                    is_reply=parent_id is not None,
                )

                if parent_id is not None:
                    refreshed = await self.fetch_comments.execute()
                    if not refreshed.ok:
                        logfire.warn(
                            "Refresh after reply failed",
                            comment_id=comment.id,
                            subject_id=subject_id,
                        )

                return SubmitCommentResult.success(comment)
        finally:
            self._submitting = False

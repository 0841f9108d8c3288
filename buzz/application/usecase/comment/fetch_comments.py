"""Fetch comments use case."""

import logfire

from buzz.adapter.error import CommentApiError
from buzz.domain.model import Comment
from buzz.domain.repository import CommentRepository
from buzz.domain.value import ErrorKind, OperationResult

from .context import CommentContext

FetchCommentsResult = OperationResult[list[Comment]]


class FetchCommentsUseCase:
    """Use case for loading every comment of the session subject."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        context: CommentContext,
    ) -> None:
        """Initialize fetch comments use case.

        Args:
            comment_repository: Remote comment repository
            context: Session the fetched comments are loaded into
        """
        self.comment_repository = comment_repository
        self.context = context
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        """Whether a fetch is in flight."""
        return self._in_flight > 0

    async def execute(self) -> FetchCommentsResult:
        """Execute fetch comments flow.

        Steps:
        1. Fetch all comments for the subject
        2. Replace the store contents with the result

        A failure leaves the store untouched. A completion arriving after
        the session closed is dropped and reported as discarded.

        Returns:
            Result with the fetched comments or FETCH_FAILED
        """
        subject_id = self.context.subject_id
        self._in_flight += 1
        try:
            with logfire.span("fetch_comments", subject_id=subject_id):
                try:
                    comments = await self.comment_repository.fetch_comments(
                        subject_id
                    )
                except CommentApiError as e:
                    if not self.context.active:
                        logfire.info(
                            "Fetch failed after session closed",
                            subject_id=subject_id,
                        )
                        return FetchCommentsResult.success(discarded=True)
                    logfire.warn(
                        "Fetching comments failed",
                        subject_id=subject_id,
                        error=str(e),
                    )
                    result = FetchCommentsResult.failure(
                        ErrorKind.FETCH_FAILED, str(e)
                    )
                    self.context.report(result.error)
                    return result

                if not self.context.active:
                    logfire.info(
                        "Dropping fetch result for closed session",
                        subject_id=subject_id,
                    )
                    return FetchCommentsResult.success(comments, discarded=True)

                self.context.store.load(comments)
                logfire.info(
                    "Comments loaded",
                    subject_id=subject_id,
                    count=len(self.context.store),
                )
                return FetchCommentsResult.success(comments)
        finally:
            self._in_flight -= 1

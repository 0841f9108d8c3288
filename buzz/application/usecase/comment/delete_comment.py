"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from buzz.adapter.error import CommentApiError
from buzz.domain.repository import CommentRepository
from buzz.domain.value import CommentId, ErrorKind, OperationResult

from .context import CommentContext

DeleteCommentResult = OperationResult[None]


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: CommentId


class DeleteCommentUseCase:
    """Use case for deleting a comment.

    Whether the user may delete a comment is decided by the view before
    this is offered; the use case does not check it.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        context: CommentContext,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_repository: Remote comment repository
            context: Session whose store drops the comment
        """
        self.comment_repository = comment_repository
        self.context = context

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResult:
        """Execute delete comment flow.

        Steps:
        1. Delete the comment remotely
        2. Remove it from the store (no-op if a fetch already dropped it)

        Args:
            request: Delete comment request

        Returns:
            Empty result on success, DELETE_FAILED otherwise
        """
        comment_id = request.comment_id
        with logfire.span("delete_comment", comment_id=comment_id):
            try:
                await self.comment_repository.delete_comment(comment_id)
            except CommentApiError as e:
                if not self.context.active:
                    logfire.info(
                        "Delete failed after session closed",
                        comment_id=comment_id,
                        error=str(e),
                    )
                    return DeleteCommentResult.success(discarded=True)
                logfire.warn(
                    "Deleting comment failed", comment_id=comment_id, error=str(e)
                )
                result = DeleteCommentResult.failure(ErrorKind.DELETE_FAILED, str(e))
                self.context.report(result.error)
                return result

            if not self.context.active:
                logfire.info(
                    "Comment deleted after session closed", comment_id=comment_id
                )
                return DeleteCommentResult.success(discarded=True)

            removed = self.context.store.remove_by_id(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id, removed=removed)
            return DeleteCommentResult.success()

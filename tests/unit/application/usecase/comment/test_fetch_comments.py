"""Unit tests for FetchCommentsUseCase."""

import asyncio

import pytest

from buzz.adapter.api.inmemory import InMemoryCommentRepository
from buzz.application.usecase.comment import FetchCommentsUseCase
from buzz.domain.value import ErrorKind, SubjectId
from tests.conftest import make_comment, make_context


class TestFetchCommentsUseCase:
    """Tests for FetchCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_fetch_loads_store_with_server_comments(self):
        """Fetched comments should replace the store contents."""
        # Arrange
        repo = InMemoryCommentRepository()
        repo.seed(
            SubjectId("P1"),
            [make_comment("c1", minutes_ago=5), make_comment("c2", minutes_ago=1)],
        )
        context, _ = make_context()
        context.store.load([make_comment("stale")])
        use_case = FetchCommentsUseCase(repo, context)

        # Act
        result = await use_case.execute()

        # Assert
        assert result.ok
        assert not result.discarded
        assert [c.id for c in result.value] == ["c2", "c1"]
        assert [c.id for c in context.store.comments] == ["c2", "c1"]
        assert repo.calls == [("fetch", "P1")]
        assert not use_case.loading

    @pytest.mark.asyncio
    async def test_fetch_failure_leaves_store_untouched(self):
        """A failed fetch should report FETCH_FAILED and keep the store."""
        # Arrange
        repo = InMemoryCommentRepository()
        repo.fail_next("fetch", "Server error")
        context, _ = make_context()
        existing = make_comment("c1")
        context.store.load([existing])
        use_case = FetchCommentsUseCase(repo, context)

        # Act
        result = await use_case.execute()

        # Assert
        assert not result.ok
        assert result.error.kind == ErrorKind.FETCH_FAILED
        assert context.store.comments == (existing,)
        assert context.last_error == result.error
        assert not use_case.loading

    @pytest.mark.asyncio
    async def test_loading_is_true_while_fetch_in_flight(self):
        """The loading flag should be set for the duration of the call."""
        # Arrange
        repo = InMemoryCommentRepository()
        repo.pause("fetch")
        context, _ = make_context()
        use_case = FetchCommentsUseCase(repo, context)

        # Act
        task = asyncio.create_task(use_case.execute())
        await asyncio.sleep(0)

        # Assert
        assert use_case.loading
        repo.resume("fetch")
        await task
        assert not use_case.loading

    @pytest.mark.asyncio
    async def test_completion_after_close_is_discarded(self):
        """A fetch finishing after the session closed must not load anything."""
        # Arrange
        repo = InMemoryCommentRepository()
        repo.seed(SubjectId("P1"), [make_comment("c1")])
        repo.pause("fetch")
        context, _ = make_context()
        use_case = FetchCommentsUseCase(repo, context)

        # Act
        task = asyncio.create_task(use_case.execute())
        await asyncio.sleep(0)
        context.close()
        repo.resume("fetch")
        result = await task

        # Assert
        assert result.ok
        assert result.discarded
        assert context.store.comments == ()

    @pytest.mark.asyncio
    async def test_failure_after_close_is_not_reported(self):
        """A fetch failing after the session closed should not surface an error."""
        # Arrange
        repo = InMemoryCommentRepository()
        repo.fail_next("fetch")
        repo.pause("fetch")
        context, _ = make_context()
        use_case = FetchCommentsUseCase(repo, context)

        # Act
        task = asyncio.create_task(use_case.execute())
        await asyncio.sleep(0)
        context.close()
        repo.resume("fetch")
        result = await task

        # Assert
        assert result.discarded
        assert context.last_error is None

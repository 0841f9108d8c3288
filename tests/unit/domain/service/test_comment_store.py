"""Unit tests for CommentStore."""

from buzz.domain.service import CommentStore
from buzz.domain.value import CommentId
from tests.conftest import make_comment


class TestLoad:
    """Tests for load method."""

    def test_load_reads_back_same_comments_in_order(self):
        """Loading a collection should read back exactly that collection."""
        store = CommentStore()
        comments = [make_comment("c3"), make_comment("c1"), make_comment("c2")]

        store.load(comments)

        assert list(store.comments) == comments
        assert len(store) == 3

    def test_load_replaces_previous_contents(self):
        """Load should replace everything held before."""
        store = CommentStore()
        store.load([make_comment("old1"), make_comment("old2")])

        store.load([make_comment("new")])

        assert [c.id for c in store.comments] == ["new"]
        assert "old1" not in store

    def test_load_empty_collection_clears_store(self):
        """Loading nothing should leave the store empty."""
        store = CommentStore()
        store.load([make_comment("c1")])

        store.load([])

        assert store.comments == ()

    def test_load_keeps_first_occurrence_of_duplicate_id(self):
        """Repeated IDs from the source should not be held twice."""
        store = CommentStore()
        first = make_comment("c1", content="first")
        second = make_comment("c1", content="second")

        store.load([first, make_comment("c2"), second])

        assert [c.id for c in store.comments] == ["c1", "c2"]
        assert store.get(CommentId("c1")).content == "first"


class TestPrepend:
    """Tests for prepend method."""

    def test_prepend_inserts_at_front(self):
        """Prepend should put the comment first and grow the store by one."""
        store = CommentStore()
        previous = [make_comment("c1"), make_comment("c2")]
        store.load(previous)
        new = make_comment("c3")

        store.prepend(new)

        assert list(store.comments) == [new] + previous
        assert len(store) == 3

    def test_prepend_into_empty_store(self):
        """Prepend on an empty store should hold just the new comment."""
        store = CommentStore()
        new = make_comment("c1")

        store.prepend(new)

        assert store.comments == (new,)

    def test_prepend_existing_id_keeps_ids_unique(self):
        """Prepending an ID already held should move it to the front once."""
        store = CommentStore()
        store.load([make_comment("c1"), make_comment("c2")])
        updated = make_comment("c2", content="from create")

        store.prepend(updated)

        assert [c.id for c in store.comments] == ["c2", "c1"]
        assert store.comments[0].content == "from create"


class TestRemoveById:
    """Tests for remove_by_id method."""

    def test_remove_present_id(self):
        """Removing a held ID should shrink the store by one."""
        store = CommentStore()
        store.load([make_comment("c1"), make_comment("c2"), make_comment("c3")])

        removed = store.remove_by_id(CommentId("c2"))

        assert removed is True
        assert [c.id for c in store.comments] == ["c1", "c3"]
        assert CommentId("c2") not in store

    def test_remove_absent_id_is_noop(self):
        """Removing an unknown ID should change nothing and not raise."""
        store = CommentStore()
        comments = [make_comment("c1"), make_comment("c2")]
        store.load(comments)

        removed = store.remove_by_id(CommentId("missing"))

        assert removed is False
        assert list(store.comments) == comments

    def test_remove_nested_reply_prunes_parent(self):
        """Removing a reply ID should drop it from its parent's replies."""
        store = CommentStore()
        reply = make_comment("r1", parent_id="c1")
        other = make_comment("r2", parent_id="c1")
        store.load([make_comment("c1", replies=[reply, other]), make_comment("c2")])

        removed = store.remove_by_id(CommentId("r1"))

        assert removed is True
        assert len(store) == 2
        parent = store.get(CommentId("c1"))
        assert [r.id for r in parent.replies] == ["r2"]

    def test_comments_snapshot_is_not_mutated_by_later_changes(self):
        """A snapshot taken before a mutation should not change."""
        store = CommentStore()
        store.load([make_comment("c1")])
        snapshot = store.comments

        store.prepend(make_comment("c2"))

        assert [c.id for c in snapshot] == ["c1"]

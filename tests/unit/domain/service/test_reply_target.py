"""Unit tests for ReplyTargetController."""

from buzz.domain.service import ReplyTargetController, SignalBus
from buzz.domain.service.reply_target import COMMENT_PLACEHOLDER, REPLY_PLACEHOLDER
from buzz.domain.value import ViewSignal
from tests.conftest import make_comment, make_user


def make_controller(max_length: int = 500) -> tuple[ReplyTargetController, list]:
    """Build a controller with a signal recorder."""
    signals = SignalBus()
    received: list[ViewSignal] = []
    signals.subscribe(received.append)
    return ReplyTargetController(signals, max_length=max_length), received


class TestBeginReply:
    """Tests for begin_reply method."""

    def test_begin_reply_prefills_mention_and_targets_comment(self):
        """Replying with a username should prefill "@username "."""
        controller, received = make_controller()
        comment = make_comment("c1", username="alice")

        controller.begin_reply(comment, "alice")

        assert controller.draft == "@alice "
        assert controller.target == comment
        assert controller.is_replying
        assert ViewSignal.REQUEST_FOCUS in received

    def test_begin_reply_without_username_leaves_draft(self):
        """Replying without a username should not touch the draft."""
        controller, _ = make_controller()
        controller.set_draft("already typed")

        controller.begin_reply(make_comment("c1"), None)

        assert controller.draft == "already typed"
        assert controller.is_replying

    def test_begin_reply_with_blank_username_leaves_draft(self):
        """A blank username counts as no username."""
        controller, _ = make_controller()
        controller.set_draft("draft")

        controller.begin_reply(make_comment("c1"), "   ")

        assert controller.draft == "draft"

    def test_begin_reply_while_replying_switches_target(self):
        """Replying again should retarget to the new comment."""
        controller, _ = make_controller()
        controller.begin_reply(make_comment("c1", username="alice"), "alice")
        second = make_comment("c2", username="bob")

        controller.begin_reply(second, "bob")

        assert controller.target == second
        assert controller.draft == "@bob "

    def test_begin_reply_with_long_username_truncates_prefill(self):
        """A mention longer than the draft limit is capped, not rejected."""
        controller, received = make_controller(max_length=500)
        comment = make_comment("c1")

        controller.begin_reply(comment, "u" * 600)

        assert controller.draft == "@" + "u" * 499
        assert controller.target == comment
        assert received == [ViewSignal.REQUEST_FOCUS]


class TestCancelReply:
    """Tests for cancel_reply method."""

    def test_cancel_reply_returns_to_idle_with_empty_draft(self):
        """Cancel should clear the target and the draft."""
        controller, received = make_controller()
        controller.begin_reply(make_comment("c1"), "alice")

        controller.cancel_reply()

        assert controller.target is None
        assert controller.draft == ""
        assert received[-1] == ViewSignal.DISMISS_KEYBOARD


class TestConsumeOnSubmit:
    """Tests for consume_on_submit method."""

    def test_consume_on_submit_resets_to_idle(self):
        """Submission should clear the target and draft without signals."""
        controller, received = make_controller()
        controller.begin_reply(make_comment("c1"), "alice")
        received.clear()

        controller.consume_on_submit()

        assert controller.target is None
        assert controller.draft == ""
        assert received == []


class TestDerivedState:
    """Tests for placeholder, label and draft editing."""

    def test_placeholder_depends_on_state(self):
        """Placeholder should switch between comment and reply."""
        controller, _ = make_controller()
        assert controller.placeholder == COMMENT_PLACEHOLDER

        controller.begin_reply(make_comment("c1"), "alice")

        assert controller.placeholder == REPLY_PLACEHOLDER

    def test_replying_to_label_falls_back_to_display_name(self):
        """Label should use the username, else the display name."""
        controller, _ = make_controller()
        assert controller.replying_to_label is None

        nameless = make_comment("c1").revised(
            author=make_user(None, name="Bob Builder")
        )
        controller.begin_reply(nameless, None)
        assert controller.replying_to_label == "Bob Builder"

        controller.begin_reply(make_comment("c2", username="bob"), "bob")
        assert controller.replying_to_label == "bob"

    def test_set_draft_is_capped_at_max_length(self):
        """Draft should be truncated like the input field."""
        controller, _ = make_controller(max_length=5)

        controller.set_draft("abcdefgh")

        assert controller.draft == "abcde"

    def test_append_emoji_extends_draft(self):
        """Picked emoji should be appended to the draft."""
        controller, _ = make_controller()
        controller.set_draft("nice ")

        controller.append_emoji("🔥")

        assert controller.draft == "nice 🔥"


class TestEmojiPicker:
    """Tests for emoji picker visibility."""

    def test_toggle_shows_picker_and_dismisses_keyboard(self):
        """Showing the picker should hide the keyboard."""
        controller, received = make_controller()

        controller.toggle_emoji_picker()

        assert controller.emoji_picker_visible
        assert received == [ViewSignal.SHOW_EMOJI_PICKER, ViewSignal.DISMISS_KEYBOARD]

    def test_toggle_twice_hides_picker(self):
        """Toggling a visible picker should hide it."""
        controller, received = make_controller()
        controller.toggle_emoji_picker()

        controller.toggle_emoji_picker()

        assert not controller.emoji_picker_visible
        assert received[-1] == ViewSignal.HIDE_EMOJI_PICKER

    def test_input_focus_hides_picker(self):
        """Focusing the input should hide a visible picker."""
        controller, _ = make_controller()
        controller.toggle_emoji_picker()

        controller.on_input_focus()

        assert not controller.emoji_picker_visible

    def test_reset_clears_everything(self):
        """Reset should force idle, empty draft and hidden picker."""
        controller, received = make_controller()
        controller.begin_reply(make_comment("c1"), "alice")
        controller.toggle_emoji_picker()

        controller.reset()

        assert controller.target is None
        assert controller.draft == ""
        assert not controller.emoji_picker_visible
        assert received[-1] == ViewSignal.HIDE_EMOJI_PICKER

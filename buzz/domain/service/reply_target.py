"""Reply targeting and composer draft state."""

from typing import Optional

from buzz.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from buzz.domain.value import Username, ViewSignal

from .base import Service
from .signals import SignalBus

COMMENT_PLACEHOLDER = "Add a comment..."
REPLY_PLACEHOLDER = "Reply to comment..."


class ReplyTargetController(Service):
    """Tracks which comment the composer replies to and the draft text.

    Two states: idle (target is None) and replying (target is a comment).
    The emoji picker visibility lives here too since it is composer state.
    """

    def __init__(
        self, signals: SignalBus, max_length: int = MAX_CONTENT_LENGTH
    ) -> None:
        """Initialize an idle controller with an empty draft.

        Args:
            signals: Bus for view signals (focus, keyboard, picker)
            max_length: Draft length cap, matching the input field limit
        """
        self.signals = signals
        self.max_length = max_length
        self._target: Optional[Comment] = None
        self._draft = ""
        self._emoji_picker_visible = False

    @property
    def target(self) -> Optional[Comment]:
        """Comment being replied to, None when idle."""
        return self._target

    @property
    def is_replying(self) -> bool:
        return self._target is not None

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def emoji_picker_visible(self) -> bool:
        return self._emoji_picker_visible

    @property
    def placeholder(self) -> str:
        """Input placeholder for the current state."""
        return REPLY_PLACEHOLDER if self.is_replying else COMMENT_PLACEHOLDER

    @property
    def replying_to_label(self) -> Optional[str]:
        """Name shown in the "Replying to" banner, None when idle."""
        if self._target is None:
            return None
        return self._target.author.display_name

    def set_draft(self, text: str) -> None:
        """Replace the draft, capped at max_length."""
        self._draft = text[: self.max_length]

    def append_emoji(self, emoji: str) -> None:
        """Append a picked emoji to the draft."""
        self.set_draft(self._draft + emoji)

    def begin_reply(self, comment: Comment, username: Optional[str] = None) -> None:
        """Start replying to a comment.

        Prefills the draft with "@username " when a username is given,
        otherwise leaves the draft untouched. Requests input focus.

        Args:
            comment: Comment to reply to
            username: Username to mention in the prefill
        """
        handle = (username or "").strip().lstrip("@")
        if handle:
            # Truncated like typed input when the mention is very long
            self.set_draft(Username(handle).mention)
        self._target = comment
        self.signals.emit(ViewSignal.REQUEST_FOCUS)

    def cancel_reply(self) -> None:
        """Stop replying, clear the draft and dismiss the keyboard."""
        self._target = None
        self._draft = ""
        self.signals.emit(ViewSignal.DISMISS_KEYBOARD)

    def consume_on_submit(self) -> None:
        """Return to idle with an empty draft after a successful submission."""
        self._target = None
        self._draft = ""

    def reset(self) -> None:
        """Force idle with an empty draft and a hidden picker."""
        self._target = None
        self._draft = ""
        self.hide_emoji_picker()

    def toggle_emoji_picker(self) -> None:
        """Show the picker (dismissing the keyboard) or hide it."""
        if self._emoji_picker_visible:
            self.hide_emoji_picker()
            return
        self._emoji_picker_visible = True
        self.signals.emit(ViewSignal.SHOW_EMOJI_PICKER)
        self.signals.emit(ViewSignal.DISMISS_KEYBOARD)

    def hide_emoji_picker(self) -> None:
        """Hide the picker if it is showing."""
        if self._emoji_picker_visible:
            self._emoji_picker_visible = False
            self.signals.emit(ViewSignal.HIDE_EMOJI_PICKER)

    def on_input_focus(self) -> None:
        """The input gained focus; the picker gives way to the keyboard."""
        self.hide_emoji_picker()

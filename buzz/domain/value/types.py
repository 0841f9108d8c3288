"""Domain value objects for the comment overlay.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from buzz.domain.value.common import RootValueObject


class ErrorKind(str, Enum):
    """Kinds of failure reported by the comment pipelines."""

    EMPTY_CONTENT = "empty_content"
    CONTENT_TOO_LONG = "content_too_long"
    ALREADY_SUBMITTING = "already_submitting"
    FETCH_FAILED = "fetch_failed"
    CREATE_FAILED = "create_failed"
    DELETE_FAILED = "delete_failed"


class OverlayPhase(str, Enum):
    """Lifecycle phase of the comment overlay."""

    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"


class ViewSignal(str, Enum):
    """Fire-and-forget notifications the engine sends to the view layer."""

    REQUEST_FOCUS = "request_focus"
    DISMISS_KEYBOARD = "dismiss_keyboard"
    SHOW_EMOJI_PICKER = "show_emoji_picker"
    HIDE_EMOJI_PICKER = "hide_emoji_picker"


class Username(RootValueObject[str]):
    """Username used for @mention prefills.

    A leading @ is stripped so "@alice" and "alice" mention the same user.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank."""
        v = v.strip().lstrip("@")
        if not v:
            raise ValueError("Username cannot be blank")
        return v

    @property
    def mention(self) -> str:
        """Mention prefix inserted into the composer."""
        return f"@{self.root} "

"""Base model for server-owned domain data."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable snapshot of data owned by the comment API.

    The engine never edits a snapshot in place. Local changes (pruning a
    deleted reply, re-threading) go through revised(), which validates the
    copy like any freshly mapped payload.
    """

    model_config = ConfigDict(frozen=True)

    def revised(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**dict(self), **changes})

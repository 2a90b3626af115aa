"""Follow-up prompt suggestions returned with an assistant answer."""

from __future__ import annotations

from assistant_models.schemas.base import WireModel
from assistant_models.schemas.enums import UserIntent


class FollowupPrompt(WireModel):
    """A suggested next user message, optionally tagged with its intent.

    The intent travels as its uppercase token, e.g. ``"IMPROVE_CODE"``.
    """

    content: str
    user_intent: UserIntent | None = None

    def with_user_intent(self, intent: UserIntent) -> FollowupPrompt:
        return self._with(user_intent=intent)

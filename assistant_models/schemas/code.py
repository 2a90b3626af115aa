"""Code query models used in outbound requests and response events."""

from __future__ import annotations

from assistant_models.schemas.base import WireModel


class ProgrammingLanguage(WireModel):
    """Language tag; any name is accepted (``"rust"``, ``"python"``, ...)."""

    language_name: str


class CodeQuery(WireModel):
    """Identifies a code search/query operation."""

    code_query_id: str
    programming_language: ProgrammingLanguage | None = None
    user_input_message_id: str | None = None

    def with_programming_language(self, language: ProgrammingLanguage) -> CodeQuery:
        return self._with(programming_language=language)

    def with_user_input_message_id(self, message_id: str) -> CodeQuery:
        """Link the query to the user message that triggered it."""
        return self._with(user_input_message_id=message_id)

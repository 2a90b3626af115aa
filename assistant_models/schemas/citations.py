"""Citation models embedded in assistant responses.

``Reference`` describes where a piece of recommended code came from
(license, repository, URL) and which part of the response text it covers.
``SupplementaryWebLink`` is a web page the assistant cites alongside its
answer.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictFloat, StrictInt

from assistant_models.schemas.base import WireModel

# Offsets are signed 32-bit integers on the wire.
SpanOffset = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]


class ContentSpan(WireModel):
    """Half-open ``[start, end)`` range within the response text.

    No ordering is enforced: a span with ``start > end`` is accepted and
    reported as empty, and its ``length`` is negative.
    """

    start: SpanOffset
    end: SpanOffset

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


class SupplementaryWebLink(WireModel):
    """A related web page cited alongside the assistant's answer."""

    url: str
    title: str | None = None
    snippet: str | None = None
    score: StrictFloat | None = None

    def with_title(self, title: str) -> SupplementaryWebLink:
        return self._with(title=title)

    def with_snippet(self, snippet: str) -> SupplementaryWebLink:
        return self._with(snippet=snippet)

    def with_score(self, score: float) -> SupplementaryWebLink:
        """Set the relevance score (unbounded; higher is more relevant)."""
        return self._with(score=score)


class MostRelevantMissedAlternative(WireModel):
    """A better-suited alternative source the recommendation did not use."""

    url: str
    license_name: str | None = None
    repository: str | None = None

    def with_license_name(self, license_name: str) -> MostRelevantMissedAlternative:
        return self._with(license_name=license_name)

    def with_repository(self, repository: str) -> MostRelevantMissedAlternative:
        return self._with(repository=repository)


class Reference(WireModel):
    """Provenance of code included in the response. Every field is optional."""

    license_name: str | None = None
    repository: str | None = None
    url: str | None = None
    information: str | None = None
    recommendation_content_span: ContentSpan | None = None
    most_relevant_missed_alternative: MostRelevantMissedAlternative | None = None

    def with_license_name(self, license_name: str) -> Reference:
        return self._with(license_name=license_name)

    def with_repository(self, repository: str) -> Reference:
        return self._with(repository=repository)

    def with_url(self, url: str) -> Reference:
        return self._with(url=url)

    def with_information(self, information: str) -> Reference:
        return self._with(information=information)

    def with_recommendation_content_span(self, span: ContentSpan) -> Reference:
        return self._with(recommendation_content_span=span)

    def with_most_relevant_missed_alternative(
        self, alternative: MostRelevantMissedAlternative
    ) -> Reference:
        return self._with(most_relevant_missed_alternative=alternative)

"""Shared fixtures: representative model instances and logging isolation."""

import logging
from collections.abc import Iterator

import pytest

from assistant_models.schemas import (
    CodeQuery,
    ContentSpan,
    MostRelevantMissedAlternative,
    ProgrammingLanguage,
    Reference,
    SupplementaryWebLink,
)


@pytest.fixture
def web_link() -> SupplementaryWebLink:
    """A web link with every optional field populated."""
    return (
        SupplementaryWebLink(url="https://example.com/docs")
        .with_title("Docs")
        .with_snippet("Reference documentation")
        .with_score(0.8125)
    )


@pytest.fixture
def full_reference() -> Reference:
    """A reference carrying both nested models."""
    return (
        Reference()
        .with_license_name("MIT")
        .with_repository("example/repo")
        .with_url("https://github.com/example/repo")
        .with_information("Adapted from example/repo")
        .with_recommendation_content_span(ContentSpan(start=10, end=42))
        .with_most_relevant_missed_alternative(
            MostRelevantMissedAlternative(url="https://github.com/other/repo")
            .with_license_name("Apache-2.0")
            .with_repository("other/repo")
        )
    )


@pytest.fixture
def code_query() -> CodeQuery:
    """A code query tagged with a language and originating message."""
    return (
        CodeQuery(code_query_id="query-123")
        .with_programming_language(ProgrammingLanguage(language_name="python"))
        .with_user_input_message_id("msg-456")
    )


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo changes a test makes to the package logger."""
    package_logger = logging.getLogger("assistant_models")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate

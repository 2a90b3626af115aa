"""Enumerations shared with the assistant API.

``UserIntent`` is owned by the remote service; the tokens below mirror its
published set and are exchanged verbatim on the wire.
"""

from enum import StrEnum


class UserIntent(StrEnum):
    """Classified intent attached to a suggested follow-up prompt."""

    SUGGEST_ALTERNATE_IMPLEMENTATION = "SUGGEST_ALTERNATE_IMPLEMENTATION"
    APPLY_COMMON_BEST_PRACTICES = "APPLY_COMMON_BEST_PRACTICES"
    IMPROVE_CODE = "IMPROVE_CODE"
    SHOW_EXAMPLES = "SHOW_EXAMPLES"
    CITE_SOURCES = "CITE_SOURCES"
    EXPLAIN_LINE_BY_LINE = "EXPLAIN_LINE_BY_LINE"
    EXPLAIN_CODE_SELECTION = "EXPLAIN_CODE_SELECTION"
    GENERATE_CLOUDFORMATION_TEMPLATE = "GENERATE_CLOUDFORMATION_TEMPLATE"
    GENERATE_UNIT_TESTS = "GENERATE_UNIT_TESTS"
    CODE_GENERATION = "CODE_GENERATION"

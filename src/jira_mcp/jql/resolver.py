"""Resolution of natural-language queries into JQL."""

import logging
from collections.abc import Sequence

from ..exceptions import TranslationUnresolvedError
from .config import LLMConfig
from .translators import EXAMPLE_PHRASINGS, JQLTranslator, KeywordTranslator, LLMTranslator

logger = logging.getLogger("jira-mcp.jql")


def unresolved_message() -> str:
    examples = ", ".join(f"'{phrase}'" for phrase in EXAMPLE_PHRASINGS)
    return (
        "Sorry, I couldn't understand your query. "
        f"Please try a different phrasing, for example: {examples}."
    )


class QueryResolver:
    """Run translators in order and stop at the first answer."""

    def __init__(self, translators: Sequence[JQLTranslator]) -> None:
        self.translators = list(translators)

    async def resolve(self, query: str) -> str:
        """Resolve a natural-language query into JQL.

        Args:
            query: Free-text query

        Returns:
            JQL string; may be empty, meaning "match all issues"

        Raises:
            TranslationUnresolvedError: If no translator produced an answer
        """
        for translator in self.translators:
            jql = await translator.translate(query)
            if jql is not None:
                logger.info(
                    f"Resolved {query!r} with {type(translator).__name__}: {jql!r}"
                )
                return jql

        logger.warning(f"Could not resolve query {query!r}")
        raise TranslationUnresolvedError(unresolved_message())


def build_query_resolver(llm_config: LLMConfig | None) -> QueryResolver:
    """Build the default chain: the language model first when configured,
    then the keyword rules."""
    translators: list[JQLTranslator] = []
    if llm_config is not None:
        translators.append(LLMTranslator(llm_config))
    translators.append(KeywordTranslator())
    return QueryResolver(translators)

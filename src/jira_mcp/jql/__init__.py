"""Natural-language to JQL resolution."""

from .config import LLMConfig
from .resolver import QueryResolver, build_query_resolver
from .translators import (
    DEFAULT_KEYWORD_RULES,
    EXAMPLE_PHRASINGS,
    KeywordRule,
    KeywordTranslator,
    LLMTranslator,
)

__all__ = [
    "DEFAULT_KEYWORD_RULES",
    "EXAMPLE_PHRASINGS",
    "KeywordRule",
    "KeywordTranslator",
    "LLMConfig",
    "LLMTranslator",
    "QueryResolver",
    "build_query_resolver",
]

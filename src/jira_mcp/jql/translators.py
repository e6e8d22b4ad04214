"""Strategies that turn a natural-language query into JQL.

Each translator answers with a JQL string or ``None`` when it has no
opinion. An empty string is a real answer: it matches every issue.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from .config import LLMConfig

logger = logging.getLogger("jira-mcp.jql")

PROMPT_TEMPLATE = (
    "Translate the following request into a Jira Query Language (JQL) query. "
    "Output only the JQL query, with no commentary, explanation or formatting.\n\n"
    "Request: {query}"
)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


class JQLTranslator(Protocol):
    """A single step of the query resolution chain."""

    async def translate(self, query: str) -> str | None: ...


class LLMTranslator:
    """Translate queries with a chat completions model.

    Failures of the completion service are logged and reported as "no
    opinion" so the next translator in the chain gets a chance.
    """

    def __init__(
        self,
        config: LLMConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.transport = transport

    def build_payload(self, query: str) -> dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "user", "content": PROMPT_TEMPLATE.format(query=query)}
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": 0,
        }

    async def translate(self, query: str) -> str | None:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=None
            ) as client:
                response = await client.post(
                    self.config.completions_url,
                    headers=headers,
                    json=self.build_payload(query),
                )
                response.raise_for_status()
                data = response.json()
            content = data["choices"][0]["message"]["content"]
            if content is not None and not isinstance(content, str):
                logger.warning(
                    f"Unsupported LLM content type: {type(content).__name__}"
                )
                return None
            jql = strip_code_fence((content or "").strip())
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"LLM translation failed with HTTP {e.response.status_code}: "
                f"{e.response.text}"
            )
            return None
        except httpx.RequestError as e:
            logger.warning(f"LLM translation request error: {e}")
            return None
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"Unexpected LLM response format: {e}")
            return None

        if not jql:
            logger.debug("LLM returned an empty translation")
            return None
        logger.info(f"LLM translated {query!r} to {jql!r}")
        return jql


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    match = _CODE_FENCE.match(text)
    return match.group(1).strip() if match else text


@dataclass(frozen=True)
class KeywordRule:
    """Map a set of lower-case cue substrings to a JQL expression.

    A cue must start at a word boundary, so "bug" matches "bugs" but not
    "debug".
    """

    cues: tuple[str, ...]
    jql: str

    def matches(self, lowered_query: str) -> bool:
        return any(
            re.search(rf"(?<!\w){re.escape(cue)}", lowered_query)
            for cue in self.cues
        )


# Checked top to bottom; the first matching rule wins.
DEFAULT_KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        ("i have now", "still open", "my open"),
        "assignee = currentUser() AND status != Done",
    ),
    KeywordRule(("in progress",), "status = 'In Progress'"),
    KeywordRule(("unassigned",), "assignee is EMPTY"),
    KeywordRule(
        ("assigned", "my issues", "assigned to me"), "assignee = currentUser()"
    ),
    KeywordRule(("bug",), "issuetype = Bug"),
    KeywordRule(("this week", "recent"), "created >= -7d ORDER BY created DESC"),
    KeywordRule(("all issues", "everything"), ""),
)

EXAMPLE_PHRASINGS: tuple[str, ...] = (
    "what issues do I have assigned",
    "what issues are in progress",
    "what issues I have now",
    "show unassigned issues",
    "show all issues",
)


class KeywordTranslator:
    """Deterministic translator based on ordered substring rules."""

    def __init__(self, rules: tuple[KeywordRule, ...] = DEFAULT_KEYWORD_RULES) -> None:
        self.rules = rules

    async def translate(self, query: str) -> str | None:
        lowered = query.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                logger.debug(f"Keyword rule {rule.cues} matched {query!r}")
                return rule.jql
        return None

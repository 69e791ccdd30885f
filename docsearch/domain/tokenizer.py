"""Deterministic text normalization for lexical scoring and highlight extraction."""

import re

from docsearch.domain.similarity import hash_token

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize_to_strings(text: str) -> list[str]:
    """Lowercase, blank out punctuation, split on whitespace, drop 1-char tokens.

    Order is preserved and duplicates are kept.
    """
    normalized = _NON_WORD.sub(" ", text.lower())
    return [token for token in normalized.split() if len(token) > 1]


def tokenize(text: str) -> set[int]:
    """Hashed, deduplicated token set of ``text``."""
    return {hash_token(token) for token in tokenize_to_strings(text)}


def extract_highlights(text: str, query: str) -> list[str]:
    """Tokens of ``text`` that also occur in ``query``, first occurrence first."""
    query_tokens = set(tokenize_to_strings(query))
    if not query_tokens:
        return []

    seen: set[str] = set()
    highlights: list[str] = []
    for token in tokenize_to_strings(text):
        if token in query_tokens and token not in seen:
            seen.add(token)
            highlights.append(token)
    return highlights

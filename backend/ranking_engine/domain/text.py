from __future__ import annotations

import string
from typing import Set

from .models import Event

NO_QUERY_SIMILARITY = 0.5
FULL_COVERAGE_BOOST = 1.5

_PUNCTUATION = str.maketrans("", "", string.punctuation)


def tokenize(text: str) -> Set[str]:
    tokens = set()
    for word in text.lower().split():
        word = word.translate(_PUNCTUATION)
        if word:
            tokens.add(word)
    return tokens


def text_similarity(query: str, text: str) -> float:
    """
    Jaccard similarity between the token sets of ``query`` and ``text``.

    An empty query is neutral (0.5) rather than a miss. When every query
    token appears in the text the ratio is boosted by 1.5, capped at 1.0.
    """
    if not query:
        return NO_QUERY_SIMILARITY
    query_tokens = tokenize(query)
    text_tokens = tokenize(text)
    if not query_tokens or not text_tokens:
        return 0.0

    common = query_tokens & text_tokens
    jaccard = len(common) / len(query_tokens | text_tokens)
    if len(common) == len(query_tokens):
        jaccard = min(jaccard * FULL_COVERAGE_BOOST, 1.0)
    return jaccard


def event_text(event: Event) -> str:
    return f"{event.title} {event.description}"

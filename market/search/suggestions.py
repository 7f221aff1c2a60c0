import logging
import re
from collections import Counter
from difflib import SequenceMatcher
from typing import Iterable, List

from .normalizer import normalize

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
_TOKEN = re.compile(r"[^\W_]+")


def _shared_prefix(a, b):
    size = 0
    for left, right in zip(a, b):
        if left != right:
            break
        size += 1
    return size


def _rank(candidate, query, frequency):
    """Sort key, best first"""
    normalized = normalize(candidate)
    return (
        -int(normalized.startswith(query) or query.startswith(normalized)),
        -_shared_prefix(normalized, query),
        -round(SequenceMatcher(None, query, normalized).ratio(), 6),
        -frequency,
        candidate,
    )


def suggest(titles: Iterable[str], query: str, max_suggestions: int = 5) -> List[str]:
    """
    Alternative search terms taken from listing titles.

    Candidates are the lower-cased words (three characters or longer) of every
    title plus whole lower-cased titles that extend the query; the latter only
    turn up when structured filters excluded the text matches. They are ranked
    by prefix relation to the query, shared prefix length, ``SequenceMatcher``
    ratio, how often the word appears, and finally alphabetically, so the same
    corpus and query always yield the same list. Failures are logged and
    produce no suggestions.
    """
    try:
        normalized_query = normalize(query or "")
        if not normalized_query or max_suggestions <= 0:
            return []

        frequency = Counter()
        for title in titles:
            if not title:
                continue
            normalized_title = normalize(title)
            if (
                normalized_title.startswith(normalized_query)
                and normalized_title != normalized_query
            ):
                frequency[title.strip().lower()] += 1
            for token in _TOKEN.findall(title.lower()):
                if len(token) >= MIN_TOKEN_LENGTH and token != normalized_query:
                    frequency[token] += 1

        ranked = sorted(
            frequency, key=lambda c: _rank(c, normalized_query, frequency[c])
        )
        return ranked[:max_suggestions]
    except Exception:
        logger.exception(f"Suggestion generation failed for query {query!r}")
        return []

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(text):
    """Lower-case ``text`` and drop every whitespace run."""
    return _WHITESPACE.sub("", text.lower())


def matches(haystack, needle):
    """
    Space-insensitive substring test.

    True when ``needle`` is found in ``haystack`` ignoring case, or when it is
    found once both sides have had their whitespace removed, so "mac book"
    finds "MacBook" and "macbook" finds "Mac Book Pro". Empty inputs never match.
    """
    if not haystack or not needle:
        return False

    if needle.lower() in haystack.lower():
        return True

    normalized_needle = normalize(needle)
    return bool(normalized_needle) and normalized_needle in normalize(haystack)


def matches_query(title, description, query):
    """Match ``query`` against a listing's title or, when present, its description."""
    if matches(title, query):
        return True
    return bool(description) and matches(description, query)

import pytest

from market.search.normalizer import matches, matches_query, normalize


def test_normalize_lowercases_and_strips_whitespace():
    assert normalize("  Mac \t Book\nPro ") == "macbookpro"


@pytest.mark.parametrize(
    "haystack, needle",
    [
        ("Mac Book Pro", "macbook"),
        ("MacBook Pro", "mac book"),
        ("Study Lamp", "LAMP"),
        ("Engineering Textbooks Bundle", "text books"),
    ],
)
def test_matches_ignores_case_and_spacing(haystack, needle):
    assert matches(haystack, needle)


@pytest.mark.parametrize(
    "haystack, needle",
    [("", "lamp"), ("Study Lamp", ""), (None, "lamp"), ("Study Lamp", None)],
)
def test_matches_rejects_empty_inputs(haystack, needle):
    assert not matches(haystack, needle)


def test_whitespace_only_needle_never_matches():
    assert not matches("Study Lamp", "   ")


def test_matches_query_falls_back_to_description():
    assert matches_query("Desk", "LED lamp with dimmer", "lamp")
    assert not matches_query("Desk", None, "lamp")
    assert not matches_query("Desk", "", "lamp")

"""Unit tests for the tokenizer and highlight extraction."""

from docsearch.domain.similarity import hash_token
from docsearch.domain.tokenizer import extract_highlights, tokenize, tokenize_to_strings


def test_tokenize_to_strings_normalizes_text():
    tokens = tokenize_to_strings("The Quick, brown fox! It's a fox-trot.")
    assert tokens == ["the", "quick", "brown", "fox", "it", "fox", "trot"]


def test_tokenize_to_strings_drops_single_characters():
    assert tokenize_to_strings("a b c de f") == ["de"]


def test_tokenize_hashes_and_deduplicates():
    tokens = tokenize("fox FOX Fox dog")
    assert tokens == {hash_token("fox"), hash_token("dog")}


def test_tokenize_blank_text_is_empty():
    assert tokenize("") == set()
    assert tokenize("   \n\t ") == set()
    assert tokenize("! ? . a") == set()


def test_highlights_for_quick_fox():
    highlights = extract_highlights("The quick brown fox jumps", "quick fox")
    assert highlights == ["quick", "fox"]


def test_highlights_follow_text_order_and_deduplicate():
    text = "Fox news: the fox saw a quick fox."
    assert extract_highlights(text, "quick FOX") == ["fox", "quick"]


def test_highlights_empty_when_nothing_matches():
    assert extract_highlights("Hello world", "turtle") == []
    assert extract_highlights("Hello world", "") == []

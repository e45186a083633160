"""Tests for the pure string analysis functions."""

from __future__ import annotations

import hashlib

import pytest

from string_analyzer.services.analyzer import (
    analyze_string,
    compute_sha256,
    count_words,
    is_palindrome,
)


def test_analyze_hello() -> None:
    props = analyze_string("hello")
    assert props["length"] == 5
    assert props["is_palindrome"] is False
    assert props["unique_characters"] == 4
    assert props["word_count"] == 1
    assert props["character_frequency_map"] == {"h": 1, "e": 1, "l": 2, "o": 1}
    assert props["sha256_hash"] == hashlib.sha256(b"hello").hexdigest()


def test_analyze_empty_string() -> None:
    props = analyze_string("")
    assert props["length"] == 0
    assert props["is_palindrome"] is True
    assert props["unique_characters"] == 0
    assert props["word_count"] == 0
    assert props["character_frequency_map"] == {}


@pytest.mark.parametrize(
    "value",
    ["A man a plan a canal Panama", "racecar", "Was it a car or a cat I saw?", "12321", "!!!", "   "],
)
def test_palindromes(value: str) -> None:
    assert is_palindrome(value) is True


@pytest.mark.parametrize("value", ["hello", "ab", "12 3 4"])
def test_not_palindromes(value: str) -> None:
    assert is_palindrome(value) is False


def test_palindrome_ignores_non_ascii_letters() -> None:
    # "é" is stripped during normalization, leaving "ab" vs "ba"
    assert is_palindrome("aéb") is False
    assert is_palindrome("aéa") is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", 0), ("   ", 0), ("one", 1), ("  two   words ", 2), ("tab\tand\nnewline", 3),
     ("nbsp\u00a0split", 2), ("bom\ufeffsplit", 2), ("unit\x1fseparator", 1), ("file\x1cseparator", 1)],
)
def test_count_words(value: str, expected: int) -> None:
    assert count_words(value) == expected


def test_frequency_is_case_sensitive_and_keeps_whitespace() -> None:
    props = analyze_string("Aa a!")
    assert props["character_frequency_map"] == {"A": 1, "a": 2, " ": 1, "!": 1}
    assert props["unique_characters"] == 4


@pytest.mark.parametrize("value", ["", "x", "hello world", "naïve café", "😀 emoji"])
def test_length_matches_character_count(value: str) -> None:
    assert analyze_string(value)["length"] == len(value)


def test_hash_is_deterministic_and_content_addressed() -> None:
    assert compute_sha256("Hello") == compute_sha256("Hello")
    assert compute_sha256("Hello") != compute_sha256("hello")
    assert compute_sha256("Hello") != compute_sha256("Hello ")
    digest = compute_sha256("naïve")
    assert digest == hashlib.sha256("naïve".encode("utf-8")).hexdigest()
    assert digest == digest.lower()
    assert len(digest) == 64


def test_hash_replaces_lone_surrogates_with_replacement_character() -> None:
    assert compute_sha256("a\ud800b") == compute_sha256("a\ufffdb")
    assert compute_sha256("\ud800") == hashlib.sha256("\ufffd".encode("utf-8")).hexdigest()

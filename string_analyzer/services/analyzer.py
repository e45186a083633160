import hashlib
import re
from collections import Counter
from typing import Dict

_NON_ALNUM = re.compile(r"[^a-z0-9]")
# Same character set as JavaScript's \s
_WHITESPACE = re.compile(r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates are hashed as U+FFFD
        data = text.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, ASCII letters and digits only)"""
    cleaned = _NON_ALNUM.sub("", text.lower())
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len([word for word in _WHITESPACE.split(text) if word])


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }

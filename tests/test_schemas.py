"""Tests for the request/response models and FilterSpec helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from string_analyzer.models.string_record import StringRecord
from string_analyzer.schemas.string_record import FilterSpec, StringCreate, StringResponse
from string_analyzer.services.analyzer import analyze_string


def test_string_create_rejects_lone_surrogates() -> None:
    with pytest.raises(ValidationError):
        StringCreate(value="a\ud800b")
    assert StringCreate(value="naïve 😀").value == "naïve 😀"


def test_from_record_builds_response_and_marks_naive_timestamps_utc() -> None:
    props = analyze_string("noon")
    record = StringRecord(
        id=props["sha256_hash"],
        value="noon",
        created_at=datetime(2024, 1, 2, 3, 4, 5),
        **props,
    )

    response = StringResponse.from_record(record)

    assert response.id == props["sha256_hash"]
    assert response.properties.is_palindrome is True
    assert response.properties.character_frequency_map == {"n": 2, "o": 2}
    assert response.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert "from_attributes" not in StringResponse.model_config


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"min_length": 5, "max_length": 4}, True),
        ({"min_length": 4, "max_length": 4}, False),
        ({"min_length": 10}, False),
        ({"max_length": -1}, False),
    ],
)
def test_has_conflicting_bounds(kwargs: dict, expected: bool) -> None:
    assert FilterSpec(**kwargs).has_conflicting_bounds() is expected


def test_applied_omits_unset_fields() -> None:
    assert FilterSpec(word_count=1, is_palindrome=False).applied() == {"word_count": 1, "is_palindrome": False}

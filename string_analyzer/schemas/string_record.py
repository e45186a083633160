from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional, List
from datetime import datetime, timezone


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

    @field_validator("value")
    @classmethod
    def validate_encodable(cls, v: str) -> str:
        """Reject lone surrogates, which cannot be stored as UTF-8"""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("value must be valid Unicode text")
        return v


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_record(cls, record) -> "StringResponse":
        created_at = record.created_at
        # SQLite hands back naive datetimes; they were written as UTC
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return cls(
            id=record.id,
            value=record.value,
            properties=StringProperties(
                length=record.length,
                is_palindrome=record.is_palindrome,
                unique_characters=record.unique_characters,
                word_count=record.word_count,
                sha256_hash=record.sha256_hash,
                character_frequency_map=record.character_frequency_map,
            ),
            created_at=created_at,
        )


class FilterSpec(BaseModel):
    """Partial set of predicates used to narrow a list of strings.

    Every field is optional; a field left as None does not constrain the result.
    """
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict:
        """Only the predicates that were actually set."""
        return self.model_dump(exclude_none=True)

    def has_conflicting_bounds(self) -> bool:
        return (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import and_, desc
from typing import List, Optional
import logging

from string_analyzer.models.string_record import StringRecord
from string_analyzer.schemas.string_record import FilterSpec
from string_analyzer.services.analyzer import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


class StringRecordError(Exception):
    """Base error for string record persistence"""

    default_message = "String record error"

    def __init__(self, string_id: str):
        self.string_id = string_id
        super().__init__(self.default_message)


class StringAlreadyExistsError(StringRecordError):
    default_message = "String already exists in the system"


class StringNotFoundError(StringRecordError):
    default_message = "String does not exist in the system"


def create_string_record(db: Session, value: str) -> StringRecord:
    """Analyze and store a new string. Raises StringAlreadyExistsError on duplicates."""
    properties = analyze_string(value)
    string_id = properties["sha256_hash"]

    if get_string_by_id(db, string_id) is not None:
        raise StringAlreadyExistsError(string_id)

    db_string = StringRecord(id=string_id, value=value, **properties)
    db.add(db_string)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same value
        db.rollback()
        logger.warning(f"Duplicate insert rejected for {string_id}")
        raise StringAlreadyExistsError(string_id)
    db.refresh(db_string)
    logger.info(f"Stored string record {string_id}")
    return db_string


def get_string_by_id(db: Session, string_id: str) -> Optional[StringRecord]:
    """Get string analysis by ID (hash)"""
    return db.query(StringRecord).filter(StringRecord.id == string_id).first()


def get_string_by_value(db: Session, value: str) -> Optional[StringRecord]:
    """Get string analysis by value, looked up through its hash"""
    return get_string_by_id(db, compute_sha256(value))


def get_all_strings(db: Session, filters: Optional[FilterSpec] = None) -> List[StringRecord]:
    """Get all strings matching the filters, newest first"""
    query = db.query(StringRecord)
    filters = filters or FilterSpec()

    conditions = []

    if filters.is_palindrome is not None:
        conditions.append(StringRecord.is_palindrome == filters.is_palindrome)

    if filters.min_length is not None:
        conditions.append(StringRecord.length >= filters.min_length)

    if filters.max_length is not None:
        conditions.append(StringRecord.length <= filters.max_length)

    if filters.word_count is not None:
        conditions.append(StringRecord.word_count == filters.word_count)

    if filters.contains_character is not None:
        # LIKE may be case-insensitive on some backends; narrowed again below
        conditions.append(StringRecord.value.contains(filters.contains_character, autoescape=True))

    if conditions:
        query = query.filter(and_(*conditions))

    records = query.order_by(desc(StringRecord.created_at)).all()

    if filters.contains_character is not None:
        records = [r for r in records if filters.contains_character in r.value]

    return records


def delete_string_by_id(db: Session, string_id: str) -> None:
    """Delete string analysis by ID. Raises StringNotFoundError if absent."""
    db_string = get_string_by_id(db, string_id)
    if db_string is None:
        raise StringNotFoundError(string_id)
    db.delete(db_string)
    db.commit()
    logger.info(f"Deleted string record {string_id}")


def delete_string(db: Session, value: str) -> None:
    """Delete string analysis by value"""
    delete_string_by_id(db, compute_sha256(value))

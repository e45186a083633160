from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from string_analyzer.database import get_db
from string_analyzer.schemas.string_record import (
    FilterSpec,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.crud import string_record as crud
from string_analyzer.services.query_interpreter import parse_natural_language_query

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, db: Session = Depends(get_db)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    try:
        db_string = crud.create_string_record(db, string_data.value)
    except crud.StringAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return StringResponse.from_record(db_string)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[int] = Query(None, ge=0, description="Minimum string length"),
    max_length: Optional[int] = Query(None, ge=0, description="Maximum string length"),
    word_count: Optional[int] = Query(None, ge=0, description="Exact word count"),
    contains_character: Optional[str] = Query(
        None, min_length=1, max_length=1, description="Filter strings that contain this character"
    ),
    db: Session = Depends(get_db)
):
    """
    Get all strings with optional filtering, newest first.
    """
    filters = FilterSpec(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    if filters.has_conflicting_bounds():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="min_length cannot be greater than max_length"
        )

    strings = crud.get_all_strings(db, filters)
    data = [StringResponse.from_record(s) for s in strings]

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.applied()
    )


# Must be registered before /strings/{string_value:path} so it is not swallowed by it
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query, e.g. 'all single word palindromic strings'"),
    db: Session = Depends(get_db)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter is required"
        )

    filters = parse_natural_language_query(query)
    if filters is None:
        logger.info(f"Unable to parse natural language query: {query!r}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to parse natural language query"
        )

    # The current rules never set min_length above max_length; kept as a guard for new rules
    if filters.has_conflicting_bounds():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Query parsed but resulted in conflicting filters"
        )

    strings = crud.get_all_strings(db, filters)
    data = [StringResponse.from_record(s) for s in strings]

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied())
    )


@router.get("/strings/{string_value:path}", response_model=StringResponse)
def get_string(string_value: str, db: Session = Depends(get_db)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    db_string = crud.get_string_by_value(db, string_value)
    if not db_string:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )

    return StringResponse.from_record(db_string)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, db: Session = Depends(get_db)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    try:
        crud.delete_string(db, string_value)
    except crud.StringNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None

import re
from typing import Optional

from fastapi import HTTPException


MAX_TERM_LENGTH = 64
MAX_QUERY_LENGTH = 100
TERM_PATTERN = re.compile(r'^[A-Za-z0-9][A-Za-z0-9 _\-]*$')


def validate_term(term: str) -> str:
    term = (term or "").strip()
    if not term:
        raise HTTPException(status_code=400, detail="term is required")
    if len(term) > MAX_TERM_LENGTH:
        raise HTTPException(status_code=400, detail=f"term too long. Maximum length is {MAX_TERM_LENGTH}")
    if not TERM_PATTERN.match(term):
        raise HTTPException(status_code=400, detail="Invalid term format")
    return term


def validate_query(query: Optional[str]) -> Optional[str]:
    if query is None:
        return None
    query = query.strip()
    if len(query) > MAX_QUERY_LENGTH:
        raise HTTPException(status_code=400, detail=f"Query too long. Maximum length is {MAX_QUERY_LENGTH}")
    return query or None

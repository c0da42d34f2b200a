"""
Dependency injection for FastAPI routes.

Database sessions are per-request; the page and count queries of one
search share that session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from roster_lite.adapters.sqlalchemy_member_search_repository import (
    SqlAlchemyMemberSearchRepository,
)
from roster_lite.infra.db.session import get_session
from roster_lite.use_cases.search_members import SearchMembers


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_search_members_use_case(db: Session = Depends(get_db)) -> SearchMembers:
    """Fresh repository and use case per request, bound to the request session."""
    repository = SqlAlchemyMemberSearchRepository(session=db)
    return SearchMembers(member_search_repository=repository)

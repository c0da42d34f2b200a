"""SQLAlchemy implementation of MemberSearchRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func, select, true
from sqlalchemy.orm import Session

from roster_lite.domain.member import MemberTeamDto
from roster_lite.domain.paging import Direction, NullsPlacement, OrderSpec, Paging
from roster_lite.domain.predicates import ComposedCondition, Operator, PredicateFragment
from roster_lite.infra.db.models import MemberRow, TeamRow
from roster_lite.ports.member_search_repository import MemberSearchRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select

logger = logging.getLogger(__name__)

# Domain attribute -> column. Team attributes need the teams join.
_COLUMNS: dict[str, Any] = {
    "member_id": MemberRow.id,
    "username": MemberRow.username,
    "age": MemberRow.age,
    "team_id": TeamRow.id,
    "team_name": TeamRow.name,
}
_TEAM_ATTRIBUTES = frozenset({"team_id", "team_name"})


class SqlAlchemyMemberSearchRepository(MemberSearchRepository):
    """
    Relational implementation of MemberSearchRepository.

    - Projects selected columns straight into MemberTeamDto (no ORM entities)
    - LEFT OUTER JOINs teams; member -> team is to-one so rows never fan out
    - Translates the composed condition into SQL WHERE clauses
    - COUNT query joins teams only when the condition filters on a team column
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session; owned by the caller, never closed here
        """
        self._session = session

    def fetch_page(self, condition: ComposedCondition, paging: Paging) -> list[MemberTeamDto]:
        query = (
            self._projection()
            .where(self._to_clause(condition))
            .order_by(*self._order_by(paging.ordering))
            .offset(paging.offset)
            .limit(paging.limit)
        )

        rows = self._session.execute(query).all()
        logger.debug(
            "Fetched member page",
            extra={"offset": paging.offset, "limit": paging.limit, "returned": len(rows)},
        )
        return [self._to_dto(row) for row in rows]

    def count(self, condition: ComposedCondition) -> int:
        query = select(func.count(MemberRow.id)).select_from(MemberRow)

        # Projection-only joins are left out of the count
        if condition.attributes & _TEAM_ATTRIBUTES:
            query = query.join(TeamRow, MemberRow.team_id == TeamRow.id)

        total = self._session.execute(query.where(self._to_clause(condition))).scalar() or 0
        logger.debug("Counted matching members", extra={"total_count": total})
        return total

    def _projection(self) -> Select[Any]:
        return (
            select(
                MemberRow.id.label("member_id"),
                MemberRow.username,
                MemberRow.age,
                TeamRow.id.label("team_id"),
                TeamRow.name.label("team_name"),
            )
            .select_from(MemberRow)
            .outerjoin(TeamRow, MemberRow.team_id == TeamRow.id)
        )

    def _to_clause(self, condition: ComposedCondition) -> ColumnElement[bool]:
        # and_(true(), ...) collapses to the bare clauses, or to TRUE when empty
        return and_(true(), *(self._fragment_clause(f) for f in condition.fragments))

    def _fragment_clause(self, fragment: PredicateFragment) -> ColumnElement[bool]:
        column = _COLUMNS[fragment.attribute]
        if fragment.operator is Operator.EQ:
            return column == fragment.value
        if fragment.operator is Operator.GOE:
            return column >= fragment.value
        return column <= fragment.value

    def _order_by(self, ordering: tuple[OrderSpec, ...]) -> list[ColumnElement[Any]]:
        clauses = []
        for spec in ordering:
            column = _COLUMNS[spec.attribute]
            clause = column.desc() if spec.direction is Direction.DESC else column.asc()
            if spec.nulls is NullsPlacement.FIRST:
                clauses.append(clause.nulls_first())
            else:
                clauses.append(clause.nulls_last())

        # Primary key tie breaker keeps pages stable across calls
        if not any(spec.attribute == "member_id" for spec in ordering):
            clauses.append(MemberRow.id.asc())
        return clauses

    def _to_dto(self, row: Any) -> MemberTeamDto:
        return MemberTeamDto(
            member_id=row.member_id,
            username=row.username,
            age=row.age,
            team_id=row.team_id,
            team_name=row.team_name,
        )

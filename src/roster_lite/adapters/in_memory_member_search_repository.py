from __future__ import annotations

from roster_lite.domain.member import MemberTeamDto
from roster_lite.domain.paging import Direction, NullsPlacement, OrderSpec, Paging
from roster_lite.domain.predicates import ComposedCondition
from roster_lite.ports.member_search_repository import MemberSearchRepository


class InMemoryMemberSearchRepository(MemberSearchRepository):
    """
    Canonical contract implementation for tests.

    - Stores already-joined member rows in insertion order
    - Applies the composed condition (AND semantics, nulls never match)
    - Orders with nulls placed per OrderSpec, then by member_id
    - Applies paging AFTER filtering and ordering
    """

    def __init__(self, members: list[MemberTeamDto]) -> None:
        self._members = members

    def fetch_page(self, condition: ComposedCondition, paging: Paging) -> list[MemberTeamDto]:
        matches = [member for member in self._members if condition.matches(member)]
        ordered = self._sort(matches, paging.ordering)

        start = paging.offset
        end = paging.offset + paging.limit
        return ordered[start:end]

    def count(self, condition: ComposedCondition) -> int:
        return sum(1 for member in self._members if condition.matches(member))

    def _sort(
        self, members: list[MemberTeamDto], ordering: tuple[OrderSpec, ...]
    ) -> list[MemberTeamDto]:
        result = sorted(members, key=lambda member: member.member_id)

        # Stable sorts applied from the least significant key to the most
        for spec in reversed(ordering):
            nulls = [m for m in result if getattr(m, spec.attribute) is None]
            values = sorted(
                (m for m in result if getattr(m, spec.attribute) is not None),
                key=lambda m, attribute=spec.attribute: getattr(m, attribute),
                reverse=spec.direction is Direction.DESC,
            )
            result = nulls + values if spec.nulls is NullsPlacement.FIRST else values + nulls
        return result

from __future__ import annotations

from dataclasses import dataclass

from roster_lite.domain.member import MEMBER_ATTRIBUTES, MemberSearchCriteria, MemberTeamDto
from roster_lite.domain.paging import Paging, resolve_total_count
from roster_lite.domain.predicates import compose
from roster_lite.ports.member_search_repository import MemberSearchRepository


@dataclass(frozen=True, slots=True)
class SearchMembersRequest:
    criteria: MemberSearchCriteria
    paging: Paging
    with_total: bool = True


@dataclass(frozen=True, slots=True)
class SearchMembersResponse:
    members: list[MemberTeamDto]
    offset: int
    limit: int
    total_count: int | None = None  # Total matching members before paging (None if not requested)


class SearchMembers:
    """
    Member search with optional filters, ordering and pagination.

    Pipeline: validate -> fragments -> composed condition -> page fetch
    -> total count (skipped when the page already proves it).
    The page and count queries share the repository's session.
    """

    def __init__(self, member_search_repository: MemberSearchRepository) -> None:
        self._repository = member_search_repository

    def execute(self, request: SearchMembersRequest) -> SearchMembersResponse:
        """
        Execute member search.

        Validates request parameters before any query is issued.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (criteria, paging, whether to count)

        Returns:
            Response containing the page of members and, if requested, the total

        Raises:
            FilterValidationError: If criteria are invalid
            PagingValidationError: If paging or ordering parameters are invalid
        """
        request.criteria.validate()
        request.paging.validate(sortable=MEMBER_ATTRIBUTES)

        condition = compose(request.criteria.fragments())
        members = self._repository.fetch_page(condition, request.paging)

        total_count = None
        if request.with_total:
            total_count = resolve_total_count(
                len(members),
                request.paging,
                lambda: self._repository.count(condition),
            )

        return SearchMembersResponse(
            members=members,
            offset=request.paging.offset,
            limit=request.paging.limit,
            total_count=total_count,
        )

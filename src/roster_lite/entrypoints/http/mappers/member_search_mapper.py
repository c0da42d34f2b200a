from __future__ import annotations

from typing import Iterable

from roster_lite.domain.errors import FilterValidationError, PagingValidationError
from roster_lite.domain.member import MemberSearchCriteria, MemberTeamDto
from roster_lite.domain.paging import Direction, NullsPlacement, OrderSpec, Paging
from roster_lite.entrypoints.http.dtos.member_search import (
    MemberResponseDTO,
    MembersSearchQueryDTO,
    MemberSearchResponseDTO,
)
from roster_lite.use_cases.search_members import SearchMembersRequest, SearchMembersResponse

_FILTER_PARAMS = ("username", "team_name", "age_goe", "age_loe")
_NULLS = {"nulls_first": NullsPlacement.FIRST, "nulls_last": NullsPlacement.LAST}


class MemberSearchMapper:
    """Maps between REST DTOs and domain models for member search."""

    @staticmethod
    def reject_unknown_params(names: Iterable[str]) -> None:
        """
        Fail on query parameters the endpoint does not understand.

        Raises:
            FilterValidationError: If any parameter name is unknown
        """
        known = set(MembersSearchQueryDTO.model_fields)
        unknown = sorted(name for name in set(names) if name not in known)
        if unknown:
            raise FilterValidationError(
                errors=[
                    {"field": name, "message": "Unknown query parameter", "code": "UNKNOWN_FIELD"}
                    for name in unknown
                ]
            )

    @staticmethod
    def to_domain_criteria(dto: MembersSearchQueryDTO) -> MemberSearchCriteria:
        """Only supplied filters are passed on; the rest stay absent."""
        return MemberSearchCriteria.from_mapping(
            {name: getattr(dto, name) for name in _FILTER_PARAMS if getattr(dto, name) is not None}
        )

    @staticmethod
    def parse_sort(sort: str | None) -> tuple[OrderSpec, ...]:
        """
        Parse ``attribute[:direction[:nulls]]`` items separated by commas.

        Raises:
            PagingValidationError: If an item is malformed
        """
        if not sort or not sort.strip():
            return Paging().ordering

        specs = []
        for item in sort.split(","):
            parts = [part.strip().lower() for part in item.split(":")]
            if len(parts) > 3 or not parts[0]:
                raise PagingValidationError(f"Malformed sort item '{item.strip()}'")
            try:
                direction = Direction(parts[1]) if len(parts) > 1 else Direction.ASC
                nulls = _NULLS[parts[2]] if len(parts) > 2 else NullsPlacement.LAST
            except (ValueError, KeyError):
                raise PagingValidationError(f"Malformed sort item '{item.strip()}'")
            specs.append(OrderSpec(parts[0], direction, nulls))
        return tuple(specs)

    @staticmethod
    def to_domain_request(dto: MembersSearchQueryDTO) -> SearchMembersRequest:
        return SearchMembersRequest(
            criteria=MemberSearchMapper.to_domain_criteria(dto),
            paging=Paging(
                offset=dto.offset,
                limit=dto.limit,
                ordering=MemberSearchMapper.parse_sort(dto.sort),
            ),
            with_total=dto.with_total,
        )

    @staticmethod
    def to_member_response(member: MemberTeamDto) -> MemberResponseDTO:
        return MemberResponseDTO(
            member_id=member.member_id,
            username=member.username,
            age=member.age,
            team_id=member.team_id,
            team_name=member.team_name,
        )

    @staticmethod
    def to_response(result: SearchMembersResponse) -> MemberSearchResponseDTO:
        """
        Converts domain search result to REST response with pagination metadata.

        ``total`` stays null when the caller opted out of counting.
        """
        return MemberSearchResponseDTO(
            members=[MemberSearchMapper.to_member_response(m) for m in result.members],
            total=result.total_count,
            offset=result.offset,
            limit=result.limit,
        )

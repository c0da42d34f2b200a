from fastapi import APIRouter, Depends, Request

from roster_lite.entrypoints.http.dependencies import get_search_members_use_case
from roster_lite.entrypoints.http.dtos.member_search import (
    MembersSearchQueryDTO,
    MemberSearchResponseDTO,
)
from roster_lite.entrypoints.http.error_responses import ErrorResponse
from roster_lite.entrypoints.http.mappers.member_search_mapper import MemberSearchMapper
from roster_lite.use_cases.search_members import SearchMembers


router = APIRouter(tags=["Members"])


@router.get(
    "/members",
    response_model=MemberSearchResponseDTO,
    summary="Search members",
    description="""
    Search members with optional filters, ordering and pagination.

    ## Filters
    - All filters use AND semantics; omitted filters don't restrict
    - username / team_name: exact match
    - age_goe / age_loe: inclusive bounds

    ## Ordering
    - `sort=age:desc,username:asc:nulls_last`
    - Nulls sort last unless `nulls_first` is given

    ## Example
    ```
    GET /v1/members?team_name=teamB&age_goe=35&age_loe=40
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def search_members(
    request: Request,
    query: MembersSearchQueryDTO = Depends(),
    use_case: SearchMembers = Depends(get_search_members_use_case),
) -> MemberSearchResponseDTO:
    """Search members endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    MemberSearchMapper.reject_unknown_params(request.query_params.keys())
    domain_request = MemberSearchMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return MemberSearchMapper.to_response(result)

from pydantic import BaseModel, ConfigDict, Field


class MemberResponseDTO(BaseModel):
    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None


class MembersSearchQueryDTO(BaseModel):
    """Query parameters for searching members."""

    username: str | None = Field(
        default=None,
        description="Filter by username (exact match)",
        examples=["member1"],
    )
    team_name: str | None = Field(
        default=None,
        description="Filter by team name (exact match)",
        examples=["teamB"],
    )
    age_goe: int | None = Field(
        default=None,
        description="Minimum age (inclusive)",
        examples=[35],
    )
    age_loe: int | None = Field(
        default=None,
        description="Maximum age (inclusive)",
        examples=[40],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )
    sort: str | None = Field(
        default=None,
        description="Comma separated attribute[:asc|desc[:nulls_first|nulls_last]]",
        examples=["age:desc,username:asc:nulls_last"],
    )
    with_total: bool = Field(
        default=True,
        description="Compute the total number of matches",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "team_name": "teamB",
                "age_goe": 35,
                "age_loe": 40,
                "offset": 0,
                "limit": 20,
                "sort": "username:desc",
            }
        }
    )


class MemberSearchResponseDTO(BaseModel):
    members: list[MemberResponseDTO]
    total: int | None
    offset: int
    limit: int

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from roster_lite.domain.errors import FilterValidationError
from roster_lite.domain.predicates import FragmentOrAbsent, eq, goe, loe

# Attributes exposed by MemberTeamDto; also the set callers may sort by
MEMBER_ATTRIBUTES = frozenset({"member_id", "username", "age", "team_id", "team_name"})


@dataclass(frozen=True, slots=True)
class MemberTeamDto:
    """Flat read-only projection of a member joined with its team."""

    member_id: int
    username: str | None
    age: int
    team_id: int | None = None
    team_name: str | None = None


@dataclass(frozen=True, slots=True)
class MemberSearchCriteria:
    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> MemberSearchCriteria:
        """
        Build criteria from loosely typed input (query params, JSON bodies).

        Raises:
            FilterValidationError: If a key is not a known criteria field
        """
        known = {field.name for field in fields(cls)}
        unknown = sorted(key for key in values if key not in known)
        if unknown:
            raise FilterValidationError(
                errors=[
                    {"field": key, "message": "Unknown filter field", "code": "UNKNOWN_FIELD"}
                    for key in unknown
                ]
            )
        return cls(**values)

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        for name in ("username", "team_name"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise FilterValidationError(f"{name} must be a string or None")

        for name in ("age_goe", "age_loe"):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                raise FilterValidationError(f"{name} must be an integer or None")

        if self.age_goe is not None and self.age_loe is not None and self.age_goe > self.age_loe:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "age_goe",
                        "message": "Must be less than or equal to age_loe",
                        "code": "INVALID_RANGE",
                    }
                ]
            )

    def fragments(self) -> list[FragmentOrAbsent]:
        """One fragment (or ABSENT) per criterion, in declaration order."""
        return [
            eq("username", self.username),
            eq("team_name", self.team_name),
            goe("age", self.age_goe),
            loe("age", self.age_loe),
        ]

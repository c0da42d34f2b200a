from __future__ import annotations

from abc import ABC, abstractmethod

from roster_lite.domain.member import MemberTeamDto
from roster_lite.domain.paging import Paging
from roster_lite.domain.predicates import ComposedCondition


class MemberSearchRepository(ABC):
    """
    Port for member search data access.

    The use case decides whether ``count`` is needed; implementations only
    execute what they are asked to. Both calls must run against the same
    session so the page and the count see one snapshot.

    Contract (Preconditions):
        - condition and paging are pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def fetch_page(self, condition: ComposedCondition, paging: Paging) -> list[MemberTeamDto]:
        """
        Fetch one page of projected members.

        Args:
            condition: Composed filter (universal condition matches every row)
            paging: Offset, limit and ordering - pre-validated

        Returns:
            At most ``paging.limit`` members, ordered per ``paging.ordering``
        """
        ...

    @abstractmethod
    def count(self, condition: ComposedCondition) -> int:
        """Total members matching ``condition``, ignoring paging."""
        ...

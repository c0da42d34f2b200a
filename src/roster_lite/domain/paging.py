from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Collection

from roster_lite.domain.errors import PagingValidationError

logger = logging.getLogger(__name__)

MAX_LIMIT = 200


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


class NullsPlacement(str, Enum):
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True, slots=True)
class OrderSpec:
    attribute: str
    direction: Direction = Direction.ASC
    nulls: NullsPlacement = NullsPlacement.LAST  # Nulls last regardless of direction


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20
    ordering: tuple[OrderSpec, ...] = (OrderSpec("member_id"),)

    def validate(self, sortable: Collection[str] | None = None) -> None:
        """
        Validate paging and ordering parameters.

        Args:
            sortable: Attribute names allowed in ordering (None skips the check)

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        # bool is an int subclass; reject it explicitly
        if not isinstance(self.offset, int) or isinstance(self.offset, bool):
            raise PagingValidationError("offset must be an integer")
        if not isinstance(self.limit, int) or isinstance(self.limit, bool):
            raise PagingValidationError("limit must be an integer")
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_LIMIT}")

        if sortable is None:
            return

        unknown = [spec.attribute for spec in self.ordering if spec.attribute not in sortable]
        if unknown:
            raise PagingValidationError(
                errors=[
                    {
                        "field": "sort",
                        "message": f"Cannot sort by '{attribute}'",
                        "code": "UNKNOWN_SORT_FIELD",
                    }
                    for attribute in unknown
                ]
            )


# ==============================================================================
# Count optimization
# ==============================================================================


def count_is_determined(returned: int, paging: Paging) -> bool:
    """
    A page shorter than the limit is the last page, so it fixes the total.

    A full page is ambiguous: more rows may follow it.
    """
    return returned < paging.limit


def resolve_total_count(
    returned: int,
    paging: Paging,
    count_query: Callable[[], int],
) -> int:
    """
    Total matching rows, running ``count_query`` only when the page can't tell.

    An empty page past the end of the match set counts as "determined" and
    yields ``offset``; no count query is issued for it.
    """
    if count_is_determined(returned, paging):
        logger.debug("Total count derived from page size; count query skipped")
        return paging.offset + returned
    return count_query()

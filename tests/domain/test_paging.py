"""
Test suite for paging validation and the count optimizer.

Boundary cases for the count decision are pinned explicitly:
exact multiple of the limit, one short, and a fully empty page.
"""

from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from roster_lite.domain.errors import PagingValidationError
from roster_lite.domain.paging import (
    MAX_LIMIT,
    Direction,
    NullsPlacement,
    OrderSpec,
    Paging,
    count_is_determined,
    resolve_total_count,
)


# ==============================================================================
# Paging Validation
# ==============================================================================


def test_defaults() -> None:
    paging = Paging()

    assert paging.offset == 0
    assert paging.limit == 20
    assert paging.ordering == (OrderSpec("member_id"),)


def test_order_spec_defaults_to_nulls_last() -> None:
    spec = OrderSpec("username", Direction.DESC)

    assert spec.nulls is NullsPlacement.LAST


@pytest.mark.parametrize(
    ("paging", "message"),
    [
        (Paging(offset=-1), "offset must be >= 0"),
        (Paging(limit=0), "limit must be > 0"),
        (Paging(limit=-5), "limit must be > 0"),
        (Paging(limit=MAX_LIMIT + 1), f"limit must be <= {MAX_LIMIT}"),
    ],
)
def test_validate_rejects_invalid_paging(paging: Paging, message: str) -> None:
    with pytest.raises(PagingValidationError, match=message):
        paging.validate()


@pytest.mark.parametrize(
    ("paging", "message"),
    [
        (Paging(offset=1.5), "offset must be an integer"),  # type: ignore[arg-type]
        (Paging(offset="1"), "offset must be an integer"),  # type: ignore[arg-type]
        (Paging(offset=True), "offset must be an integer"),
        (Paging(limit=None), "limit must be an integer"),  # type: ignore[arg-type]
        (Paging(limit=2.0), "limit must be an integer"),  # type: ignore[arg-type]
        (Paging(limit=True), "limit must be an integer"),
    ],
)
def test_validate_rejects_non_integer_paging(paging: Paging, message: str) -> None:
    with pytest.raises(PagingValidationError, match=message):
        paging.validate()


def test_validate_rejects_unknown_sort_attribute() -> None:
    paging = Paging(ordering=(OrderSpec("username"), OrderSpec("salary")))

    with pytest.raises(PagingValidationError) as exc_info:
        paging.validate(sortable={"username", "age"})

    assert exc_info.value.errors == [
        {"field": "sort", "message": "Cannot sort by 'salary'", "code": "UNKNOWN_SORT_FIELD"}
    ]


def test_validate_accepts_max_limit() -> None:
    Paging(offset=0, limit=MAX_LIMIT).validate(sortable={"member_id"})


# ==============================================================================
# Count Optimizer
# ==============================================================================


def test_full_page_is_ambiguous() -> None:
    assert not count_is_determined(returned=2, paging=Paging(limit=2))


def test_short_page_is_determined() -> None:
    assert count_is_determined(returned=1, paging=Paging(limit=2))


def test_one_short_uses_page_size_without_count_query() -> None:
    count_query = Mock(return_value=999)

    total = resolve_total_count(returned=19, paging=Paging(offset=40, limit=20), count_query=count_query)

    assert total == 59
    count_query.assert_not_called()


def test_exact_multiple_of_limit_runs_count_query() -> None:
    count_query = Mock(return_value=40)

    total = resolve_total_count(returned=20, paging=Paging(offset=20, limit=20), count_query=count_query)

    assert total == 40
    count_query.assert_called_once_with()


def test_empty_first_page_is_zero_without_count_query() -> None:
    count_query = Mock()

    assert resolve_total_count(returned=0, paging=Paging(offset=0, limit=10), count_query=count_query) == 0
    count_query.assert_not_called()


def test_empty_trailing_page_uses_offset_without_count_query() -> None:
    count_query = Mock()

    total = resolve_total_count(returned=0, paging=Paging(offset=50, limit=10), count_query=count_query)

    assert total == 50
    count_query.assert_not_called()


def test_skipped_count_query_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="roster_lite.domain.paging"):
        resolve_total_count(returned=3, paging=Paging(limit=10), count_query=Mock())

    skipped = [r for r in caplog.records if "count query skipped" in r.getMessage()]
    assert len(skipped) == 1


def test_full_page_logs_nothing_about_skipping(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="roster_lite.domain.paging"):
        resolve_total_count(returned=10, paging=Paging(limit=10), count_query=Mock(return_value=12))

    assert not [r for r in caplog.records if "count query skipped" in r.getMessage()]

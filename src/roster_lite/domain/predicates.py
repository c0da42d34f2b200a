"""Predicate fragments and their composition.

A fragment is a single restriction on one attribute. Optional criteria
that are not supplied produce the ``ABSENT`` marker instead of a fragment,
and ``compose`` drops those markers, so a search with no criteria turns
into a condition that matches every row.

Adapters translate a ``ComposedCondition`` into SQL WHERE clauses or
in-memory checks; nothing here knows about persistence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union


class Operator(str, Enum):
    EQ = "eq"
    GOE = "goe"
    LOE = "loe"


class Absent:
    """Marker for an optional criterion that was not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()


@dataclass(frozen=True, slots=True)
class PredicateFragment:
    attribute: str
    operator: Operator
    value: Any

    def matches(self, record: Any) -> bool:
        """
        Evaluate the fragment against an object exposing ``attribute``.

        A null record value never matches (same as SQL comparisons with NULL).
        """
        actual = getattr(record, self.attribute)
        if actual is None:
            return False
        if self.operator is Operator.EQ:
            return actual == self.value
        if self.operator is Operator.GOE:
            return actual >= self.value
        return actual <= self.value


FragmentOrAbsent = Union[PredicateFragment, Absent]


def eq(attribute: str, value: Any) -> FragmentOrAbsent:
    """Equality fragment, or ABSENT when the value is missing or blank."""
    if value is None:
        return ABSENT
    if isinstance(value, str) and not value.strip():
        return ABSENT
    return PredicateFragment(attribute, Operator.EQ, value)


def goe(attribute: str, value: Any) -> FragmentOrAbsent:
    """Inclusive lower bound, or ABSENT when the bound is missing."""
    if value is None:
        return ABSENT
    return PredicateFragment(attribute, Operator.GOE, value)


def loe(attribute: str, value: Any) -> FragmentOrAbsent:
    """Inclusive upper bound, or ABSENT when the bound is missing."""
    if value is None:
        return ABSENT
    return PredicateFragment(attribute, Operator.LOE, value)


@dataclass(frozen=True, slots=True)
class ComposedCondition:
    """Conjunction of fragments. No fragments means "match everything"."""

    fragments: tuple[PredicateFragment, ...] = ()

    @property
    def is_universal(self) -> bool:
        return not self.fragments

    @property
    def attributes(self) -> frozenset[str]:
        return frozenset(fragment.attribute for fragment in self.fragments)

    def matches(self, record: Any) -> bool:
        return all(fragment.matches(record) for fragment in self.fragments)


def compose(fragments: Iterable[FragmentOrAbsent]) -> ComposedCondition:
    """
    Combine fragments into one conjunctive condition.

    ABSENT markers are dropped; the remaining fragments keep their input
    order so the generated SQL is stable between calls.
    """
    return ComposedCondition(
        tuple(fragment for fragment in fragments if isinstance(fragment, PredicateFragment))
    )

"""Query Builder - construct the Instances table filter for a request.

A predicate is a small tree of frozen dataclasses:

- ``Comparison(field, op, value)``: one condition on a row property
- ``And(left, right)``: conjunction of two predicates
- ``MATCH_ALL``: the unconditional predicate

Predicates only describe the query. Table back-ends either evaluate them
locally with ``matches()`` or send ``to_filter_string()`` to a remote
table service.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from dfhv.params import RequestFilter
from dfhv.timeutil import parse_timestamp, to_filter_literal

TIMESTAMP_FIELD = "Timestamp"
NAME_FIELD = "Name"

# Allowed comparison operators (table-service names)
ALLOWED_OPS = {"eq", "ne", "gt", "ge", "lt", "le"}


@dataclass(frozen=True)
class Comparison:
    """A single condition: ``<field> <op> <value>``."""

    field: str
    op: str
    value: str | datetime

    def __post_init__(self) -> None:
        if self.op not in ALLOWED_OPS:
            raise ValueError(f"Invalid operator '{self.op}'. Allowed: {ALLOWED_OPS}")

    def to_filter_string(self) -> str:
        if isinstance(self.value, datetime):
            literal = to_filter_literal(self.value)
        else:
            literal = "'" + self.value.replace("'", "''") + "'"
        return f"{self.field} {self.op} {literal}"

    def matches(self, row: dict[str, Any]) -> bool:
        if self.field not in row:
            return False

        actual: Any = row[self.field]
        expected: Any = self.value
        if isinstance(expected, datetime):
            actual = parse_timestamp(actual)
            if actual is None:
                return False
        elif not isinstance(actual, str):
            return False

        if self.op == "eq":
            return actual == expected
        if self.op == "ne":
            return actual != expected
        if self.op == "gt":
            return actual > expected
        if self.op == "ge":
            return actual >= expected
        if self.op == "lt":
            return actual < expected
        return actual <= expected


@dataclass(frozen=True)
class And:
    """Conjunction of two predicates."""

    left: Predicate
    right: Predicate

    def to_filter_string(self) -> str:
        return f"({self.left.to_filter_string()}) and ({self.right.to_filter_string()})"

    def matches(self, row: dict[str, Any]) -> bool:
        return self.left.matches(row) and self.right.matches(row)


@dataclass(frozen=True)
class MatchAll:
    """Predicate without conditions."""

    def to_filter_string(self) -> str:
        return ""

    def matches(self, row: dict[str, Any]) -> bool:
        return True


MATCH_ALL = MatchAll()

Predicate = Union[Comparison, And, MatchAll]


def _with_name(predicate: Predicate, orchestrator_name: str | None) -> Predicate:
    if not orchestrator_name:
        return predicate
    return And(predicate, Comparison(NAME_FIELD, "eq", orchestrator_name))


def build(request_filter: RequestFilter) -> Predicate:
    """Build the Instances table predicate for a request.

    Only the parameters that are present take part. Time bounds are
    inclusive; an inverted range is passed through and matches nothing.

    Args:
        request_filter: Extracted request parameters.

    Returns:
        One of four shapes: ``(ge AND le) [AND name]``, ``ge [AND name]``,
        ``le [AND name]``, or ``name`` / ``MATCH_ALL``.
    """
    start = request_filter.start_time
    end = request_filter.end_time
    name = request_filter.orchestrator_name

    if start is not None and end is not None:
        where: Predicate = And(
            Comparison(TIMESTAMP_FIELD, "ge", start),
            Comparison(TIMESTAMP_FIELD, "le", end),
        )
        return _with_name(where, name)

    if start is not None:
        return _with_name(Comparison(TIMESTAMP_FIELD, "ge", start), name)

    if end is not None:
        return _with_name(Comparison(TIMESTAMP_FIELD, "le", end), name)

    if name:
        return Comparison(NAME_FIELD, "eq", name)
    return MATCH_ALL

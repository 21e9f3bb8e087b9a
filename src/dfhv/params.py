"""Query-string parameter extraction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator

from dfhv.timeutil import parse_timestamp

INSTANCE_ID_PARAMETER = "instanceid"
START_TIME_PARAMETER = "starttime"
END_TIME_PARAMETER = "endtime"
ORCHESTRATOR_NAME_PARAMETER = "orchestratorname"
CODE_PARAMETER = "code"

# Lower-cased parameter name -> RequestFilter field
_SLOTS = {
    INSTANCE_ID_PARAMETER: "instance_id",
    START_TIME_PARAMETER: "start_time",
    END_TIME_PARAMETER: "end_time",
    ORCHESTRATOR_NAME_PARAMETER: "orchestrator_name",
    CODE_PARAMETER: "code",
}

_TIME_SLOTS = frozenset({"start_time", "end_time"})


class RequestFilter(BaseModel):
    """Parameters honoured for one request.

    Attributes:
        start_time: Inclusive lower bound on the instance timestamp.
        end_time: Inclusive upper bound on the instance timestamp.
        orchestrator_name: Exact orchestrator name to match.
        code: Authorization code, passed through untouched.
        instance_id: Instance to show (detail only).
    """

    model_config = ConfigDict(frozen=True)

    start_time: AwareDatetime | None = None
    end_time: AwareDatetime | None = None
    orchestrator_name: str | None = None
    code: str | None = None
    instance_id: str | None = None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _assume_utc(cls, value: Any) -> Any:
        # Naive bounds are UTC, as in parse_timestamp.
        parsed = parse_timestamp(value)
        return value if parsed is None else parsed


def extract(pairs: Iterable[tuple[str, str]]) -> RequestFilter:
    """Build a RequestFilter from raw query pairs.

    Names are matched case-insensitively. The first non-blank occurrence of
    each parameter wins and later duplicates are ignored. Unparseable
    ``starttime``/``endtime`` values are treated as absent, so a later
    duplicate may still fill the slot.

    Args:
        pairs: (name, value) pairs in their original order, duplicates kept.

    Returns:
        Immutable RequestFilter.
    """
    values: dict[str, object] = {}

    for name, value in pairs:
        slot = _SLOTS.get(name.lower())
        if slot is None or slot in values:
            continue
        if value is None or not value.strip():
            continue

        if slot in _TIME_SLOTS:
            parsed = parse_timestamp(value)
            if parsed is not None:
                values[slot] = parsed
        else:
            values[slot] = value

    return RequestFilter(**values)

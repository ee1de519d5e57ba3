"""Canonical player statistics shared across ingestion and ranking layers."""

from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


NUMERIC_FIELDS: tuple[str, ...] = (
    "avg",
    "obp",
    "slg",
    "ops",
    "pa",
    "ab",
    "ab_risp",
    "sb_percent",
    "contact_percent",
    "qab_percent",
    "ba_risp",
    "bb_k",
    "sb",
    "cs",
    "xbh",
    "hr",
    "tb",
    "two_out_rbi",
    "rbi",
    "hr_rate",
    "xbh_rate",
    "two_out_rbi_rate",
)

# derived field -> (numerator, denominator)
_DERIVED_RATES: Mapping[str, tuple[str, str]] = {
    "hr_rate": ("hr", "ab"),
    "xbh_rate": ("xbh", "ab"),
    "two_out_rbi_rate": ("two_out_rbi", "ab_risp"),
}


def coerce_number(value: Any) -> float:
    """Return ``value`` as a finite float, or ``0.0`` when that is not possible."""

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().rstrip("%")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _raw_value(data: Mapping[str, Any], field: str) -> Any:
    for key in (field, to_camel(field)):
        if key in data:
            return data[key]
    return None


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class PlayerStats(BaseModel):
    """Batting statistics for one roster player.

    Every numeric field defaults to ``0`` and anything unparseable (including
    ``NaN`` and infinities) is coerced to ``0``. Both snake_case names and the
    camelCase aliases (``abRisp``, ``sbPercent``...) are accepted on input.
    """

    id: str = Field(..., min_length=1)
    name: str = ""

    avg: float = 0.0
    obp: float = 0.0
    slg: float = 0.0
    ops: float = 0.0

    pa: float = 0.0
    ab: float = 0.0
    ab_risp: float = 0.0

    sb_percent: float = 0.0
    contact_percent: float = 0.0
    qab_percent: float = 0.0
    ba_risp: float = 0.0
    bb_k: float = 0.0

    sb: float = 0.0
    cs: float = 0.0
    xbh: float = 0.0
    hr: float = 0.0
    tb: float = 0.0
    two_out_rbi: float = 0.0
    rbi: float = 0.0

    hr_rate: float = 0.0
    xbh_rate: float = 0.0
    two_out_rbi_rate: float = 0.0

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_numeric(cls, value: Any) -> float:
        return coerce_number(value)

    @model_validator(mode="before")
    @classmethod
    def _derive_rates(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        values = dict(data)
        for field, (numerator, denominator) in _DERIVED_RATES.items():
            if not _is_absent(_raw_value(values, field)):
                continue
            top = coerce_number(_raw_value(values, numerator))
            bottom = coerce_number(_raw_value(values, denominator))
            values.pop(to_camel(field), None)
            values[field] = top / bottom if bottom > 0 else 0.0
        return values

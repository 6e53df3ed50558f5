"""
Row schemas for the CSV sources.

Each CSV record is decoded into a pydantic model; the outcome is wrapped
in a ``Decoded`` result so loaders can decide what to do with a bad row
instead of catching validation errors inline.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import (
    AliasChoices,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationError,
    field_validator,
)

from replay.errors import ParseError

M = TypeVar("M", bound=BaseModel)


class CoordinateRow(BaseModel):
    """One LED of the track layout."""

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    x_led: float = Field(validation_alias=AliasChoices("x_led", "x"))
    y_led: float = Field(validation_alias=AliasChoices("y_led", "y"))


class SampleRow(BaseModel):
    """One recorded car position; ``time_delta`` may be blank or absent."""

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    date: AwareDatetime = Field(validation_alias=AliasChoices("date", "timestamp"))
    x_led: float = Field(validation_alias=AliasChoices("x_led", "x"))
    y_led: float = Field(validation_alias=AliasChoices("y_led", "y"))
    time_delta: Optional[NonNegativeInt] = None

    @field_validator("date", mode="before")
    @classmethod
    def _iso_only(cls, value: Any) -> datetime:
        # pydantic would also take unix epochs and a few other shapes
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("timestamp must be an ISO-8601 string")
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"'{value}' is not an ISO-8601 timestamp with offset") from None

    @field_validator("date", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)

    @field_validator("time_delta", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        return value

    @property
    def delay_ms(self) -> int:
        return self.time_delta if self.time_delta is not None else 0


class TimedSampleRow(SampleRow):
    """Combined-file variant: every row carries its own ``time_delta``."""

    time_delta: NonNegativeInt


@dataclass(frozen=True)
class Decoded(Generic[M]):
    """Tagged decode result: exactly one of ``value`` / ``error`` is set."""

    value: Optional[M] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_row(model: Type[M], record: Dict[str, Any], row: int) -> Decoded[M]:
    try:
        return Decoded(value=model.model_validate(record))
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else None
        return Decoded(error=ParseError(row, first.get("msg", "invalid value"), field))


def required_columns(model: Type[BaseModel]) -> List[Tuple[str, ...]]:
    """
    Column alternatives a CSV header must provide for ``model``.

    Each entry lists the accepted spellings of one required column.
    """
    out: List[Tuple[str, ...]] = []
    for name, info in model.model_fields.items():
        if not info.is_required():
            continue
        alias = info.validation_alias
        if isinstance(alias, AliasChoices):
            out.append(tuple(str(c) for c in alias.choices))
        else:
            out.append((name,))
    return out

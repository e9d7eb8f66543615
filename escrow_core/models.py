from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union

INSPECTION_LABEL = "Inspection"


@dataclass(frozen=True)
class Single:
    day: Optional[date] = None


@dataclass(frozen=True)
class Range:
    start: Optional[date] = None
    end: Optional[date] = None


FieldValue = Union[Single, Range]


@dataclass(frozen=True)
class Field:
    name: str
    value: FieldValue


@dataclass(frozen=True)
class NamedDate:
    label: str
    day: date

    @property
    def month_key(self):
        return (self.day.year, self.day.month)

    def to_payload(self):
        return {"name": self.label, "value": self.day.isoformat()}


MonthBucket = Tuple[NamedDate, ...]


@dataclass(frozen=True)
class Partition:
    entries: MonthBucket
    first: MonthBucket
    second: MonthBucket

    def buckets(self):
        return [self.first, self.second]

    def to_payload(self):
        return [[item.to_payload() for item in bucket] for bucket in self.buckets()]


@dataclass(frozen=True)
class Cell:
    day_of_month: Optional[int] = None
    events: Tuple[NamedDate, ...] = ()

    @property
    def is_blank(self):
        return self.day_of_month is None


@dataclass(frozen=True)
class LabelPlacement:
    label: str
    highlighted: bool = False
    pinned_bottom: bool = False


@dataclass(frozen=True)
class CalendarGrid:
    year: int
    month: int
    month_name: str
    first_weekday: int
    days_in_month: int
    cells: Tuple[Cell, ...] = field(default_factory=tuple)

    @property
    def stray_days(self):
        return [cell.day_of_month for cell in self.cells if not cell.is_blank and cell.day_of_month > self.days_in_month]

    @property
    def hidden_days(self):
        shown = {cell.day_of_month for cell in self.cells if not cell.is_blank}
        return [day for day in range(1, self.days_in_month + 1) if day not in shown]

    def weeks(self):
        return [self.cells[start:start + 7] for start in range(0, len(self.cells), 7)]


@dataclass(frozen=True)
class EscrowForm:
    address: str = ""
    fields: Tuple[Field, ...] = ()

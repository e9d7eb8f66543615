from __future__ import annotations

from datetime import date
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field


class DateRangePayload(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class CustomFieldPayload(BaseModel):
    name: str = ""
    value: Optional[date] = None


class CalendarRequest(BaseModel):
    address: str = ""
    acceptance: Optional[date] = None
    inspection: DateRangePayload = Field(default_factory=DateRangePayload)
    loan_appraisal: DateRangePayload = Field(default_factory=DateRangePayload)
    custom_fields: List[CustomFieldPayload] = Field(default_factory=list)


class LabelPayload(BaseModel):
    label: str
    highlighted: bool = False
    pinned_bottom: bool = False


class CellPayload(BaseModel):
    day: Optional[int] = None
    labels: List[LabelPayload] = Field(default_factory=list)


class GridPayload(BaseModel):
    year: int
    month: int
    month_name: str
    first_weekday: int
    days_in_month: int
    weekday_labels: List[str]
    weeks: List[List[CellPayload]]
    stray_days: List[int] = Field(default_factory=list)
    hidden_days: List[int] = Field(default_factory=list)


class CalendarResponse(BaseModel):
    title: str
    heading: str
    second_month_name: Optional[str] = None
    grid: GridPayload
    listing: List[List[Dict[str, Any]]]


class ErrorResponse(BaseModel):
    detail: str
    error: str

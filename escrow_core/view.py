from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from escrow_core.grid import build_month_grid, grid_to_payload, month_name
from escrow_core.models import CalendarGrid, EscrowForm, Partition
from escrow_core.normalizer import partition_by_month

logger = logging.getLogger(__name__)

TITLE_SUFFIX = "Escrow Calendar"


@dataclass(frozen=True)
class CalendarView:
    title: str
    partition: Partition
    grid: CalendarGrid
    second_month_name: Optional[str] = None

    @property
    def heading(self):
        return f"{self.grid.month_name} {self.grid.year}"

    def listing(self):
        return self.partition.to_payload()

    def to_payload(self):
        return {
            "title": self.title,
            "heading": self.heading,
            "second_month_name": self.second_month_name,
            "grid": grid_to_payload(self.grid),
            "listing": self.listing(),
        }


def build_title(address):
    return f"{(address or '').strip()} - {TITLE_SUFFIX}"


@lru_cache(maxsize=64)
def build_calendar_view(form: EscrowForm, conserve_days=False, reject_extra_months=False) -> CalendarView:
    partition = partition_by_month(form.fields, reject_extra_months=reject_extra_months)
    grid = build_month_grid(partition.first, conserve_days=conserve_days)
    second_name = month_name(partition.second[0].day.month) if partition.second else None
    logger.debug("Built calendar view for %s (second month: %s)", grid.month_name, second_name)
    return CalendarView(
        title=build_title(form.address),
        partition=partition,
        grid=grid,
        second_month_name=second_name,
    )

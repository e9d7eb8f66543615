from __future__ import annotations

import logging
from typing import Iterable, List

from escrow_core.errors import EmptyInputError, InvalidRangeError, MonthSpanError
from escrow_core.models import Field, NamedDate, Partition, Range, Single

logger = logging.getLogger(__name__)


def flatten_field(field: Field) -> List[NamedDate]:
    value = field.value
    if isinstance(value, Single):
        if value.day is None:
            return []
        return [NamedDate(field.name, value.day)]
    if isinstance(value, Range):
        if value.start is not None and value.end is not None and value.end < value.start:
            raise InvalidRangeError(field.name, value.start, value.end)
        return [NamedDate(field.name, bound) for bound in (value.start, value.end) if bound is not None]
    raise TypeError(f"Unsupported field value for {field.name!r}: {type(value).__name__}")


def flatten_fields(fields: Iterable[Field]) -> List[NamedDate]:
    entries = []
    for field in fields:
        entries.extend(flatten_field(field))
    return entries


def sort_entries(entries):
    # sorted() is stable, so same-day entries keep field order.
    return sorted(entries, key=lambda item: item.day)


def partition_by_month(fields: Iterable[Field], reject_extra_months=False) -> Partition:
    """Flatten, sort and split the entries into the earliest month and the rest.

    Anything outside the earliest month lands in the second bucket. A third
    distinct month is merged there as well unless ``reject_extra_months`` is
    set, in which case ``MonthSpanError`` is raised.
    """
    entries = sort_entries(flatten_fields(fields))
    if not entries:
        raise EmptyInputError()

    first_month = entries[0].month_key
    first = [item for item in entries if item.month_key == first_month]
    second = [item for item in entries if item.month_key != first_month]

    months = []
    for item in entries:
        if item.month_key not in months:
            months.append(item.month_key)
    if len(months) > 2:
        if reject_extra_months:
            raise MonthSpanError(months)
        logger.warning("Dates span %s months; merging %s into the second month", len(months), months[2:])

    logger.debug("Partitioned %s dates into %s + %s", len(entries), len(first), len(second))
    return Partition(entries=tuple(entries), first=tuple(first), second=tuple(second))

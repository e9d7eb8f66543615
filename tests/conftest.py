from datetime import date

import pytest

from escrow_core.fields import build_form
from escrow_core.models import Range, Single
from escrow_core.view import build_calendar_view


@pytest.fixture(autouse=True)
def _clear_view_cache():
    build_calendar_view.cache_clear()
    yield
    build_calendar_view.cache_clear()


@pytest.fixture
def scenario_a_form():
    return build_form(
        "12 Oak Lane",
        {
            "acceptance": Single(date(2024, 3, 5)),
            "inspection": Range(date(2024, 3, 10), date(2024, 3, 15)),
        },
    )


@pytest.fixture
def scenario_b_form():
    return build_form(
        "40 Pine Street",
        {"loan_appraisal": Range(date(2024, 3, 28), date(2024, 4, 3))},
    )

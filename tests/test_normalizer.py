from datetime import date

import pytest

from escrow_core.errors import EmptyInputError, InvalidRangeError, MonthSpanError
from escrow_core.fields import build_form
from escrow_core.models import Field, NamedDate, Range, Single
from escrow_core.normalizer import flatten_field, flatten_fields, partition_by_month


def test_single_field_flattens_to_one_entry():
    assert flatten_field(Field("Acceptance", Single(date(2024, 3, 5)))) == [
        NamedDate("Acceptance", date(2024, 3, 5))
    ]


def test_unset_values_contribute_nothing():
    assert flatten_field(Field("Acceptance", Single())) == []
    assert flatten_field(Field("Inspection", Range())) == []


def test_range_with_both_bounds_yields_two_entries_with_same_label():
    entries = flatten_field(Field("Inspection", Range(date(2024, 3, 10), date(2024, 3, 15))))
    assert [item.label for item in entries] == ["Inspection", "Inspection"]
    assert [item.day for item in entries] == [date(2024, 3, 10), date(2024, 3, 15)]


def test_range_with_one_bound_yields_one_entry():
    assert flatten_field(Field("Inspection", Range(start=date(2024, 3, 10)))) == [
        NamedDate("Inspection", date(2024, 3, 10))
    ]
    assert flatten_field(Field("Inspection", Range(end=date(2024, 3, 15)))) == [
        NamedDate("Inspection", date(2024, 3, 15))
    ]


def test_reversed_range_is_rejected():
    with pytest.raises(InvalidRangeError) as excinfo:
        flatten_field(Field("Inspection", Range(date(2024, 3, 15), date(2024, 3, 10))))
    assert excinfo.value.label == "Inspection"


def test_unknown_value_type_is_a_type_error():
    with pytest.raises(TypeError):
        flatten_field(Field("Acceptance", date(2024, 3, 5)))


def test_scenario_a_first_bucket(scenario_a_form):
    partition = partition_by_month(scenario_a_form.fields)
    assert partition.first == (
        NamedDate("Acceptance", date(2024, 3, 5)),
        NamedDate("Inspection", date(2024, 3, 10)),
        NamedDate("Inspection", date(2024, 3, 15)),
    )
    assert partition.second == ()


def test_scenario_b_splits_range_across_months(scenario_b_form):
    partition = partition_by_month(scenario_b_form.fields)
    assert partition.first == (NamedDate("Loan & Appraisal", date(2024, 3, 28)),)
    assert partition.second == (NamedDate("Loan & Appraisal", date(2024, 4, 3)),)


def test_scenario_c_all_unset_raises():
    with pytest.raises(EmptyInputError):
        partition_by_month(build_form("", {}).fields)


def test_entries_are_sorted_chronologically():
    form = build_form(
        "",
        {
            "acceptance": Single(date(2024, 5, 20)),
            "inspection": Range(date(2024, 5, 2), date(2024, 5, 9)),
        },
        [("Closing", date(2024, 5, 1))],
    )
    partition = partition_by_month(form.fields)
    days = [item.day for item in partition.first]
    assert days == sorted(days)
    assert {(item.day.year, item.day.month) for item in partition.first} == {(2024, 5)}
    assert partition.first[0].label == "Closing"


def test_same_day_ties_keep_field_order():
    form = build_form(
        "",
        {"acceptance": Single(date(2024, 6, 3))},
        [("Walkthrough", date(2024, 6, 3)), ("Closing", date(2024, 6, 3))],
    )
    partition = partition_by_month(form.fields)
    assert [item.label for item in partition.first] == ["Acceptance", "Walkthrough", "Closing"]


def test_same_month_of_another_year_goes_to_second_bucket():
    form = build_form("", {"acceptance": Single(date(2024, 3, 5))}, [("Renewal", date(2025, 3, 5))])
    partition = partition_by_month(form.fields)
    assert [item.label for item in partition.first] == ["Acceptance"]
    assert [item.label for item in partition.second] == ["Renewal"]


def test_year_boundary():
    form = build_form(
        "",
        {
            "acceptance": Single(date(2024, 12, 30)),
            "loan_appraisal": Range(date(2024, 12, 31), date(2025, 1, 5)),
        },
    )
    partition = partition_by_month(form.fields)
    assert [item.day for item in partition.first] == [date(2024, 12, 30), date(2024, 12, 31)]
    assert [item.day for item in partition.second] == [date(2025, 1, 5)]


def test_third_month_is_merged_into_second_bucket(caplog):
    form = build_form(
        "",
        {
            "acceptance": Single(date(2024, 1, 10)),
            "inspection": Range(date(2024, 2, 1), date(2024, 3, 5)),
        },
    )
    with caplog.at_level("WARNING", logger="escrow_core.normalizer"):
        partition = partition_by_month(form.fields)
    assert [item.day for item in partition.second] == [date(2024, 2, 1), date(2024, 3, 5)]
    assert "3 months" in caplog.text


def test_third_month_can_be_rejected():
    form = build_form(
        "",
        {
            "acceptance": Single(date(2024, 1, 10)),
            "inspection": Range(date(2024, 2, 1), date(2024, 3, 5)),
        },
    )
    with pytest.raises(MonthSpanError) as excinfo:
        partition_by_month(form.fields, reject_extra_months=True)
    assert excinfo.value.months == [(2024, 1), (2024, 2), (2024, 3)]


def test_listing_keeps_all_entries(scenario_b_form):
    partition = partition_by_month(scenario_b_form.fields)
    assert partition.to_payload() == [
        [{"name": "Loan & Appraisal", "value": "2024-03-28"}],
        [{"name": "Loan & Appraisal", "value": "2024-04-03"}],
    ]
    assert len(flatten_fields(scenario_b_form.fields)) == len(partition.entries)

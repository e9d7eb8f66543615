from __future__ import annotations

from escrow_core.models import EscrowForm, Field, Range, Single

ADDRESS_LABEL = "Address"

# (key, label, kind) in the order the form lists them.
FIXED_FIELDS = [
    ("acceptance", "Acceptance", "single"),
    ("inspection", "Inspection", "range"),
    ("loan_appraisal", "Loan & Appraisal", "range"),
]
FIXED_FIELD_LABELS = {key: label for key, label, _ in FIXED_FIELDS}
FIXED_FIELD_KINDS = {key: kind for key, _, kind in FIXED_FIELDS}


def empty_value(kind):
    return Range() if kind == "range" else Single()


def build_form(address, fixed_values, custom_fields=()):
    """Assemble an immutable form snapshot.

    ``fixed_values`` maps fixed field keys to ``Single``/``Range`` values;
    missing keys count as unset. ``custom_fields`` is a sequence of
    ``(name, date_or_none)`` pairs.
    """
    fields = []
    for key, label, kind in FIXED_FIELDS:
        value = fixed_values.get(key)
        if value is None:
            value = empty_value(kind)
        fields.append(Field(label, value))
    for name, day in custom_fields:
        fields.append(Field(str(name or ""), Single(day)))
    return EscrowForm(address=str(address or ""), fields=tuple(fields))

"""Unit tests for RecordPatch: only supplied fields count as changes."""

from datetime import date

from brick_catalog.domain.entities import RecordPatch


def test_empty_patch():
    patch = RecordPatch()
    assert patch.is_empty()
    assert patch.changes() == {}
    assert not patch.supplies("title")


def test_none_is_a_supplied_value():
    patch = RecordPatch(notes=None, value_last_updated=date(2024, 3, 5))

    assert not patch.is_empty()
    assert patch.supplies("notes")
    assert patch.changes() == {"notes": None, "value_last_updated": date(2024, 3, 5)}


def test_falsy_values_are_changes():
    patch = RecordPatch(owned=False, quantity_owned=0, series="")
    assert patch.changes() == {"owned": False, "quantity_owned": 0, "series": ""}

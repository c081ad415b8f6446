"""Tests for the interval and filter catalog."""

import pytest

from journal_query.domain import catalog
from journal_query.domain.errors import UnknownFilterNameError, UnknownIntervalError


def test_intervals_include_range_sentinel():
    """Test that the explicit range is always selectable."""
    tags = [option.tag for option in catalog.intervals()]

    assert catalog.RANGE_TAG in tags
    assert tags == ["boot", "previous-boot", "today", "yesterday", "range"]


def test_filters_are_stable():
    """Test that the filter catalog keeps its order across calls."""
    assert catalog.filters() == catalog.filters()
    assert catalog.filter_names() == ("unit", "identifier", "priority", "boot-id", "match")


def test_priority_filter():
    """Test the enum-like priority filter."""
    spec = catalog.filter_spec("priority")

    assert spec.multiple is False
    assert spec.is_enum
    assert spec.allowed_values[:4] == ("emerg", "alert", "crit", "err")


def test_unit_filter_accepts_multiple_values():
    """Test the free text unit filter."""
    spec = catalog.filter_spec("unit")

    assert spec.multiple is True
    assert spec.allowed_values is None


def test_unknown_lookups():
    """Test lookups of names missing from the catalog."""
    with pytest.raises(UnknownFilterNameError):
        catalog.filter_spec("nope")

    with pytest.raises(UnknownIntervalError):
        catalog.interval_option("nope")


def test_catalog_entries_are_frozen():
    """Test that catalog rows cannot be modified."""
    with pytest.raises(AttributeError):
        catalog.intervals()[0].label = "changed"

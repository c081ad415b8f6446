"""Static catalog of the intervals and filters a query may use."""

from typing import Tuple

from journal_query.domain.errors import UnknownFilterNameError, UnknownIntervalError
from journal_query.domain.models import FilterSpec, IntervalOption

# Selecting this tag means the since/until bounds are read instead.
RANGE_TAG = "range"

PRIORITIES = ("emerg", "alert", "crit", "err", "warning", "notice", "info", "debug")

_INTERVALS: Tuple[IntervalOption, ...] = (
    IntervalOption(tag="boot", label="Since system's boot"),
    IntervalOption(tag="previous-boot", label="From previous boot"),
    IntervalOption(tag="today", label="Today"),
    IntervalOption(tag="yesterday", label="Yesterday"),
    IntervalOption(tag=RANGE_TAG, label="Between these dates"),
)

_FILTERS: Tuple[FilterSpec, ...] = (
    FilterSpec(
        name="unit",
        label="For these systemd units",
        multiple=True,
        option="--unit",
    ),
    FilterSpec(
        name="identifier",
        label="For these syslog identifiers",
        multiple=True,
        option="--identifier",
    ),
    FilterSpec(
        name="priority",
        label="With at least this priority",
        allowed_values=PRIORITIES,
        option="--priority",
    ),
    FilterSpec(
        name="boot-id",
        label="For this boot ID",
        option="_BOOT_ID=",
    ),
    FilterSpec(
        name="match",
        label="For these files (executables or devices)",
        multiple=True,
    ),
)

_FILTERS_BY_NAME = {spec.name: spec for spec in _FILTERS}
_INTERVALS_BY_TAG = {option.tag: option for option in _INTERVALS}


def intervals() -> Tuple[IntervalOption, ...]:
    """Selectable intervals, in display order."""
    return _INTERVALS


def filters() -> Tuple[FilterSpec, ...]:
    """Supported filters, in display order."""
    return _FILTERS


def filter_names() -> Tuple[str, ...]:
    return tuple(spec.name for spec in _FILTERS)


def filter_spec(name: str) -> FilterSpec:
    try:
        return _FILTERS_BY_NAME[name]
    except KeyError:
        raise UnknownFilterNameError(name) from None


def interval_option(tag: str) -> IntervalOption:
    try:
        return _INTERVALS_BY_TAG[tag]
    except KeyError:
        raise UnknownIntervalError(tag) from None

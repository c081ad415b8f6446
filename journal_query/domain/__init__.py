"""Domain models for the journal query system."""

from .models import FilterSpec, IntervalOption, Named, Query, Range, RawInputs
from .errors import (
    InvalidFilterValueError,
    InvalidRangeError,
    InvalidTimestampError,
    UnknownFilterNameError,
    UnknownIntervalError,
    ValidationError,
)

__all__ = [
    "FilterSpec",
    "IntervalOption",
    "Named",
    "Query",
    "Range",
    "RawInputs",
    "InvalidFilterValueError",
    "InvalidRangeError",
    "InvalidTimestampError",
    "UnknownFilterNameError",
    "UnknownIntervalError",
    "ValidationError",
]

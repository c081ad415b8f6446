"""Domain models for journal queries."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping, Tuple, Union, NamedTuple, FrozenSet


@dataclass(frozen=True)
class Named:
    """A preset interval, identified by its catalog tag."""

    tag: str


@dataclass(frozen=True)
class Range:
    """An explicit interval. Missing bounds are open."""

    since: Optional[datetime] = None
    until: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.since is None and self.until is None


Interval = Union[Named, Range]

FilterValue = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class IntervalOption:
    """Selectable interval in the catalog."""

    tag: str
    label: str


@dataclass(frozen=True)
class FilterSpec:
    """A filter the system understands.

    ``option`` is the journalctl option the filter translates to. A value
    ending in ``=`` is a field match (``_BOOT_ID=``), an empty value means the
    filter values are passed as positional arguments.
    """

    name: str
    label: str
    multiple: bool = False
    allowed_values: Optional[Tuple[str, ...]] = None
    option: str = ""

    @property
    def is_enum(self) -> bool:
        return self.allowed_values is not None


@dataclass(frozen=True)
class Query:
    """A time interval plus a set of field filters.

    Empty and all-whitespace filter values are dropped on construction.
    """

    interval: Interval
    filters: Mapping[str, FilterValue] = field(default_factory=dict)

    def __post_init__(self):
        filters = {
            name: value
            for name, value in self.filters.items()
            if value and not (isinstance(value, str) and not value.strip())
        }
        object.__setattr__(self, "filters", MappingProxyType(filters))

    def __hash__(self):
        return hash((self.interval, frozenset(self.filters.items())))

    def __eq__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return self.interval == other.interval and dict(self.filters) == dict(other.filters)

    @property
    def is_range(self) -> bool:
        return isinstance(self.interval, Range)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation of the query."""
        if isinstance(self.interval, Range):
            interval = {
                "since": self.interval.since.isoformat() if self.interval.since else None,
                "until": self.interval.until.isoformat() if self.interval.until else None,
            }
        else:
            interval = self.interval.tag

        filters = {}
        for name, value in self.filters.items():
            filters[name] = list(value) if isinstance(value, tuple) else value

        return {"interval": interval, "filters": filters}

    def describe(self) -> str:
        """Short human readable summary of the query."""
        if isinstance(self.interval, Range):
            since = self.interval.since.isoformat(sep=" ") if self.interval.since else "the beginning"
            until = self.interval.until.isoformat(sep=" ") if self.interval.until else "now"
            parts = [f"from {since} until {until}"]
        else:
            parts = [self.interval.tag]

        for name, value in self.filters.items():
            shown = ", ".join(value) if isinstance(value, tuple) else value
            parts.append(f"{name}: {shown}")

        return "; ".join(parts)


class RawInputs(NamedTuple):
    """Raw key-value form of a query, as a presentation layer produces it."""

    interval_input: Union[str, Dict[str, Optional[datetime]]]
    filter_inputs: Dict[str, str]
    enabled: FrozenSet[str]

"""Builds journal queries from raw user input and back."""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from journal_query.application.config import Config
from journal_query.domain import catalog
from journal_query.domain.errors import (
    InvalidFilterValueError,
    InvalidRangeError,
    InvalidTimestampError,
)
from journal_query.domain.models import (
    FilterSpec,
    FilterValue,
    Interval,
    Named,
    Query,
    Range,
    RawInputs,
)

logger = logging.getLogger(__name__)

IntervalInput = Union[str, Range, Mapping[str, Any]]
EnabledInput = Union[Mapping[str, bool], Iterable[str], None]


def parse_timestamp(field: str, value: Any) -> Optional[datetime]:
    """Turn a raw range bound into a datetime. Blank values mean "no bound"."""
    if value is None or isinstance(value, datetime):
        return value

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise InvalidTimestampError(field, value) from None

    raise InvalidTimestampError(field, value)


def split_values(raw: str) -> Tuple[str, ...]:
    """Split a multiple-value input on any run of whitespace."""
    return tuple(raw.split())


def join_values(values: Iterable[str]) -> str:
    return " ".join(values)


class QueryModel:
    """Validates and normalizes raw input into a Query.

    The model is stateless apart from its configuration, so a single instance
    can be shared between callers.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging configuration."""
        level = "DEBUG" if self.config.debug else self.config.log_level
        logging.basicConfig(
            level=getattr(logging, level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            filename=self.config.log_file
        )

    @staticmethod
    def intervals():
        return catalog.intervals()

    @staticmethod
    def filters():
        return catalog.filters()

    def build(
        self,
        interval_input: IntervalInput,
        filter_inputs: Optional[Mapping[str, str]] = None,
        enabled: EnabledInput = None,
    ) -> Query:
        """
        Build a query from the values a presentation layer collected.

        Args:
            interval_input: A catalog tag, or a since/until mapping (or Range)
                for an explicit interval
            filter_inputs: Raw string per filter name
            enabled: Which filters are switched on, as a name -> bool mapping
                or an iterable of names. None enables every supplied filter.

        Returns:
            The normalized query

        Raises:
            ValidationError: On an invalid range, unknown names or values
        """
        filter_inputs = filter_inputs or {}
        interval = self._build_interval(interval_input)
        enabled_names = self._enabled_names(filter_inputs, enabled)

        filters: Dict[str, FilterValue] = {}
        for spec in catalog.filters():
            if spec.name not in enabled_names or spec.name not in filter_inputs:
                continue

            value = self._derive_value(spec, filter_inputs[spec.name])
            if not value:
                logger.debug(f"Dropping blank filter '{spec.name}'")
                continue

            filters[spec.name] = value

        query = Query(interval=interval, filters=filters)
        logger.info(f"Built query: {query.describe()}")
        return query

    def to_raw_inputs(self, query: Query) -> RawInputs:
        """Convert a query back into the raw form accepted by build()."""
        if isinstance(query.interval, Range):
            interval_input = {"since": query.interval.since, "until": query.interval.until}
        else:
            interval_input = query.interval.tag

        filter_inputs = {}
        for name, value in query.filters.items():
            filter_inputs[name] = join_values(value) if isinstance(value, tuple) else value

        return RawInputs(
            interval_input=interval_input,
            filter_inputs=filter_inputs,
            enabled=frozenset(filter_inputs),
        )

    def range_defaults(
        self, query: Optional[Query] = None, now: Optional[datetime] = None
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        """Initial since/until values to show for an explicit range.

        A range query keeps its own bounds. Otherwise the range suggested is the
        configured lookback window ending now.
        """
        if query is not None and isinstance(query.interval, Range):
            return query.interval.since, query.interval.until

        now = now or datetime.now()
        return now - timedelta(hours=self.config.range_lookback_hours), now

    def default_query(self) -> Query:
        return self.build(self.config.default_interval)

    def _build_interval(self, interval_input: IntervalInput) -> Interval:
        if isinstance(interval_input, Range):
            return self._build_range(interval_input.since, interval_input.until)

        if isinstance(interval_input, Mapping):
            return self._build_range(interval_input.get("since"), interval_input.get("until"))

        if interval_input == catalog.RANGE_TAG:
            return Range()

        return Named(catalog.interval_option(interval_input).tag)

    def _build_range(self, since: Any, until: Any) -> Range:
        since = parse_timestamp("since", since)
        until = parse_timestamp("until", until)

        if since is not None and until is not None:
            try:
                inverted = since > until
            except TypeError:
                raise InvalidRangeError(
                    since, until, "cannot compare naive and timezone-aware timestamps"
                ) from None
            if inverted:
                raise InvalidRangeError(since, until)

        return Range(since=since, until=until)

    @staticmethod
    def _enabled_names(filter_inputs: Mapping[str, str], enabled: EnabledInput) -> frozenset:
        for name in filter_inputs:
            catalog.filter_spec(name)

        if enabled is None:
            return frozenset(filter_inputs)

        if isinstance(enabled, Mapping):
            for name in enabled:
                catalog.filter_spec(name)
            return frozenset(name for name, checked in enabled.items() if checked)

        if isinstance(enabled, str):
            enabled = (enabled,)

        names = frozenset(enabled)
        for name in names:
            catalog.filter_spec(name)
        return names

    @staticmethod
    def _derive_value(spec: FilterSpec, raw: Optional[str]) -> FilterValue:
        raw = raw or ""

        if spec.multiple:
            value = split_values(raw)
            candidates = value
        else:
            value = raw.strip()
            candidates = (value,) if value else ()

        if spec.allowed_values is not None:
            for candidate in candidates:
                if candidate not in spec.allowed_values:
                    raise InvalidFilterValueError(spec.name, candidate, spec.allowed_values)

        return value

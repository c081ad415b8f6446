"""Validation errors raised while building journal queries."""


class ValidationError(ValueError):
    """Raw input could not be turned into a query."""


class InvalidRangeError(ValidationError):
    """Explicit interval whose start lies after its end."""

    def __init__(self, since, until, reason: str = "since is after until"):
        self.since = since
        self.until = until
        super().__init__(f"Invalid time range ({since} - {until}): {reason}")


class InvalidTimestampError(ValidationError):
    """Explicit interval bound that is not a valid timestamp."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid timestamp for '{field}': {value!r}")


class UnknownFilterNameError(ValidationError):
    """Filter name absent from the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown filter: {name!r}")


class UnknownIntervalError(ValidationError):
    """Interval tag absent from the catalog."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown interval: {tag!r}")


class InvalidFilterValueError(ValidationError):
    """Value not among the allowed values of a filter."""

    def __init__(self, name: str, value: str, allowed):
        self.name = name
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {value!r} for filter '{name}' "
            f"(expected one of: {', '.join(self.allowed)})"
        )

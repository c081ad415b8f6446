"""Journal query model: intervals, field filters and their raw input form."""

__version__ = "0.1.0"

"""Translation of a query into a journalctl command line."""

import shlex
from typing import List, Optional

from journal_query.application.config import Config
from journal_query.domain import catalog
from journal_query.domain.models import Query, Range

NAMED_INTERVAL_ARGUMENTS = {
    "boot": ["--boot=0"],
    "previous-boot": ["--boot=-1"],
    "today": ["--since=today"],
    "yesterday": ["--since=yesterday", "--until=today"],
}


class JournalctlCommand:
    """Arguments that make journalctl show the entries a query selects.

    Nothing is executed here; running the command is up to the journal reader.
    """

    def __init__(self, query: Query, config: Optional[Config] = None):
        self.query = query
        self.config = config or Config()

    def interval_arguments(self) -> List[str]:
        interval = self.query.interval
        if isinstance(interval, Range):
            args = []
            if interval.since is not None:
                args.append(f"--since={interval.since.strftime(self.config.timestamp_format)}")
            if interval.until is not None:
                args.append(f"--until={interval.until.strftime(self.config.timestamp_format)}")
            return args

        return list(NAMED_INTERVAL_ARGUMENTS[interval.tag])

    def filter_arguments(self) -> List[str]:
        options = []
        positional = []

        for name, value in self.query.filters.items():
            spec = catalog.filter_spec(name)
            values = value if isinstance(value, tuple) else (value,)

            if not spec.option:
                positional.extend(values)
            elif spec.option.endswith("="):
                # Field match, e.g. _BOOT_ID=...
                options.extend(f"{spec.option}{v}" for v in values)
            else:
                options.extend(f"{spec.option}={v}" for v in values)

        return options + positional

    def arguments(self) -> List[str]:
        return self.interval_arguments() + self.filter_arguments()

    def argv(self) -> List[str]:
        return [self.config.journalctl_binary] + self.arguments()

    def __str__(self) -> str:
        return " ".join(shlex.quote(arg) for arg in self.argv())

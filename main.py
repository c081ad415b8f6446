#!/usr/bin/env python3
"""
Journal Query

Builds systemd journal queries (a time interval plus field filters) from raw
user input and renders them for journalctl.
"""

from journal_query.cli.main import main

if __name__ == "__main__":
    main()

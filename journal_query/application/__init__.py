"""Application layer modules."""

from .query_model import QueryModel
from .journalctl import JournalctlCommand
from .config import Config

__all__ = ["QueryModel", "JournalctlCommand", "Config"]

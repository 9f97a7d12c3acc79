"""Fluent request builders.

Module split:
    - `base`: shared accumulate/dispatch state machine and argument checks.
    - `search`: collection search with paging.
    - `graph`: relation reads, creation, and removal.
    - `events`: event creation and time-ranged reads.
"""

from orchestrate.builders.base import Builder
from orchestrate.builders.events import EventBuilder
from orchestrate.builders.graph import GraphBuilder
from orchestrate.builders.search import SearchBuilder

__all__ = ["Builder", "EventBuilder", "GraphBuilder", "SearchBuilder"]

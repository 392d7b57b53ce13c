"""Domain Types — enums and aliases shared across the Waktu codebase.

Invariants:
    - FeedCategory lists the feed types the upstream service documents
    - FeedCategory is descriptive only: the `type` query value is forwarded as-is

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
    - FeedResult is an alias, not a model: upstream payloads pass through untouched
"""

from enum import Enum
from typing import Any, TypeAlias


class FeedCategory(str, Enum):
    """Feed types understood by the upstream "On This Day" service."""
    ALL = "all"
    SELECTED = "selected"
    EVENTS = "events"
    BIRTHS = "births"
    DEATHS = "deaths"
    HOLIDAYS = "holidays"


# Opaque JSON body returned by the upstream feed
FeedResult: TypeAlias = Any


DEFAULT_CATEGORY = FeedCategory.ALL.value

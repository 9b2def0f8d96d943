from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence


@dataclass(frozen=True)
class Event:
    """
    A single timestamped occurrence of a metric.

    Events are immutable: operations that need a different event (merging,
    app name enrichment) build a new one. Every field defaults to its zero
    value, so a coalesced span produced by merging is simply
    ``Event(start=..., end=...)``.

    Attributes:
        type: sub-kind of the event, e.g. a state name
        start: start time in milliseconds
        end: end time in milliseconds; ``start <= end`` is not enforced
        value: free-form payload
        opt: free-form secondary payload
        app_name: optional enrichment populated from package metadata
    """

    type: str = ""
    start: int = 0
    end: int = 0
    value: str = ""
    opt: str = ""
    app_name: str = ""

    def with_app_name(self, app_name: str) -> "Event":
        return replace(self, app_name=app_name)


def populate_app_names(
        events: Sequence[Event],
        lookup: Callable[[Event], Optional[str]],
) -> List[Event]:
    """
    Returns new events with ``app_name`` set from ``lookup``.

    Events for which the lookup returns None or an empty name are kept as-is.
    """
    populated = []
    for event in events:
        app_name = lookup(event)
        populated.append(event.with_app_name(app_name) if app_name else event)
    return populated

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Dict, List, Mapping, Sequence

from eventline.core.event import Event

logger = logging.getLogger(__name__)

_by_start_time = attrgetter("start")


def sort_by_start_time(events: List[Event]) -> None:
    """Sorts events in place in ascending order of start time, keeping input order for ties"""
    events.sort(key=_by_start_time)


def merge_events(events: List[Event]) -> List[Event]:
    """
    Merges all overlapping events into the minimal set of disjoint spans.

    Events overlap when one ends at or after the start of the next, so spans
    that merely touch are merged too. A merged span keeps only its start and
    end; type, value, opt and app_name are reset to empty. Events that do not
    overlap anything are returned unchanged.

    The input list is sorted in place by start time. Pass a copy if the
    caller's ordering must be kept.

    :param events: events of a single metric
    :return: disjoint events in ascending order of start time, where every
        event ends strictly before the next one starts
    """
    if not events:
        return []
    # the sweep below relies on events being sorted by start time
    sort_by_start_time(events)

    merged = []
    prev = events[0]
    for cur in events[1:]:
        if prev.end < cur.start:
            merged.append(prev)
            prev = cur
        else:
            prev = Event(start=prev.start, end=max(prev.end, cur.end))
    merged.append(prev)

    logger.debug("Merged {} events into {} spans".format(len(events), len(merged)))
    return merged


def merge_event_map(events_by_metric: Mapping[str, Sequence[Event]]) -> Dict[str, List[Event]]:
    """
    Merges the events of every metric independently.

    Each metric's events are copied before merging, so the lists held by
    ``events_by_metric`` keep their order.
    """
    return {metric: merge_events(list(events)) for metric, events in events_by_metric.items()}

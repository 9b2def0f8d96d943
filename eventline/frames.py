from typing import Mapping, Sequence

from pandas import DataFrame

from eventline.core.event import Event

FRAME_COLUMNS = ["metric", "type", "start", "end", "value", "opt", "app_name"]


def events_to_pandas(events_by_metric: Mapping[str, Sequence[Event]]) -> DataFrame:
    """
    Flattens a metric to events mapping into a DataFrame, one row per event.

    Rows follow the mapping's key order, then each metric's event order.
    Metrics without events contribute no rows. The ``start`` and ``end``
    columns are always int64, even for an empty frame.
    """
    rows = [
        (metric, e.type, e.start, e.end, e.value, e.opt, e.app_name)
        for metric, events in events_by_metric.items()
        for e in events
    ]
    df = DataFrame(rows, columns=FRAME_COLUMNS)
    return df.astype({"start": "int64", "end": "int64"})

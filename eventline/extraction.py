from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Collection, Iterator, List, Optional

from pandas import DataFrame

from eventline.core.event import Event
from eventline.core.exceptions import (
    ErrorMessages,
    InvalidRecordError,
    InvalidTimestampError,
    RecordError,
    RecordParseError,
)
from eventline.core.types import INT64_MAX, INT64_MIN, EventMap, Record, Records
from eventline.frames import events_to_pandas
from eventline.records import FILE_HEADER, parse_csv

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("metric", "type", "start", "end", "value", "opt")

# optional sign followed by decimal digits, nothing else
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ExtractionConfig:
    """Configuration for event extraction behavior"""

    def __init__(self, header: Optional[str] = None):
        self.header = FILE_HEADER if header is None else header
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.header, str):
            raise ValueError(ErrorMessages.INVALID_HEADER.format(type(self.header).__name__))

    def is_header(self, record: Record) -> bool:
        return ",".join(record) == self.header


@dataclass
class ExtractionResult:
    """
    Events extracted per metric, along with the errors collected on the way.

    ``events`` is None only when the input could not be parsed at all, in which
    case ``errors`` holds a single :class:`RecordParseError`. Unpacks as a pair::

        events, errors = extract_events(csv_input)
    """

    events: Optional[EventMap]
    errors: List[Exception] = field(default_factory=list)

    def __iter__(self) -> Iterator:
        return iter((self.events, self.errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_pandas(self) -> DataFrame:
        return events_to_pandas(self.events or {})


def extract_events(
        csv_input: str,
        metrics: Optional[Collection[str]] = None,
        config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Parses CSV text and returns all events matching any of the given metric names.

    See :func:`extract_events_from_records` for the extraction rules.
    """
    return extract_events_from_records(parse_csv(csv_input), metrics, config)


def extract_events_from_records(
        records: Optional[Records],
        metrics: Optional[Collection[str]] = None,
        config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Returns all events matching any of the given metric names.

    If a metric has no matching events, the map contains an empty list for it.
    If ``metrics`` is None, events for every metric found are extracted.
    Errors encountered on a record are collected and the remaining records are
    still processed; only a failed parse (``records`` is None) stops extraction.

    :param records: parsed records, or None if parsing failed
    :param metrics: names of the metrics to extract, or None for all
    :param config: extraction configuration, defaults apply if omitted
    :raises ValueError: if ``metrics`` is a single str rather than a collection
    """
    if isinstance(metrics, str):
        raise ValueError(ErrorMessages.INVALID_METRICS.format(metrics))
    if records is None:
        return ExtractionResult(events=None, errors=[RecordParseError(ErrorMessages.PARSE_FAILED)])
    config = config or ExtractionConfig()

    # only requested metrics are stored
    events: EventMap = {m: [] for m in metrics} if metrics is not None else {}

    errors: List[Exception] = []
    for i, record in enumerate(records):
        if len(record) == 0 or config.is_header(record):
            logger.debug("Skipping header or empty record {}".format(i))
            continue
        desc = record[0]
        if metrics is not None and desc not in events:
            continue
        try:
            event = event_from_record(record)
        except (InvalidRecordError, InvalidTimestampError) as e:
            errors.append(RecordError(i, e, record))
            continue
        events.setdefault(desc, []).append(event)

    if errors:
        logger.warning(
            "Collected {} record error(s) while extracting events, first: {}".format(len(errors), errors[0])
        )
    return ExtractionResult(events=events, errors=errors)


def event_from_record(record: Record) -> Event:
    """
    Builds an event from a record of the form ``metric,type,start,end,value,opt``.

    :raises InvalidRecordError: if the record does not have exactly 6 fields
    :raises InvalidTimestampError: if start or end is not a 64-bit integer
    """
    if len(record) != len(RECORD_FIELDS):
        raise InvalidRecordError(ErrorMessages.FIELD_COUNT.format(list(record), len(record)))
    return Event(
        type=record[1],
        start=_parse_int64(record[2], "start"),
        end=_parse_int64(record[3], "end"),
        value=record[4],
        opt=record[5],
    )


def _parse_int64(value: str, field_name: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise InvalidTimestampError(ErrorMessages.INVALID_INT.format(field_name, value))
    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise InvalidTimestampError(ErrorMessages.INT_OUT_OF_RANGE.format(field_name, value))
    return parsed

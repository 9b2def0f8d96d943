from eventline.core.event import Event, populate_app_names
from eventline.extraction import (
    ExtractionConfig,
    ExtractionResult,
    event_from_record,
    extract_events,
    extract_events_from_records,
)
from eventline.frames import events_to_pandas
from eventline.merging import merge_event_map, merge_events
from eventline.records import FILE_HEADER, parse_csv

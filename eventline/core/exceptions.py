from typing import Optional, Sequence


class EventExtractionError(Exception):
    """Base exception for event extraction errors"""
    pass


class RecordParseError(EventExtractionError):
    """Raised when the CSV input could not be parsed into records at all"""
    pass


class InvalidRecordError(EventExtractionError):
    """Raised when a record does not have the expected number of fields"""
    pass


class InvalidTimestampError(EventExtractionError):
    """Raised when a start or end field is not a valid 64-bit integer"""
    pass


class RecordError(EventExtractionError):
    """A per-record failure, tagged with the index of the offending record"""

    def __init__(self, index: int, cause: Exception, record: Optional[Sequence[str]] = None):
        super().__init__(ErrorMessages.RECORD.format(index, cause))
        self.index = index
        self.cause = cause
        self.record = list(record) if record is not None else None
        self.__cause__ = cause


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    PARSE_FAILED = "parse_csv produced no records: input could not be parsed"
    RECORD = "record {}: {}"
    FIELD_COUNT = "non matching {}, len was {}"
    INVALID_INT = "invalid {} value {!r}: expected a base-10 integer"
    INT_OUT_OF_RANGE = "invalid {} value {!r}: out of 64-bit integer range"
    INVALID_HEADER = "header must be a str, got {}"
    INVALID_METRICS = "metrics must be a collection of metric names, not a str: {!r}"

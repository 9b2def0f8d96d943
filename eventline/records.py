from __future__ import annotations

import csv
import io
import logging
import sys
from typing import Optional

logger = logging.getLogger(__name__)


def _max_field_size_limit() -> int:
    # sys.maxsize overflows the C long behind the limit on some platforms
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            limit //= 2


FIELD_SIZE_LIMIT = _max_field_size_limit()

FILE_HEADER = "metric,type,start_time,end_time,value,opt"
"""
Header row written at the top of an event CSV.

Rows whose fields, joined with commas, equal this literal are skipped during
extraction.
"""


def parse_csv(csv_input: str) -> Optional[list[list[str]]]:
    """
    Parses CSV text into an ordered list of records.

    Records may have any number of fields; arity is checked during extraction.
    Blank lines produce no record. Fields are not limited in size, and a quote
    inside an unquoted field is kept as a literal character.

    :param csv_input: raw CSV text
    :return: the records, or None if the text could not be parsed at all.
        Note that an empty input is a successful parse and returns an empty list.
    """
    csv.field_size_limit(FIELD_SIZE_LIMIT)
    reader = csv.reader(io.StringIO(csv_input, newline=""), strict=True)
    try:
        return [record for record in reader if record]
    except csv.Error as e:
        logger.error(
            "Unable to parse CSV input at line {}.\nError: {}".format(reader.line_num, e)
        )
        return None

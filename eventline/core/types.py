from typing import Dict, List, Sequence

from eventline.core.event import Event

Record = Sequence[str]
Records = Sequence[Record]
EventMap = Dict[str, List[Event]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

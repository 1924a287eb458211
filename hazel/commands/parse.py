"""Extraction result for the command system.

Extractor.extract(line) returns an Extraction for every input line.
The router looks at `command` and passes the Extraction to that command's handler.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Extraction:
    command: str = ""                 # e.g. "remind", "list"; "" if nothing matched
    text: str = ""                    # free-text payload, "" if none
    due: Optional[datetime] = None    # aware local datetime, None if no usable date

    @property
    def matched(self):
        return bool(self.command)


NO_MATCH = Extraction()

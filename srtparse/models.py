"""Data models for parsed SRT subtitles."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict


class ParserState(Enum):
    """What the scanner expects from the next non-blank line."""
    SEEK_INDEX = 'seek-index'
    SEEK_TIME = 'seek-time'
    SEEK_TEXT = 'seek-text'


@dataclass
class Subtitle:
    """A single subtitle block: index, display window in seconds, and text."""
    index: int
    start: float = 0.0
    end: float = 0.0
    text: str = ''

    @property
    def duration(self) -> float:
        """Return end - start in seconds. Not validated, may be negative."""
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

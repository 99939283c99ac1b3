"""srtparse — strict SubRip (SRT) subtitle parser."""

from srtparse.exceptions import (
    SrtParseError, InvalidInputTypeError, InvalidTimeFormatError,
    InvalidTimeRangeFormatError, InvalidIndexError, IndexSequenceError,
    ParserStateError,
)
from srtparse.models import Subtitle
from srtparse.parser import parse_subtitles, parse_subtitles_file
from srtparse.timing import parse_time

__version__ = "0.1.0"

__all__ = [
    "IndexSequenceError",
    "InvalidIndexError",
    "InvalidInputTypeError",
    "InvalidTimeFormatError",
    "InvalidTimeRangeFormatError",
    "ParserStateError",
    "SrtParseError",
    "Subtitle",
    "parse_subtitles",
    "parse_subtitles_file",
    "parse_time",
]

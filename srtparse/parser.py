"""SRT subtitle parsing — a strict, single-pass line scanner."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from srtparse.exceptions import (
    IndexSequenceError, InvalidIndexError, InvalidInputTypeError,
    InvalidTimeRangeFormatError, ParserStateError,
)
from srtparse.models import ParserState, Subtitle
from srtparse.timing import parse_time, trim

logger = logging.getLogger(__name__)

_INDEX = re.compile(r'[0-9]+')
TIME_ARROW = '-->'


class _BlockScanner:
    """Consumes trimmed SRT lines one at a time and builds Subtitle records.

    Blocks go index -> time range -> text, and a blank line after the time
    range closes the block. The first malformed line raises.
    """

    def __init__(self) -> None:
        self.subtitles: List[Subtitle] = []
        self.state = ParserState.SEEK_INDEX
        self.current: Optional[Subtitle] = None
        self.line_number = 0

    def feed(self, line: str) -> None:
        self.line_number += 1
        line = trim(line)

        if not line:
            if self.state is ParserState.SEEK_TEXT:
                self.current = None
                self.state = ParserState.SEEK_INDEX
            return

        if self.state is ParserState.SEEK_INDEX:
            self._read_index(line)
        elif self.state is ParserState.SEEK_TIME:
            self._read_time_range(line)
        else:
            self._read_text(line)

    def _open_subtitle(self) -> Subtitle:
        if self.current is None:
            raise ParserStateError(
                'fatal: invalid parser state',
                details={'line': self.line_number, 'state': self.state.value},
            )
        return self.current

    def _read_index(self, line: str) -> None:
        if not _INDEX.fullmatch(line):
            raise InvalidIndexError(
                'index must be an integer, found: ' + line,
                details={'line': self.line_number},
            )
        digits = line.lstrip('0') or '0'
        expected = self.subtitles[-1].index + 1 if self.subtitles else 1
        if digits != str(expected):
            raise IndexSequenceError(
                f'index must be 1 or the next index, found: {digits}',
                details={'line': self.line_number},
            )

        self.current = Subtitle(index=expected)
        self.subtitles.append(self.current)
        self.state = ParserState.SEEK_TIME

    def _read_time_range(self, line: str) -> None:
        subtitle = self._open_subtitle()
        if TIME_ARROW not in line:
            raise InvalidTimeRangeFormatError(
                'time must be in the format HH:MM:SS,SSS --> HH:MM:SS,SSS, found: ' + line,
                details={'line': self.line_number},
            )
        start, end = line.split(TIME_ARROW)[:2]
        subtitle.start = parse_time(start)
        subtitle.end = parse_time(end)
        self.state = ParserState.SEEK_TEXT

    def _read_text(self, line: str) -> None:
        subtitle = self._open_subtitle()
        subtitle.text = f'{subtitle.text}\n{line}' if subtitle.text else line


def parse_subtitles(source: str) -> List[Subtitle]:
    """Parse SRT content into a list of Subtitle records, in input order.

    Indices must start at 1 and increase by exactly one per block. A trailing
    block without a closing blank line is kept as-is.

    Raises:
        InvalidInputTypeError: If ``source`` is not a str.
        InvalidIndexError: If an index line is not a bare integer.
        IndexSequenceError: If an index breaks the 1, 2, 3... sequence.
        InvalidTimeRangeFormatError: If a time line has no '-->'.
        InvalidTimeFormatError: If either timestamp of a time line is invalid.
    """
    if not isinstance(source, str):
        raise InvalidInputTypeError('input must be a string')

    scanner = _BlockScanner()
    for line in source.split('\n'):
        scanner.feed(line)

    logger.debug("Parsed %d subtitles from %d lines", len(scanner.subtitles), scanner.line_number)
    return scanner.subtitles


def parse_subtitles_file(path: Union[str, Path], encoding: str = 'utf-8-sig') -> List[Subtitle]:
    """Read an SRT file and parse it. The default encoding drops a UTF-8 BOM."""
    content = Path(path).read_text(encoding=encoding)
    return parse_subtitles(content)

"""SRT timestamp parsing."""

import re
from typing import Optional

from srtparse.exceptions import InvalidTimeFormatError

_INTEGER = re.compile(r'[+-]?[0-9]+')
# str.strip() keeps U+FEFF
_EDGE_BLANKS = re.compile(r'^[\s\ufeff]+|[\s\ufeff]+$')


def trim(text: str) -> str:
    """Strip surrounding whitespace and byte order marks."""
    return _EDGE_BLANKS.sub('', text)


def _to_int(field: str) -> Optional[int]:
    """Parse a base-10 integer field, or return None if it is not one."""
    field = trim(field)
    if not _INTEGER.fullmatch(field):
        return None
    try:
        return int(field)
    except ValueError:
        # over the interpreter's int string conversion limit
        return None


def parse_time(time: str) -> float:
    """Convert an SRT timestamp (HH:MM:SS,mmm) to seconds.

    A '.' millisecond separator is accepted in place of ',' and the
    millisecond part may be omitted entirely. Hours are unbounded; minutes
    and seconds must be below 60 and milliseconds below 1000.

    Raises:
        InvalidTimeFormatError: If the token has the wrong shape, a field is
            not an integer, a field is out of range, or the total does not
            fit in a float. The message echoes the token verbatim.
    """
    message = 'time must be in the format HH:MM:SS,SSS, found: ' + time
    parts = time.replace('.', ',').split(':')
    if len(parts) != 3:
        raise InvalidTimeFormatError(message)

    seconds_part = parts[2].split(',', 1)
    fields = [parts[0], parts[1], seconds_part[0]]
    fields.append(seconds_part[1] if len(seconds_part) > 1 else '0')

    values = [_to_int(f) for f in fields]
    if any(v is None for v in values):
        raise InvalidTimeFormatError(message)

    hours, minutes, seconds, milliseconds = values
    if min(values) < 0 or minutes >= 60 or seconds >= 60 or milliseconds >= 1000:
        raise InvalidTimeFormatError(message)

    try:
        return hours * 3600 + minutes * 60 + seconds + milliseconds / 1000
    except OverflowError as e:
        raise InvalidTimeFormatError(message, original_error=e) from e

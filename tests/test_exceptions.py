"""Tests for srtparse.exceptions module."""

from srtparse.exceptions import (
    SrtParseError, InvalidInputTypeError, InvalidTimeFormatError,
    InvalidTimeRangeFormatError, InvalidIndexError, IndexSequenceError,
    ParserStateError,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        e = SrtParseError('test', error_code='E001')
        assert e.message == 'test'
        assert e.error_code == 'E001'
        assert '[E001]' in str(e)

    def test_to_dict(self):
        e = IndexSequenceError('msg', details={'line': 5})
        d = e.to_dict()
        assert d['error_type'] == 'IndexSequenceError'
        assert d['error_code'] == 'INDEX_SEQ'
        assert d['details'] == {'line': 5}
        assert d['original_error'] is None

    def test_inheritance(self):
        for cls in (InvalidInputTypeError, InvalidTimeFormatError, InvalidTimeRangeFormatError,
                    InvalidIndexError, IndexSequenceError, ParserStateError):
            assert issubclass(cls, SrtParseError)

    def test_default_codes(self):
        assert InvalidInputTypeError('x').error_code == 'INPUT_TYPE'
        assert InvalidTimeFormatError('x').error_code == 'TIME_FMT'
        assert InvalidTimeRangeFormatError('x').error_code == 'RANGE_FMT'
        assert InvalidIndexError('x').error_code == 'INDEX_FMT'
        assert ParserStateError('x').error_code == 'STATE_ERR'

    def test_details_in_str(self):
        e = InvalidIndexError('index must be an integer, found: x', details={'line': 3})
        assert e.message == 'index must be an integer, found: x'
        assert "'line': 3" in str(e)

    def test_original_error(self):
        orig = ValueError('bad')
        e = SrtParseError('wrap', original_error=orig)
        assert e.original_error is orig
        assert 'bad' in str(e)

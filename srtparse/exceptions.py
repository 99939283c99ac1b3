"""Exception hierarchy for srtparse."""


class SrtParseError(Exception):
    """Base exception for all srtparse errors."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}
        self.original_error = original_error

        full_message = f"[{self.error_code}] {message}"
        if details:
            full_message += f"\nDetails: {details}"
        if original_error:
            full_message += f"\nCaused by: {original_error}"

        super().__init__(full_message)

    def to_dict(self):
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InvalidInputTypeError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "INPUT_TYPE", details, original_error)


class InvalidTimeFormatError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "TIME_FMT", details, original_error)


class InvalidTimeRangeFormatError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "RANGE_FMT", details, original_error)


class InvalidIndexError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "INDEX_FMT", details, original_error)


class IndexSequenceError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "INDEX_SEQ", details, original_error)


class ParserStateError(SrtParseError):
    """Raised when the scanner reaches a state its transitions cannot produce."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "STATE_ERR", details, original_error)

"""Errors raised while building speech markup."""


class SpeechError(Exception):
    """Base class for all builder errors."""


class InvalidArgumentError(SpeechError, ValueError):
    """A required value is missing, empty, not allowed, or of the wrong shape."""


class InvalidTypeError(SpeechError, TypeError):
    """The escaping routine received a value it cannot render."""


class DurationOutOfRangeError(SpeechError, ValueError):
    """A pause duration exceeds the allowed maximum."""


class RateOutOfRangeError(SpeechError, ValueError):
    """A prosody rate percentage is below the allowed minimum."""

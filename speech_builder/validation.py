"""Input checks and escaping shared by the speech builders."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable

from speech_builder.shared.enums import (
    EscapeMode,
    ProsodyPitch,
    ProsodyRate,
    ProsodyVolume,
    values,
)
from speech_builder.shared.exceptions import (
    DurationOutOfRangeError,
    InvalidArgumentError,
    InvalidTypeError,
    RateOutOfRangeError,
)

DURATION_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(s|ms)$")
MAX_PAUSE_SECONDS = 10
MAX_PAUSE_MILLISECONDS = 10000

PERCENT_PATTERN = re.compile(r"^([+-]?\d+(?:\.\d+)?)%$")
DECIBEL_PATTERN = re.compile(r"^([+-]\d+(?:\.\d+)?)db$")
MIN_RATE_PERCENT = 20

# Ampersand must be first so entities added by later passes are left alone.
_ENTITY_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_STRIP_REPLACEMENTS = (
    ("&", "and"),
    ("<", ""),
    (">", ""),
    ('"', ""),
    ("'", ""),
)


def validate_present(value: Any, msg: str) -> None:
    """Raise InvalidArgumentError with ``msg`` when ``value`` is None."""
    if value is None:
        raise InvalidArgumentError(msg)


def validate_not_empty(value: Any, msg: str) -> None:
    """Raise InvalidArgumentError with ``msg`` when ``value`` is None or zero-length."""
    if value is None or (hasattr(value, "__len__") and len(value) == 0):
        raise InvalidArgumentError(msg)


def validate_in_list(value: Any, allowed: Iterable[str], msg: str) -> str:
    """
    Normalize ``value`` (trimmed, lower-cased) and check it against ``allowed``.

    Returns:
        The normalized value

    Raises:
        InvalidArgumentError: If the normalized value is not allowed
    """
    normalized = str(value).strip().lower()
    if normalized not in set(allowed):
        raise InvalidArgumentError(msg)
    return normalized


def validate_callable(fn: Any, name: str) -> None:
    """Raise InvalidArgumentError when ``fn`` cannot be called."""
    if not callable(fn):
        raise InvalidArgumentError(
            f"{name} was not a function. received: {type(fn).__name__}"
        )


def validate_duration(duration: Any) -> None:
    """
    Check a pause duration such as ``"1s"``, ``"0.5s"`` or ``"250ms"``.

    The duration must be a positive number followed by 's' or 'ms' and may not
    exceed 10 seconds (10000 milliseconds).

    Raises:
        InvalidArgumentError: If the duration is malformed
        DurationOutOfRangeError: If the duration is longer than allowed
    """
    match = DURATION_PATTERN.match(str(duration))
    if not match:
        raise InvalidArgumentError(
            "The duration must be a number followed by either 's' for second or 'ms' "
            "for milliseconds. e.g., 10s or 100ms. Max duration is 10 seconds "
            f"(10000 milliseconds). Received: {duration}"
        )

    amount, unit = match.group(1), match.group(2)
    if unit == "s" and float(amount) > MAX_PAUSE_SECONDS:
        raise DurationOutOfRangeError(
            "The pause duration exceeds the allowed 10 second duration. "
            f"Duration provided: {amount}"
        )
    if unit == "ms" and float(amount) > MAX_PAUSE_MILLISECONDS:
        raise DurationOutOfRangeError(
            "The pause duration exceeds the allowed 10,000 milliseconds duration. "
            f"Duration provided: {amount}"
        )


def _validate_attribute(
    value: Any,
    name: str,
    allowed: list[str],
    on_pattern: Callable[[str], str | None],
) -> str:
    """Accept a named value from ``allowed`` or fall back to ``on_pattern``."""
    normalized = str(value).strip().lower()
    if normalized in allowed:
        return normalized
    result = on_pattern(normalized)
    if result is None:
        raise InvalidArgumentError(f"attributes.{name} is not a valid {name}")
    return result


def _rate_percentage(value: str) -> str | None:
    match = PERCENT_PATTERN.match(value)
    if not match:
        return None
    if float(match.group(1)) < MIN_RATE_PERCENT:
        raise RateOutOfRangeError(
            f"The minimum rate is twenty percentage. Received: {match.group(1)}"
        )
    return value


def _pitch_percentage(value: str) -> str | None:
    return value if PERCENT_PATTERN.match(value) else None


def _volume_decibels(value: str) -> str | None:
    match = DECIBEL_PATTERN.match(value)
    if not match:
        return None
    return f"{match.group(1)}dB"


def normalize_rate(value: Any) -> str:
    """Validate a prosody rate: a named rate or a percentage of at least 20%."""
    return _validate_attribute(value, "rate", values(ProsodyRate), _rate_percentage)


def normalize_pitch(value: Any) -> str:
    """Validate a prosody pitch: a named pitch or a signed percentage."""
    return _validate_attribute(value, "pitch", values(ProsodyPitch), _pitch_percentage)


def normalize_volume(value: Any) -> str:
    """Validate a prosody volume: a named volume or a signed decibel change."""
    return _validate_attribute(value, "volume", values(ProsodyVolume), _volume_decibels)


def escape(word: Any, mode: str = EscapeMode.ENTITY.value) -> Any:
    """
    Make a value safe to insert as SSML text.

    Strings have the five XML special characters replaced by entities (or, in
    the legacy ``strip`` mode, removed). Numbers and booleans pass through.

    Raises:
        InvalidTypeError: For any other type
    """
    if isinstance(word, str):
        replacements = _STRIP_REPLACEMENTS if mode == EscapeMode.STRIP.value else _ENTITY_REPLACEMENTS
        for char, replacement in replacements:
            word = word.replace(char, replacement)
        return word
    if isinstance(word, (bool, int, float)):
        return word
    raise InvalidTypeError(f"received invalid type {type(word).__name__}")

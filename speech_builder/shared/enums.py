"""
Enums and constants describing the allowed SSML attribute values.
"""

from enum import Enum


class BreakStrength(str, Enum):
    """Strengths accepted by the break tag."""

    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"


class InterpretAs(str, Enum):
    """Interpretations accepted by the say-as tag."""

    CHARACTERS = "characters"
    SPELL_OUT = "spell-out"
    CARDINAL = "cardinal"
    NUMBER = "number"
    ORDINAL = "ordinal"
    DIGITS = "digits"
    FRACTION = "fraction"
    UNIT = "unit"
    DATE = "date"
    TIME = "time"
    TELEPHONE = "telephone"
    ADDRESS = "address"
    INTERJECTION = "interjection"
    EXPLETIVE = "expletive"


class EmphasisLevel(str, Enum):
    """Levels accepted by the emphasis tag."""

    STRONG = "strong"
    MODERATE = "moderate"
    REDUCED = "reduced"


class ProsodyRate(str, Enum):
    """Named prosody rates."""

    X_SLOW = "x-slow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    X_FAST = "x-fast"


class ProsodyPitch(str, Enum):
    """Named prosody pitches."""

    X_LOW = "x-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    X_HIGH = "x-high"


class ProsodyVolume(str, Enum):
    """Named prosody volumes."""

    SILENT = "silent"
    X_SOFT = "x-soft"
    SOFT = "soft"
    MEDIUM = "medium"
    LOUD = "loud"
    X_LOUD = "x-loud"


class EscapeMode(str, Enum):
    """How plain text is made safe for insertion."""

    ENTITY = "entity"
    STRIP = "strip"  # legacy: drops special characters instead of encoding them


def values(enum_cls: type[Enum]) -> list[str]:
    """Return the string values of an enum, in declaration order."""
    return [member.value for member in enum_cls]

"""
Speech Builder

Chainable builders for SSML (Speech Synthesis Markup Language) in the subset
supported by Alexa, plus Amazon-specific extension tags.
"""

from .amazon import AmazonSpeech
from .builder import ElementSink, Speech
from .helper import Helper
from .shared.exceptions import (
    DurationOutOfRangeError,
    InvalidArgumentError,
    InvalidTypeError,
    RateOutOfRangeError,
    SpeechError,
)
from .shared.models import PartOfSpeechOptions, ProsodyAttributes, SayAsOptions, SpeechObject

__all__ = [
    "Speech",
    "AmazonSpeech",
    "ElementSink",
    "Helper",
    "SpeechError",
    "InvalidArgumentError",
    "InvalidTypeError",
    "DurationOutOfRangeError",
    "RateOutOfRangeError",
    "SayAsOptions",
    "PartOfSpeechOptions",
    "ProsodyAttributes",
    "SpeechObject",
]

"""
Consolidated shared module.
This module re-exports commonly used utilities from specialized modules.
"""

# Logging utilities
from .logging_utils import setup_logging

# Configuration management
from .config import config, SpeechConfig

# Errors
from .exceptions import (
    SpeechError,
    InvalidArgumentError,
    InvalidTypeError,
    DurationOutOfRangeError,
    RateOutOfRangeError,
)

# Models
from .models import SayAsOptions, PartOfSpeechOptions, ProsodyAttributes, SpeechObject

__all__ = [
    # Logging
    'setup_logging',
    # Config
    'config',
    'SpeechConfig',
    # Errors
    'SpeechError',
    'InvalidArgumentError',
    'InvalidTypeError',
    'DurationOutOfRangeError',
    'RateOutOfRangeError',
    # Models
    'SayAsOptions',
    'PartOfSpeechOptions',
    'ProsodyAttributes',
    'SpeechObject',
]

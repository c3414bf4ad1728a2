"""Amazon-specific SSML tags layered on top of the core builder.

The tags are written against :class:`ElementSink`, so any builder exposing
append, escape and the validation hooks can carry them. ``AmazonSpeech``
bundles them with the core operations.
"""

from __future__ import annotations

from typing import Any, TypeVar

from speech_builder.builder import ElementSink, Speech

SinkT = TypeVar("SinkT", bound=ElementSink)


def whisper(sink: SinkT, words: Any, escape: bool = True) -> SinkT:
    """
    Wrap words in the whispered effect.

    Args:
        sink: Builder receiving the fragment
        words: Text to whisper
        escape: Set to False to insert already valid SSML

    Returns:
        The sink
    """
    sink.validate_not_empty(words, f"The words provided to AmazonSpeech.whisper() was {words!r}")
    text = sink.escape(words) if escape else words
    sink.append(f'<amazon:effect name="whispered">{text}</amazon:effect>')
    return sink


def voice(sink: SinkT, name: Any, words: Any, escape: bool = True) -> SinkT:
    """Speak words with one of the Amazon Polly voices, e.g. 'Kendra' or 'Brian'."""
    sink.validate_not_empty(name, f"The name provided to AmazonSpeech.voice() was {name!r}")
    sink.validate_not_empty(words, f"The words provided to AmazonSpeech.voice() was {words!r}")
    text = sink.escape(words) if escape else words
    sink.append(f'<voice name="{name}">{text}</voice>')
    return sink


class AmazonSpeech(Speech):
    """Speech builder with Amazon extensions such as the whisper effect and named voices."""

    def whisper(self, words: Any, escape: bool = True) -> AmazonSpeech:
        return whisper(self, words, escape=escape)

    def voice(self, name: Any, words: Any, escape: bool = True) -> AmazonSpeech:
        return voice(self, name, words, escape=escape)

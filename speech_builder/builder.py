"""SSML builder for assembling Alexa speech responses one element at a time."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any, Callable, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from speech_builder import validation
from speech_builder.helper import Helper
from speech_builder.shared.enums import BreakStrength, EmphasisLevel, EscapeMode, InterpretAs, values
from speech_builder.shared.exceptions import InvalidArgumentError
from speech_builder.shared.logging_utils import setup_logging
from speech_builder.shared.models import (
    PartOfSpeechOptions,
    ProsodyAttributes,
    SayAsOptions,
    SpeechObject,
)

logger = setup_logging("speech-builder")

ModelT = TypeVar("ModelT", bound=BaseModel)


class ElementSink(Protocol):
    """What an operation needs from a builder to append a fragment."""

    def append(self, fragment: str) -> None: ...

    def escape(self, word: Any) -> Any: ...

    def validate_present(self, value: Any, msg: str) -> None: ...

    def validate_not_empty(self, value: Any, msg: str) -> None: ...


def _coerce_options(options: Any, model: type[ModelT], msg: str) -> ModelT:
    """Accept either a model instance or a plain mapping as an option bag."""
    if isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        try:
            return model.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidArgumentError(f"{msg} {e}") from e
    raise InvalidArgumentError(msg)


class Speech:
    """
    Build SSML markup supported by Alexa devices.

    Each operation validates its input, escapes plain text, formats a single
    fragment and appends it. Operations return the builder so calls chain:

        speech = Speech()
        speech.say("Let's begin your lesson").pause("1s")
        speech.ssml()  # "<speak>Let&apos;s begin your lesson <break time='1s'/></speak>"
    """

    def __init__(self, escape_mode: str | None = None, rng: random.Random | None = None):
        """
        Initialize an empty document.

        Args:
            escape_mode: 'entity' (default) or the legacy 'strip' mode
            rng: Optional random source used by say_random_choice
        """
        mode = escape_mode or EscapeMode.ENTITY.value
        self.escape_mode = validation.validate_in_list(
            mode, values(EscapeMode), f"The escape mode is invalid. Received this: {mode}"
        )
        if self.escape_mode == EscapeMode.STRIP.value:
            logger.warning(
                "Legacy 'strip' escape mode is deprecated; special characters will be removed"
            )
        self.helper = Helper(rng)
        self._elements: list[str] = []

    @property
    def elements(self) -> tuple[str, ...]:
        """Fragments appended so far, in order."""
        return tuple(self._elements)

    # Sink primitives shared with extensions

    def append(self, fragment: str) -> None:
        """Append an already formatted fragment."""
        self._elements.append(fragment)

    def escape(self, word: Any) -> Any:
        """Escape text using this builder's escape mode."""
        return validation.escape(word, self.escape_mode)

    def validate_present(self, value: Any, msg: str) -> None:
        validation.validate_present(value, msg)

    def validate_not_empty(self, value: Any, msg: str) -> None:
        validation.validate_not_empty(value, msg)

    # Text

    def say(self, saying: Any) -> Speech:
        """Append escaped text to the speak tag."""
        self.validate_present(saying, "The saying provided to Speech.say() was None.")
        self.append(f"{self.escape(saying)}")
        return self

    def paragraph(self, paragraph: Any) -> Speech:
        """Append a paragraph tag."""
        self.validate_present(paragraph, "The paragraph provided to Speech.paragraph() was None.")
        self.append(f"<p>{self.escape(paragraph)}</p>")
        return self

    def sentence(self, saying: Any) -> Speech:
        """Append a sentence tag."""
        self.validate_present(saying, "The sentence provided to Speech.sentence() was None.")
        self.append(f"<s>{self.escape(saying)}</s>")
        return self

    def say_with_ssml(self, saying: Any) -> Speech:
        """
        Append raw SSML without escaping.

        For example, 'we should all <w role="amazon:VB">read</w> more' is kept as is.
        """
        self.validate_present(saying, "The saying provided to Speech.say_with_ssml() was None.")
        self.append(f"{saying}")
        return self

    def say_random_choice(self, choices: Any) -> Speech:
        """Say one of ``choices``, picked uniformly at random."""
        choice = self.helper.choose_random_word(choices)
        self.append(f"{self.escape(choice)}")
        return self

    # Breaks

    def pause(self, duration: Any) -> Speech:
        """
        Append a break tag for a duration such as '1s' or '500ms'.

        The duration may not exceed 10 seconds (10000 milliseconds).
        """
        self.validate_present(duration, "The duration provided to Speech.pause() was None.")
        validation.validate_duration(duration)
        self.append(self._break(duration))
        return self

    def pause_by_strength(self, strength: Any) -> Speech:
        """Append a break tag with a strength: none, x-weak, weak, medium, strong or x-strong."""
        self.validate_present(
            strength, "The strength provided to Speech.pause_by_strength() was None."
        )
        strength = validation.validate_in_list(
            strength,
            values(BreakStrength),
            "The strength provided to Speech.pause_by_strength() was not valid. "
            f"Received strength: {strength}",
        )
        self.append(f"<break strength='{strength}'/>")
        return self

    @staticmethod
    def _break(duration: Any) -> str:
        return f"<break time='{duration}'/>"

    # Audio

    def audio(self, url: Any, callback: Callable[[Speech], Any] | None = None) -> Speech:
        """
        Append an audio tag.

        Args:
            url: Link to the audio file; inserted as is
            callback: Optional function given a fresh builder of the same type;
                whatever it builds is nested inside the audio tag

        Returns:
            This builder
        """
        self.validate_present(url, "The url provided to Speech.audio() was None.")
        if callback is None:
            self.append(f"<audio src='{url}'/>")
            return self

        validation.validate_callable(callback, "callback")
        nested = type(self)(escape_mode=self.escape_mode, rng=self.helper.rng)
        callback(nested)
        self.append(f"<audio src='{url}'>{nested.ssml(True)}</audio>")
        return self

    # Say-as

    def spell(self, word: Any) -> Speech:
        """Append a say-as tag that spells the word out."""
        self.validate_present(word, "The word provided to Speech.spell() was None.")
        self.append(self._spell_out(word))
        return self

    def spell_slowly(self, word: Any, delay: Any) -> Speech:
        """Spell the word out one character at a time with a pause after each character."""
        self.validate_present(word, "The word provided to Speech.spell_slowly() was None.")
        self.validate_present(delay, "The delay provided to Speech.spell_slowly() was None.")
        validation.validate_duration(delay)
        if not isinstance(word, str):
            word = str(self.escape(word))

        fragments: list[str] = []
        for char in word:
            fragments.append(self._spell_out(char))
            fragments.append(self._break(delay))
        self._elements.extend(fragments)
        return self

    def _spell_out(self, word: Any) -> str:
        return f"<say-as interpret-as='spell-out'>{self.escape(word)}</say-as>"

    def say_as(self, options: SayAsOptions | Mapping[str, Any] | None) -> Speech:
        """
        Append a say-as tag with interpret-as and optional format attributes.

        Args:
            options: word, interpret (e.g. 'cardinal', 'date', 'telephone') and
                format (e.g. 'mdy', 'hms24'). The word is inserted unescaped.
                Without interpret only the word is appended.

        Returns:
            This builder
        """
        self.validate_present(options, "The object provided to Speech.say_as() was invalid.")
        opts = _coerce_options(options, SayAsOptions, "The object provided to Speech.say_as() was invalid.")
        self.validate_present(opts.word, "The word provided to Speech.say_as() was None.")

        if not opts.interpret:
            self.append(f"{opts.word}")
            return self

        interpret = validation.validate_in_list(
            opts.interpret,
            values(InterpretAs),
            f"The interpret is invalid. Received this: {opts.interpret}",
        )
        if opts.format:
            self.append(
                f"<say-as interpret-as='{interpret}' format='{opts.format}'>{opts.word}</say-as>"
            )
        else:
            self.append(f"<say-as interpret-as='{interpret}'>{opts.word}</say-as>")
        return self

    # Pronunciation

    def part_of_speech(self, options: PartOfSpeechOptions | Mapping[str, Any] | None) -> Speech:
        """Append a w tag with a role; nothing is appended when no role is given."""
        self.validate_present(
            options, "The object provided to Speech.part_of_speech() was invalid."
        )
        opts = _coerce_options(
            options, PartOfSpeechOptions, "The object provided to Speech.part_of_speech() was invalid."
        )
        self.validate_present(opts.word, "The word provided to Speech.part_of_speech() was None.")
        word = self.escape(opts.word)
        if opts.role:
            self.append(f"<w role='{opts.role}'>{word}</w>")
        return self

    def phoneme(self, alphabet: Any, ph: Any, word: Any) -> Speech:
        """
        Append a phoneme tag.

        Args:
            alphabet: Phonetic alphabet, e.g. 'ipa'
            ph: Phonetic spelling, e.g. 'pɪˈkɑːn'
            word: Text to insert

        Returns:
            This builder
        """
        self.validate_present(alphabet, "The alphabet provided to Speech.phoneme() was None.")
        self.validate_present(ph, "The ph provided to Speech.phoneme() was None.")
        self.validate_present(word, "The word provided to Speech.phoneme() was None.")
        escaped_word = self.escape(word)
        ph = str(ph).replace("'", "&apos;")
        self.append(f"<phoneme alphabet='{alphabet}' ph='{ph}'>{escaped_word}</phoneme>")
        return self

    def sub(self, alias: Any, word: Any) -> Speech:
        """Pronounce ``word`` as ``alias``."""
        self._not_empty(alias, "alias", "sub")
        self._not_empty(word, "word", "sub")
        self.append(f"<sub alias='{alias}'>{self.escape(word)}</sub>")
        return self

    # Expression

    def emphasis(self, level: Any, word: Any) -> Speech:
        """Append an emphasis tag with level strong, moderate or reduced."""
        self.validate_present(level, "The level provided to Speech.emphasis() was None.")
        self.validate_present(word, "The word provided to Speech.emphasis() was None.")
        level = validation.validate_in_list(
            level,
            values(EmphasisLevel),
            f"The level provided to Speech.emphasis() was not valid. Received level: {level}",
        )
        self._not_empty(word, "word", "emphasis")
        self.append(f"<emphasis level='{level}'>{self.escape(word)}</emphasis>")
        return self

    def prosody(self, attributes: ProsodyAttributes | Mapping[str, Any] | None, word: Any) -> Speech:
        """
        Append a prosody tag.

        Args:
            attributes: Any of rate, pitch and volume. Rate is x-slow..x-fast or a
                percentage of at least 20%; pitch is x-low..x-high or a signed
                percentage; volume is silent..x-loud or a signed change in dB.
            word: Text to insert

        Returns:
            This builder

        Raises:
            InvalidArgumentError: For missing input or an unrecognized attribute value
            RateOutOfRangeError: For a rate below 20%
        """
        self.validate_present(attributes, "The attributes provided to Speech.prosody() was None.")
        self._not_empty(word, "word", "prosody")
        attrs = _coerce_options(
            attributes, ProsodyAttributes, "The attributes provided to Speech.prosody() was invalid."
        )

        parts = []
        if attrs.rate is not None:
            parts.append(f"rate='{validation.normalize_rate(attrs.rate)}'")
        if attrs.pitch is not None:
            parts.append(f"pitch='{validation.normalize_pitch(attrs.pitch)}'")
        if attrs.volume is not None:
            parts.append(f"volume='{validation.normalize_volume(attrs.volume)}'")

        opening = " ".join(["<prosody", *parts]) + ">"
        self.append(f"{opening}{self.escape(word)}</prosody>")
        return self

    def _not_empty(self, value: Any, name: str, operation: str) -> None:
        self.validate_present(value, f"The {name} provided to Speech.{operation}() was None.")
        self.validate_not_empty(value, f"The {name} provided to Speech.{operation}() was empty.")

    # Output

    def ssml(self, exclude_speak_tag: bool = False) -> str:
        """
        Serialize the document.

        Args:
            exclude_speak_tag: Leave out the surrounding speak tag (used for nesting)

        Returns:
            SSML string
        """
        body = " ".join(self._elements)
        logger.debug(f"Serialized {len(self._elements)} elements")
        if exclude_speak_tag:
            return body
        return f"<speak>{body}</speak>"

    def to_object(self) -> SpeechObject:
        """Build the record the skill response layer sends to the device."""
        return SpeechObject(speech=self.ssml())

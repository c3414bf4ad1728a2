"""Unit tests for Amazon extension tags"""

import re

import pytest

from speech_builder import AmazonSpeech, ElementSink, InvalidArgumentError, Speech
from speech_builder.amazon import voice, whisper


class TestWhisper:
    """Test cases for the whispered effect."""

    def test_whisper(self, amazon_speech):
        amazon_speech.whisper("good night and sweet dreams")
        assert amazon_speech.ssml() == (
            '<speak><amazon:effect name="whispered">good night and sweet dreams</amazon:effect></speak>'
        )

    def test_whisper_escapes_special_characters(self, amazon_speech):
        amazon_speech.whisper("good night & sweet dreams")
        assert amazon_speech.ssml() == (
            '<speak><amazon:effect name="whispered">good night &amp; sweet dreams</amazon:effect></speak>'
        )

    def test_whisper_without_escaping(self, amazon_speech):
        amazon_speech.whisper("<emphasis level='strong'>hush</emphasis>", escape=False)
        assert amazon_speech.ssml(True) == (
            "<amazon:effect name=\"whispered\"><emphasis level='strong'>hush</emphasis></amazon:effect>"
        )

    @pytest.mark.parametrize("words,shown", [(None, "None"), ("", "''")])
    def test_whisper_rejects_missing_words(self, amazon_speech, words, shown):
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape(f"The words provided to AmazonSpeech.whisper() was {shown}"),
        ):
            amazon_speech.whisper(words)
        assert amazon_speech.elements == ()


class TestVoice:
    """Test cases for named voices."""

    def test_voice(self, amazon_speech):
        amazon_speech.voice("Kendra", "I'm Kendra")
        assert amazon_speech.ssml() == '<speak><voice name="Kendra">I&apos;m Kendra</voice></speak>'

    def test_voice_without_escaping(self, amazon_speech):
        amazon_speech.voice("Brian", "<s>Hello</s>", escape=False)
        assert amazon_speech.ssml() == '<speak><voice name="Brian"><s>Hello</s></voice></speak>'

    def test_voice_requires_name(self, amazon_speech):
        with pytest.raises(InvalidArgumentError, match=re.escape("The name provided to AmazonSpeech.voice() was ''")):
            amazon_speech.voice("", "Hello")

    def test_voice_requires_words(self, amazon_speech):
        with pytest.raises(InvalidArgumentError, match=re.escape("The words provided to AmazonSpeech.voice() was None")):
            amazon_speech.voice("Brian", None)


class TestAmazonSpeechReusesCore:
    """The extension shares the core document and serialization."""

    def test_mixes_core_and_extension_tags(self, amazon_speech):
        amazon_speech.say("Hi").whisper("secret").pause("1s")
        assert amazon_speech.ssml() == (
            "<speak>Hi <amazon:effect name=\"whispered\">secret</amazon:effect> <break time='1s'/></speak>"
        )

    def test_nested_audio_builder_keeps_extensions(self, amazon_speech):
        amazon_speech.audio("http://a.mp3", lambda builder: builder.whisper("psst"))
        assert amazon_speech.ssml(True) == (
            "<audio src='http://a.mp3'><amazon:effect name=\"whispered\">psst</amazon:effect></audio>"
        )

    def test_satisfies_element_sink(self):
        sink: ElementSink = AmazonSpeech()
        sink.append("<p>raw</p>")
        assert sink.escape("&") == "&amp;"


class TestVendorFunctions:
    """The Amazon tags work on any element sink, not only AmazonSpeech."""

    def test_whisper_on_plain_speech(self, speech):
        result = whisper(speech.say("Hi"), "secret")
        assert result is speech
        assert speech.ssml() == (
            "<speak>Hi <amazon:effect name=\"whispered\">secret</amazon:effect></speak>"
        )

    def test_voice_on_plain_speech(self, speech):
        voice(speech, "Kendra", "Tom & Jerry")
        assert speech.ssml(True) == '<voice name="Kendra">Tom &amp; Jerry</voice>'

    def test_voice_uses_sink_escape_mode(self):
        speech = Speech(escape_mode="strip")
        voice(speech, "Brian", "<Cat's>")
        assert speech.ssml(True) == '<voice name="Brian">Cats</voice>'

    def test_failed_vendor_call_appends_nothing(self, speech):
        with pytest.raises(InvalidArgumentError):
            whisper(speech, "")
        assert speech.elements == ()

"""Tests for the random choice helper."""

import random
from unittest.mock import MagicMock

import pytest

from speech_builder import Helper, InvalidArgumentError, Speech


class TestHelper:
    """Test random word selection with an injectable source."""

    def test_seeded_source_is_deterministic(self) -> None:
        words = ["apple", "peach", "plum"]
        first = [Helper(random.Random(7)).choose_random_word(words) for _ in range(5)]
        second = [Helper(random.Random(7)).choose_random_word(words) for _ in range(5)]
        assert first == second

    def test_uses_index_from_source(self) -> None:
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 1
        helper = Helper(rng)

        assert helper.choose_random_word(["apple", "peach"]) == "peach"
        rng.randrange.assert_called_once_with(2)

    def test_random_stays_in_range(self) -> None:
        helper = Helper(random.Random(1))
        assert all(0 <= helper.random(3) < 3 for _ in range(200))

    def test_empty_choices_are_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Helper().choose_random_word([])

    def test_string_is_not_a_sequence_of_choices(self) -> None:
        with pytest.raises(InvalidArgumentError, match="The words must be a list or tuple"):
            Helper().choose_random_word("apple")

    def test_speech_uses_injected_source(self) -> None:
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 0
        speech = Speech(rng=rng)

        speech.say_random_choice(["first", "second"])

        assert speech.ssml() == "<speak>first</speak>"

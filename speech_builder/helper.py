"""Utility helpers used by the speech builder."""

from __future__ import annotations

import random as _random
from typing import Any, Sequence

from speech_builder.shared.exceptions import InvalidArgumentError


class Helper:
    """Random selection of words or phrases."""

    def __init__(self, rng: _random.Random | None = None):
        """
        Initialize the helper.

        Args:
            rng: Optional random source; a private ``random.Random`` is used when omitted
        """
        self.rng = rng or _random.Random()

    def choose_random_word(self, words: Sequence[Any]) -> Any:
        """
        Pick a random word or phrase.

        Args:
            words: A list or tuple of words or phrases

        Returns:
            One element of ``words``

        Raises:
            InvalidArgumentError: If ``words`` is not a list or tuple, or is empty
        """
        if not isinstance(words, (list, tuple)):
            raise InvalidArgumentError("The words must be a list or tuple")
        if not words:
            raise InvalidArgumentError("The words must contain at least one choice")
        return words[self.random(len(words))]

    def random(self, max_value: int) -> int:
        """Return a random index between 0 and ``max_value - 1``."""
        return self.rng.randrange(max_value)

"""
Shared pytest fixtures for Solitaire cipher tests.

Provides convenience wrappers around str_to_card / card_to_code for building
card codes from human-readable labels.
"""

from __future__ import annotations

import numpy as np
import pytest

from solitaire.engine.cards import card_to_code, str_to_card
from solitaire.engine.deck import create_deck


def codes(*card_strs: str) -> list[int]:
    """Build a list of card codes from human-readable card labels.

    Examples:
        >>> codes('AC', 'KS', 'JA')
        [0, 51, 52]
    """
    return [card_to_code(str_to_card(s)) for s in card_strs]


@pytest.fixture
def fresh_deck() -> np.ndarray:
    """Return a deck in canonical order."""
    return create_deck()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so randomised tests are reproducible."""
    return np.random.default_rng(20241019)

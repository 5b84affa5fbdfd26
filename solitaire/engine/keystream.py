"""
Keystream generation: the deck cycle and the keying procedure.

One cycle of the deck:
    1. Move Joker A one card down.
    2. Move Joker B two cards down.
    3. Triple cut around the two jokers.
    4. Count cut by the value of the bottom card.
    5. Read the top card's value n and output the card n positions below it.
       A joker output is discarded and the whole cycle runs again.

Keying replaces step 5 with a second count cut by the key letter's alphabet
position (A=1 .. Z=26); no card is output.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .cards import CARD_NUMBERS, CARD_VALUES, JOKER_A, JokerId
from .deck import count_cut, create_deck, locate_joker, move_card, triple_cut
from .text import filter_letters


def _shuffle(deck: np.ndarray) -> None:
    """Steps 1–4 of a cycle."""
    a = locate_joker(deck, JokerId.A)
    move_card(deck, a, a + 1)

    b = locate_joker(deck, JokerId.B)
    move_card(deck, b, b + 2)

    triple_cut(deck, locate_joker(deck, JokerId.A), locate_joker(deck, JokerId.B))
    count_cut(deck, int(CARD_VALUES[deck[-1]]))


def cycle(deck: np.ndarray, forced_cut: int = 0) -> int | None:
    """Advance the deck by one full cycle.

    Args:
        deck: Mutable deck array, modified in place.
        forced_cut: When positive (keying only), perform an extra count cut of
                    this size after step 4 and return without an output card.

    Returns:
        The code of the output card (never a joker), or None when forced_cut
        was given.

    Examples:
        >>> deck = create_deck()
        >>> int(CARD_VALUES[cycle(deck)])
        4
    """
    while True:
        _shuffle(deck)

        if forced_cut > 0:
            count_cut(deck, forced_cut)
            return None

        output = int(deck[CARD_VALUES[deck[0]]])
        if output < JOKER_A:
            return output


def key_deck(deck: np.ndarray, key: bytes) -> None:
    """Key the deck with an already filtered passphrase (uppercase letters only).

    Each letter runs one cycle whose output step is replaced by a count cut of
    the letter's alphabet position. An empty key leaves the deck untouched.

    Raises:
        ValueError: If the key contains anything but uppercase ASCII letters.
    """
    for c in key:
        if not ord('A') <= c <= ord('Z'):
            raise ValueError(f"Key byte {c!r} is not an uppercase letter; filter the key first.")
        cycle(deck, forced_cut=c - ord('A') + 1)


def keyed_deck(key: bytes | str) -> np.ndarray:
    """Return a fresh canonical deck keyed with the letters of `key`."""
    deck = create_deck()
    key_deck(deck, filter_letters(key))
    return deck


def keystream(deck: np.ndarray) -> Iterator[int]:
    """Yield output card codes forever, cycling the deck in place."""
    while True:
        yield cycle(deck)


def generate_keystream(key: bytes | str, length: int) -> np.ndarray:
    """Return the first `length` keystream numbers (0–25) for a passphrase.

    Examples:
        >>> generate_keystream(b'', 4).tolist()
        [3, 22, 9, 23]
    """
    stream = keystream(keyed_deck(key))
    codes = np.fromiter((next(stream) for _ in range(length)), dtype=np.int8, count=length)
    return CARD_NUMBERS[codes]

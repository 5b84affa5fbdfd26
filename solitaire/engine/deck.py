"""
Deck creation and the shuffle primitives of the cipher.

The deck is a numpy int8 array of length 54 holding a permutation of the card
codes (see cards.py). Index 0 is the top card, index 53 the bottom card.

Every primitive mutates the deck in place and only ever permutes it: no card is
created, dropped, or duplicated.
"""

from __future__ import annotations

import numpy as np

from .cards import (
    DECK_SIZE,
    JOKER_A,
    JOKER_B,
    JokerId,
    card_to_code,
    card_to_str,
    card_to_value_str,
    code_to_card,
    str_to_card,
)


def create_deck() -> np.ndarray:
    """Create a deck in canonical order.

    Clubs A..K, diamonds A..K, hearts A..K, spades A..K, Joker A, Joker B.

    Returns:
        np.ndarray: int8 array of shape (54,) equal to arange(54).

    Examples:
        >>> deck = create_deck()
        >>> int(deck[0]), int(deck[-1])
        (0, 53)
    """
    return np.arange(DECK_SIZE, dtype=np.int8)


def is_valid_deck(deck: np.ndarray) -> bool:
    """Return True when the deck holds each of the 54 cards exactly once."""
    return deck.shape == (DECK_SIZE,) and bool(
        np.array_equal(np.sort(deck), np.arange(DECK_SIZE))
    )


def locate_joker(deck: np.ndarray, identity: JokerId) -> int:
    """Return the current position of Joker A or Joker B.

    Examples:
        >>> locate_joker(create_deck(), JokerId.A)
        52
    """
    code = JOKER_A if identity is JokerId.A else JOKER_B
    positions = np.flatnonzero(deck == code)
    assert len(positions) == 1, f"Deck holds {len(positions)} copies of joker {identity.name}"
    return int(positions[0])


def move_card(deck: np.ndarray, from_pos: int, to_pos: int) -> None:
    """Move the card at from_pos so that it ends up at to_pos.

    A target past the bottom wraps around the deck skipping the bottom slot:
    to_pos >= 54 becomes (to_pos % 54) + 1, so a wrapped card lands just below
    the top card and never becomes the new bottom card.

    The card is taken out first and reinserted at to_pos in the shortened
    sequence; for adjacent positions this is a plain swap.

    Args:
        deck: Mutable deck array, modified in place.
        from_pos: Current position of the card (0–53).
        to_pos: Target position, possibly past the bottom.

    Examples:
        >>> deck = create_deck()
        >>> move_card(deck, 53, 55)
        >>> [int(c) for c in deck[:4]]
        [0, 1, 53, 2]
    """
    if to_pos >= DECK_SIZE:
        to_pos = to_pos % DECK_SIZE + 1

    card = deck[from_pos]
    if from_pos < to_pos:
        deck[from_pos:to_pos] = deck[from_pos + 1:to_pos + 1].copy()
    elif to_pos < from_pos:
        deck[to_pos + 1:from_pos + 1] = deck[to_pos:from_pos].copy()
    deck[to_pos] = card


def triple_cut(deck: np.ndarray, pos_a: int, pos_b: int) -> None:
    """Swap the cards above the top joker with the cards below the bottom joker.

    The block between the two boundaries (inclusive) keeps its internal order.
    The boundaries may be given in either order.

    Args:
        deck: Mutable deck array, modified in place.
        pos_a: Position of one joker.
        pos_b: Position of the other joker.

    Examples:
        >>> deck = create_deck()
        >>> triple_cut(deck, 2, 50)
        >>> [int(c) for c in deck[:4]], [int(c) for c in deck[-3:]]
        ([51, 52, 53, 2], [50, 0, 1])
    """
    top, bottom = min(pos_a, pos_b), max(pos_a, pos_b)
    deck[:] = np.concatenate((deck[bottom + 1:], deck[top:bottom + 1], deck[:top]))


def count_cut(deck: np.ndarray, n: int) -> None:
    """Move the top n cards to just above the bottom card.

    The bottom card always stays where it is:
        new = old[n:53] + old[:n] + old[53]

    Args:
        deck: Mutable deck array, modified in place.
        n: Number of cards to cut (1–53). A cut of 53 leaves the deck unchanged.

    Raises:
        ValueError: If n is outside 1..53.

    Examples:
        >>> deck = create_deck()
        >>> count_cut(deck, 3)
        >>> [int(c) for c in deck[:2]], [int(c) for c in deck[-4:]]
        ([3, 4], [0, 1, 2, 53])
    """
    if not 1 <= n <= DECK_SIZE - 1:
        raise ValueError(f"Count cut of {n} is outside 1..{DECK_SIZE - 1}.")
    last = DECK_SIZE - 1
    deck[:last] = np.concatenate((deck[n:last], deck[:n]))


# ─── String I/O ───────────────────────────────────────────────────────────────

def deck_to_str(deck: np.ndarray, numeric: bool = False) -> str:
    """Render a deck top to bottom as space-separated card labels.

    With numeric=True the published notation is used (values 1–52, 'A', 'B').

    Examples:
        >>> deck_to_str(create_deck(), numeric=True).split()[-3:]
        ['52', 'A', 'B']
        >>> deck_to_str(create_deck()).split()[:2]
        ['AC', '2C']
    """
    render = card_to_value_str if numeric else card_to_str
    return ' '.join(render(code_to_card(c)) for c in deck)


def deck_from_str(s: str) -> np.ndarray:
    """Parse a full deck from space-separated card labels (see deck_to_str).

    Raises:
        ValueError: If the labels are not a permutation of all 54 cards.

    Examples:
        >>> deck = deck_from_str(deck_to_str(create_deck()))
        >>> is_valid_deck(deck)
        True
    """
    deck = np.array([card_to_code(str_to_card(label)) for label in s.split()], dtype=np.int8)
    if not is_valid_deck(deck):
        raise ValueError(f"Expected each of the {DECK_SIZE} cards exactly once.")
    return deck

"""
Card model, integer encoding, and human-readable I/O helpers.

Cards are a tagged variant:
    StandardCard(suit, rank)  ->  suit in CLUBS..SPADES, rank 1..13
    Joker(identity)           ->  identity A or B

Card encoding (integer 0–53) used inside the deck array:
    code = suit_index * 13 + (rank - 1)   for standard cards (0–51)
    52 = Joker A, 53 = Joker B

A card's value is its position in the 1..53 bridge ordering (clubs, diamonds,
hearts, spades); both jokers are worth 53. The keystream number is the value
folded onto the alphabet: (value - 1) mod 26.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

SUIT_SIZE: int = 13
SUIT_COUNT: int = 4
DECK_SIZE: int = SUIT_SIZE * SUIT_COUNT + 2   # 54
JOKER_VALUE: int = SUIT_SIZE * SUIT_COUNT + 1  # 53
ALPHABET_SIZE: int = 26

RANK_NAMES: list[str] = ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']


class Suit(Enum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return self.name[0]


class JokerId(Enum):
    A = 0
    B = 1


@dataclass(frozen=True)
class StandardCard:
    suit: Suit
    rank: int  # 1 (ace) .. 13 (king)


@dataclass(frozen=True)
class Joker:
    identity: JokerId


Card = StandardCard | Joker

# Codes of the two jokers inside the deck array
JOKER_A: int = DECK_SIZE - 2  # 52
JOKER_B: int = DECK_SIZE - 1  # 53


# ─── Value functions ──────────────────────────────────────────────────────────

def card_value(card: Card) -> int:
    """Return the 1-based bridge value of a card (both jokers are 53).

    Examples:
        >>> card_value(StandardCard(Suit.CLUBS, 1))
        1
        >>> card_value(StandardCard(Suit.HEARTS, 4))
        30
        >>> card_value(Joker(JokerId.B))
        53
    """
    if isinstance(card, Joker):
        return JOKER_VALUE
    return card.suit.value * SUIT_SIZE + card.rank


def card_number(card: Card) -> int:
    """Return the 0-based keystream letter offset of a card.

    Examples:
        >>> card_number(StandardCard(Suit.CLUBS, 4))
        3
        >>> card_number(StandardCard(Suit.HEARTS, 1))   # value 27
        0
    """
    return (card_value(card) - 1) % ALPHABET_SIZE


def is_joker(card: Card) -> bool:
    return isinstance(card, Joker)


# ─── Integer encoding ─────────────────────────────────────────────────────────

def card_to_code(card: Card) -> int:
    """Encode a card as its integer code (0–53).

    Raises:
        ValueError: If a standard card carries a rank outside 1..13.

    Examples:
        >>> card_to_code(StandardCard(Suit.CLUBS, 1))
        0
        >>> card_to_code(StandardCard(Suit.SPADES, 13))
        51
        >>> card_to_code(Joker(JokerId.A))
        52
    """
    if isinstance(card, Joker):
        return JOKER_A + card.identity.value
    if not 1 <= card.rank <= SUIT_SIZE:
        raise ValueError(f"Rank {card.rank} is outside 1..{SUIT_SIZE}.")
    return card.suit.value * SUIT_SIZE + card.rank - 1


def code_to_card(code: int) -> Card:
    """Decode an integer code (0–53) back into a card.

    Examples:
        >>> code_to_card(0)
        StandardCard(suit=<Suit.CLUBS: 0>, rank=1)
        >>> code_to_card(53)
        Joker(identity=<JokerId.B: 1>)
    """
    code = int(code)
    if code >= JOKER_A:
        return Joker(JokerId(code - JOKER_A))
    return StandardCard(Suit(code // SUIT_SIZE), code % SUIT_SIZE + 1)


# Lookup tables indexed by card code, derived from the value functions above.
CARD_VALUES: np.ndarray = np.array(
    [card_value(code_to_card(c)) for c in range(DECK_SIZE)], dtype=np.int8
)
CARD_NUMBERS: np.ndarray = np.array(
    [card_number(code_to_card(c)) for c in range(DECK_SIZE)], dtype=np.int8
)


# ─── String I/O ───────────────────────────────────────────────────────────────

def card_to_str(card: Card) -> str:
    """Convert a card to its human-readable label.

    Examples:
        >>> card_to_str(StandardCard(Suit.CLUBS, 1))
        'AC'
        >>> card_to_str(StandardCard(Suit.DIAMONDS, 10))
        '10D'
        >>> card_to_str(Joker(JokerId.A))
        'JA'
    """
    if isinstance(card, Joker):
        return 'J' + card.identity.name
    return RANK_NAMES[card.rank - 1] + card.suit.symbol


def str_to_card(s: str) -> Card:
    """Parse a human-readable card label.

    The format is <rank><suit> where suit is the last character, or 'JA' / 'JB'
    for the jokers. Rank can be 'A', '2'-'10', 'J', 'Q' or 'K'.

    Raises:
        ValueError: If the label is not a valid card.

    Examples:
        >>> str_to_card('KS')
        StandardCard(suit=<Suit.SPADES: 3>, rank=13)
        >>> str_to_card('JB')
        Joker(identity=<JokerId.B: 1>)
    """
    s = s.strip().upper()
    if s in ('JA', 'JB'):
        return Joker(JokerId[s[1]])
    suits = {suit.symbol: suit for suit in Suit}
    rank_str, suit_char = s[:-1], s[-1:]
    if suit_char not in suits or rank_str not in RANK_NAMES:
        raise ValueError(f"Unknown card label {s!r}.")
    return StandardCard(suits[suit_char], RANK_NAMES.index(rank_str) + 1)


def card_to_value_str(card: Card) -> str:
    """Render a card in the numeric notation of the published algorithm.

    Standard cards print their value (1–52); jokers print 'A' or 'B'.

    Examples:
        >>> card_to_value_str(StandardCard(Suit.SPADES, 13))
        '52'
        >>> card_to_value_str(Joker(JokerId.A))
        'A'
    """
    if isinstance(card, Joker):
        return card.identity.name
    return str(card_value(card))

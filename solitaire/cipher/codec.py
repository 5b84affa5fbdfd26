"""
Encryption and decryption with the Solitaire keystream.

Both directions filter their inputs to uppercase letters and key a fresh deck
with the filtered passphrase. Each message letter consumes one keystream
number k (0–25) and is shifted by k + 1 places:

    encrypt:  C = (P + k + 1) mod 26
    decrypt:  P = (C - k - 1) mod 26

Only encryption pads (with 'X' up to a multiple of five letters); decryption
returns the padding as-is, so callers strip it themselves if needed.
"""

from __future__ import annotations

from solitaire.engine.cards import ALPHABET_SIZE, CARD_NUMBERS
from solitaire.engine.keystream import keyed_deck, keystream
from solitaire.engine.text import BLOCK_SIZE, PAD_CHAR, filter_letters, pad


def _shift(data: bytes, key: bytes | str, direction: int) -> bytes:
    stream = keystream(keyed_deck(key))
    output = bytearray(len(data))
    for i, c in enumerate(data):
        shift = int(CARD_NUMBERS[next(stream)]) + 1
        output[i] = ord('A') + (c - ord('A') + direction * shift) % ALPHABET_SIZE
    return bytes(output)


def encrypt(plaintext: bytes | str, key: bytes | str) -> bytes:
    """Encrypt plaintext with a passphrase.

    Non-letters in both arguments are ignored and lowercase letters are
    uppercased. The filtered plaintext is padded with 'X' to whole blocks of
    five letters, so the ciphertext length is always a multiple of five.

    Examples:
        >>> encrypt(b'SOLITAIRE', b'cryptonomicon')
        b'KIRAKSFJAN'
        >>> encrypt(b'', b'key')
        b''
    """
    data = pad(filter_letters(plaintext), BLOCK_SIZE, PAD_CHAR)
    return _shift(data, key, +1)


def decrypt(ciphertext: bytes | str, key: bytes | str) -> bytes:
    """Decrypt ciphertext with a passphrase.

    Non-letters (for example the spaces between five-letter groups) are
    ignored. Padding added by encrypt() is not removed.

    Examples:
        >>> decrypt(b'KIRAK SFJAN', b'cryptonomicon')
        b'SOLITAIREX'
    """
    return _shift(filter_letters(ciphertext), key, -1)

"""
Text normalisation helpers feeding the cipher.

The cipher only works on the 26 uppercase letters. Messages and keys are
filtered to letters, plaintext is padded to whole five-letter blocks, and
ciphertext is traditionally written in five-letter groups.
"""

from __future__ import annotations

BLOCK_SIZE: int = 5
PAD_CHAR: bytes = b'X'


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode('ascii', errors='ignore')
    return bytes(data)


def filter_letters(data: bytes | str) -> bytes:
    """Keep only ASCII letters, uppercased. Everything else is dropped.

    Examples:
        >>> filter_letters(b'Solitaire, 1999!')
        b'SOLITAIRE'
        >>> filter_letters('??a?')
        b'A'
    """
    result = bytearray()
    for b in _as_bytes(data):
        if ord('a') <= b <= ord('z'):
            b -= ord('a') - ord('A')
        if ord('A') <= b <= ord('Z'):
            result.append(b)
    return bytes(result)


def pad(data: bytes, multiple: int = BLOCK_SIZE, pad_char: bytes = PAD_CHAR) -> bytes:
    """Right-pad data with pad_char until its length is a multiple of `multiple`.

    Empty input stays empty.

    Raises:
        ValueError: If multiple is not positive or pad_char is not one byte.

    Examples:
        >>> pad(b'SOLITAIRE')
        b'SOLITAIREX'
        >>> pad(b'')
        b''
    """
    if multiple < 1:
        raise ValueError(f"Padding multiple must be positive, got {multiple}.")
    if len(pad_char) != 1:
        raise ValueError(f"Padding character must be a single byte, got {pad_char!r}.")
    return data + pad_char * (-len(data) % multiple)


def group(data: bytes, size: int = BLOCK_SIZE, sep: bytes = b' ') -> bytes:
    """Split data into groups of `size` letters joined by `sep`.

    Examples:
        >>> group(b'KIRAKSFJAN')
        b'KIRAK SFJAN'
    """
    if size < 1:
        raise ValueError(f"Group size must be positive, got {size}.")
    return sep.join(data[i:i + size] for i in range(0, len(data), size))

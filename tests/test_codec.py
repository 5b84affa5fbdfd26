"""
Tests for solitaire/cipher/codec.py: encrypt / decrypt.

Reference vectors are the published Solitaire test set (ciphertext shown in
five-letter groups, as published).
"""

from __future__ import annotations

import pytest

from solitaire.cipher.codec import decrypt, encrypt
from solitaire.engine.text import filter_letters, group, pad

VECTORS = [
    # (plaintext, key, ciphertext)
    ("AAAAAAAAAAAAAAA", "", "EXKYI ZSGEH UNTIQ"),
    ("AAAAAAAAAAAAAAA", "f", "XYIUQ BMHKK JBEGY"),
    ("AAAAAAAAAAAAAAA", "fo", "TUJYM BERLG XNDIW"),
    ("AAAAAAAAAAAAAAA", "foo", "ITHZU JIWGR FARMW"),
    ("AAAAAAAAAAAAAAA", "a", "XODAL GSCUL IQNSC"),
    ("AAAAAAAAAAAAAAA", "aa", "OHGWM XXCAI MCIQP"),
    ("AAAAAAAAAAAAAAA", "aaa", "DCSQY HBQZN GDRUT"),
    ("AAAAAAAAAAAAAAA", "b", "XQEEM OITLZ VDSQS"),
    ("AAAAAAAAAAAAAAA", "bc", "QNGRK QIHCL GWSCE"),
    ("AAAAAAAAAAAAAAA", "bcd", "FMUBY BMAXH NQXCJ"),
    ("AAAAAAAAAAAAAAAAAAAAAAAAA", "cryptonomicon", "SUGSR SXSWQ RMXOH IPBFP XARYQ"),
    ("SOLITAIRE", "cryptonomicon", "KIRAK SFJAN"),
    # Distribution
    ("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "", "EYMBM EYNMQ EYFVE KLJQD UUTWG CMTPJ"),
    ("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "foobarbaz", "EHZXE QOZQX HHKDG WKESR DVHAV LMXVZ"),
    # Padding
    ("A", "", "EUHVF"),
    ("??A?", "", "EUHVF"),
    ("A", "foo", "IQEWR"),
]


def _ids(vectors):
    return [f"{pt[:10]}/{key or 'nokey'}" for pt, key, _ in vectors]


# ─── Reference vectors ────────────────────────────────────────────────────────


class TestEncryptVectors:
    @pytest.mark.parametrize("plaintext, key, ciphertext", VECTORS, ids=_ids(VECTORS))
    def test_encrypt(self, plaintext, key, ciphertext):
        assert encrypt(plaintext.encode(), key.encode()) == ciphertext.replace(" ", "").encode()

    def test_grouped_output(self):
        assert group(encrypt(b'AAAAAAAAAAAAAAA', b'')) == b'EXKYI ZSGEH UNTIQ'


class TestDecryptVectors:
    @pytest.mark.parametrize("plaintext, key, ciphertext", VECTORS, ids=_ids(VECTORS))
    def test_decrypt(self, plaintext, key, ciphertext):
        output = decrypt(ciphertext.encode(), key.encode())
        assert len(output) % 5 == 0
        assert output.startswith(filter_letters(plaintext))

    def test_solitaire_keeps_padding(self):
        assert decrypt(b'KIRAKSFJAN', b'cryptonomicon') == b'SOLITAIREX'

    def test_single_letter_keeps_padding(self):
        assert decrypt(b'EUHVF', b'') == b'AXXXX'

    def test_no_padding_added(self):
        assert decrypt(b'EUH', b'') == b'AXX'


# ─── Interface behaviour ──────────────────────────────────────────────────────


class TestInterface:
    def test_empty_plaintext(self):
        assert encrypt(b'', b'KEY') == b''

    def test_non_letter_plaintext_is_empty(self):
        assert encrypt(b'123 !?', b'KEY') == b''

    def test_empty_ciphertext(self):
        assert decrypt(b'', b'KEY') == b''

    def test_str_arguments(self):
        assert encrypt('solitaire', 'cryptonomicon') == b'KIRAKSFJAN'
        assert decrypt('kirak sfjan', 'CRYPTONOMICON') == b'SOLITAIREX'

    def test_key_case_and_punctuation_ignored(self):
        assert encrypt(b'SOLITAIRE', b'Crypto-Nomicon!') == b'KIRAKSFJAN'

    def test_output_is_uppercase_letters(self):
        output = encrypt(b'The quick brown fox', b'key')
        assert output.isalpha() and output.isupper()

    def test_length_is_multiple_of_five(self):
        for n in range(1, 12):
            assert len(encrypt(b'A' * n, b'K')) % 5 == 0


# ─── Properties ───────────────────────────────────────────────────────────────


class TestRoundTrip:
    def test_random_messages(self, rng):
        letters = b'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
        for _ in range(25):
            plaintext = bytes(letters[i] for i in rng.integers(0, 26, size=int(rng.integers(1, 40))))
            key = bytes(letters[i] for i in rng.integers(0, 26, size=int(rng.integers(0, 12))))
            assert decrypt(encrypt(plaintext, key), key) == pad(plaintext)

    def test_grouped_ciphertext_decrypts(self):
        ciphertext = group(encrypt(b'MEET AT NOON TOMORROW', b'PASSPHRASE'))
        assert ciphertext.count(b' ') == 3
        assert decrypt(ciphertext, b'PASSPHRASE') == b'MEETATNOONTOMORROWXX'


class TestFilteringIdempotence:
    def test_random_bytes(self, rng):
        for _ in range(20):
            raw = rng.integers(0, 256, size=60).astype('uint8').tobytes()
            assert encrypt(filter_letters(raw), b'KEY') == encrypt(raw, b'KEY')

    def test_key_filtering(self):
        assert encrypt(b'HELLO', b'f o o') == encrypt(b'HELLO', b'FOO')


class TestKeySensitivity:
    def test_constant_plaintext_corpus(self):
        keys = [key for _, key, _ in VECTORS[:10] if key]
        ciphertexts = {encrypt(b'A' * 15, key.encode()) for key in keys}
        assert len(ciphertexts) == len(keys)

    def test_wrong_key_fails_to_decrypt(self):
        ciphertext = encrypt(b'ATTACKATDAWN', b'RIGHT')
        assert decrypt(ciphertext, b'WRONG') != pad(b'ATTACKATDAWN')

"""
ciphersuite - Core Test Suite
=============================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import io
import string
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from ciphersuite.runeops           import shift_rune, read_all_runes, CHUNK_SIZE
from ciphersuite.ciphers.caesar    import CaesarCipher
from ciphersuite.ciphers.vigenere  import VigenereCipher, clean_key, key_offsets
from ciphersuite.registry          import get_cipher_from_name, available_ciphers
from ciphersuite.errors            import (InvalidKeyError, OperationError,
                                           StreamReadError, StreamWriteError)

MSG = "The quick brown fox jumps over the lazy dog! 0123456789 ~ ¡Ünïcødé Жук!"
OFFSETS = list(range(-60, 61, 7)) + [0, 26, -26, 52, 1000003]


def caesar(key):
    c = CaesarCipher()
    c.set_key(key)
    return c


def vigenere(key):
    v = VigenereCipher()
    v.set_key(key)
    return v


class ExplodingReader:
    """Returns `head` once, then fails."""

    def __init__(self, head):
        self._head = head

    def read(self, size=-1):
        if self._head is None:
            raise OSError("disk on fire")
        head, self._head = self._head, None
        return head


class ExplodingWriter:
    def __init__(self):
        self.flushes = 0

    def write(self, s):
        raise OSError("no space left on device")

    def flush(self):
        self.flushes += 1


class BrokenFlushWriter:
    def __init__(self):
        self.text = ""

    def write(self, s):
        self.text += s

    def flush(self):
        raise OSError("flush failed")


class CountingWriter(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


# ── Letter shift ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("k", OFFSETS)
def test_shift_roundtrip(k):
    for c in string.ascii_letters:
        assert shift_rune(shift_rune(c, k), -k) == c

@pytest.mark.parametrize("k", OFFSETS)
def test_shift_periodic_and_case_preserving(k):
    for c in string.ascii_uppercase:
        assert shift_rune(c, k) == shift_rune(c, k + 26)
        assert shift_rune(c, k) in string.ascii_uppercase
    for c in string.ascii_lowercase:
        assert shift_rune(c, k) in string.ascii_lowercase

@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \t\n") + ["é", "Ж", "ß", "€"])
def test_shift_leaves_non_letters(c):
    for k in OFFSETS:
        assert shift_rune(c, k) == c

def test_shift_wraps():
    assert shift_rune("z", 1) == "a"
    assert shift_rune("A", -1) == "Z"
    assert shift_rune("Z", 27) == "A"
    assert shift_rune("m", -53) == "l"
    assert shift_rune("q", 0) == "q"


# ── Stream transformer ────────────────────────────────────────────────────────
def test_empty_stream():
    out = CountingWriter()
    assert read_all_runes(io.StringIO(""), out, lambda i: 3) == 0
    assert out.getvalue() == ""
    assert out.flushes == 1

def test_positions_span_chunks():
    n = CHUNK_SIZE * 2 + 3
    out = io.StringIO()
    count = read_all_runes(io.StringIO("a" * n), out, lambda i: i % 2)
    assert count == n
    assert out.getvalue() == ("ab" * n)[:n]

def test_read_failure_keeps_partial_output():
    out = CountingWriter()
    with pytest.raises(StreamReadError) as exc:
        read_all_runes(ExplodingReader("abc"), out, lambda i: 1)
    assert exc.value.count == 3
    assert str(exc.value).startswith("Read error:")
    assert isinstance(exc.value.__cause__, OSError)
    assert out.getvalue() == "bcd"
    assert out.flushes == 1

def test_write_failure_is_reported_and_flushed():
    out = ExplodingWriter()
    with pytest.raises(StreamWriteError) as exc:
        read_all_runes(io.StringIO("hello"), out, lambda i: 1)
    assert exc.value.count == 0
    assert out.flushes == 1

def test_read_failure_wins_over_flush_failure():
    out = BrokenFlushWriter()
    with pytest.raises(StreamReadError) as exc:
        read_all_runes(ExplodingReader("abc"), out, lambda i: 1)
    assert exc.value.count == 3
    assert isinstance(exc.value.flush_error, StreamWriteError)
    assert out.text == "bcd"

def test_flush_failure_after_success_is_reported():
    with pytest.raises(StreamWriteError) as exc:
        read_all_runes(io.StringIO("abc"), BrokenFlushWriter(), lambda i: 1)
    assert exc.value.count == 3
    assert exc.value.flush_error is None

def test_operation_failure_stops_at_position():
    def offset_for(i):
        if i == 2:
            raise KeyError(i)
        return 1

    out = io.StringIO()
    with pytest.raises(OperationError) as exc:
        read_all_runes(io.StringIO("abcd"), out, offset_for)
    assert exc.value.count == 2
    assert out.getvalue() == "bc"


# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_known_answer():
    assert caesar("3").encode_string("Attack at dawn!") == "Dwwdfn dw gdzq!"

@pytest.mark.parametrize("key", ["3", "-3", "+29", "0", "26", "-1000", " 7\n"])
def test_caesar_roundtrip(key):
    c = caesar(key)
    assert c.decode_string(c.encode_string(MSG)) == MSG

def test_caesar_counts_characters():
    c = caesar("5")
    out = io.StringIO()
    assert c.encode(io.StringIO(MSG), out) == len(MSG)
    assert len(out.getvalue()) == len(MSG)

def test_caesar_get_key():
    c = caesar("+29")
    assert c.get_key() == "29"
    assert c.keyed

@pytest.mark.parametrize("key", ["abc", "", "3.5", "1e3", "0x1F", "--3", "1_000"])
def test_caesar_invalid_key(key):
    c = CaesarCipher()
    with pytest.raises(InvalidKeyError):
        c.set_key(key)
    assert not c.keyed
    assert c.get_key() == "0"

def test_caesar_invalid_key_resets_offset():
    c = caesar("4")
    with pytest.raises(InvalidKeyError):
        c.set_key("four")
    assert c.encode_string("abc") == "abc"

def test_caesar_unkeyed_is_identity():
    assert CaesarCipher().encode_string("Hello") == "Hello"


# ── Key derivation ────────────────────────────────────────────────────────────
def test_clean_key():
    assert clean_key("lemon") == "LEMON"
    assert clean_key(" Le-m0n!\n") == "LEMN"
    assert clean_key("123 !?") == ""
    assert clean_key("Straße") == "STRAE"

def test_key_offsets():
    assert key_offsets("AZLEMON") == [0, 25, 11, 4, 12, 14, 13]


# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_answer():
    assert vigenere("lemon").encode_string("ATTACKATDAWN") == "LXFOPVEFRNHR"

def test_vigenere_key_advances_on_every_character():
    assert vigenere("lemon").encode_string("ATTACK AT DAWN") == "LXFOPV MH OEIB"

def test_vigenere_get_key_is_clean():
    v = vigenere("lemon")
    assert v.get_key() == "LEMON"
    assert v.offsets == [11, 4, 12, 14, 13]

@pytest.mark.parametrize("key", ["lemon", "A", "Christman", "k3y w0rd!"])
def test_vigenere_roundtrip(key):
    v = vigenere(key)
    ct = v.encode_string(MSG)
    assert v.decode_string(ct) == MSG

def test_vigenere_single_letter_is_caesar():
    assert vigenere("D").encode_string(MSG) == caesar("3").encode_string(MSG)

@pytest.mark.parametrize("key", ["123", "", "  !? ", "éüø", "ß"])
def test_vigenere_invalid_key(key):
    v = VigenereCipher()
    with pytest.raises(InvalidKeyError):
        v.set_key(key)
    assert not v.keyed

def test_vigenere_invalid_key_discards_previous():
    v = vigenere("lemon")
    with pytest.raises(InvalidKeyError):
        v.set_key("123")
    assert v.get_key() == ""
    with pytest.raises(InvalidKeyError):
        v.encode_string("abc")

def test_vigenere_reuse_starts_each_call_at_position_zero():
    v = vigenere("lemon")
    assert v.encode_string("ATTACK") == v.encode_string("ATTACK") == "LXFOPV"


# ── Registry ──────────────────────────────────────────────────────────────────
def test_registry_lookup():
    assert isinstance(get_cipher_from_name("  Caesar \n"), CaesarCipher)
    assert isinstance(get_cipher_from_name("VIGENERE"), VigenereCipher)
    assert get_cipher_from_name("enigma") is None
    assert available_ciphers() == ["caesar", "vigenere"]

def test_registry_returns_fresh_instances():
    a = get_cipher_from_name("caesar")
    a.set_key("5")
    b = get_cipher_from_name("caesar")
    assert a is not b
    assert not b.keyed


# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

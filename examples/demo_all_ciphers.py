"""
ciphersuite - Live Demo: Caesar + Vigenère
==========================================
Run:  python examples/demo_all_ciphers.py

Shows each cipher encoding and decoding a real message, streaming
through in-memory buffers exactly as it would through files.
"""

import io
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ciphersuite import CaesarCipher, VigenereCipher, InvalidKeyError, get_cipher_from_name

LINE = "═" * 70
MSG  = "Attack at dawn! Meet at the old mill, bring 3 lanterns."

def header(n, name):
    print(f"\n{LINE}")
    print(f"  {n} - {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  ciphersuite - Classical Cipher Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header(1, "FIXED OFFSET - Caesar")
c = CaesarCipher()
c.set_key("3")
ct = c.encode_string(MSG)
ok("Key",       c.get_key())
ok("Encoded",   ct)
ok("Decoded",   c.decode_string(ct))

# ── VIGENERE ─────────────────────────────────────────────────────────────────
header(2, "REPEATING KEYWORD - Vigenère")
v = VigenereCipher()
v.set_key("lemon")
out = io.StringIO()
count = v.encode(io.StringIO(MSG), out)
ct = out.getvalue()
ok("Key",       f"{v.get_key()} -> offsets {v.offsets}")
ok("Encoded",   ct)
ok("Decoded",   v.decode_string(ct))
ok("Streamed",  f"{count} characters")

# ── REGISTRY ─────────────────────────────────────────────────────────────────
header(3, "LOOKUP BY NAME")
same = get_cipher_from_name("  Vigenere ")
same.set_key("D")
ok("Vigenère key 'D'", same.encode_string("abc xyz"))
c.set_key("3")
ok("Caesar key '3'",   c.encode_string("abc xyz"))

# ── BAD KEYS ─────────────────────────────────────────────────────────────────
header(4, "KEY VALIDATION")
for cipher, key in ((CaesarCipher(), "abc"), (VigenereCipher(), "123")):
    try:
        cipher.set_key(key)
    except InvalidKeyError as e:
        ok(f"{cipher.name} rejects {key!r}", str(e))

print(f"\n{LINE}\n")

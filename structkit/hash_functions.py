"""String hash functions over the bytes of a string."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1

_POLY_BASE = 19
_POLY_MODULUS = 3298534883309

_FNV_PRIME = 0x00000100000001B3
_FNV_BASIS = 0xCBF29CE484222325


def _signed_bytes(text: str | bytes):
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    for byte in data:
        yield byte - 256 if byte >= 128 else byte


def polynomial_rolling_hash(text: str | bytes) -> int:
    """Polynomial rolling hash with base 19, as an unsigned 64-bit value."""
    power = 1
    result = 0
    for c in _signed_bytes(text):
        result = (result + c * power) & _MASK64
        power = (power * _POLY_BASE) % _POLY_MODULUS
    return result


def fnv1a_hash(text: str | bytes) -> int:
    """64-bit FNV-1a hash."""
    result = _FNV_BASIS
    for c in _signed_bytes(text):
        result ^= c & _MASK64
        result = (result * _FNV_PRIME) & _MASK64
    return result
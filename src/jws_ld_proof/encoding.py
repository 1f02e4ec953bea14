"""Byte codecs used on the wire.

base64url
---------
JWS segments use the URL-safe base64 alphabet with the ``=`` padding removed
(RFC 7515 section 2). Decoding is strict: characters outside the alphabet and
impossible lengths are rejected rather than silently discarded, and so is
any text that is not exactly what the encoder would produce for the same bytes.

base58btc
---------
``publicKeyBase58`` values on Ed25519 verification methods use the Bitcoin
base58 alphabet. Leading zero bytes are encoded as ``1`` characters.
"""
from __future__ import annotations

import base64
import binascii
import re

_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")

_BASE58_ALPHABET: bytes = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


# ---------------------------------------------------------------------------
# base64url
# ---------------------------------------------------------------------------


def base64url_encode(data: bytes) -> str:
    """Encode *data* as unpadded base64url text."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(encoded: str) -> bytes:
    """Decode unpadded base64url text.

    Parameters
    ----------
    encoded:
        Text produced by :func:`base64url_encode`.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If *encoded* contains characters outside the base64url alphabet,
        carries padding, has a length no encoder can produce, or sets
        unused trailing bits.
    """
    if not _BASE64URL_PATTERN.fullmatch(encoded):
        raise ValueError(f"Invalid base64url character in {encoded!r}")
    if len(encoded) % 4 == 1:
        raise ValueError(f"Invalid base64url length {len(encoded)} for {encoded!r}")
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        decoded = base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64url data {encoded!r}: {exc}") from exc
    # the last character may carry unused bits; only the canonical form is accepted
    if base64url_encode(decoded) != encoded:
        raise ValueError(f"Non-canonical base64url data {encoded!r}")
    return decoded


# ---------------------------------------------------------------------------
# base58btc
# ---------------------------------------------------------------------------


def base58btc_encode(data: bytes) -> str:
    """Encode *data* to a base58btc string."""
    n = int.from_bytes(data, "big")
    result: list[bytes] = []
    while n > 0:
        n, remainder = divmod(n, 58)
        result.append(_BASE58_ALPHABET[remainder : remainder + 1])
    for byte in data:
        if byte == 0:
            result.append(b"1")
        else:
            break
    return b"".join(reversed(result)).decode("ascii")


def base58btc_decode(encoded: str) -> bytes:
    """Decode a base58btc string back to bytes.

    Raises
    ------
    ValueError
        If the string contains a character not in the base58btc alphabet.
    """
    n = 0
    alphabet_str = _BASE58_ALPHABET.decode("ascii")
    for char in encoded:
        if char not in alphabet_str:
            raise ValueError(
                f"Invalid base58btc character {char!r} in encoded string {encoded!r}"
            )
        n = n * 58 + alphabet_str.index(char)
    result = n.to_bytes((n.bit_length() + 7) // 8, "big") if n > 0 else b""
    pad_size = len(encoded) - len(encoded.lstrip("1"))
    return b"\x00" * pad_size + result


__all__ = [
    "base58btc_decode",
    "base58btc_encode",
    "base64url_decode",
    "base64url_encode",
]

"""Detached JWS codec (RFC 7797, ``b64: false``).

Signing input
-------------
::

    +-------+-----------------------------------------------------------+
    | "b64" | JWS Signing Input Formula                                 |
    +-------+-----------------------------------------------------------+
    | true  | ASCII(BASE64URL(UTF8(JWS Protected Header)) || '.' ||     |
    |       | BASE64URL(JWS Payload))                                   |
    | false | ASCII(BASE64URL(UTF8(JWS Protected Header)) || '.') ||    |
    |       | JWS Payload                                               |
    +-------+-----------------------------------------------------------+

Only the ``false`` row is implemented.

Wire format
-----------
::

    <encoded-header>..<encoded-signature>

The empty middle segment marks the payload as detached; it is supplied
out-of-band as ``verify_data`` when verifying.
"""
from __future__ import annotations

from typing import NamedTuple

from jws_ld_proof.encoding import base64url_decode, base64url_encode
from jws_ld_proof.errors import FormatError


class DetachedJws(NamedTuple):
    """The two meaningful segments of a detached compact JWS."""

    encoded_header: str
    encoded_signature: str


def build_signing_input(encoded_header: str, verify_data: bytes) -> bytes:
    """Return ``ASCII(encoded_header + ".")`` followed by the raw *verify_data*."""
    return (encoded_header + ".").encode("ascii") + bytes(verify_data)


def encode_jws(encoded_header: str, signature: bytes) -> str:
    """Assemble the detached compact serialization ``<header>..<signature>``."""
    return f"{encoded_header}..{base64url_encode(signature)}"


def decode_jws(jws: str) -> DetachedJws:
    """Split a detached compact JWS into its header and signature segments.

    The payload segment is not inspected.

    Raises
    ------
    FormatError
        If *jws* has no ``.``, does not have exactly three segments, or has
        an empty header or signature segment.
    """
    if "." not in jws:
        raise FormatError("expected a compact JWS containing '.'")
    segments = jws.split(".")
    if len(segments) != 3:
        raise FormatError(f"expected 3 dot-separated segments, got {len(segments)}")
    encoded_header, _payload, encoded_signature = segments
    if not encoded_header:
        raise FormatError("the header segment is empty")
    if not encoded_signature:
        raise FormatError("the signature segment is empty")
    return DetachedJws(encoded_header, encoded_signature)


def decode_signature(encoded_signature: str) -> bytes:
    """Decode the signature segment to raw bytes, raising :class:`FormatError`."""
    try:
        return base64url_decode(encoded_signature)
    except ValueError as exc:
        raise FormatError(f"the signature segment is not base64url: {exc}") from exc


__all__ = [
    "DetachedJws",
    "build_signing_input",
    "decode_jws",
    "decode_signature",
    "encode_jws",
]

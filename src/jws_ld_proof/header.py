"""JWS protected header construction and validation.

The header is fully controlled by the suite: on the sign path it is always
``{"alg": <alg>, "b64": false, "crit": ["b64"]}`` and nothing supplied by the
caller is merged in. On the verify path an incoming header must equal that
shape exactly: no other ``alg``, no ``b64: true``, no extra parameters.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from jws_ld_proof.encoding import base64url_decode, base64url_encode
from jws_ld_proof.errors import HeaderDecodeError, HeaderValidationError

logger = logging.getLogger(__name__)

_EXPECTED_KEYS = frozenset({"alg", "b64", "crit"})


def build_header(alg: str) -> dict[str, Any]:
    """Return a fresh detached-payload header for *alg*."""
    return {"alg": alg, "b64": False, "crit": ["b64"]}


def encode_header(header: dict[str, Any]) -> str:
    """Serialize *header* as compact JSON and base64url-encode it."""
    return base64url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))


def _reject_duplicate_members(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for name, value in pairs:
        if name in result:
            raise ValueError(f"duplicate member {name!r}")
        result[name] = value
    return result


def parse_header(encoded_header: str) -> dict[str, Any]:
    """Decode a base64url header segment into a JSON object.

    Parameters
    ----------
    encoded_header:
        The first segment of a compact JWS.

    Returns
    -------
    dict[str, Any]
        The decoded header object.

    Raises
    ------
    HeaderDecodeError
        On malformed base64url, invalid UTF-8, invalid or too deeply nested
        JSON, duplicate member names, or a JSON value that is not an object.
    """
    try:
        text = base64url_decode(encoded_header).decode("utf-8")
    except ValueError as exc:
        # UnicodeDecodeError is a ValueError too
        raise HeaderDecodeError(str(exc)) from exc

    try:
        header = json.loads(text, object_pairs_hook=_reject_duplicate_members)
    except ValueError as exc:
        raise HeaderDecodeError(str(exc)) from exc
    except RecursionError as exc:
        raise HeaderDecodeError("JSON nested too deeply") from exc

    if not isinstance(header, dict):
        raise HeaderDecodeError(f"expected a JSON object, got {type(header).__name__}")
    return header


def validate_header(header: dict[str, Any], *, alg: str, suite_type: str) -> None:
    """Reject any header that is not exactly ``{alg, b64: false, crit: ["b64"]}``.

    Raises
    ------
    HeaderValidationError
        If ``alg`` differs from *alg*, ``b64`` is not the boolean ``false``,
        ``crit`` is not the single-element list ``["b64"]``, or the header has
        any key besides these three.
    """
    crit = header.get("crit")
    valid = (
        set(header) == _EXPECTED_KEYS
        and len(header) == 3
        and header.get("alg") == alg
        and header.get("b64") is False
        and isinstance(crit, list)
        and len(crit) == 1
        and crit[0] == "b64"
    )
    if not valid:
        logger.warning("Rejected JWS header for %s: %r", suite_type, header)
        raise HeaderValidationError(suite_type, header)


__all__ = [
    "build_header",
    "encode_header",
    "parse_header",
    "validate_header",
]

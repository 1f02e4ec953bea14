"""Ed25519VerificationKey2018 — Ed25519 key handle, signer and verifier.

This module wraps the ``cryptography`` package's Ed25519 primitives. Key
material is kept as raw 32-byte values and published as ``publicKeyBase58``
on the verification method document.

The class doubles as the suite's key adapter:
:meth:`Ed25519VerificationKey2018.from_verification_method` turns a resolved
verification method into a key whose :meth:`~Ed25519VerificationKey2018.verifier`
checks signatures.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from jws_ld_proof.encoding import base58btc_decode, base58btc_encode
from jws_ld_proof.errors import ConfigurationError

ED25519_2018_CONTEXT_URL: str = "https://w3id.org/security/suites/ed25519-2018/v1"
ED25519_KEY_TYPE: str = "Ed25519VerificationKey2018"

_KEY_LENGTH = 32


# ---------------------------------------------------------------------------
# Signer / verifier
# ---------------------------------------------------------------------------


class Ed25519Signer:
    """Signs bytes with an Ed25519 private key; produces 64-byte signatures."""

    algorithm: str = "EdDSA"

    def __init__(self, key_id: str, private_key_bytes: bytes) -> None:
        self.id = key_id
        self._private_key = Ed25519PrivateKey.from_private_bytes(private_key_bytes)

    async def sign(self, data: bytes) -> bytes:
        return self._private_key.sign(data)


class Ed25519Verifier:
    """Verifies Ed25519 signatures; returns ``False`` on mismatch."""

    algorithm: str = "EdDSA"

    def __init__(self, key_id: str, public_key_bytes: bytes) -> None:
        self.id = key_id
        self._public_key = Ed25519PublicKey.from_public_bytes(public_key_bytes)

    async def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            self._public_key.verify(signature, data)
            return True
        except InvalidSignature:
            return False


# ---------------------------------------------------------------------------
# Ed25519VerificationKey2018
# ---------------------------------------------------------------------------


@dataclass
class Ed25519VerificationKey2018:
    """An Ed25519 key bound to a verification method id.

    Parameters
    ----------
    id:
        The verification method id, e.g. ``did:example:123#key-1``.
    controller:
        The DID or URL that controls this key.
    public_key:
        The 32-byte raw public key.
    private_key:
        The 32-byte raw private key, or ``None`` for a verify-only key.
    revoked:
        Revocation timestamp carried through :meth:`export`, if any.

    Example
    -------
    ::

        key = Ed25519VerificationKey2018.generate(controller="did:example:123")
        signature = await key.signer().sign(b"hello")
        assert await key.verifier().verify(b"hello", signature)
    """

    id: str
    controller: str
    public_key: bytes
    private_key: bytes | None = None
    revoked: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Ed25519VerificationKey2018.id must not be empty.")
        if len(self.public_key) != _KEY_LENGTH:
            raise ValueError(
                f"Ed25519 public key must be {_KEY_LENGTH} bytes, got {len(self.public_key)}."
            )
        if self.private_key is not None and len(self.private_key) != _KEY_LENGTH:
            raise ValueError(
                f"Ed25519 private key must be {_KEY_LENGTH} bytes, got {len(self.private_key)}."
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def generate(cls, *, controller: str, id: str | None = None) -> Ed25519VerificationKey2018:
        """Generate a fresh keypair.

        When *id* is omitted it becomes ``<controller>#<fingerprint>``, where
        the fingerprint is the base58btc-encoded public key.
        """
        private_key = Ed25519PrivateKey.generate()
        private_bytes = private_key.private_bytes(
            Encoding.Raw, PrivateFormat.Raw, NoEncryption()
        )
        public_bytes = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        key_id = id or f"{controller}#{base58btc_encode(public_bytes)}"
        return cls(
            id=key_id,
            controller=controller,
            public_key=public_bytes,
            private_key=private_bytes,
        )

    @classmethod
    def from_verification_method(
        cls, verification_method: dict[str, Any]
    ) -> Ed25519VerificationKey2018:
        """Build a verify-only key from a verification method document.

        Raises
        ------
        ValueError
            If ``id`` or ``publicKeyBase58`` is missing or the key is malformed.
        """
        public_key_base58 = verification_method.get("publicKeyBase58")
        if not isinstance(public_key_base58, str) or not public_key_base58:
            raise ValueError(
                f"Verification method {verification_method.get('id')!r} "
                "has no publicKeyBase58."
            )
        return cls(
            id=str(verification_method.get("id") or ""),
            controller=str(verification_method.get("controller") or ""),
            public_key=base58btc_decode(public_key_base58),
            revoked=verification_method.get("revoked"),
        )

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def fingerprint(self) -> str:
        return base58btc_encode(self.public_key)

    def signer(self) -> Ed25519Signer:
        """Return a signer for this key.

        Raises
        ------
        ConfigurationError
            If this is a verify-only key.
        """
        if self.private_key is None:
            raise ConfigurationError(f"Key {self.id!r} has no private key; no signer available.")
        return Ed25519Signer(self.id, self.private_key)

    def verifier(self) -> Ed25519Verifier:
        """Return a verifier for this key."""
        return Ed25519Verifier(self.id, self.public_key)

    def export(
        self,
        *,
        public_key: bool = True,
        private_key: bool = False,
        include_context: bool = True,
    ) -> dict[str, Any]:
        """Serialize to a verification method document.

        Private key bytes are only included when *private_key* is set.
        """
        exported: dict[str, Any] = {}
        if include_context:
            exported["@context"] = ED25519_2018_CONTEXT_URL
        exported["id"] = self.id
        exported["type"] = ED25519_KEY_TYPE
        exported["controller"] = self.controller
        if public_key:
            exported["publicKeyBase58"] = base58btc_encode(self.public_key)
        if private_key and self.private_key is not None:
            exported["privateKeyBase58"] = base58btc_encode(self.private_key + self.public_key)
        if self.revoked is not None:
            exported["revoked"] = self.revoked
        return exported


__all__ = [
    "ED25519_2018_CONTEXT_URL",
    "ED25519_KEY_TYPE",
    "Ed25519Signer",
    "Ed25519VerificationKey2018",
    "Ed25519Verifier",
]

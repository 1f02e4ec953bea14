"""RsaVerificationKey2018 — RSA key handle producing PS256 signatures.

Signatures are RSASSA-PSS with SHA-256, MGF1-SHA-256 and a 32-byte salt,
which is what JWS ``PS256`` requires (RFC 7518 section 3.5). Public keys are
published as ``publicKeyPem``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from jws_ld_proof.errors import ConfigurationError

SECURITY_V2_CONTEXT_URL: str = "https://w3id.org/security/v2"
RSA_KEY_TYPE: str = "RsaVerificationKey2018"

_MIN_KEY_SIZE = 2048
_PSS_PADDING = padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=32)


class RsaSigner:
    """Signs bytes with RSASSA-PSS / SHA-256."""

    algorithm: str = "PS256"

    def __init__(self, key_id: str, private_key: rsa.RSAPrivateKey) -> None:
        self.id = key_id
        self._private_key = private_key

    async def sign(self, data: bytes) -> bytes:
        return self._private_key.sign(data, _PSS_PADDING, hashes.SHA256())


class RsaVerifier:
    """Verifies RSASSA-PSS / SHA-256 signatures; returns ``False`` on mismatch."""

    algorithm: str = "PS256"

    def __init__(self, key_id: str, public_key: rsa.RSAPublicKey) -> None:
        self.id = key_id
        self._public_key = public_key

    async def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            self._public_key.verify(signature, data, _PSS_PADDING, hashes.SHA256())
            return True
        except InvalidSignature:
            return False


@dataclass
class RsaVerificationKey2018:
    """An RSA key bound to a verification method id.

    Parameters
    ----------
    id:
        The verification method id.
    controller:
        The DID or URL that controls this key.
    public_key:
        The RSA public key.
    private_key:
        The RSA private key, or ``None`` for a verify-only key.
    revoked:
        Revocation timestamp carried through :meth:`export`, if any.
    """

    id: str
    controller: str
    public_key: rsa.RSAPublicKey
    private_key: rsa.RSAPrivateKey | None = None
    revoked: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("RsaVerificationKey2018.id must not be empty.")
        if self.public_key.key_size < _MIN_KEY_SIZE:
            raise ValueError(
                f"RSA keys must be at least {_MIN_KEY_SIZE} bits, got {self.public_key.key_size}."
            )

    @classmethod
    def generate(
        cls, *, controller: str, id: str | None = None, key_size: int = _MIN_KEY_SIZE
    ) -> RsaVerificationKey2018:
        """Generate a fresh RSA keypair (public exponent 65537)."""
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
        return cls(
            id=id or f"{controller}#rsa-key-1",
            controller=controller,
            public_key=private_key.public_key(),
            private_key=private_key,
        )

    @classmethod
    def from_verification_method(
        cls, verification_method: dict[str, Any]
    ) -> RsaVerificationKey2018:
        """Build a verify-only key from a verification method's ``publicKeyPem``.

        Raises
        ------
        ValueError
            If ``publicKeyPem`` is missing or is not an RSA public key.
        """
        pem = verification_method.get("publicKeyPem")
        if not isinstance(pem, str) or not pem:
            raise ValueError(
                f"Verification method {verification_method.get('id')!r} has no publicKeyPem."
            )
        public_key = serialization.load_pem_public_key(pem.encode("ascii"))
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise ValueError(
                f"Verification method {verification_method.get('id')!r} is not an RSA key."
            )
        return cls(
            id=str(verification_method.get("id") or ""),
            controller=str(verification_method.get("controller") or ""),
            public_key=public_key,
            revoked=verification_method.get("revoked"),
        )

    def signer(self) -> RsaSigner:
        """Return a signer for this key; raises ConfigurationError if verify-only."""
        if self.private_key is None:
            raise ConfigurationError(f"Key {self.id!r} has no private key; no signer available.")
        return RsaSigner(self.id, self.private_key)

    def verifier(self) -> RsaVerifier:
        return RsaVerifier(self.id, self.public_key)

    def export(
        self,
        *,
        public_key: bool = True,
        private_key: bool = False,
        include_context: bool = True,
    ) -> dict[str, Any]:
        """Serialize to a verification method document."""
        exported: dict[str, Any] = {}
        if include_context:
            exported["@context"] = SECURITY_V2_CONTEXT_URL
        exported["id"] = self.id
        exported["type"] = RSA_KEY_TYPE
        exported["controller"] = self.controller
        if public_key:
            exported["publicKeyPem"] = self.public_key.public_bytes(
                serialization.Encoding.PEM,
                serialization.PublicFormat.SubjectPublicKeyInfo,
            ).decode("ascii")
        if private_key and self.private_key is not None:
            exported["privateKeyPem"] = self.private_key.private_bytes(
                serialization.Encoding.PEM,
                serialization.PrivateFormat.PKCS8,
                serialization.NoEncryption(),
            ).decode("ascii")
        if self.revoked is not None:
            exported["revoked"] = self.revoked
        return exported


__all__ = [
    "RSA_KEY_TYPE",
    "RsaSigner",
    "RsaVerificationKey2018",
    "RsaVerifier",
    "SECURITY_V2_CONTEXT_URL",
]

"""jws_ld_proof.keys — key handles usable as suite keys and key adapters.

Submodules
----------
ed25519
    Ed25519VerificationKey2018 with its signer and verifier.
rsa
    RsaVerificationKey2018 (PS256) with its signer and verifier.
"""
from __future__ import annotations

from jws_ld_proof.keys.ed25519 import (
    ED25519_2018_CONTEXT_URL,
    ED25519_KEY_TYPE,
    Ed25519Signer,
    Ed25519VerificationKey2018,
    Ed25519Verifier,
)
from jws_ld_proof.keys.rsa import (
    RSA_KEY_TYPE,
    SECURITY_V2_CONTEXT_URL,
    RsaSigner,
    RsaVerificationKey2018,
    RsaVerifier,
)

__all__ = [
    "ED25519_2018_CONTEXT_URL",
    "ED25519_KEY_TYPE",
    "Ed25519Signer",
    "Ed25519VerificationKey2018",
    "Ed25519Verifier",
    "RSA_KEY_TYPE",
    "RsaSigner",
    "RsaVerificationKey2018",
    "RsaVerifier",
    "SECURITY_V2_CONTEXT_URL",
]

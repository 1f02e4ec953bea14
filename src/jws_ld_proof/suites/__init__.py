"""jws_ld_proof.suites — proof suites.

Submodules
----------
base
    ProofSuiteConfig, ProofVerificationResult and the abstract LinkedDataProof.
jws
    JwsLinkedDataSignature, the detached JWS suite.
ed25519
    Ed25519Signature2018 suite factory (``EdDSA``).
rsa
    RsaSignature2018 suite factory (``PS256``).
"""
from __future__ import annotations

from jws_ld_proof.suites.base import LinkedDataProof, ProofSuiteConfig, ProofVerificationResult
from jws_ld_proof.suites.ed25519 import Ed25519Signature2018
from jws_ld_proof.suites.jws import JwsLinkedDataSignature
from jws_ld_proof.suites.rsa import RsaSignature2018

__all__ = [
    "Ed25519Signature2018",
    "JwsLinkedDataSignature",
    "LinkedDataProof",
    "ProofSuiteConfig",
    "ProofVerificationResult",
    "RsaSignature2018",
]

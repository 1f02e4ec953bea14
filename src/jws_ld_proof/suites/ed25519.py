"""Ed25519Signature2018 — detached JWS proofs with ``alg: EdDSA``."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from jws_ld_proof.capabilities import Signer, Verifier
from jws_ld_proof.keys.ed25519 import (
    ED25519_2018_CONTEXT_URL,
    ED25519_KEY_TYPE,
    Ed25519VerificationKey2018,
)
from jws_ld_proof.suites.base import ProofSuiteConfig
from jws_ld_proof.suites.jws import JwsLinkedDataSignature

SUITE_TYPE: str = "Ed25519Signature2018"
ALG: str = "EdDSA"


def Ed25519Signature2018(
    *,
    key: Ed25519VerificationKey2018 | None = None,
    signer: Signer | None = None,
    verifier: Verifier | None = None,
    proof_template: dict[str, Any] | None = None,
    date: datetime | str | None = None,
    use_native_canonize: bool = False,
) -> JwsLinkedDataSignature:
    """Build a detached JWS suite for Ed25519 keys.

    Parameters
    ----------
    key:
        A key to sign with (if it holds a private key) and to bind matching to.
    signer:
        Explicit signer, e.g. a KMS client. Takes precedence over *key*.
    verifier:
        Explicit verifier. When omitted, verifiers are built from resolved
        verification methods.
    proof_template:
        Extra fields copied into every built proof.
    date:
        Fixed ``created`` date for built proofs.
    use_native_canonize:
        Passed through to canonicalizers.
    """
    return JwsLinkedDataSignature(
        ProofSuiteConfig(
            type=SUITE_TYPE,
            alg=ALG,
            context_url=ED25519_2018_CONTEXT_URL,
            required_key_type=ED25519_KEY_TYPE,
            key_adapter=Ed25519VerificationKey2018,
            key=key,
            signer=signer,
            verifier=verifier,
            proof_template=proof_template,
            date=date,
            use_native_canonize=use_native_canonize,
        )
    )


__all__ = ["ALG", "Ed25519Signature2018", "SUITE_TYPE"]

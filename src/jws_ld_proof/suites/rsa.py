"""RsaSignature2018 — detached JWS proofs with ``alg: PS256``."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from jws_ld_proof.capabilities import Signer, Verifier
from jws_ld_proof.keys.rsa import RSA_KEY_TYPE, SECURITY_V2_CONTEXT_URL, RsaVerificationKey2018
from jws_ld_proof.suites.base import ProofSuiteConfig
from jws_ld_proof.suites.jws import JwsLinkedDataSignature

SUITE_TYPE: str = "RsaSignature2018"
ALG: str = "PS256"


def RsaSignature2018(
    *,
    key: RsaVerificationKey2018 | None = None,
    signer: Signer | None = None,
    verifier: Verifier | None = None,
    proof_template: dict[str, Any] | None = None,
    date: datetime | str | None = None,
    use_native_canonize: bool = False,
) -> JwsLinkedDataSignature:
    """Build a detached JWS suite for RSA keys; see :func:`Ed25519Signature2018`."""
    return JwsLinkedDataSignature(
        ProofSuiteConfig(
            type=SUITE_TYPE,
            alg=ALG,
            context_url=SECURITY_V2_CONTEXT_URL,
            required_key_type=RSA_KEY_TYPE,
            key_adapter=RsaVerificationKey2018,
            key=key,
            signer=signer,
            verifier=verifier,
            proof_template=proof_template,
            date=date,
            use_native_canonize=use_native_canonize,
        )
    )


__all__ = ["ALG", "RsaSignature2018", "SUITE_TYPE"]

"""jws-ld-proof — detached JWS proof suites for Linked Data documents.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick start
-----------
::

    from jws_ld_proof import (
        Ed25519Signature2018,
        Ed25519VerificationKey2018,
        ProofPurpose,
        StaticDocumentLoader,
    )

    key = Ed25519VerificationKey2018.generate(controller="did:example:alice")
    suite = Ed25519Signature2018(key=key)
    proof = await suite.sign(verify_data, suite.build_proof(ProofPurpose()))

    loader = StaticDocumentLoader()
    loader.add_verification_method(key.export(public_key=True))
    result = await Ed25519Signature2018().verify_proof(
        verify_data, proof, document=document, document_loader=loader
    )
    print(result.verified)  # True

``verify_data`` is the canonicalized document plus proof options, produced by
the caller's JSON-LD canonicalizer.
"""
from __future__ import annotations

__version__: str = "0.1.0"

from jws_ld_proof.capabilities import DocumentLoader, KeyAdapter, KeyHandle, Signer, Verifier
from jws_ld_proof.detached import DetachedJws, build_signing_input, decode_jws, encode_jws
from jws_ld_proof.documents import StaticDocumentLoader
from jws_ld_proof.errors import (
    ConfigurationError,
    ContextError,
    DocumentNotFoundError,
    FormatError,
    HeaderDecodeError,
    HeaderValidationError,
    JwsProofError,
    KeyMaterialError,
    KeyTypeError,
    MissingVerificationMethodError,
    RevokedKeyError,
)
from jws_ld_proof.header import build_header, parse_header, validate_header
from jws_ld_proof.keys import Ed25519VerificationKey2018, RsaVerificationKey2018
from jws_ld_proof.purposes import ASSERTION_METHOD, AUTHENTICATION, ProofPurpose
from jws_ld_proof.suites import (
    Ed25519Signature2018,
    JwsLinkedDataSignature,
    LinkedDataProof,
    ProofSuiteConfig,
    ProofVerificationResult,
    RsaSignature2018,
)

__all__ = [
    "__version__",
    # capabilities
    "DocumentLoader",
    "KeyAdapter",
    "KeyHandle",
    "Signer",
    "Verifier",
    # detached JWS codec
    "DetachedJws",
    "build_header",
    "build_signing_input",
    "decode_jws",
    "encode_jws",
    "parse_header",
    "validate_header",
    # documents
    "StaticDocumentLoader",
    # errors
    "ConfigurationError",
    "ContextError",
    "DocumentNotFoundError",
    "FormatError",
    "HeaderDecodeError",
    "HeaderValidationError",
    "JwsProofError",
    "KeyMaterialError",
    "KeyTypeError",
    "MissingVerificationMethodError",
    "RevokedKeyError",
    # keys
    "Ed25519VerificationKey2018",
    "RsaVerificationKey2018",
    # purposes
    "ASSERTION_METHOD",
    "AUTHENTICATION",
    "ProofPurpose",
    # suites
    "Ed25519Signature2018",
    "JwsLinkedDataSignature",
    "LinkedDataProof",
    "ProofSuiteConfig",
    "ProofVerificationResult",
    "RsaSignature2018",
]

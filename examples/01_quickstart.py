#!/usr/bin/env python3
"""Example: Quickstart

Signs a pre-canonicalized payload with an Ed25519 detached JWS proof and
verifies it through a document loader.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install jws-ld-proof
"""
from __future__ import annotations

import asyncio
import json

import jws_ld_proof
from jws_ld_proof import (
    Ed25519Signature2018,
    Ed25519VerificationKey2018,
    ProofPurpose,
    StaticDocumentLoader,
)


async def main() -> None:
    print(f"jws-ld-proof version: {jws_ld_proof.__version__}")

    # Step 1: Create a key and a signing suite bound to it
    key = Ed25519VerificationKey2018.generate(controller="did:example:alice")
    suite = Ed25519Signature2018(key=key)

    # Step 2: Build and sign a proof. A real caller canonicalizes the
    # document together with the proof options to get verify_data.
    verify_data = b"<canonicalized document and proof options>"
    proof = await suite.sign(verify_data, suite.build_proof(ProofPurpose()))
    print(json.dumps(proof, indent=2))

    # Step 3: Verify with a suite that resolves the key through a loader
    loader = StaticDocumentLoader()
    loader.add_verification_method(key.export(public_key=True))
    result = await Ed25519Signature2018().verify_proof(
        verify_data,
        proof,
        document={"@context": suite.context_url},
        purpose=ProofPurpose(),
        document_loader=loader,
    )
    print(f"Proof verified: {result.verified}")

    # Step 4: A tampered payload is reported as unverified, not as an error
    tampered = await Ed25519Signature2018().verify_proof(
        verify_data + b"!",
        proof,
        document={"@context": suite.context_url},
        document_loader=loader,
    )
    print(f"Tampered proof verified: {tampered.verified} (error={tampered.error})")


if __name__ == "__main__":
    asyncio.run(main())

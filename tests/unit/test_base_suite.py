"""Tests for the generic proof lifecycle: config, build_proof, verify_proof."""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pydantic
import pytest

from jws_ld_proof.documents import StaticDocumentLoader
from jws_ld_proof.errors import (
    ConfigurationError,
    ContextError,
    HeaderValidationError,
    KeyMaterialError,
    RevokedKeyError,
)
from jws_ld_proof.keys.ed25519 import ED25519_2018_CONTEXT_URL, Ed25519VerificationKey2018
from jws_ld_proof.purposes import ASSERTION_METHOD, AUTHENTICATION, ProofPurpose
from jws_ld_proof.suites.base import ProofSuiteConfig, ProofVerificationResult
from jws_ld_proof.suites.ed25519 import Ed25519Signature2018
from jws_ld_proof.suites.jws import JwsLinkedDataSignature

CONTROLLER = "did:example:alice"
VERIFY_DATA = b"canonicalized document and proof options"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_key() -> Ed25519VerificationKey2018:
    return Ed25519VerificationKey2018.generate(controller=CONTROLLER)


def make_document() -> dict[str, object]:
    return {"@context": ED25519_2018_CONTEXT_URL, "id": "urn:uuid:1234"}


def make_config(**overrides: object) -> ProofSuiteConfig:
    fields: dict[str, object] = {
        "type": "Ed25519Signature2018",
        "alg": "EdDSA",
        "context_url": ED25519_2018_CONTEXT_URL,
        "required_key_type": "Ed25519VerificationKey2018",
    }
    fields.update(overrides)
    return ProofSuiteConfig(**fields)


def signed_proof(key: Ed25519VerificationKey2018, purpose: ProofPurpose | None = None) -> dict:
    suite = Ed25519Signature2018(key=key)
    return asyncio.run(suite.sign(VERIFY_DATA, suite.build_proof(purpose or ProofPurpose())))


def loader_for(*verification_methods: dict[str, object]) -> StaticDocumentLoader:
    loader = StaticDocumentLoader()
    for vm in verification_methods:
        loader.add_verification_method(vm)
    return loader


# ---------------------------------------------------------------------------
# ProofSuiteConfig
# ---------------------------------------------------------------------------


class TestProofSuiteConfig:
    def test_is_frozen(self) -> None:
        config = make_config()
        with pytest.raises(pydantic.ValidationError):
            config.alg = "none"  # type: ignore[misc]

    def test_empty_alg_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            make_config(alg="")

    def test_date_parsed_from_iso_string(self) -> None:
        config = make_config(date="2021-03-04T05:06:07Z")
        assert config.date == datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)

    def test_naive_date_treated_as_utc(self) -> None:
        config = make_config(date=datetime(2021, 3, 4, 5, 6, 7))
        assert config.date is not None
        assert config.date.tzinfo == timezone.utc

    def test_use_native_canonize_passes_through(self) -> None:
        assert make_config(use_native_canonize=True).use_native_canonize is True

    def test_non_verifier_capability_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="does not implement Verifier"):
            JwsLinkedDataSignature(make_config(verifier="not a verifier"))

    def test_non_key_adapter_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="does not implement KeyAdapter"):
            JwsLinkedDataSignature(make_config(key_adapter=42))

    def test_suite_exposes_config(self) -> None:
        suite = Ed25519Signature2018()
        assert suite.type == "Ed25519Signature2018"
        assert suite.alg == "EdDSA"
        assert suite.context_url == ED25519_2018_CONTEXT_URL
        assert suite.required_key_type == "Ed25519VerificationKey2018"
        assert suite.key is None
        assert "EdDSA" in repr(suite)


# ---------------------------------------------------------------------------
# build_proof()
# ---------------------------------------------------------------------------


class TestBuildProof:
    def test_sets_type_created_and_verification_method(self) -> None:
        key = make_key()
        proof = Ed25519Signature2018(key=key, date="2020-01-01T00:00:00Z").build_proof()
        assert proof == {
            "type": "Ed25519Signature2018",
            "created": "2020-01-01T00:00:00Z",
            "verificationMethod": key.id,
        }

    def test_created_defaults_to_now_without_fraction(self) -> None:
        proof = Ed25519Signature2018().build_proof()
        created = datetime.strptime(proof["created"], "%Y-%m-%dT%H:%M:%SZ").replace(
            tzinfo=timezone.utc
        )
        assert abs((datetime.now(timezone.utc) - created).total_seconds()) < 60

    def test_no_verification_method_without_key(self) -> None:
        assert "verificationMethod" not in Ed25519Signature2018().build_proof()

    def test_purpose_is_stamped(self) -> None:
        proof = Ed25519Signature2018().build_proof(ProofPurpose(AUTHENTICATION))
        assert proof["proofPurpose"] == AUTHENTICATION

    def test_template_is_merged_and_not_shared(self) -> None:
        template = {"domain": "example.com", "nested": {"a": 1}, "created": "2019-01-01T00:00:00Z"}
        suite = Ed25519Signature2018(proof_template=template)
        first = suite.build_proof()
        first["nested"]["a"] = 2
        second = suite.build_proof()
        assert second["domain"] == "example.com"
        assert second["nested"] == {"a": 1}
        assert second["created"] == "2019-01-01T00:00:00Z"

    def test_template_cannot_override_type(self) -> None:
        suite = Ed25519Signature2018(proof_template={"type": "Other"})
        assert suite.build_proof()["type"] == "Ed25519Signature2018"


# ---------------------------------------------------------------------------
# ensure_suite_context()
# ---------------------------------------------------------------------------


class TestEnsureSuiteContext:
    def test_present_context_is_left_alone(self) -> None:
        document = make_document()
        Ed25519Signature2018().ensure_suite_context(document)
        assert document["@context"] == ED25519_2018_CONTEXT_URL

    def test_missing_context_raises(self) -> None:
        with pytest.raises(ContextError):
            Ed25519Signature2018().ensure_suite_context({"@context": "https://example.com"})

    def test_adds_to_string_context(self) -> None:
        document = {"@context": "https://example.com"}
        Ed25519Signature2018().ensure_suite_context(document, add_suite_context=True)
        assert document["@context"] == ["https://example.com", ED25519_2018_CONTEXT_URL]

    def test_adds_to_list_context(self) -> None:
        document = {"@context": ["https://example.com"]}
        Ed25519Signature2018().ensure_suite_context(document, add_suite_context=True)
        assert document["@context"] == ["https://example.com", ED25519_2018_CONTEXT_URL]

    def test_adds_when_absent(self) -> None:
        document: dict[str, object] = {}
        Ed25519Signature2018().ensure_suite_context(document, add_suite_context=True)
        assert document["@context"] == ED25519_2018_CONTEXT_URL


# ---------------------------------------------------------------------------
# verify_proof()
# ---------------------------------------------------------------------------


class TestVerifyProof:
    def test_valid_proof_verifies(self) -> None:
        key = make_key()
        proof = signed_proof(key)
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                VERIFY_DATA,
                proof,
                document=make_document(),
                purpose=ProofPurpose(ASSERTION_METHOD),
                document_loader=loader_for(key.export()),
            )
        )
        assert result.verified is True
        assert result.error is None
        assert result.verification_method is not None
        assert result.verification_method["id"] == key.id

    def test_tampered_data_is_unverified_without_error(self) -> None:
        key = make_key()
        proof = signed_proof(key)
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                b"different bytes",
                proof,
                document=make_document(),
                document_loader=loader_for(key.export()),
            )
        )
        assert result.verified is False
        assert result.error is None
        assert result.details == {"failed": "signature"}

    def test_revoked_key_reports_error(self) -> None:
        key = make_key()
        proof = signed_proof(key)
        vm = key.export()
        vm["revoked"] = "2022-01-01T00:00:00Z"
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                VERIFY_DATA, proof, document=make_document(), document_loader=loader_for(vm)
            )
        )
        assert result.verified is False
        assert isinstance(result.error, RevokedKeyError)

    def test_bad_header_reports_error(self) -> None:
        key = make_key()
        proof = signed_proof(key)
        proof["jws"] = "eyJhbGciOiJub25lIn0..AAAA"
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                VERIFY_DATA,
                proof,
                document=make_document(),
                document_loader=loader_for(key.export()),
            )
        )
        assert result.verified is False
        assert isinstance(result.error, HeaderValidationError)

    def test_malformed_key_material_reports_error(self) -> None:
        key = make_key()
        proof = signed_proof(key)
        vm = key.export()
        vm["publicKeyBase58"] = "1111"
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                VERIFY_DATA, proof, document=make_document(), document_loader=loader_for(vm)
            )
        )
        assert result.verified is False
        assert isinstance(result.error, KeyMaterialError)
        assert result.details == {}

    def test_purpose_mismatch_is_unverified(self) -> None:
        key = make_key()
        proof = signed_proof(key, ProofPurpose(ASSERTION_METHOD))
        result = asyncio.run(
            Ed25519Signature2018().verify_proof(
                VERIFY_DATA,
                proof,
                document=make_document(),
                purpose=ProofPurpose(AUTHENTICATION),
                document_loader=loader_for(key.export()),
            )
        )
        assert result.verified is False
        assert result.details == {"failed": "purpose"}

    def test_non_package_errors_propagate(self) -> None:
        async def broken_loader(url: str) -> dict[str, object]:
            raise OSError("network down")

        key = make_key()
        proof = signed_proof(key)
        with pytest.raises(OSError, match="network down"):
            asyncio.run(
                Ed25519Signature2018().verify_proof(
                    VERIFY_DATA, proof, document=make_document(), document_loader=broken_loader
                )
            )

    def test_result_with_error_is_never_verified(self) -> None:
        result = ProofVerificationResult(verified=True, error=RevokedKeyError("x"))
        assert result.verified is False

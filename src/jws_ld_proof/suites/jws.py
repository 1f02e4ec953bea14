"""JwsLinkedDataSignature — detached JWS proofs over canonicalized bytes.

The suite is algorithm-agnostic: the config supplies ``alg``, the required
key type and a key adapter, and every cryptographic operation goes through an
injected :class:`~jws_ld_proof.capabilities.Signer` or
:class:`~jws_ld_proof.capabilities.Verifier`.

Signing writes ``proof["jws"] = "<b64url header>..<b64url signature>"``.
Verification is a chain of hard gates:

1. the ``jws`` value is present and well formed
2. the header decodes and is exactly ``{alg, b64: false, crit: ["b64"]}``
3. a verifier is resolved
4. the signature is checked over the original header segment + ``verify_data``

Gates 1 to 3 raise; gate 4 returns the verifier's boolean unchanged.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from jws_ld_proof.capabilities import Signer, Verifier
from jws_ld_proof.detached import (
    build_signing_input,
    decode_jws,
    decode_signature,
    encode_jws,
)
from jws_ld_proof.documents import has_value, includes_context
from jws_ld_proof.errors import (
    ConfigurationError,
    ContextError,
    FormatError,
    KeyMaterialError,
    KeyTypeError,
    MissingVerificationMethodError,
    RevokedKeyError,
)
from jws_ld_proof.header import build_header, encode_header, parse_header, validate_header
from jws_ld_proof.purposes import ProofPurpose
from jws_ld_proof.suites.base import LinkedDataProof

logger = logging.getLogger(__name__)


def _verification_method_id(proof: dict[str, Any]) -> str | None:
    """Return the proof's verification method id, whether a string or an object."""
    verification_method = proof.get("verificationMethod")
    if isinstance(verification_method, dict):
        verification_method = verification_method.get("id")
    if not isinstance(verification_method, str):
        return None
    return verification_method or None


class JwsLinkedDataSignature(LinkedDataProof):
    """Detached JWS proof suite.

    Example
    -------
    ::

        suite = JwsLinkedDataSignature(ProofSuiteConfig(
            type="Ed25519Signature2018",
            alg="EdDSA",
            context_url=ED25519_2018_CONTEXT_URL,
            required_key_type="Ed25519VerificationKey2018",
            key=key,
        ))
        proof = await suite.sign(verify_data, suite.build_proof())
        assert await suite.verify_signature(verify_data, key.export(), proof)
    """

    @property
    def alg(self) -> str:
        return self.config.alg

    # ------------------------------------------------------------------
    # Sign
    # ------------------------------------------------------------------

    async def sign(self, verify_data: bytes, proof: dict[str, Any]) -> dict[str, Any]:
        """Sign *verify_data* and return a copy of *proof* with ``jws`` set.

        Parameters
        ----------
        verify_data:
            The canonicalized bytes to sign. They are not embedded in the JWS.
        proof:
            The unsigned proof node. It is not modified.

        Returns
        -------
        dict[str, Any]
            A shallow copy of *proof* whose only change is the ``jws`` field.

        Raises
        ------
        ConfigurationError
            If neither an explicit signer nor a bound key is configured.
        """
        signer = self._resolve_signer()
        encoded_header = encode_header(build_header(self.alg))
        data = build_signing_input(encoded_header, verify_data)

        signature = await signer.sign(data)

        signed = dict(proof)
        signed["jws"] = encode_jws(encoded_header, signature)
        logger.debug(
            "Signed %s proof for %s", self.type, _verification_method_id(signed)
        )
        return signed

    # ------------------------------------------------------------------
    # Verify
    # ------------------------------------------------------------------

    async def verify_signature(
        self,
        verify_data: bytes,
        verification_method: dict[str, Any],
        proof: dict[str, Any],
    ) -> bool:
        """Check the detached JWS in *proof* against *verify_data*.

        Parameters
        ----------
        verify_data:
            The canonicalized bytes the signature should cover.
        verification_method:
            The resolved verification method, used to build a verifier when
            none is configured.
        proof:
            The proof carrying ``jws``.

        Returns
        -------
        bool
            The verifier's result. ``False`` means the signature does not
            match; it is never used for malformed input.

        Raises
        ------
        FormatError
            If ``jws`` is missing, not a string, or malformed.
        HeaderDecodeError
            If the header segment is not base64url-encoded JSON.
        HeaderValidationError
            If the header is not exactly the detached header for this suite.
        ConfigurationError
            If no verifier can be resolved.
        KeyMaterialError
            If the key adapter cannot build a key from *verification_method*.
        """
        jws = proof.get("jws")
        if not isinstance(jws, str) or "." not in jws:
            raise FormatError("expected a string containing '.'")

        encoded_header, encoded_signature = decode_jws(jws)
        header = parse_header(encoded_header)
        validate_header(header, alg=self.alg, suite_type=self.type)

        verifier = self._resolve_verifier(verification_method)

        data = build_signing_input(encoded_header, verify_data)
        signature = decode_signature(encoded_signature)

        verified = await verifier.verify(data, signature)
        logger.debug(
            "Verified %s proof for %s: %s", self.type, _verification_method_id(proof), verified
        )
        return verified

    # ------------------------------------------------------------------
    # Verification methods
    # ------------------------------------------------------------------

    async def assert_verification_method(self, verification_method: dict[str, Any]) -> None:
        """Enforce context, key type and revocation policy on a verification method.

        Raises
        ------
        ContextError
            If ``@context`` does not include the suite context. DID documents
            usually get the suite context from the document loader, since
            their keys do not carry their own.
        KeyTypeError
            If ``type`` is not the suite's required key type.
        RevokedKeyError
            If a ``revoked`` property is present, whatever its value.
        """
        if not includes_context(verification_method, self.context_url):
            logger.warning(
                "Verification method %s lacks context %s",
                verification_method.get("id"),
                self.context_url,
            )
            raise ContextError(self.context_url, subject="verification method (key)")

        if not has_value(verification_method, "type", self.required_key_type):
            raise KeyTypeError(self.required_key_type)

        if "revoked" in verification_method:
            logger.warning("Verification method %s is revoked", verification_method.get("id"))
            raise RevokedKeyError(verification_method.get("id"))

    async def get_verification_method(
        self, proof: dict[str, Any], document_loader: Any
    ) -> dict[str, Any]:
        """Return the verification method for *proof*.

        A bound key is exported directly, without consulting
        *document_loader*. This is the usual path when signing. Otherwise
        the proof's ``verificationMethod`` is loaded, parsed if it is JSON
        text, and checked by :meth:`assert_verification_method`.

        Raises
        ------
        MissingVerificationMethodError
            If no key is bound and the proof names no verification method.
        """
        if self.key is not None:
            return self.key.export(public_key=True)

        verification_method_id = _verification_method_id(proof)
        if not verification_method_id:
            raise MissingVerificationMethodError()

        if document_loader is None:
            raise ConfigurationError("no document loader configured")
        remote = await document_loader(verification_method_id)
        document = remote["document"]
        verification_method = json.loads(document) if isinstance(document, str) else document

        await self.assert_verification_method(verification_method)
        return verification_method

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    async def match_proof(
        self,
        proof: dict[str, Any],
        *,
        document: dict[str, Any],
        purpose: ProofPurpose | None = None,
        document_loader: Any = None,
    ) -> bool:
        """Return True when this suite applies to *proof*.

        Beyond the generic checks, a suite bound to a key only matches proofs
        that name that key's id as their verification method.
        """
        if not await super().match_proof(
            proof, document=document, purpose=purpose, document_loader=document_loader
        ):
            return False

        if self.key is None:
            return True
        return _verification_method_id(proof) == self.key.id

    # ------------------------------------------------------------------
    # Capability resolution
    # ------------------------------------------------------------------

    def _resolve_signer(self) -> Signer:
        if self.config.signer is not None:
            return self.config.signer
        if self.key is not None:
            return self.key.signer()
        raise ConfigurationError("no signer configured")

    def _resolve_verifier(self, verification_method: dict[str, Any]) -> Verifier:
        if self.config.verifier is not None:
            return self.config.verifier
        if self.config.key_adapter is not None:
            try:
                key = self.config.key_adapter.from_verification_method(verification_method)
            except (ValueError, TypeError) as exc:
                raise KeyMaterialError(verification_method.get("id"), str(exc)) from exc
            return key.verifier()
        if self.key is not None:
            return self.key.verifier()
        raise ConfigurationError("no verifier configured")


__all__ = ["JwsLinkedDataSignature"]

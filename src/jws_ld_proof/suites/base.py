"""LinkedDataProof — the generic proof-suite lifecycle.

A suite is configured once with a :class:`ProofSuiteConfig` and then used for
any number of independent sign and verify calls. Concrete algorithms do not
subclass a suite; they build a config (``alg``, key type, key adapter) and
hand it to :class:`~jws_ld_proof.suites.jws.JwsLinkedDataSignature`.

Lifecycle
---------
1. :meth:`LinkedDataProof.build_proof` — create the unsigned proof node
2. caller canonicalizes document + proof into ``verify_data``
3. :meth:`LinkedDataProof.sign` — attach the signature
4. :meth:`LinkedDataProof.verify_proof` — resolve the key, check the
   signature and the proof purpose
"""
from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, field_validator

from jws_ld_proof.capabilities import KeyAdapter, KeyHandle, Signer, Verifier
from jws_ld_proof.documents import has_value, includes_context, w3c_date
from jws_ld_proof.errors import ConfigurationError, ContextError, JwsProofError
from jws_ld_proof.purposes import ProofPurpose

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Configuration (Pydantic v2)
# ------------------------------------------------------------------


class ProofSuiteConfig(BaseModel):
    """Immutable configuration for a proof suite.

    Parameters
    ----------
    type:
        The proof type this suite produces, e.g. ``"Ed25519Signature2018"``.
    alg:
        The JWS ``alg`` written to and required in headers, e.g. ``"EdDSA"``.
    context_url:
        The JSON-LD context documents and verification methods must declare.
    required_key_type:
        The verification method ``type`` this suite accepts.
    key_adapter:
        Builds a key handle from a resolved verification method.
    key:
        A key handle bound to this suite. Supplies the signer, the verifier
        and the verification method id when no explicit ones are given.
    signer:
        Explicit signer, e.g. one backed by a KMS.
    verifier:
        Explicit verifier, used instead of resolving one from the document.
    proof_template:
        JSON-LD fragment copied into every proof built by this suite.
    date:
        Fixed ``created`` date for built proofs. Naive datetimes are UTC.
    use_native_canonize:
        Passed through to canonicalizers; unused here.
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    type: str
    alg: str
    context_url: str
    required_key_type: str
    key_adapter: Any = None
    key: Any = None
    signer: Any = None
    verifier: Any = None
    proof_template: dict[str, Any] | None = None
    date: datetime | None = None
    use_native_canonize: bool = False

    @field_validator("type", "alg", "context_url", "required_key_type")
    @classmethod
    def validate_not_empty(cls, value: str) -> str:
        """Ensure identifying strings are non-empty."""
        if not value:
            raise ValueError("must not be empty.")
        return value

    @field_validator("date")
    @classmethod
    def validate_date_timezone(cls, value: datetime | None) -> datetime | None:
        """Treat naive datetimes as UTC."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


# ------------------------------------------------------------------
# ProofVerificationResult
# ------------------------------------------------------------------


@dataclass(frozen=True)
class ProofVerificationResult:
    """The outcome of :meth:`LinkedDataProof.verify_proof`.

    Parameters
    ----------
    verified:
        ``True`` only if the signature matched and the purpose validated.
    verification_method:
        The resolved verification method, when resolution succeeded.
    error:
        The package error that stopped verification. ``None`` when the proof
        verified or when the signature simply did not match.
    details:
        Additional context about the verification run.
    """

    verified: bool
    verification_method: dict[str, Any] | None = None
    error: JwsProofError | None = None
    details: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.error is not None:
            object.__setattr__(self, "verified", False)


# ------------------------------------------------------------------
# LinkedDataProof
# ------------------------------------------------------------------


class LinkedDataProof(ABC):
    """Abstract proof suite: configuration, proof building and matching.

    Subclasses implement :meth:`sign`, :meth:`verify_signature` and
    :meth:`get_verification_method`.

    Raises
    ------
    ConfigurationError
        On construction, if a supplied capability does not satisfy its
        protocol.
    """

    def __init__(self, config: ProofSuiteConfig) -> None:
        _check_capability(config.signer, Signer, "signer")
        _check_capability(config.verifier, Verifier, "verifier")
        _check_capability(config.key, KeyHandle, "key")
        _check_capability(config.key_adapter, KeyAdapter, "key_adapter")
        self.config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, alg={self.config.alg!r})"

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def type(self) -> str:
        return self.config.type

    @property
    def context_url(self) -> str:
        return self.config.context_url

    @property
    def required_key_type(self) -> str:
        return self.config.required_key_type

    @property
    def key(self) -> KeyHandle | None:
        return self.config.key

    # ------------------------------------------------------------------
    # Proof building
    # ------------------------------------------------------------------

    def build_proof(self, purpose: ProofPurpose | None = None) -> dict[str, Any]:
        """Return a fresh, unsigned proof node.

        The node starts from a deep copy of ``proof_template`` and gains
        ``type``, ``created`` and, for a bound key, ``verificationMethod``
        unless the template already sets them. *purpose* stamps
        ``proofPurpose``.
        """
        proof = copy.deepcopy(self.config.proof_template) if self.config.proof_template else {}
        proof["type"] = self.type
        if "created" not in proof:
            proof["created"] = w3c_date(self.config.date)
        if self.key is not None and "verificationMethod" not in proof:
            proof["verificationMethod"] = self.key.id
        if purpose is not None:
            proof = purpose.update(proof)
        return proof

    def ensure_suite_context(
        self, document: dict[str, Any], *, add_suite_context: bool = False
    ) -> None:
        """Make sure *document* declares this suite's context.

        Parameters
        ----------
        document:
            The JSON-LD document about to be signed. Modified in place when
            *add_suite_context* is set.
        add_suite_context:
            Append the context instead of raising when it is missing.

        Raises
        ------
        ContextError
            If the context is missing and *add_suite_context* is ``False``.
        """
        if includes_context(document, self.context_url):
            return
        if not add_suite_context:
            raise ContextError(self.context_url)

        context = document.get("@context")
        if context is None:
            document["@context"] = self.context_url
        elif isinstance(context, list):
            context.append(self.context_url)
        else:
            document["@context"] = [context, self.context_url]

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
        """Return True when this suite can verify *proof* on *document*.

        The document must declare the suite context, the proof must be of
        this suite's type, and *purpose* (if any) must match the proof.
        """
        if not includes_context(document, self.context_url):
            return False
        if not has_value(proof, "type", self.type):
            return False
        if purpose is not None:
            return await purpose.match(
                proof, document=document, document_loader=document_loader
            )
        return True

    # ------------------------------------------------------------------
    # Verification orchestration
    # ------------------------------------------------------------------

    async def verify_proof(
        self,
        verify_data: bytes,
        proof: dict[str, Any],
        *,
        document: dict[str, Any],
        purpose: ProofPurpose | None = None,
        document_loader: Any = None,
    ) -> ProofVerificationResult:
        """Resolve the verification method, check the signature and the purpose.

        Errors from this package are captured in the result. Anything else
        propagates.
        """
        verification_method: dict[str, Any] | None = None
        try:
            verification_method = await self.get_verification_method(
                proof, document_loader
            )
            if not await self.verify_signature(verify_data, verification_method, proof):
                return ProofVerificationResult(
                    verified=False,
                    verification_method=verification_method,
                    details={"failed": "signature"},
                )
            if purpose is not None and not await purpose.validate(
                proof,
                document=document,
                suite=self,
                verification_method=verification_method,
                document_loader=document_loader,
            ):
                return ProofVerificationResult(
                    verified=False,
                    verification_method=verification_method,
                    details={"failed": "purpose"},
                )
        except JwsProofError as exc:
            logger.debug("Proof verification for %s failed: %s", self.type, exc)
            return ProofVerificationResult(
                verified=False, verification_method=verification_method, error=exc
            )
        return ProofVerificationResult(verified=True, verification_method=verification_method)

    # ------------------------------------------------------------------
    # Suite-specific operations
    # ------------------------------------------------------------------

    @abstractmethod
    async def sign(self, verify_data: bytes, proof: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of *proof* carrying a signature over *verify_data*."""

    @abstractmethod
    async def verify_signature(
        self,
        verify_data: bytes,
        verification_method: dict[str, Any],
        proof: dict[str, Any],
    ) -> bool:
        """Return True when *proof*'s signature matches *verify_data*."""

    @abstractmethod
    async def get_verification_method(
        self, proof: dict[str, Any], document_loader: Any
    ) -> dict[str, Any]:
        """Return the verification method document *proof* refers to."""


def _check_capability(value: object, protocol: type, name: str) -> None:
    if value is not None and not isinstance(value, protocol):
        raise ConfigurationError(
            f"{name} {value!r} does not implement {protocol.__name__}."
        )


__all__ = ["LinkedDataProof", "ProofSuiteConfig", "ProofVerificationResult"]

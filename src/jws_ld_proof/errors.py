"""Error taxonomy for detached JWS proof suites.

Every error is raised where the problem is detected and propagates to the
caller unchanged. A signature that is structurally valid but does not match
is *not* an error: :meth:`JwsLinkedDataSignature.verify_signature` returns
``False`` for it.
"""
from __future__ import annotations


class JwsProofError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(JwsProofError):
    """Raised when a suite lacks a capability needed for the operation."""


class FormatError(JwsProofError, ValueError):
    """Raised when a proof's ``jws`` value is missing or malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"The proof does not include a valid \"jws\" property: {reason}")


class HeaderDecodeError(JwsProofError, ValueError):
    """Raised when the JWS header segment cannot be decoded into a JSON object."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse JWS header; {reason}")


class HeaderValidationError(JwsProofError):
    """Raised when a decoded JWS header does not match the suite's expectations.

    Parameters
    ----------
    suite_type:
        The ``type`` of the suite that rejected the header.
    header:
        The decoded header that was rejected.
    """

    def __init__(self, suite_type: str, header: dict[str, object]) -> None:
        self.suite_type = suite_type
        self.header = header
        super().__init__(f"Invalid JWS header parameters for {suite_type}.")


class ContextError(JwsProofError, TypeError):
    """Raised when a document does not declare the suite's context URL."""

    def __init__(self, context_url: str, subject: str = "document") -> None:
        self.context_url = context_url
        super().__init__(f"The {subject} must contain \"{context_url}\".")


class KeyTypeError(JwsProofError):
    """Raised when a verification method is not of the suite's key type."""

    def __init__(self, required_key_type: str) -> None:
        self.required_key_type = required_key_type
        super().__init__(f"Invalid key type. Key type must be \"{required_key_type}\".")


class RevokedKeyError(JwsProofError):
    """Raised when a verification method carries a ``revoked`` property."""

    def __init__(self, verification_method_id: str | None) -> None:
        self.verification_method_id = verification_method_id
        super().__init__(
            f"The verification method {verification_method_id!r} has been revoked."
        )


class KeyMaterialError(JwsProofError, ValueError):
    """Raised when a verification method's key material cannot be loaded."""

    def __init__(self, verification_method_id: str | None, reason: str) -> None:
        self.verification_method_id = verification_method_id
        self.reason = reason
        super().__init__(
            f"Could not load key material from verification method "
            f"{verification_method_id!r}: {reason}"
        )


class MissingVerificationMethodError(JwsProofError):
    """Raised when a proof does not reference a verification method."""

    def __init__(self) -> None:
        super().__init__("No \"verificationMethod\" found in proof.")


class DocumentNotFoundError(JwsProofError, KeyError):
    """Raised by :class:`StaticDocumentLoader` for an unknown URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Document {url!r} could not be loaded.")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
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
]

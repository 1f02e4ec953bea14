"""ProofPurpose — the minimal term-based proof purpose.

A proof purpose states what a proof is for (``assertionMethod``,
``authentication``, ...). Real purpose policy, such as checking that a
controller document authorizes the verification method for that purpose,
belongs to the caller. This class only stamps and compares the term, which is
what suites need to match and build proofs.
"""
from __future__ import annotations

from typing import Any

ASSERTION_METHOD: str = "assertionMethod"
AUTHENTICATION: str = "authentication"


class ProofPurpose:
    """Matches proofs by their ``proofPurpose`` term.

    Parameters
    ----------
    term:
        The purpose term written to and expected in ``proof["proofPurpose"]``.

    Example
    -------
    ::

        purpose = ProofPurpose(ASSERTION_METHOD)
        proof = purpose.update({"type": "Ed25519Signature2018"})
        assert proof["proofPurpose"] == "assertionMethod"
    """

    def __init__(self, term: str = ASSERTION_METHOD) -> None:
        if not term:
            raise ValueError("ProofPurpose.term must not be empty.")
        self.term = term

    def __repr__(self) -> str:
        return f"ProofPurpose({self.term!r})"

    def update(self, proof: dict[str, Any]) -> dict[str, Any]:
        """Set ``proofPurpose`` on *proof* and return it."""
        proof["proofPurpose"] = self.term
        return proof

    async def match(
        self,
        proof: dict[str, Any],
        *,
        document: dict[str, Any] | None = None,
        document_loader: Any = None,
    ) -> bool:
        """Return True when *proof* was created for this purpose."""
        return proof.get("proofPurpose") == self.term

    async def validate(
        self,
        proof: dict[str, Any],
        *,
        document: dict[str, Any] | None = None,
        suite: Any = None,
        verification_method: dict[str, Any] | None = None,
        document_loader: Any = None,
    ) -> bool:
        """Return True when *proof* declares this purpose."""
        return proof.get("proofPurpose") == self.term


__all__ = ["ASSERTION_METHOD", "AUTHENTICATION", "ProofPurpose"]

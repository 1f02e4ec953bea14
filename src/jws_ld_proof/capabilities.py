"""Capability protocols injected into proof suites.

A suite never touches raw key material itself. Signing and verification go
through these small interfaces, so a key-management service can hand out a
:class:`Signer` without ever exposing a private key. Every protocol is
``runtime_checkable`` and suites check their capabilities on construction.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Signer(Protocol):
    """Produces a signature over raw bytes. May suspend (e.g. a remote KMS)."""

    async def sign(self, data: bytes) -> bytes:
        ...


@runtime_checkable
class Verifier(Protocol):
    """Checks a signature over raw bytes; returns ``False`` on mismatch."""

    async def verify(self, data: bytes, signature: bytes) -> bool:
        ...


@runtime_checkable
class KeyHandle(Protocol):
    """A key bound to a verification method identifier."""

    id: str

    def signer(self) -> Signer:
        ...

    def verifier(self) -> Verifier:
        ...

    def export(
        self,
        *,
        public_key: bool = True,
        private_key: bool = False,
        include_context: bool = True,
    ) -> dict[str, Any]:
        ...


@runtime_checkable
class KeyAdapter(Protocol):
    """Builds a :class:`KeyHandle` from a verification method document."""

    def from_verification_method(self, verification_method: dict[str, Any]) -> KeyHandle:
        ...


@runtime_checkable
class DocumentLoader(Protocol):
    """Resolves a URL to ``{"document": <str | dict>, ...}``. May suspend."""

    async def __call__(self, url: str) -> dict[str, Any]:
        ...


__all__ = [
    "DocumentLoader",
    "KeyAdapter",
    "KeyHandle",
    "Signer",
    "Verifier",
]

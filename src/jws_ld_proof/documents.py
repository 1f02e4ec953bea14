"""JSON-LD document helpers and an in-memory document loader.

:class:`StaticDocumentLoader` stores documents keyed by URL, which is enough
for tests, offline verification and pre-fetched verification methods. Network
document loading is left to the caller: any async callable returning
``{"document": ...}`` satisfies :class:`~jws_ld_proof.capabilities.DocumentLoader`.
"""
from __future__ import annotations

import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Any

from jws_ld_proof.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# JSON-LD helpers
# ------------------------------------------------------------------


def includes_context(document: dict[str, Any], context_url: str) -> bool:
    """Return True when *document*'s ``@context`` is or contains *context_url*."""
    context = document.get("@context")
    if isinstance(context, list):
        return context_url in context
    return context == context_url


def has_value(document: dict[str, Any], prop: str, value: object) -> bool:
    """Return True when *document[prop]* equals *value* or is a list holding it."""
    found = document.get(prop)
    if isinstance(found, list):
        return value in found
    return found == value


def w3c_date(date: datetime | None = None) -> str:
    """Format *date* (default: now) as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""
    if date is None:
        date = datetime.now(timezone.utc)
    elif date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


# ------------------------------------------------------------------
# StaticDocumentLoader
# ------------------------------------------------------------------


class StaticDocumentLoader:
    """In-memory document loader.

    All mutations acquire a lock before modifying the internal store. Loaded
    documents are deep copies, so callers cannot alter the stored originals.

    Example
    -------
    ::

        loader = StaticDocumentLoader()
        loader.add_verification_method(key.export(public_key=True))
        result = await loader(key.id)
        print(result["document"]["type"])
    """

    def __init__(self, documents: dict[str, dict[str, Any] | str] | None = None) -> None:
        self._documents: dict[str, dict[str, Any] | str] = dict(documents or {})
        self._lock = threading.Lock()

    def add(self, url: str, document: dict[str, Any] | str) -> None:
        """Register *document* under *url*, replacing any previous entry.

        Parameters
        ----------
        url:
            The URL the document resolves from.
        document:
            A JSON object, or its serialized JSON text.
        """
        if not url:
            raise ValueError("url must not be empty.")
        with self._lock:
            self._documents[url] = document
        logger.info("Registered document %s", url)

    def add_verification_method(self, verification_method: dict[str, Any]) -> str:
        """Register a verification method under its own ``id`` and return it."""
        vm_id = verification_method.get("id")
        if not isinstance(vm_id, str) or not vm_id:
            raise ValueError("verification method must have a non-empty string 'id'.")
        self.add(vm_id, verification_method)
        return vm_id

    def remove(self, url: str) -> bool:
        """Remove *url*; return True if it was registered."""
        with self._lock:
            return self._documents.pop(url, None) is not None

    def urls(self) -> list[str]:
        """Return a sorted list of all registered URLs."""
        with self._lock:
            return sorted(self._documents)

    async def __call__(self, url: str) -> dict[str, Any]:
        """Resolve *url* to a remote-document dictionary.

        Raises
        ------
        DocumentNotFoundError
            If *url* is not registered.
        """
        with self._lock:
            document = self._documents.get(url)
        if document is None:
            raise DocumentNotFoundError(url)
        return {
            "contextUrl": None,
            "documentUrl": url,
            "document": document if isinstance(document, str) else copy.deepcopy(document),
        }


__all__ = [
    "StaticDocumentLoader",
    "has_value",
    "includes_context",
    "w3c_date",
]

"""Shared dependencies for API routes."""

from services.document_store import DocumentStore, InMemoryDocumentStore

_store = InMemoryDocumentStore()


def get_document_store() -> DocumentStore:
    return _store

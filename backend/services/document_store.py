"""Storage for evaluated documents, keyed by content hash."""

import logging
from abc import ABC, abstractmethod

from models.schemas.document_record import DocumentRecord

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Interface the ingestion service persists DocumentRecords through.

    Records are never mutated: the first evaluation of a hash is kept. Who
    uploaded a hash is tracked separately from the record, so every uploader
    of the same bytes sees it in their history.
    """

    @abstractmethod
    def get(self, content_hash: str) -> DocumentRecord | None:
        """Return the record for `content_hash`, or None."""

    @abstractmethod
    def put(self, content_hash: str, record: DocumentRecord) -> bool:
        """Store `record` and link it to `record.user_id`.

        Returns False if the hash was already present; the uploader is still
        linked to the existing record.
        """

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[DocumentRecord]:
        """Records uploaded by `user_id`, oldest first."""

    @abstractmethod
    def delete_for_user(self, user_id: str) -> int:
        """Unlink every record uploaded by `user_id`; returns the count unlinked.

        A record is removed once no uploader references it.
        """


class InMemoryDocumentStore(DocumentStore):
    """Process-local store; contents are lost on restart."""

    def __init__(self) -> None:
        self._records: dict[str, DocumentRecord] = {}
        self._uploads: dict[str, list[str]] = {}
        # hashes submitted without a user id; never cleared
        self._anonymous: set[str] = set()

    def get(self, content_hash: str) -> DocumentRecord | None:
        return self._records.get(content_hash)

    def put(self, content_hash: str, record: DocumentRecord) -> bool:
        self._link(content_hash, record.user_id)
        if content_hash in self._records:
            logger.info("Document %s already stored, keeping existing record", content_hash[:12])
            return False
        self._records[content_hash] = record
        return True

    def list_for_user(self, user_id: str) -> list[DocumentRecord]:
        return [self._records[h] for h in self._uploads.get(user_id, []) if h in self._records]

    def delete_for_user(self, user_id: str) -> int:
        hashes = self._uploads.pop(user_id, [])
        for h in hashes:
            if not self._is_referenced(h):
                self._records.pop(h, None)
        return len(hashes)

    def _link(self, content_hash: str, user_id: str | None) -> None:
        if user_id is None:
            self._anonymous.add(content_hash)
            return
        hashes = self._uploads.setdefault(user_id, [])
        if content_hash not in hashes:
            hashes.append(content_hash)

    def _is_referenced(self, content_hash: str) -> bool:
        if content_hash in self._anonymous:
            return True
        return any(content_hash in hashes for hashes in self._uploads.values())

    def __len__(self) -> int:
        return len(self._records)

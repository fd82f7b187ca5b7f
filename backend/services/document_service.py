"""Document ingestion: bytes in, stored evaluation out.

1. Reject empty uploads
2. SHA-256 content hash
3. Text extraction
4. Evaluation pipeline
5. Store DocumentRecord (idempotent by hash)
"""

import logging
from datetime import datetime, timezone

from models.responses import (
    ClearHistoryResponse,
    EvaluationResponse,
    HistoryEntry,
    HistoryResponse,
    VerifyResponse,
)
from models.schemas.document_record import DocumentRecord
from services import document_reader
from services.document_store import DocumentStore
from services.pipeline.errors import NoDocumentContentError
from services.pipeline.orchestrator import evaluate_document

logger = logging.getLogger(__name__)


async def ingest_document(
    content: bytes,
    file_name: str,
    store: DocumentStore,
    user_id: str | None = None,
    user_name: str | None = None,
    email: str | None = None,
) -> EvaluationResponse:
    """Evaluate an uploaded document and record the result under its hash."""
    if not content:
        raise NoDocumentContentError()

    content_hash = document_reader.compute_content_hash(content)
    document_text = document_reader.extract_text(content, file_name)

    response = await evaluate_document(document_text, file_name, content_hash)

    record = DocumentRecord(
        hash=content_hash,
        file_name=file_name,
        file_size=len(content),
        user_id=user_id,
        user_name=user_name,
        email=email,
        evaluated_at=datetime.now(timezone.utc),
        evaluation=response.evaluation,
        fairness_result=response.fairness_result,
        public_status=response.public_status,
    )
    store.put(content_hash, record)
    return response


def verify_hash(content_hash: str, store: DocumentStore) -> VerifyResponse:
    record = store.get(content_hash)
    if record is None:
        return VerifyResponse(
            found=False,
            message="Hash not found in the system. This document has not been evaluated.",
        )
    return VerifyResponse(
        found=True,
        status=record.public_status,
        evaluated_at=record.evaluated_at,
        message=record.public_status.message,
    )


def get_history(user_id: str, store: DocumentStore) -> HistoryResponse:
    return HistoryResponse(
        documents=[
            HistoryEntry(
                hash=r.hash,
                file_name=r.file_name,
                evaluated_at=r.evaluated_at,
                status=r.public_status,
                score=r.evaluation.score,
            )
            for r in store.list_for_user(user_id)
        ]
    )


def clear_history(user_id: str, store: DocumentStore) -> ClearHistoryResponse:
    deleted = store.delete_for_user(user_id)
    logger.info("Cleared %d documents for user %s", deleted, user_id)
    return ClearHistoryResponse(success=True, deleted_count=deleted)

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_document_store
from config import settings
from models.requests import TextEvaluateRequest, VerifyRequest
from models.responses import (
    ClearHistoryResponse,
    EvaluationResponse,
    HistoryResponse,
    VerifyResponse,
)
from services import document_service
from services.document_store import DocumentStore
from services.pipeline.errors import NoDocumentContentError, PipelineError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


async def _run_ingestion(content: bytes, file_name: str, store: DocumentStore, **user) -> EvaluationResponse:
    try:
        return await document_service.ingest_document(content, file_name, store, **user)
    except NoDocumentContentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PipelineError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "scoring_profile": settings.scoring_profile,
    }


@router.post("/evaluate", response_model=EvaluationResponse)
@limiter.limit(settings.evaluation_rate_limit)
async def evaluate(
    request: Request,
    document: UploadFile = File(...),
    user_id: str | None = Form(None),
    user_name: str | None = Form(None),
    email: str | None = Form(None),
    store: DocumentStore = Depends(get_document_store),
):
    # Read and validate size
    content = await document.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    return await _run_ingestion(
        content,
        document.filename or "document",
        store,
        user_id=user_id,
        user_name=user_name,
        email=email,
    )


@router.post("/evaluate/text", response_model=EvaluationResponse)
@limiter.limit(settings.evaluation_rate_limit)
async def evaluate_text(
    request: Request,
    body: TextEvaluateRequest,
    store: DocumentStore = Depends(get_document_store),
):
    return await _run_ingestion(body.text.encode("utf-8"), body.file_name, store)


@router.post("/verify", response_model=VerifyResponse)
async def verify(body: VerifyRequest, store: DocumentStore = Depends(get_document_store)):
    if not body.hash or not body.hash.strip():
        raise HTTPException(status_code=400, detail="Hash is required")
    return document_service.verify_hash(body.hash.strip(), store)


@router.get("/history/{user_id}", response_model=HistoryResponse)
async def history(user_id: str, store: DocumentStore = Depends(get_document_store)):
    return document_service.get_history(user_id, store)


@router.delete("/history/{user_id}", response_model=ClearHistoryResponse)
async def clear_history(user_id: str, store: DocumentStore = Depends(get_document_store)):
    return document_service.clear_history(user_id, store)

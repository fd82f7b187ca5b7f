"""Stored evaluation of a document, keyed by the SHA-256 of its bytes."""

from datetime import datetime

from pydantic import BaseModel

from models.schemas.evaluation import Evaluation
from models.schemas.fairness_result import FairnessResult
from models.schemas.public_status import PublicStatus


class DocumentRecord(BaseModel):
    hash: str
    file_name: str = ""
    file_size: int = 0
    user_id: str | None = None
    user_name: str | None = None
    email: str | None = None
    evaluated_at: datetime
    evaluation: Evaluation
    fairness_result: FairnessResult
    public_status: PublicStatus

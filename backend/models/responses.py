from datetime import datetime

from pydantic import BaseModel

from models.schemas.evaluation import Evaluation
from models.schemas.fairness_result import FairnessResult
from models.schemas.public_status import PublicStatus


class EvaluationResponse(BaseModel):
    hash: str = ""
    evaluation: Evaluation = Evaluation()
    fairness_result: FairnessResult = FairnessResult()
    public_status: PublicStatus = PublicStatus()


class VerifyResponse(BaseModel):
    found: bool = False
    status: PublicStatus | None = None
    evaluated_at: datetime | None = None
    message: str = ""


class HistoryEntry(BaseModel):
    hash: str
    file_name: str = ""
    evaluated_at: datetime
    status: PublicStatus
    score: int = 0


class HistoryResponse(BaseModel):
    documents: list[HistoryEntry] = []


class ClearHistoryResponse(BaseModel):
    success: bool = True
    deleted_count: int = 0

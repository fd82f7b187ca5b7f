"""Inter-stage Pydantic contracts for the evaluation pipeline."""

from models.schemas.features import ExtractedFeatures
from models.schemas.evaluation import Evaluation, ModelEvaluation
from models.schemas.fairness_result import FairnessCheck, FairnessResult
from models.schemas.public_status import PublicStatus
from models.schemas.document_record import DocumentRecord

__all__ = [
    "ExtractedFeatures",
    "Evaluation",
    "ModelEvaluation",
    "FairnessCheck",
    "FairnessResult",
    "PublicStatus",
    "DocumentRecord",
]

"""Pipeline orchestrator: wires the evaluation stages together.

Flow:
    document_text
      ├─ feature_extractor.extract_features()          → ExtractedFeatures
      │       ↓
      ├─ evaluation_adapter.evaluate_with_model()      → Evaluation
      │       (heuristic_scorer fallback on any model failure)
      │       ↓
      ├─ fairness_verifier.verify_fairness()           → FairnessResult
      │       ↓
      └─ status_mapper.map_to_public_status()          → PublicStatus
                       ↓
         EvaluationResponse(hash, evaluation, fairness_result, public_status)
"""

import logging

from models.responses import EvaluationResponse
from models.schemas.evaluation import Evaluation
from models.schemas.fairness_result import FairnessResult
from models.schemas.features import ExtractedFeatures
from services.pipeline.errors import EvaluationFailedError, NoDocumentContentError
from services.pipeline.evaluation_adapter import evaluate_with_model
from services.pipeline.fairness_verifier import verify_fairness
from services.pipeline.feature_extractor import extract_features
from services.pipeline.scoring_profiles import ScoringProfile
from services.pipeline.status_mapper import map_to_public_status

logger = logging.getLogger(__name__)


async def evaluate_document(
    document_text: str | None,
    file_name: str,
    content_hash: str,
    profile: str | ScoringProfile | None = None,
) -> EvaluationResponse:
    """Run the full pipeline for one document.

    Raises NoDocumentContentError when no text was supplied and
    EvaluationFailedError for any unexpected failure. Model failures are
    absorbed by the evaluation adapter.
    """
    if document_text is None:
        raise NoDocumentContentError()

    logger.info("Evaluating %s (%d chars, hash %s)", file_name, len(document_text), content_hash[:12])

    try:
        # --- Stage 1: Feature extraction ---
        features: ExtractedFeatures = extract_features(document_text, profile)

        # --- Stage 2: Model evaluation (falls back to heuristic) ---
        evaluation: Evaluation = await evaluate_with_model(document_text, file_name, features)

        # --- Stage 3: Fairness verification ---
        fairness_result: FairnessResult = verify_fairness(evaluation, document_text)
    except Exception as e:
        logger.exception("Evaluation pipeline failed for %s", file_name)
        raise EvaluationFailedError() from e

    # --- Stage 4: Public status ---
    public_status = map_to_public_status(fairness_result.status)

    logger.info(
        "Evaluation complete for %s: score %d (%s), %s -> %s",
        file_name,
        evaluation.score,
        evaluation.source,
        fairness_result.status,
        public_status.status,
    )

    return EvaluationResponse(
        hash=content_hash,
        evaluation=evaluation,
        fairness_result=fairness_result,
        public_status=public_status,
    )

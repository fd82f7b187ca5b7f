"""Heuristic Scorer: turns ExtractedFeatures into the fallback Evaluation."""

from models.schemas.evaluation import Evaluation
from models.schemas.features import ExtractedFeatures

SHORTLIST_YES_THRESHOLD = 70
SHORTLIST_MAYBE_THRESHOLD = 50


def recommend_shortlist(score: int) -> str:
    if score >= SHORTLIST_YES_THRESHOLD:
        return "Yes"
    if score >= SHORTLIST_MAYBE_THRESHOLD:
        return "Maybe"
    return "No"


def fallback_evaluation(features: ExtractedFeatures) -> Evaluation:
    """Evaluation built entirely from local features, used when the model is unavailable."""
    return Evaluation(
        score=features.heuristic_score,
        skills=list(features.skills),
        experience_level=features.experience_level,
        experience_years=features.experience_years,
        shortlist_recommendation=recommend_shortlist(features.heuristic_score),
        strengths=list(features.strengths),
        improvements=list(features.improvements),
        reasoning=features.summary,
        source="heuristic",
    )

"""Fairness Verifier output: weighted rule checks and the final classification."""

from typing import Literal

from pydantic import BaseModel

FairnessStatus = Literal["verified", "under_review", "biased"]


class FairnessCheck(BaseModel):
    passed: bool = False
    weight: float = 0.0
    description: str = ""
    analysis: str = ""


class FairnessResult(BaseModel):
    """Single-shot classification of one Evaluation against its document.

    `checks` is keyed by check name: evaluation_score, skills_identified,
    experience_level, shortlist_decision, content_quality.
    """
    status: FairnessStatus = "under_review"
    fairness_score: float = 0.0  # 0-100
    content_score: int = 0  # 0-100
    checks: dict[str, FairnessCheck] = {}
    decision: str = ""

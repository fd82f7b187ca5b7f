"""Fairness Verifier: rule-based audit of an Evaluation against its document.

Five weighted checks are combined into a 0-100 fairness score, which together
with the evaluation score selects one of three terminal statuses:

    score >= 70 and fairness >= 70  -> verified
    score >= 50 and fairness >= 45  -> under_review
    otherwise                       -> biased

The weights and thresholds are fixed golden values.
"""

import logging
import math

from models.schemas.evaluation import Evaluation
from models.schemas.fairness_result import FairnessCheck, FairnessResult

logger = logging.getLogger(__name__)

CHECK_WEIGHTS: dict[str, float] = {
    "evaluation_score": 0.30,
    "skills_identified": 0.25,
    "experience_level": 0.20,
    "shortlist_decision": 0.15,
    "content_quality": 0.10,
}

EVALUATION_SCORE_THRESHOLD = 65
MIN_SKILLS = 3
QUALIFIED_LEVELS = frozenset({"Mid", "Senior", "Expert"})
CONTENT_QUALITY_THRESHOLD = 50

VERIFIED_SCORE = 70
VERIFIED_FAIRNESS = 70
REVIEW_SCORE = 50
REVIEW_FAIRNESS = 45

DECISIONS = {
    "verified": "Document MEETS quality standards - VERIFIED",
    "under_review": "Document needs REVIEW - borderline quality",
    "biased": "Document DOES NOT meet standards - REJECTED",
}

# Keyword groups scored by content_score: +15 each when any keyword is present
CONTENT_KEYWORD_GROUPS: list[tuple[str, ...]] = [
    ("experience", "work history"),
    ("education", "degree"),
    ("skills", "technologies"),
    ("project", "achievement"),
]
CONTENT_GROUP_POINTS = 15
CONTENT_LENGTH_TIERS: list[tuple[int, int]] = [(500, 10), (1000, 10), (2000, 10)]


def compute_content_score(document_text: str) -> int:
    """Structure/length score of the raw document, 0-100."""
    text = document_text.lower()
    score = 0
    for group in CONTENT_KEYWORD_GROUPS:
        if any(keyword in text for keyword in group):
            score += CONTENT_GROUP_POINTS
    for threshold, bonus in CONTENT_LENGTH_TIERS:
        if len(document_text) > threshold:
            score += bonus
    return min(100, score)


def build_checks(evaluation: Evaluation, content_score: int) -> dict[str, FairnessCheck]:
    score = evaluation.score
    n_skills = len(evaluation.skills)
    level = evaluation.experience_level
    recommendation = evaluation.shortlist_recommendation

    if recommendation == "Yes":
        shortlist_analysis = "Candidate recommended for shortlisting"
    elif recommendation == "Maybe":
        shortlist_analysis = "Candidate needs further review"
    else:
        shortlist_analysis = "Candidate not recommended based on evaluation"

    score_passed = score >= EVALUATION_SCORE_THRESHOLD
    skills_passed = n_skills >= MIN_SKILLS
    level_passed = level in QUALIFIED_LEVELS
    content_passed = content_score >= CONTENT_QUALITY_THRESHOLD

    return {
        "evaluation_score": FairnessCheck(
            passed=score_passed,
            weight=CHECK_WEIGHTS["evaluation_score"],
            description=f"Evaluation Score Check ({score}/100)",
            analysis=(
                f"Score {score} meets quality threshold"
                if score_passed
                else f"Score {score} is below acceptable threshold ({EVALUATION_SCORE_THRESHOLD})"
            ),
        ),
        "skills_identified": FairnessCheck(
            passed=skills_passed,
            weight=CHECK_WEIGHTS["skills_identified"],
            description=f"Skills Coverage ({n_skills} skills found)",
            analysis=(
                f"{n_skills} skills identified - adequate coverage"
                if skills_passed
                else f"Only {n_skills} skills found - insufficient detail"
            ),
        ),
        "experience_level": FairnessCheck(
            passed=level_passed,
            weight=CHECK_WEIGHTS["experience_level"],
            description=f"Experience Level ({level})",
            analysis=(
                f"{level} level indicates qualified candidate"
                if level_passed
                else f"{level} level may need more experience"
            ),
        ),
        "shortlist_decision": FairnessCheck(
            passed=recommendation == "Yes",
            weight=CHECK_WEIGHTS["shortlist_decision"],
            description=f"Shortlist Recommendation ({recommendation})",
            analysis=shortlist_analysis,
        ),
        "content_quality": FairnessCheck(
            passed=content_passed,
            weight=CHECK_WEIGHTS["content_quality"],
            description=f"Content Quality Score ({content_score}/100)",
            analysis=(
                f"Document content is {'well' if content_score >= 70 else 'adequately'} structured"
                if content_passed
                else "Document content lacks detail or structure"
            ),
        ),
    }


def compute_fairness_score(checks: dict[str, FairnessCheck]) -> float:
    """Weighted percentage of passed checks, rounded to two decimals."""
    total = math.fsum(c.weight for c in checks.values())
    if total <= 0:
        return 0.0
    passed = math.fsum(c.weight for c in checks.values() if c.passed)
    return round(100 * passed / total, 2)


def classify(score: int, fairness_score: float) -> str:
    """Ordered three-way decision; exactly one status for every input."""
    if score >= VERIFIED_SCORE and fairness_score >= VERIFIED_FAIRNESS:
        return "verified"
    if score >= REVIEW_SCORE and fairness_score >= REVIEW_FAIRNESS:
        return "under_review"
    return "biased"


def verify_fairness(evaluation: Evaluation, document_text: str) -> FairnessResult:
    content_score = compute_content_score(document_text or "")
    checks = build_checks(evaluation, content_score)
    fairness_score = compute_fairness_score(checks)
    status = classify(evaluation.score, fairness_score)

    logger.info(
        "Fairness verification: score %d, fairness %.2f, content %d -> %s",
        evaluation.score, fairness_score, content_score, status,
    )
    for name, check in checks.items():
        logger.debug("%s %s | %s", "PASS" if check.passed else "FAIL", name, check.analysis)

    return FairnessResult(
        status=status,
        fairness_score=fairness_score,
        content_score=content_score,
        checks=checks,
        decision=DECISIONS[status],
    )

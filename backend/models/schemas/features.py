"""Feature Extractor output: structured signals pulled from document text."""

from typing import Literal

from pydantic import BaseModel

ExperienceLevel = Literal["Entry", "Mid", "Senior", "Expert"]


class ExtractedFeatures(BaseModel):
    """Deterministic features derived from a single document's text.

    `skills` and `strengths` carry placeholder values when nothing was found;
    `skill_count` and `strength_count` keep the raw numbers the score was
    computed from.
    """
    skills: list[str] = []
    strengths: list[str] = []  # max 5
    experience_years: int = 0
    experience_level: ExperienceLevel = "Entry"
    heuristic_score: int = 0
    improvements: list[str] = []
    summary: str = ""

    skill_count: int = 0
    strength_count: int = 0
    profile: str = ""

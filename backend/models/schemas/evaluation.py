"""Merged evaluation produced by the external model or the heuristic fallback."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.schemas.features import ExperienceLevel

ShortlistRecommendation = Literal["Yes", "No", "Maybe"]


class Evaluation(BaseModel):
    score: int = Field(0, ge=0, le=100)
    skills: list[str] = []
    experience_level: ExperienceLevel = "Entry"
    experience_years: int = 0
    shortlist_recommendation: ShortlistRecommendation = "No"
    strengths: list[str] = []
    improvements: list[str] = []
    reasoning: str = ""
    source: Literal["model", "heuristic"] = "heuristic"


class ModelEvaluation(BaseModel):
    """Raw JSON contract returned by the text-generation service.

    Every field is optional. A value of the wrong type is coerced to None
    field by field so the rest of the response survives; the evaluation
    adapter fills those gaps from the extracted features.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: float | None = None
    skills: list[str] | None = None
    experience_level: str | None = Field(None, alias="experienceLevel")
    experience_years: float | None = Field(None, alias="experienceYears")
    shortlist_recommendation: str | None = Field(None, alias="shortlistRecommendation")
    strengths: list[str] | None = None
    improvements: list[str] | None = None
    reasoning: str | None = None

    @field_validator("score", "experience_years", mode="before")
    @classmethod
    def _number_or_none(cls, value: Any) -> float | None:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None
        return None

    @field_validator("skills", "strengths", "improvements", mode="before")
    @classmethod
    def _string_items(cls, value: Any) -> list[str] | None:
        if not isinstance(value, list):
            return None
        # null and non-string entries are dropped, not fatal
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]

    @field_validator("experience_level", "shortlist_recommendation", "reasoning", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

"""Tests for the Heuristic Scorer and scoring profiles."""

import pytest

from config import settings
from models.schemas.features import ExtractedFeatures
from services.pipeline.heuristic_scorer import fallback_evaluation, recommend_shortlist
from services.pipeline.scoring_profiles import LENIENT, STRICT, get_profile


@pytest.mark.parametrize(
    "score, expected",
    [(100, "Yes"), (70, "Yes"), (69, "Maybe"), (50, "Maybe"), (49, "No"), (0, "No")],
)
def test_recommend_shortlist_thresholds(score, expected):
    assert recommend_shortlist(score) == expected


def test_fallback_copies_features():
    features = ExtractedFeatures(
        skills=["Python", "Docker", "AWS"],
        strengths=["Won the city hackathon"],
        experience_years=4,
        experience_level="Mid",
        heuristic_score=64,
        improvements=["Add more technical skills"],
        summary="Document contains 3 relevant skills.",
    )
    evaluation = fallback_evaluation(features)

    assert evaluation.score == 64
    assert evaluation.shortlist_recommendation == "Maybe"
    assert evaluation.skills == ["Python", "Docker", "AWS"]
    assert evaluation.strengths == ["Won the city hackathon"]
    assert evaluation.experience_level == "Mid"
    assert evaluation.experience_years == 4
    assert evaluation.improvements == ["Add more technical skills"]
    assert evaluation.reasoning == "Document contains 3 relevant skills."
    assert evaluation.source == "heuristic"


class TestScoringProfiles:
    def test_golden_constants(self):
        assert (LENIENT.base, LENIENT.min_score, LENIENT.max_score) == (30, 25, 95)
        assert (STRICT.base, STRICT.min_score, STRICT.max_score) == (40, 30, 98)
        assert LENIENT.length_tiers == ((1500, 3), (2500, 4), (4000, 3))
        assert STRICT.length_tiers == ((2000, 5), (3000, 5))
        assert STRICT.education_bonuses == ()

    def test_lookup_by_name_is_case_insensitive(self):
        assert get_profile("LENIENT") is LENIENT
        assert get_profile("strict") is STRICT

    def test_profile_instance_passes_through(self):
        assert get_profile(LENIENT) is LENIENT

    def test_default_comes_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "scoring_profile", "lenient")
        assert get_profile() is LENIENT

    def test_canonical_default_is_strict(self):
        assert settings.scoring_profile == "strict"

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown scoring profile"):
            get_profile("generous")

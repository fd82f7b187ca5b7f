"""Named constant sets for the heuristic document score.

Two variants of the score formula exist in the wild: a lenient one (lower
base, small per-skill credit, education bonuses) and a strict one (higher
base, larger per-skill credit, extra achievement patterns). Both are kept as
profiles; `strict` is the default.
"""

from pydantic import BaseModel, ConfigDict


class ScoringProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base: float
    per_skill: float
    skill_cap: float
    per_strength: float
    strength_cap: float
    level_bonus: dict[str, float]
    # (min length exclusive, bonus) applied cumulatively
    length_tiers: tuple[tuple[int, float], ...]
    # (keywords, bonus); bonus applies when any keyword is present
    education_bonuses: tuple[tuple[tuple[str, ...], float], ...] = ()
    min_score: int
    max_score: int
    extended_strengths: bool = False
    notable_summary: bool = False


LENIENT = ScoringProfile(
    name="lenient",
    base=30,
    per_skill=1,
    skill_cap=20,
    per_strength=4,
    strength_cap=20,
    level_bonus={"Expert": 15, "Senior": 12, "Mid": 8, "Entry": 3},
    length_tiers=((1500, 3), (2500, 4), (4000, 3)),
    education_bonuses=(
        (("bachelor", "b.tech", "bsc"), 3),
        (("master", "m.tech", "phd"), 5),
        (("certified", "certification"), 5),
    ),
    min_score=25,
    max_score=95,
)

STRICT = ScoringProfile(
    name="strict",
    base=40,
    per_skill=2.5,
    skill_cap=25,
    per_strength=5,
    strength_cap=20,
    level_bonus={"Expert": 15, "Senior": 12, "Mid": 8, "Entry": 4},
    length_tiers=((2000, 5), (3000, 5)),
    min_score=30,
    max_score=98,
    extended_strengths=True,
    notable_summary=True,
)

PROFILES: dict[str, ScoringProfile] = {p.name: p for p in (LENIENT, STRICT)}


def get_profile(name: str | ScoringProfile | None = None) -> ScoringProfile:
    """Resolve a profile by name, defaulting to the configured one."""
    if isinstance(name, ScoringProfile):
        return name
    if name is None:
        from config import settings
        name = settings.scoring_profile
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown scoring profile: {name!r} (expected one of {sorted(PROFILES)})"
        ) from None

"""Feature Extractor: skills, achievements, experience and heuristic score.

Pure regex/keyword analysis over the decoded document text. No model, no
randomness and no clock: the same text and profile always produce the same
ExtractedFeatures.

Stages:
    text
      ├─ extract_skills()       → ordered skill names from SKILL_PATTERNS
      ├─ extract_strengths()    → achievement phrases + synthetic strengths
      ├─ extract_experience_years() / classify_experience_level()
      ├─ compute_heuristic_score()   (per ScoringProfile)
      ├─ suggest_improvements()
      └─ build_summary()
"""

import logging
import math
import re

from models.schemas.features import ExtractedFeatures
from services.pipeline.scoring_profiles import ScoringProfile, get_profile

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Skill table: display name -> case-insensitive word-boundary pattern.
# Iteration order is the order skills are reported in.
# ---------------------------------------------------------------------------
_SKILL_SOURCES: dict[str, str] = {
    # Programming languages
    "Python": r"\bpython\b",
    "JavaScript": r"\bjavascript\b",
    "TypeScript": r"\btypescript\b",
    "Java": r"\bjava\b(?!script)",
    "C++": r"(?<!\w)c\+\+(?!\w)",
    "C#": r"(?<!\w)c#(?!\w)",
    "C": r"\bc\b(?!\+|#)",
    "Go": r"\bgolang\b|\bgo\b",
    "Rust": r"\brust\b",
    "Ruby": r"\bruby\b",
    "PHP": r"\bphp\b",
    "Swift": r"\bswift\b",
    "Kotlin": r"\bkotlin\b",
    "Scala": r"\bscala\b",
    "R": r"\br programming\b|\br language\b",
    "MATLAB": r"\bmatlab\b",
    "Perl": r"\bperl\b",
    # Frontend
    "React": r"\breact\b|\breactjs\b|\breact\.js\b",
    "Angular": r"\bangular\b|\bangularjs\b",
    "Vue.js": r"\bvue\b|\bvuejs\b|\bvue\.js\b",
    "Next.js": r"\bnext\.js\b|\bnextjs\b",
    "HTML": r"\bhtml\b|\bhtml5\b",
    "CSS": r"\bcss\b|\bcss3\b",
    "SASS": r"\bsass\b|\bscss\b",
    "Tailwind CSS": r"\btailwind\b",
    "Bootstrap": r"\bbootstrap\b",
    "jQuery": r"\bjquery\b",
    # Backend
    "Node.js": r"\bnode\.js\b|\bnodejs\b|\bnode\b",
    "Express": r"\bexpress\b|\bexpress\.js\b",
    "Django": r"\bdjango\b",
    "Flask": r"\bflask\b",
    "FastAPI": r"\bfastapi\b",
    "Spring Boot": r"\bspring boot\b|\bspringboot\b",
    "Spring": r"\bspring\b",
    "Laravel": r"\blaravel\b",
    "Ruby on Rails": r"\brails\b|\bruby on rails\b",
    "ASP.NET": r"\basp\.net\b|\baspdotnet\b",
    # Databases
    "MySQL": r"\bmysql\b",
    "PostgreSQL": r"\bpostgresql\b|\bpostgres\b",
    "MongoDB": r"\bmongodb\b|\bmongo\b",
    "Redis": r"\bredis\b",
    "SQLite": r"\bsqlite\b",
    "Oracle": r"\boracle\b",
    "SQL Server": r"\bsql server\b|\bmssql\b",
    "Firebase": r"\bfirebase\b",
    "Firestore": r"\bfirestore\b",
    "DynamoDB": r"\bdynamodb\b",
    "Cassandra": r"\bcassandra\b",
    "Neo4j": r"\bneo4j\b",
    # Cloud & DevOps
    "AWS": r"\baws\b|\bamazon web services\b",
    "Azure": r"\bazure\b|\bmicrosoft azure\b",
    "GCP": r"\bgcp\b|\bgoogle cloud\b",
    "Docker": r"\bdocker\b",
    "Kubernetes": r"\bkubernetes\b|\bk8s\b",
    "Jenkins": r"\bjenkins\b",
    "CI/CD": r"\bci/cd\b|\bcicd\b",
    "Terraform": r"\bterraform\b",
    "Ansible": r"\bansible\b",
    "Linux": r"\blinux\b|\bubuntu\b|\bcentos\b",
    "Git": r"\bgit\b|\bgithub\b|\bgitlab\b",
    "Nginx": r"\bnginx\b",
    # AI/ML
    "Machine Learning": r"\bmachine learning\b|\bml\b",
    "Deep Learning": r"\bdeep learning\b",
    "TensorFlow": r"\btensorflow\b",
    "PyTorch": r"\bpytorch\b",
    "Keras": r"\bkeras\b",
    "Scikit-learn": r"\bscikit-learn\b|\bsklearn\b",
    "NLP": r"\bnlp\b|\bnatural language processing\b",
    "Computer Vision": r"\bcomputer vision\b|\bcv\b",
    "OpenCV": r"\bopencv\b",
    "Pandas": r"\bpandas\b",
    "NumPy": r"\bnumpy\b",
    "LLM": r"\bllm\b|\blarge language model\b",
    "GPT": r"\bgpt\b|\bopenai\b",
    "Hugging Face": r"\bhugging face\b|\btransformers\b",
    # Mobile
    "React Native": r"\breact native\b",
    "Flutter": r"\bflutter\b",
    "iOS": r"\bios\b|\bswiftui\b",
    "Android": r"\bandroid\b",
    # Other
    "REST API": r"\brest api\b|\brestful\b",
    "GraphQL": r"\bgraphql\b",
    "Microservices": r"\bmicroservices\b",
    "Agile": r"\bagile\b",
    "Scrum": r"\bscrum\b",
    "JIRA": r"\bjira\b",
    "WebSocket": r"\bwebsocket\b",
    "OAuth": r"\boauth\b",
    "JWT": r"\bjwt\b",
    "Data Science": r"\bdata science\b",
    "Power BI": r"\bpower bi\b",
    "Tableau": r"\btableau\b",
    "Excel": r"\bexcel\b",
    "Blockchain": r"\bblockchain\b",
    "Web3": r"\bweb3\b",
    "Solidity": r"\bsolidity\b",
}

SKILL_PATTERNS: dict[str, re.Pattern] = {
    name: re.compile(pattern, re.IGNORECASE) for name, pattern in _SKILL_SOURCES.items()
}

# ---------------------------------------------------------------------------
# Achievement templates, applied in order
# ---------------------------------------------------------------------------
_ACHIEVEMENT_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"(?:won|awarded|received|achieved|secured)\s+[^.]*"
        r"(?:hackathon|competition|challenge|contest)[^.]*",
        re.IGNORECASE,
    ),
    re.compile(r"(?:1st|2nd|3rd|first|second|third)\s+(?:place|prize|position|rank)[^.]*", re.IGNORECASE),
    re.compile(r"(?:winner|champion|finalist)[^.]*", re.IGNORECASE),
    re.compile(
        r"(?:built|developed|created)\s+[^.]*"
        r"(?:platform|system|application|app|website|tool)[^.]*",
        re.IGNORECASE,
    ),
]

# Extended patterns (strict profile only)
_PLACEMENT_LINE_RE = re.compile(
    r"(\d+(?:st|nd|rd|th)\s+(?:place|prize|position|rank).*?"
    r"(?:hackathon|competition|contest).*?)(?:\n|$)",
    re.IGNORECASE,
)
# Case-sensitive on purpose: needs a capitalised project name after the verb
_PROJECT_NAME_RE = re.compile(
    r"(?:built|developed|created|designed)\s+([A-Z][a-zA-Z]+(?:\s*-\s*[A-Za-z\s]+)?)"
)

# Notable items for the strict summary
_SIH_RE = re.compile(r"smart india hackathon[^.]*\d{4}[^.]*", re.IGNORECASE)
_PROJECT_DESC_RE = re.compile(
    r"(?:built|developed|created)\s+[^.]+(?:platform|system|application|tool)[^.]*",
    re.IGNORECASE,
)
_CERT_RE = re.compile(r"certified[^.]*|certification[^.]*", re.IGNORECASE)

MAX_STRENGTHS = 5
MAX_STRENGTH_CHARS = 120
MIN_STRENGTH_CHARS = 15
DEDUP_PREFIX_CHARS = 30

# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------
_YEAR_PATTERNS: list[re.Pattern] = [
    re.compile(r"(\d+)\+?\s*years?\s*(?:of)?\s*experience", re.IGNORECASE),
    re.compile(r"experience[:\s]*(\d+)\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\s*years?\s*(?:in|of|working)", re.IGNORECASE),
]

EXPERT_KEYWORDS = ("director", "vp", "chief")
SENIOR_KEYWORDS = ("senior", "lead", "manager")
MID_KEYWORDS = ("mid-level",)

DEFAULT_SKILLS = ["Communication", "Problem Solving"]
DEFAULT_STRENGTHS = ["Document submitted for evaluation"]
DEFAULT_IMPROVEMENTS = ["Consider adding certifications"]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def extract_skills(text: str) -> list[str]:
    """Return every skill whose pattern matches, in table order."""
    return [name for name, pattern in SKILL_PATTERNS.items() if pattern.search(text)]


def _append_unique(strengths: list[str], candidate: str) -> None:
    clean = candidate.strip()[:MAX_STRENGTH_CHARS]
    if len(clean) <= MIN_STRENGTH_CHARS:
        return
    prefix = clean[:DEDUP_PREFIX_CHARS]
    if any(prefix in s for s in strengths):
        return
    strengths.append(clean)


def extract_strengths(text: str, skill_count: int, extended: bool = False) -> list[str]:
    """Collect achievement phrases and synthetic strengths.

    Returns the full list; callers truncate to MAX_STRENGTHS for display.
    """
    text_lower = text.lower()
    strengths: list[str] = []

    if extended:
        for match in _PLACEMENT_LINE_RE.finditer(text):
            clean = match.group(0).strip()[:100]
            if len(clean) > 10:
                strengths.append(clean)

    for pattern in _ACHIEVEMENT_PATTERNS:
        for match in pattern.finditer(text):
            _append_unique(strengths, match.group(0))

    if extended:
        for match in _PROJECT_NAME_RE.finditer(text):
            phrase = match.group(0)
            prefix = phrase.lower()[:20]
            if not any(prefix in s.lower() for s in strengths):
                strengths.append(phrase.strip())

    if "team lead" in text_lower or "led a team" in text_lower:
        strengths.append("Leadership & Team Management Experience")
    if "intern" in text_lower:
        strengths.append("Industry Internship Experience")
    if skill_count >= 10:
        strengths.append("Diverse Technical Skill Set")

    return strengths


def extract_experience_years(text: str) -> int:
    """First matching year-count pattern wins; 0 when none match."""
    for pattern in _YEAR_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def classify_experience_level(
    text: str, years: int, skill_count: int, strength_count: int
) -> str:
    """Assign Entry/Mid/Senior/Expert in fixed precedence order."""
    text_lower = text.lower()
    if any(k in text_lower for k in EXPERT_KEYWORDS) or years >= 10:
        return "Expert"
    if any(k in text_lower for k in SENIOR_KEYWORDS) or years >= 5:
        return "Senior"
    if (
        years >= 2
        or any(k in text_lower for k in MID_KEYWORDS)
        or (skill_count >= 8 and strength_count >= 2)
    ):
        return "Mid"
    return "Entry"


def compute_heuristic_score(
    text: str,
    skill_count: int,
    strength_count: int,
    experience_level: str,
    profile: ScoringProfile,
) -> int:
    """Baseline 0-100 score, clamped to the profile's bounds."""
    text_lower = text.lower()
    score = profile.base
    score += min(profile.skill_cap, skill_count * profile.per_skill)
    score += min(profile.strength_cap, strength_count * profile.per_strength)
    score += profile.level_bonus.get(experience_level, 0)

    for threshold, bonus in profile.length_tiers:
        if len(text) > threshold:
            score += bonus

    for keywords, bonus in profile.education_bonuses:
        if any(k in text_lower for k in keywords):
            score += bonus

    return min(profile.max_score, max(profile.min_score, _round_half_up(score)))


def suggest_improvements(
    text: str, skill_count: int, strength_count: int, experience_years: int
) -> list[str]:
    text_lower = text.lower()
    improvements: list[str] = []
    if skill_count < 5:
        improvements.append("Add more technical skills")
    if strength_count < 2:
        improvements.append("Highlight more achievements and projects")
    if experience_years == 0:
        improvements.append("Specify years of experience")
    if "education" not in text_lower and "degree" not in text_lower:
        improvements.append("Include education details")
    if len(text) < 1000:
        improvements.append("Add more details to your document")
    return improvements or list(DEFAULT_IMPROVEMENTS)


def build_summary(
    text: str, skill_count: int, strengths: list[str], notable: bool = False
) -> str:
    if notable:
        items: list[str] = []
        items.extend(m.group(0) for m in list(_SIH_RE.finditer(text))[:2])
        items.extend(m.group(0) for m in list(_PROJECT_DESC_RE.finditer(text))[:2])
        items.extend(m.group(0) for m in list(_CERT_RE.finditer(text))[:1])
        summary = " • ".join(items[:3])[:500]
        if summary:
            return summary

    lead = strengths[0] if strengths else "Document reviewed for evaluation."
    return f"Document contains {skill_count} relevant skills. {lead}"


def extract_features(
    text: str, profile: str | ScoringProfile | None = None
) -> ExtractedFeatures:
    """Run every extraction stage over `text` with the given scoring profile."""
    scoring = get_profile(profile)
    text = text or ""

    skills = extract_skills(text)
    strengths = extract_strengths(text, len(skills), extended=scoring.extended_strengths)
    years = extract_experience_years(text)
    level = classify_experience_level(text, years, len(skills), len(strengths))
    score = compute_heuristic_score(text, len(skills), len(strengths), level, scoring)
    improvements = suggest_improvements(text, len(skills), len(strengths), years)
    summary = build_summary(text, len(skills), strengths, notable=scoring.notable_summary)

    logger.debug(
        "Extracted %d skills, %d strengths, %d years (%s), score %d [%s]",
        len(skills), len(strengths), years, level, score, scoring.name,
    )

    return ExtractedFeatures(
        skills=skills or list(DEFAULT_SKILLS),
        strengths=strengths[:MAX_STRENGTHS] or list(DEFAULT_STRENGTHS),
        experience_years=years,
        experience_level=level,
        heuristic_score=score,
        improvements=improvements,
        summary=summary,
        skill_count=len(skills),
        strength_count=len(strengths),
        profile=scoring.name,
    )

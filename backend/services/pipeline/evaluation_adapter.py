"""External Evaluation Adapter: Gemini evaluation with heuristic fallback.

    document_text
      ├─ prompt_builder.build_evaluation_prompt()  (first 6000 chars + file name)
      ├─ gemini_client.generate_text()             (bounded timeout)
      ├─ extract_json_object()                     (first balanced {...})
      ├─ ModelEvaluation.model_validate()          (all fields optional)
      └─ merge_evaluation()                        (per-field defaults from features)

Any failure along the way yields heuristic_scorer.fallback_evaluation(); the
adapter never raises to its caller.
"""

import json
import logging
import math

from pydantic import ValidationError

from config import settings
from models.schemas.evaluation import Evaluation, ModelEvaluation
from models.schemas.features import ExtractedFeatures
from services import gemini_client, prompt_builder
from services.pipeline.errors import EvaluationParseError
from services.pipeline.heuristic_scorer import fallback_evaluation, recommend_shortlist

logger = logging.getLogger(__name__)

MIN_MODEL_SKILLS = 3
MIN_MODEL_STRENGTHS = 2

_LEVELS = {level.lower(): level for level in ("Entry", "Mid", "Senior", "Expert")}
_RECOMMENDATIONS = {rec.lower(): rec for rec in ("Yes", "No", "Maybe")}


def extract_json_object(text: str) -> dict:
    """Parse the first balanced `{...}` block in `text`.

    Braces inside JSON string literals are ignored when balancing.
    """
    start = text.find("{")
    if start == -1:
        raise EvaluationParseError("No JSON object found in model response")

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                try:
                    data = json.loads(text[start : i + 1])
                except json.JSONDecodeError as e:
                    raise EvaluationParseError(f"Malformed JSON in model response: {e}") from e
                if not isinstance(data, dict):
                    raise EvaluationParseError("Model response JSON is not an object")
                return data

    raise EvaluationParseError("Unbalanced JSON object in model response")


def parse_model_response(text: str) -> ModelEvaluation:
    data = extract_json_object(text)
    try:
        return ModelEvaluation.model_validate(data)
    except ValidationError as e:
        raise EvaluationParseError(f"Model response does not match schema: {e}") from e


def merge_evaluation(parsed: ModelEvaluation, features: ExtractedFeatures) -> Evaluation:
    """Fill every missing or deficient model field from the extracted features."""
    if parsed.score is None or not math.isfinite(parsed.score):
        score = features.heuristic_score
    else:
        score = min(100, max(0, math.floor(parsed.score + 0.5)))

    level = _LEVELS.get((parsed.experience_level or "").strip().lower(), features.experience_level)

    if parsed.experience_years is None or not math.isfinite(parsed.experience_years) or parsed.experience_years < 0:
        years = features.experience_years
    else:
        years = int(parsed.experience_years)

    recommendation = _RECOMMENDATIONS.get(
        (parsed.shortlist_recommendation or "").strip().lower(),
        recommend_shortlist(score),
    )

    skills = parsed.skills if parsed.skills and len(parsed.skills) >= MIN_MODEL_SKILLS else features.skills
    strengths = (
        parsed.strengths
        if parsed.strengths and len(parsed.strengths) >= MIN_MODEL_STRENGTHS
        else features.strengths
    )
    improvements = parsed.improvements if parsed.improvements else features.improvements
    reasoning = parsed.reasoning if parsed.reasoning and parsed.reasoning.strip() else features.summary

    return Evaluation(
        score=score,
        skills=list(skills),
        experience_level=level,
        experience_years=years,
        shortlist_recommendation=recommendation,
        strengths=list(strengths),
        improvements=list(improvements),
        reasoning=reasoning,
        source="model",
    )


async def evaluate_with_model(
    document_text: str,
    file_name: str,
    features: ExtractedFeatures,
) -> Evaluation:
    """Ask the model for an evaluation, falling back to the heuristic one.

    Makes one call plus up to `settings.evaluation_max_retries` retries.
    """
    prompt = prompt_builder.build_evaluation_prompt(document_text, file_name)
    attempts = 1 + max(0, settings.evaluation_max_retries)

    for attempt in range(1, attempts + 1):
        try:
            raw = await gemini_client.generate_text(
                prompt,
                system_instruction=prompt_builder.EVALUATION_SYSTEM_INSTRUCTION,
                timeout=settings.evaluation_timeout_seconds,
            )
            if raw is None:
                logger.warning("Model evaluation unavailable for %s (attempt %d/%d)", file_name, attempt, attempts)
                continue
            evaluation = merge_evaluation(parse_model_response(raw), features)
            logger.info("Model evaluation for %s: score %d", file_name, evaluation.score)
            return evaluation
        except EvaluationParseError as e:
            logger.warning("Unusable model response for %s (attempt %d/%d): %s", file_name, attempt, attempts, e)
        except Exception:
            logger.exception("Model evaluation failed for %s (attempt %d/%d)", file_name, attempt, attempts)

    logger.warning("Using heuristic evaluation for %s", file_name)
    return fallback_evaluation(features)

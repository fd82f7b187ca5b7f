"""Maps internal fairness statuses to the public Fair/Pending/Unfair vocabulary."""

from models.schemas.public_status import PublicStatus

_STATUS_MAP: dict[str, PublicStatus] = {
    "verified": PublicStatus(status="Fair", emoji="🟢", message="Verified = Fair"),
    "biased": PublicStatus(status="Unfair", emoji="🔴", message="Biased = Unfair"),
    "under_review": PublicStatus(status="Pending", emoji="🟡", message="Under Review = Pending"),
}

DEFAULT_STATUS = "under_review"


def map_to_public_status(internal_status: str) -> PublicStatus:
    """Unknown statuses map to Pending."""
    mapped = _STATUS_MAP.get(internal_status, _STATUS_MAP[DEFAULT_STATUS])
    return mapped.model_copy()

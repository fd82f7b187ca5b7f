"""Tests for the public status mapping."""

import pytest

from services.pipeline.status_mapper import map_to_public_status


@pytest.mark.parametrize(
    "internal, status, emoji, message",
    [
        ("verified", "Fair", "🟢", "Verified = Fair"),
        ("biased", "Unfair", "🔴", "Biased = Unfair"),
        ("under_review", "Pending", "🟡", "Under Review = Pending"),
    ],
)
def test_mapping(internal, status, emoji, message):
    public = map_to_public_status(internal)
    assert (public.status, public.emoji, public.message) == (status, emoji, message)


@pytest.mark.parametrize("internal", ["", "unknown", "VERIFIED", "Fair"])
def test_unknown_defaults_to_pending(internal):
    assert map_to_public_status(internal) == map_to_public_status("under_review")


def test_repeated_lookups_are_stable():
    first = map_to_public_status("verified")
    first.message = "mutated by caller"
    assert map_to_public_status("verified").message == "Verified = Fair"
    assert map_to_public_status("verified") == map_to_public_status("verified")

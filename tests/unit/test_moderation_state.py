"""Moderation state machine for testimonials."""
import itertools
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from lingam.app.schemas.testimonials import (
    ModerationState,
    Testimonial as StoredTestimonial,
    TestimonialCreate as NewTestimonial,
)


def test_approval_toggle_transitions():
    assert ModerationState.UNREVIEWED.toggle_approval() is ModerationState.APPROVED_HIDDEN
    assert ModerationState.APPROVED_HIDDEN.toggle_approval() is ModerationState.UNREVIEWED
    # Withdrawing approval also drops the homepage flag
    assert ModerationState.APPROVED_FEATURED.toggle_approval() is ModerationState.UNREVIEWED


def test_homepage_toggle_transitions():
    assert ModerationState.APPROVED_HIDDEN.toggle_homepage() is ModerationState.APPROVED_FEATURED
    assert ModerationState.APPROVED_FEATURED.toggle_homepage() is ModerationState.APPROVED_HIDDEN
    assert ModerationState.UNREVIEWED.toggle_homepage() is ModerationState.UNREVIEWED


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 6])
def test_homepage_implies_approved_for_any_toggle_sequence(length):
    for sequence in itertools.product(("approval", "homepage"), repeat=length):
        state = ModerationState.UNREVIEWED
        for step in sequence:
            state = state.toggle_approval() if step == "approval" else state.toggle_homepage()
            assert not state.show_on_homepage or state.is_approved, sequence


def test_testimonial_exposes_derived_flags():
    testimonial = StoredTestimonial(
        id="1",
        customer_name="B",
        content="Great",
        rating=5,
        submitted_at=datetime.now(timezone.utc),
        moderation=ModerationState.APPROVED_FEATURED,
    )
    dumped = testimonial.model_dump()
    assert dumped["is_approved"] is True
    assert dumped["show_on_homepage"] is True
    assert dumped["moderation"] == "approved_featured"


def test_submission_ignores_moderation_fields():
    payload = NewTestimonial.model_validate({
        "customer_name": "B",
        "content": "Great",
        "rating": 5,
        "is_approved": True,
        "show_on_homepage": True,
    })
    assert "is_approved" not in payload.model_dump()


def test_testimonial_is_immutable():
    testimonial = StoredTestimonial(
        id="1", customer_name="B", content="Great", rating=5,
        submitted_at=datetime.now(timezone.utc),
    )
    with pytest.raises(ValidationError):
        testimonial.moderation = ModerationState.APPROVED_FEATURED

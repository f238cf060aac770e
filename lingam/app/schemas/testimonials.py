"""
Testimonial moderation schemas.

Moderation is a single tri-state value instead of two independent flags, so a
testimonial can only be featured on the homepage once it is approved.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field


class ModerationState(str, Enum):
    UNREVIEWED = "unreviewed"
    APPROVED_HIDDEN = "approved_hidden"
    APPROVED_FEATURED = "approved_featured"

    @property
    def is_approved(self) -> bool:
        return self is not ModerationState.UNREVIEWED

    @property
    def show_on_homepage(self) -> bool:
        return self is ModerationState.APPROVED_FEATURED

    def toggle_approval(self) -> "ModerationState":
        """Approve an unreviewed entry; withdrawing approval also unfeatures it."""
        if self is ModerationState.UNREVIEWED:
            return ModerationState.APPROVED_HIDDEN
        return ModerationState.UNREVIEWED

    def toggle_homepage(self) -> "ModerationState":
        """Flip homepage display. Unreviewed entries are left as they are."""
        if self is ModerationState.APPROVED_HIDDEN:
            return ModerationState.APPROVED_FEATURED
        if self is ModerationState.APPROVED_FEATURED:
            return ModerationState.APPROVED_HIDDEN
        return self


class TestimonialCreate(BaseModel):
    """Customer submission. Approval and display fields are ignored."""
    customer_name: str
    content: str
    rating: int
    image: Optional[str] = None


class Testimonial(TestimonialCreate):
    model_config = ConfigDict(frozen=True)

    id: str
    submitted_at: datetime
    moderation: ModerationState = ModerationState.UNREVIEWED

    @computed_field
    @property
    def is_approved(self) -> bool:
        return self.moderation.is_approved

    @computed_field
    @property
    def show_on_homepage(self) -> bool:
        return self.moderation.show_on_homepage

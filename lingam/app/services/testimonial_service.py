"""
Testimonial Moderation Service.

New submissions always start unreviewed. Approval and homepage display are
toggled by the back office; the tri-state ModerationState guarantees that
only approved testimonials can be featured.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from lingam.app.schemas.testimonials import ModerationState, Testimonial, TestimonialCreate
from lingam.app.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class TestimonialService:

    def __init__(self, store: EntityStore[Testimonial]):
        self.store = store

    async def add(self, payload: TestimonialCreate) -> Testimonial:
        testimonial = Testimonial(
            **payload.model_dump(),
            id=self.store.next_id(),
            submitted_at=datetime.now(timezone.utc),
            moderation=ModerationState.UNREVIEWED,
        )
        await self.store.add(testimonial)
        logger.info(f"Testimonial submitted: {testimonial.id} (rating={testimonial.rating})")
        return testimonial

    async def get_all(self) -> List[Testimonial]:
        return self.store.all()

    async def get_approved(self) -> List[Testimonial]:
        return self.store.filter(lambda t: t.is_approved)

    async def get_homepage(self) -> List[Testimonial]:
        return self.store.filter(lambda t: t.is_approved and t.show_on_homepage)

    async def toggle_approval(self, testimonial_id: str) -> Optional[Testimonial]:
        """Approve or withdraw approval. Withdrawing also removes it from the homepage."""
        updated = await self.store.update(
            testimonial_id,
            lambda t: t.model_copy(update={"moderation": t.moderation.toggle_approval()}),
        )
        if updated is not None:
            logger.info(f"Testimonial {testimonial_id} moderation -> {updated.moderation.value}")
        return updated

    async def toggle_homepage_display(self, testimonial_id: str) -> Optional[Testimonial]:
        """Feature or unfeature an approved testimonial; unreviewed ones are returned unchanged."""

        def _toggle(t: Testimonial) -> Testimonial:
            state = t.moderation.toggle_homepage()
            if state is t.moderation:
                return t
            return t.model_copy(update={"moderation": state})

        updated = await self.store.update(testimonial_id, _toggle)
        if updated is not None and not updated.is_approved:
            logger.info(f"Homepage toggle ignored for unapproved testimonial {testimonial_id}")
        return updated

    async def delete(self, testimonial_id: str) -> bool:
        return await self.store.remove(testimonial_id)

    async def clear_all(self) -> bool:
        count = len(self.store)
        await self.store.clear()
        logger.warning(f"Cleared all testimonials ({count} removed)")
        return True

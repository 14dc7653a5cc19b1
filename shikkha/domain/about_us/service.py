"""About us service - upsert and read of the single about us document"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import AboutUs
from .repository import AboutUsRepository
from .schemas import AboutUsUpsert

logger = logging.getLogger(__name__)


class AboutUsService:
    """Service layer for the about us document"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AboutUsRepository()

    def create_or_update_about_us(self, data: AboutUsUpsert) -> AboutUs:
        """Replace the existing document, or create it on first write"""
        existing = self.repo.get_first(self.db)
        if existing is None:
            logger.info("📝 Creating about us document")
            return self.repo.create(self.db, **data.model_dump())

        logger.info(f"📝 Updating about us document {existing.id}")
        return self.repo.update(self.db, existing, **data.model_dump())

    def get_about_us(self) -> Optional[AboutUs]:
        return self.repo.get_first(self.db)

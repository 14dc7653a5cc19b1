"""About us repository - Database operations for the about us document"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import AboutUs


class AboutUsRepository:
    """Repository for about us database operations"""

    @staticmethod
    def get_first(db: Session) -> Optional[AboutUs]:
        return db.query(AboutUs).order_by(AboutUs.id.asc()).first()

    @staticmethod
    def create(db: Session, **data) -> AboutUs:
        about_us = AboutUs(**data)
        db.add(about_us)
        db.commit()
        db.refresh(about_us)
        return about_us

    @staticmethod
    def update(db: Session, about_us: AboutUs, **updates) -> AboutUs:
        for key, value in updates.items():
            if hasattr(about_us, key):
                setattr(about_us, key, value)

        db.commit()
        db.refresh(about_us)
        return about_us

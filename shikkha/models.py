from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.sql import func

from .database import Base


class AboutUs(Base):
    """Singleton "about us" page content; the service keeps at most one row"""

    __tablename__ = "about_us"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

"""About us domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AboutUsUpsert(BaseModel):
    """Schema for creating or replacing the about us document"""

    content: str


class AboutUsResponse(BaseModel):
    """Schema for about us response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

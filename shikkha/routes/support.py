"""
Support Routes - Users contacting the operator inbox
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, EmailStr, Field

from ..email_service import EmailService
from ..shared.responses import send_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/support", tags=["Support"])


class SupportRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)
    message: str = Field(min_length=1)


def get_email_service(request: Request) -> EmailService:
    """EmailService built at application wiring time"""
    return request.app.state.email_service


@router.post("")
async def send_support_request(
    data: SupportRequest,
    email_service: EmailService = Depends(get_email_service),
):
    """Forward a support message to the operator; delivery problems only show up in logs"""
    logger.info(f"📨 Support request from {data.email}")
    await email_service.send_support_message_email(
        user_email=data.email,
        user_name=data.name,
        message=data.message,
    )
    return send_response(message="Support request sent")

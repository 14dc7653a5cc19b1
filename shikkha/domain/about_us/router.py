"""About us router - FastAPI endpoints for the about us settings page"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.responses import send_response
from .schemas import AboutUsResponse, AboutUsUpsert
from .service import AboutUsService

router = APIRouter(prefix="/about-us", tags=["Settings"])


def get_about_us_service(db: Session = Depends(get_db)) -> AboutUsService:
    """Dependency injection for AboutUsService"""
    return AboutUsService(db)


@router.post("")
@router.put("")
async def create_or_update_about_us(
    data: AboutUsUpsert,
    service: AboutUsService = Depends(get_about_us_service),
):
    result = service.create_or_update_about_us(data)
    return send_response(
        message="About us updated successfully",
        data=AboutUsResponse.model_validate(result),
    )


@router.get("")
async def get_about_us(service: AboutUsService = Depends(get_about_us_service)):
    result = service.get_about_us()
    return send_response(
        message="About us fetched successfully",
        data=AboutUsResponse.model_validate(result) if result else None,
    )

"""Catalog router - FastAPI endpoints for services"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import Service, User
from .schemas import ServiceCreate, ServiceEnvelope, ServiceListResponse, ServiceResponse
from .service import CatalogService

router = APIRouter(prefix="/services", tags=["Services"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


def service_response(s: Service) -> ServiceResponse:
    return ServiceResponse(
        id=s.id,
        name=s.name,
        description=s.description,
        price=s.price,
        ownerId=s.owner_id,
        createdAt=s.created_at,
    )


@router.get("", response_model=ServiceListResponse)
async def list_services(service: CatalogService = Depends(get_catalog_service)):
    """List every service available for booking"""
    return ServiceListResponse(services=[service_response(s) for s in service.get_services()])


@router.post("", response_model=ServiceEnvelope, status_code=status.HTTP_201_CREATED)
async def create_service(
    data: ServiceCreate,
    current_user: User = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service),
):
    """Create a new service (ADMIN only)"""
    created = service.create_service(data, current_user)
    return ServiceEnvelope(service=service_response(created))

"""Catalog service - Business logic for services offered"""

import logging

from sqlalchemy.orm import Session

from ...authorization import Operation, enforce
from ...models import Service, User
from .repository import ServiceRepository
from .schemas import ServiceCreate

logger = logging.getLogger(__name__)


class CatalogService:
    """Service layer for the service catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository()

    def get_services(self) -> list[Service]:
        """All services, public"""
        return self.repo.get_services(self.db)

    def create_service(self, data: ServiceCreate, user: User) -> Service:
        """Publish a new service (ADMIN only)"""
        enforce(user, Operation.CREATE_SERVICE)

        service = self.repo.create_service(
            self.db,
            user.id,
            name=data.name,
            description=data.description,
            price=data.price,
        )
        logger.info(f"✅ Service {service.id} created by user {user.id}")
        return service

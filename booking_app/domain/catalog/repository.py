"""Service catalog repository - Database operations for services"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Service


class ServiceRepository:
    """Repository for service database operations"""

    @staticmethod
    def get_services(db: Session) -> list[Service]:
        return db.query(Service).order_by(Service.created_at.desc()).all()

    @staticmethod
    def get_service_by_id(db: Session, service_id: str) -> Optional[Service]:
        return db.get(Service, service_id)

    @staticmethod
    def create_service(db: Session, owner_id: str, **service_data) -> Service:
        service = Service(owner_id=owner_id, **service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

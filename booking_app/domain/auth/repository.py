"""User repository - Database operations for accounts"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Role, User


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
        return db.get(User, user_id)

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def has_role(db: Session, role: Role) -> bool:
        """True if at least one account holds ``role``"""
        return db.query(User.id).filter(User.role == role).first() is not None

    @staticmethod
    def create_user(db: Session, **user_data) -> User:
        """Create a new user. Raises IntegrityError if the email is taken."""
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

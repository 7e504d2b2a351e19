from typing import Optional
from sqlmodel import Session, select
from fastapi import HTTPException, status

from storefront.core.logger import get_logger
from storefront.core.security import get_password_hash, verify_password, create_access_token
from storefront.models.user import User

logger = get_logger(__name__)

class AuthService:
    def __init__(self, session: Session):
        self.session = session

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email.lower())).first()

    def get_user(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def register_user(self, email: str, password: str, name: Optional[str] = None) -> User:
        if self.get_user_by_email(email):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        user = User(
            email=email.lower(),
            name=name,
            password_hash=get_password_hash(password),
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("user registered", user_id=user.id)
        return user

    def authenticate_user(self, email: str, password: str) -> tuple[Optional[User], Optional[str]]:
        user = self.get_user_by_email(email)
        if not user:
            return None, "User not found. Please check your email or register a new account."
        if not verify_password(password, user.password_hash):
            return None, "Incorrect password. Please try again."
        return user, None

    def issue_token(self, user: User) -> str:
        return create_access_token(user.id)

"""
Credential store: user accounts keyed by email with hashed passwords.
"""
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import PasswordHasher
from .errors import DuplicateEmail, InvalidCredentials, UserNotFound, ValidationError
from .models import User, parse_id

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, db: Session, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def register(self, email: str, password: str) -> str:
        """
        Create a user account and return its id.

        Raises:
            ValidationError: email or password is blank
            DuplicateEmail: an account with this email already exists
        """
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")

        if self.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(email=email, password_hash=self.hasher.hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise DuplicateEmail() from exc

        logger.info("Registered user: user_id=%s", user.id)
        return user.id

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: str) -> Optional[User]:
        canonical = parse_id(user_id)
        if canonical is None:
            return None
        return self.db.query(User).filter(User.id == canonical).first()

    def check_credentials(self, email: str, password: str) -> User:
        user = self.find_by_email(email)
        if user is None:
            raise UserNotFound()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login rejected, bad password: user_id=%s", user.id)
            raise InvalidCredentials()
        return user

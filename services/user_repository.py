"""
User Repository - Database access layer for user accounts and login.
"""

import logging
from datetime import datetime
from typing import List, Optional, Dict
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from database.models import User

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when an email address already belongs to a user."""


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: Session, company_id: str = None):
        self.session = session
        self.company_id = company_id

    def list_users(self, active_only: bool = True) -> List[Dict]:
        """List the company's users."""
        query = self.session.query(User).filter(User.company_id == self.company_id)
        if active_only:
            query = query.filter(User.is_active == True)
        return [u.to_dict() for u in query.order_by(User.name).all()]

    def get_user(self, user_id: str) -> Optional[Dict]:
        """Get a user by ID."""
        user = self.session.query(User).filter(User.id == user_id).first()
        return user.to_dict() if user else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email (returns model for auth)."""
        return self.session.query(User).filter(User.email == email.strip().lower()).first()

    def create_user(self, data: Dict) -> Dict:
        """Create a new user. Emails are stored lowercased."""
        email = data['email'].strip().lower()
        if self.get_user_by_email(email):
            raise DuplicateEmailError(f"User with email {email} already exists")

        user = User(
            company_id=data.get('companyId') or self.company_id,
            company_name=data.get('companyName'),
            email=email,
            name=data['name'],
            password_hash=generate_password_hash(data['password'], method='pbkdf2:sha256'),
            role=data.get('role', 'viewer'),
            is_active=data.get('isActive', True),
        )
        self.session.add(user)
        self.session.flush()
        logger.info(f"Created user: {user.id} ({user.role})")
        return user.to_dict()

    def verify_password(self, user: User, password: str) -> bool:
        """Verify a user's password."""
        return check_password_hash(user.password_hash, password)

    def update_last_login(self, user_id: str) -> None:
        """Update user's last login timestamp."""
        user = self.session.query(User).filter(User.id == user_id).first()
        if user:
            user.last_login = datetime.utcnow()
            self.session.flush()

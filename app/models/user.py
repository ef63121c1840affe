"""
User model for authentication.

Users log in with username/password and receive a JWT carrying their
username and admin flag.
"""

from sqlalchemy import Boolean, Column, String, Text
from app.core.database import Base


class User(Base):
    """
    User account. is_admin grants access to the admin-only routes.
    """
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)

    # Authentication credentials (bcrypt hash)
    password = Column(Text, nullable=False)

    # User profile
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)

    is_admin = Column(Boolean, default=False, nullable=False)  # Admin role for protected endpoints

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"

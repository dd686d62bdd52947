"""
User model - accounts allowed to call the translation API
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
import uuid

from app.core.database import Base


class User(Base):
    """API user with a hashed password"""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"

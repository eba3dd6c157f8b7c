from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from hypot.models.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(12), primary_key=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    password = Column(String(255), nullable=False)  # salted hash, never the plain text
    premium = Column(Boolean, nullable=False, default=False)
    admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # One user → many properties / sessions
    properties = relationship("Property", back_populates="owner", order_by="Property.created_at")
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")

    @property
    def owned(self) -> list[str]:
        return [p.id for p in self.properties]

    def owns(self, prop) -> bool:
        return prop.owner_id == self.id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "premium": bool(self.premium),
            "admin": bool(self.admin),
            "owned": self.owned,
        }


class UserSession(Base):
    __tablename__ = "sessions"

    id = Column(String(12), primary_key=True)
    token = Column(String(32), unique=True, index=True, nullable=False)
    user_id = Column(String(12), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="sessions")

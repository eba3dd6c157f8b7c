from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from hypot.models.database import Base


class Property(Base):
    __tablename__ = "data"

    id = Column(String(12), primary_key=True)
    name = Column(String, nullable=False)
    file = Column(String, nullable=False)          # reference to the stored file
    expires = Column(DateTime, nullable=True)
    public = Column(Boolean, nullable=False, default=False)
    shared = Column(JSON, nullable=False, default=list)  # user ids with read access
    created_at = Column(DateTime, default=datetime.utcnow)

    owner_id = Column(String(12), ForeignKey("users.id"), nullable=False, index=True)

    # Many properties → one owner (User)
    owner = relationship("User", back_populates="properties")
    pointers = relationship("Pointer", back_populates="property")

    def visible_to(self, user) -> bool:
        if self.public:
            return True
        if user.id in (self.shared or []):
            return True
        return user.owns(self)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner": self.owner_id,
            "name": self.name,
            "file": self.file,
            "expires": self.expires,
            "public": bool(self.public),
            "shared": list(self.shared or []),
            "pointers": [p.address for p in self.pointers],
        }

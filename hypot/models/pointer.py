from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from hypot.models.database import Base


class Pointer(Base):
    __tablename__ = "pointers"

    id = Column(String(12), primary_key=True)
    address = Column(String, unique=True, index=True, nullable=False)  # e.g. "docs.alice.hypot"
    destination = Column(String(12), ForeignKey("data.id"), nullable=False, index=True)

    property = relationship("Property", back_populates="pointers")

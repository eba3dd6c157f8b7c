from hypot.models.database import Base, Database
from hypot.models.pointer import Pointer
from hypot.models.property import Property
from hypot.models.user import User, UserSession

__all__ = ["Base", "Database", "Pointer", "Property", "User", "UserSession"]

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hypot.core.errors import InvalidPointer, NotPremium, PointerTaken, PropertyNotFound
from hypot.core.results import operation
from hypot.core.security import unique_id
from hypot.models.pointer import Pointer
from hypot.models.property import Property
from hypot.services.identity import authenticate

logger = logging.getLogger(__name__)

POINTER_SUFFIX = "hypot"  # aliases look like "<custom>.<username>.hypot"


def validate_pointer(pointer: str, username: str) -> bool:
    parts = pointer.split(".")
    if len(parts) != 3:
        return False
    if parts[1] != username:
        return False
    if parts[2] != POINTER_SUFFIX:
        return False
    return True


@operation("adding pointer")
def add_pointer(db: Session, owner_id: str, session_token: str, property_id: str, pointer: str, id_attempts: int = 16):
    user = authenticate(db, owner_id, session_token)
    if not user.premium:
        raise NotPremium()

    prop = db.query(Property).filter(Property.id == property_id).first()
    if not prop or not prop.visible_to(user):
        raise PropertyNotFound()
    if not user.admin and not validate_pointer(pointer, user.username):
        raise InvalidPointer()
    # a property id would shadow the alias on lookup
    if db.query(Pointer).filter(Pointer.address == pointer).first() or db.get(Property, pointer):
        raise PointerTaken()

    new_pointer = Pointer(
        id=unique_id(db, Pointer, id_attempts),
        address=pointer,
        destination=prop.id,
    )
    db.add(new_pointer)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if db.query(Pointer).filter(Pointer.address == pointer).first():
            raise PointerTaken()
        raise

    logger.info(f"Pointer {pointer} -> {prop.id}")
    return {"id": new_pointer.id, "address": new_pointer.address, "destination": new_pointer.destination}

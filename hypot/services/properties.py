import logging
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from hypot.core.errors import PropertyNotFound
from hypot.core.results import operation
from hypot.core.security import unique_id
from hypot.models.pointer import Pointer
from hypot.models.property import Property
from hypot.services.identity import authenticate

logger = logging.getLogger(__name__)


def find_property(db: Session, query: str) -> Optional[Property]:
    # ids first, then aliases
    prop = db.query(Property).filter(Property.id == query).first()
    if prop:
        return prop

    pointer = db.query(Pointer).filter(Pointer.address == query).first()
    if not pointer:
        return None
    return db.query(Property).filter(Property.id == pointer.destination).first()


def visible_property(db: Session, user, query: str) -> Property:
    prop = find_property(db, query)
    if not prop or not prop.visible_to(user):
        raise PropertyNotFound()
    return prop


@operation("registering property")
def register_property(
    db: Session,
    owner_id: str,
    session_token: str,
    name: str,
    file: str,
    public: bool,
    access_list: Iterable[str] = (),
    expiry: Optional[datetime] = None,
    id_attempts: int = 16,
):
    user = authenticate(db, owner_id, session_token)

    prop = Property(
        id=unique_id(db, Property, id_attempts),
        name=name,
        file=file,
        expires=expiry,
        public=bool(public),
        shared=list(access_list or []),
    )
    # attaching through the relationship puts it on the owned list in the same commit
    user.properties.append(prop)
    db.commit()

    logger.info(f"Registered property {prop.id} for {user.username}")
    return prop.to_dict()


@operation("getting property")
def get_property(db: Session, requester_id: str, session_token: str, query: str):
    user = authenticate(db, requester_id, session_token)
    return visible_property(db, user, query).to_dict()

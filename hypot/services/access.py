import logging
from typing import Iterable

from sqlalchemy.orm import Session

from hypot.core.errors import NotOwner, PropertyNotFound
from hypot.core.results import operation
from hypot.models.property import Property
from hypot.services.identity import authenticate

logger = logging.getLogger(__name__)


@operation("updating access list")
def update_access_list(db: Session, owner_id: str, session_token: str, property_id: str, access_list: Iterable[str]):
    user = authenticate(db, owner_id, session_token)

    prop = db.query(Property).filter(Property.id == property_id).first()
    if not prop or not prop.visible_to(user):
        raise PropertyNotFound()
    if not user.owns(prop):
        raise NotOwner()

    prop.shared = list(access_list or [])
    db.commit()

    logger.info(f"Access list of {prop.id} now has {len(prop.shared)} users")
    return prop.to_dict()

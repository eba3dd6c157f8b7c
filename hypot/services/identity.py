import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hypot.core.errors import IncorrectPassword, SessionNotFound, UserExists, UserNotFound
from hypot.core.results import operation
from hypot.core.security import generate_session_token, hash_password, unique_id, verify_password
from hypot.models.user import User, UserSession

logger = logging.getLogger(__name__)


def authenticate(db: Session, user_id: str, session_token: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFound()

    session = (
        db.query(UserSession)
        .filter(UserSession.user_id == user.id, UserSession.token == session_token)
        .first()
    )
    if not session:
        raise SessionNotFound()
    return user


@operation("registering user")
def register_user(db: Session, username: str, name: str, password: str, hash_method: str = "scrypt", id_attempts: int = 16):
    existing_user = db.query(User).filter(User.username == username).first()
    if existing_user:
        raise UserExists()

    new_user = User(
        id=unique_id(db, User, id_attempts),
        username=username,
        name=name,
        password=hash_password(password, hash_method),
        premium=False,
        admin=False,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration of the same name
        db.rollback()
        if db.query(User).filter(User.username == username).first():
            raise UserExists()
        raise

    logger.info(f"Registered: {username}")
    return new_user.to_dict()


@operation("logging in user")
def login_user(db: Session, username: str, password: str, id_attempts: int = 16):
    user = db.query(User).filter(User.username == username).first()
    if not user:
        raise UserNotFound()
    if not verify_password(user.password, password):
        raise IncorrectPassword()

    session = UserSession(
        id=unique_id(db, UserSession, id_attempts),
        token=generate_session_token(),
        user_id=user.id,
    )
    db.add(session)
    db.commit()

    logger.info(f"Logged in: {username}")
    return {"id": user.id, "session": session.token}


@operation("logging out user")
def logout_user(db: Session, user_id: str, session_token: str):
    user = authenticate(db, user_id, session_token)

    # only the presented session goes, the user's other sessions stay
    db.query(UserSession).filter(
        UserSession.user_id == user.id, UserSession.token == session_token
    ).delete(synchronize_session=False)
    db.commit()

    logger.info(f"Logged out: {user.username}")


@operation("getting user data")
def get_user_data(db: Session, user_id: str, session_token: str):
    user = authenticate(db, user_id, session_token)
    return user.owned

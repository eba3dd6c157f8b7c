# hypot/core/security.py
import secrets

from werkzeug.security import check_password_hash, generate_password_hash

ID_ALPHABET = "0123456789ABCDEF"
ID_LENGTH = 12

TOKEN_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
TOKEN_LENGTH = 32


def generate_id() -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def generate_session_token() -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))


def unique_id(db, model, attempts: int = 16) -> str:
    """Draw identifiers until one is not yet used as ``model.id``."""
    for _ in range(attempts):
        candidate = generate_id()
        if db.get(model, candidate) is None:
            return candidate
    raise RuntimeError(f"could not find a free {model.__tablename__} id after {attempts} attempts")


def hash_password(password: str, method: str = "scrypt") -> str:
    return generate_password_hash(password, method=method)


def verify_password(hashed: str, password: str) -> bool:
    return check_password_hash(hashed, password)

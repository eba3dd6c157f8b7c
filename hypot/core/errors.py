# hypot/core/errors.py
from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = -1
    INTERNAL = 0
    USER_EXISTS = 1
    USER_NOT_FOUND = 2
    INCORRECT_PASSWORD = 3
    SESSION_NOT_FOUND = 4
    INVALID_SESSION_TOKEN = 5  # deprecated, kept so the numbering stays stable
    NOT_PREMIUM = 6
    PROPERTY_NOT_FOUND = 7
    NOT_OWNER = 8
    INVALID_POINTER = 9
    POINTER_TAKEN = 10


MESSAGES = {
    ErrorCode.INTERNAL: "An error occurred.",
    ErrorCode.USER_EXISTS: "User already exists.",
    ErrorCode.USER_NOT_FOUND: "User does not exist.",
    ErrorCode.INCORRECT_PASSWORD: "Incorrect password.",
    ErrorCode.SESSION_NOT_FOUND: "Session does not exist.",
    ErrorCode.INVALID_SESSION_TOKEN: "Invalid session token.",
    ErrorCode.NOT_PREMIUM: "User does not have premium access.",
    ErrorCode.PROPERTY_NOT_FOUND: "Property does not exist.",
    ErrorCode.NOT_OWNER: "User does not own the property.",
    ErrorCode.INVALID_POINTER: "Invalid pointer format.",
    ErrorCode.POINTER_TAKEN: "Pointer already exists.",
}


class HypotError(Exception):
    """Base class for failures that are reported to the caller by code."""

    code = ErrorCode.INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or MESSAGES[self.code]
        super().__init__(self.message)


class UserExists(HypotError):
    code = ErrorCode.USER_EXISTS


class UserNotFound(HypotError):
    code = ErrorCode.USER_NOT_FOUND


class IncorrectPassword(HypotError):
    code = ErrorCode.INCORRECT_PASSWORD


class SessionNotFound(HypotError):
    code = ErrorCode.SESSION_NOT_FOUND


class NotPremium(HypotError):
    code = ErrorCode.NOT_PREMIUM


class PropertyNotFound(HypotError):
    """Also raised when the requester may not see the property."""

    code = ErrorCode.PROPERTY_NOT_FOUND


class NotOwner(HypotError):
    code = ErrorCode.NOT_OWNER


class InvalidPointer(HypotError):
    code = ErrorCode.INVALID_POINTER


class PointerTaken(HypotError):
    code = ErrorCode.POINTER_TAKEN

# hypot/core/results.py
"""
Result envelope returned by every service operation.

``{status, code, message?, data?}`` where ``code == -1`` is success,
``code == 0`` an unexpected fault and positive codes are domain failures.
"""

import functools
import logging
from typing import Any, Optional

from pydantic import BaseModel

from hypot.core.errors import MESSAGES, ErrorCode, HypotError

logger = logging.getLogger(__name__)


class Result(BaseModel):
    status: bool
    code: ErrorCode
    message: Optional[str] = None
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None) -> "Result":
        return cls(status=True, code=ErrorCode.SUCCESS, data=data)

    @classmethod
    def fail(cls, code: ErrorCode, message: Optional[str] = None) -> "Result":
        return cls(status=False, code=code, message=message or MESSAGES[code])

    @classmethod
    def from_error(cls, error: HypotError) -> "Result":
        return cls.fail(error.code, error.message)

    def envelope(self) -> dict:
        """JSON-ready dict with the optional fields left out when unset."""
        return self.model_dump(mode="json", exclude_none=True)


def operation(action: str):
    """
    Run a service function at the component boundary.

    The wrapped function takes the SQLAlchemy session first and returns its
    success payload. Domain errors become failed results, anything else is
    logged and reported as code 0. The session is rolled back on any failure.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(db, *args, **kwargs) -> Result:
            try:
                data = func(db, *args, **kwargs)
            except HypotError as e:
                db.rollback()
                return Result.from_error(e)
            except Exception as e:
                db.rollback()
                logger.exception(f"Error occurred while {action}: {e}")
                return Result.fail(ErrorCode.INTERNAL)
            return Result.ok(data)

        return wrapper

    return decorator

from fastapi import Request

from hypot.core.config import Settings


# DB session dependency, one session per request
def get_db(request: Request):
    with request.app.state.database.session() as db:
        yield db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

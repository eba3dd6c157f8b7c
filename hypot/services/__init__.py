from hypot.services.access import update_access_list
from hypot.services.identity import get_user_data, login_user, logout_user, register_user
from hypot.services.pointers import add_pointer, validate_pointer
from hypot.services.properties import get_property, register_property

__all__ = [
    "add_pointer",
    "get_property",
    "get_user_data",
    "login_user",
    "logout_user",
    "register_property",
    "register_user",
    "update_access_list",
    "validate_pointer",
]

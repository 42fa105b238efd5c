"""Resource namespaces hanging off the Facebook client."""

from .events import Events
from .friends import Friends
from .users import Users

__all__ = [
    "Events",
    "Friends",
    "Users",
]

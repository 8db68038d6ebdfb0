"""Database models"""

from mybot_api.models.restaurant import Restaurant
from mybot_api.models.call import Call

__all__ = [
    "Restaurant",
    "Call",
]

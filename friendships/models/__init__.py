from .user import User
from .friendship import Friendship, FriendshipQuerySet

__all__ = [
    "User",
    "Friendship",
    "FriendshipQuerySet",
]

from .activity import is_active, active_edges
from .resolver import FriendCache, RelationshipResolver, default_resolver
from .friendship import FriendshipService

__all__ = [
    "is_active",
    "active_edges",
    "FriendCache",
    "RelationshipResolver",
    "default_resolver",
    "FriendshipService",
]

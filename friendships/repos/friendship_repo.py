"""Repository helpers for friendship edges."""

from typing import Any, List

from django.utils import timezone

from friendships.db_accessor import DB_Accessor
from friendships.models.friendship import Friendship

PIVOT_FIELDS = ("name", "other_name", "start", "end")
EDGE_ORDER = ("created_at", "id")
EDGE_USERS = ("source", "target")


class FriendshipRepo(DB_Accessor):
    """Store contract for friendship edges; every read skips soft-deleted rows."""
    def __init__(self) -> None:
        """Initialise with the Friendship model."""
        super().__init__(Friendship)

    def _edges(self, **filters: Any) -> List[Friendship]:
        return self.list(filters=filters, order_by=EDGE_ORDER, related=EDGE_USERS)

    def insert_edge(self, source_id, target_id, **pivot: Any) -> Friendship:
        """Create a pending edge from ``source_id`` to ``target_id``."""
        unknown = set(pivot) - set(PIVOT_FIELDS)
        if unknown:
            raise TypeError(f"Unknown pivot fields: {', '.join(sorted(unknown))}")
        data = {key: value for key, value in pivot.items() if value is not None}
        return self.create(source_id=source_id, target_id=target_id, **data)

    def update_edge(self, edge_id, **changes: Any) -> int:
        """Apply field changes to a live edge; return rows updated."""
        changes.setdefault("updated_at", timezone.now())
        return self.update({"pk": edge_id}, **changes)

    def approve_edge(self, edge_id, when) -> int:
        """Stamp ``approved_at`` on a live edge in one UPDATE; return rows updated."""
        return self.update({"pk": edge_id}, approved_at=when, updated_at=when)

    def soft_delete_edge(self, edge_id, when) -> int:
        """Terminate a live edge; return rows updated."""
        return self.soft_delete({"pk": edge_id}, when)

    def query_outgoing(self, user_id) -> List[Friendship]:
        """Live edges the user initiated, any approval state."""
        return self._edges(source_id=user_id)

    def query_incoming(self, user_id, *, approved_only: bool) -> List[Friendship]:
        """Live edges pointing at the user, optionally only approved ones."""
        if approved_only:
            return self._edges(target_id=user_id, approved_at__isnull=False)
        return self._edges(target_id=user_id)

    def query_incoming_pending(self, user_id) -> List[Friendship]:
        """Live, unapproved edges pointing at the user."""
        return self._edges(target_id=user_id, approved_at__isnull=True)

    def has_outstanding(self, source_id, target_id) -> bool:
        """Return True if a live edge exists for the ordered pair."""
        return self.exists(source_id=source_id, target_id=target_id)

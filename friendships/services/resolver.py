"""Resolve a user's friend edges from both directions, with an explicit cache."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from django.utils import timezone

from friendships.conf import friendship_setting
from friendships.models import Friendship
from friendships.repos.friendship_repo import FriendshipRepo
from .activity import active_edges

logger = logging.getLogger(__name__)

FRIENDS = "friends"
OUTGOING = "outgoing"
INCOMING_APPROVED = "incoming_approved"

# FriendCache ttl marker: read FRIENDSHIPS["CACHE_TTL"] on every lookup.
TTL_FROM_SETTINGS = object()


def _key(user):
    """Return the identity key for a user instance or a bare id."""
    return getattr(user, "pk", user)


class FriendCache:
    """
    Process-local map of user id -> resolved relation lists.

    Entries older than ``ttl`` seconds are treated as missing; ``ttl=None``
    keeps them until invalidated. With ``TTL_FROM_SETTINGS`` the expiry
    follows the current ``CACHE_TTL`` setting. Nothing is shared across
    processes.
    """

    def __init__(self, ttl: Any = None, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: Dict[Any, Dict[str, Tuple[float, List[Friendship]]]] = {}

    @property
    def ttl(self) -> Optional[float]:
        if self._ttl is TTL_FROM_SETTINGS:
            return friendship_setting("CACHE_TTL")
        return self._ttl

    def get(self, user_id, relation: str) -> Optional[List[Friendship]]:
        stored = self._entries.get(user_id, {}).get(relation)
        if stored is None:
            return None
        stored_at, edges = stored
        ttl = self.ttl
        if ttl is not None and self._clock() - stored_at > ttl:
            self._entries[user_id].pop(relation, None)
            return None
        return edges

    def set(self, user_id, relation: str, edges: List[Friendship]) -> None:
        self._entries.setdefault(user_id, {})[relation] = (self._clock(), edges)

    def invalidate(self, user_id) -> None:
        """Drop every cached relation for ``user_id``; missing entries are fine."""
        self._entries.pop(user_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, user_id) -> bool:
        return bool(self._entries.get(user_id))


class RelationshipResolver:
    """Merge outgoing and incoming-approved edges into a user's friend set."""

    def __init__(self, repo: FriendshipRepo | None = None, cache: FriendCache | None = None) -> None:
        self.repo = repo or FriendshipRepo()
        self.cache = cache or FriendCache(ttl=TTL_FROM_SETTINGS)

    def _cached(self, user_id, relation: str, load: Callable[[], List[Friendship]]) -> List[Friendship]:
        edges = self.cache.get(user_id, relation)
        if edges is None:
            edges = load()
            self.cache.set(user_id, relation, edges)
        return edges

    def outgoing(self, user) -> List[Friendship]:
        """Live edges the user initiated, pending or approved."""
        user_id = _key(user)
        return self._cached(user_id, OUTGOING, lambda: self.repo.query_outgoing(user_id))

    def incoming_approved(self, user) -> List[Friendship]:
        """Live, approved edges pointing at the user."""
        user_id = _key(user)
        return self._cached(
            user_id, INCOMING_APPROVED, lambda: self.repo.query_incoming(user_id, approved_only=True)
        )

    def incoming_pending(self, user) -> List[Friendship]:
        """Requests awaiting the user's decision; always read fresh."""
        return self.repo.query_incoming_pending(_key(user))

    def get_friends(self, user, *, refresh: bool = False) -> List[Friendship]:
        """
        Return the user's friend edges: outgoing first, then incoming approved.

        Edges are united by edge id, so a pending edge one way and an approved
        edge the other way both appear. ``refresh=True`` skips the cache.
        """
        user_id = _key(user)
        if refresh:
            self.invalidate(user_id)
        friends = self.cache.get(user_id, FRIENDS)
        if friends is None:
            friends = self._merge(self.outgoing(user_id), self.incoming_approved(user_id))
            self.cache.set(user_id, FRIENDS, friends)
        return friends

    @staticmethod
    def _merge(*relations: List[Friendship]) -> List[Friendship]:
        seen = set()
        merged = []
        for edges in relations:
            for edge in edges:
                if edge.pk in seen:
                    continue
                seen.add(edge.pk)
                merged.append(edge)
        return merged

    def get_current_friend_edges(self, user, now=None) -> List[Friendship]:
        """Friend edges that are active at ``now`` (defaults to the current time)."""
        now = now or timezone.now()
        return active_edges(self.get_friends(user), now)

    def get_current_friends(self, user, now=None) -> list:
        """Return the counterpart users of the active edges, each user once."""
        user_id = _key(user)
        friends = []
        seen = set()
        for edge in self.get_current_friend_edges(user_id, now=now):
            other_id = edge.counterpart_id(user_id)
            if other_id in seen:
                continue
            seen.add(other_id)
            friends.append(edge.target if other_id == edge.target_id else edge.source)
        return friends

    def invalidate(self, user) -> None:
        """Forget everything cached for the user; safe to call repeatedly."""
        user_id = _key(user)
        self.cache.invalidate(user_id)
        logger.debug("Invalidated friend cache for user %s", user_id)


default_resolver = RelationshipResolver()

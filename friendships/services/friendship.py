"""Friendship state transitions: request, approve, deny, block and membership checks."""

import logging

from django.db import transaction
from django.utils import timezone

from friendships.conf import friendship_setting
from friendships.exceptions import DuplicateFriendRequest, SelfFriendshipError
from friendships.repos.friendship_repo import FriendshipRepo
from .resolver import RelationshipResolver, default_resolver

logger = logging.getLogger(__name__)


class FriendshipService:
    """
    Run friendship operations on behalf of ``actor``.

    Lookups always resolve fresh from the store before mutating, and every
    successful write invalidates the resolver cache of both users on the edge.
    """

    def __init__(self, actor, *, resolver: RelationshipResolver | None = None, clock=timezone.now):
        self.actor = actor
        self.resolver = resolver or default_resolver
        self.repo: FriendshipRepo = self.resolver.repo
        self._clock = clock

    def _points_back(self, edge, owner, other) -> bool:
        """True when ``edge``, seen from ``owner``, has ``other`` on the far side."""
        return edge.counterpart_id(owner.pk) == other.pk

    def _invalidate_pair(self, other):
        self.resolver.invalidate(self.actor)
        self.resolver.invalidate(other)

    @transaction.atomic
    def request(self, target, *, name="", other_name="", start=None, end=None):
        """Create a pending edge from the actor to ``target`` and return it."""
        if target.pk == self.actor.pk:
            logger.warning("Rejected self friendship request by user %s", self.actor.pk)
            raise SelfFriendshipError()
        if not friendship_setting("ALLOW_DUPLICATE_REQUESTS") and self.repo.has_outstanding(self.actor.pk, target.pk):
            logger.warning("Rejected duplicate friend request %s -> %s", self.actor.pk, target.pk)
            raise DuplicateFriendRequest()

        edge = self.repo.insert_edge(
            self.actor.pk,
            target.pk,
            name=name,
            other_name=other_name,
            start=start,
            end=end,
        )
        self._invalidate_pair(target)
        logger.info("Friend request %s created: %s -> %s", edge.pk, self.actor.pk, target.pk)
        return edge

    @transaction.atomic
    def block(self, target) -> bool:
        """Terminate every edge in the actor's friend set that points at ``target``."""
        deleted_at_least_one = False
        now = self._clock()

        for edge in self.resolver.get_friends(self.actor, refresh=True):
            if self._points_back(edge, self.actor, target):
                if self.repo.soft_delete_edge(edge.pk, now):
                    logger.info("Friendship %s blocked by user %s", edge.pk, self.actor.pk)
                    deleted_at_least_one = True

        if deleted_at_least_one:
            self._invalidate_pair(target)
        return deleted_at_least_one

    @transaction.atomic
    def approve(self, requester) -> bool:
        """Approve every live edge between ``requester`` and the actor in the requester's friend set."""
        approved_at_least_one = False
        now = self._clock()

        for edge in self.resolver.get_friends(requester, refresh=True):
            if self._points_back(edge, requester, self.actor):
                if self.repo.approve_edge(edge.pk, now):
                    logger.info("Friendship %s approved by user %s", edge.pk, self.actor.pk)
                    approved_at_least_one = True

        if approved_at_least_one:
            self._invalidate_pair(requester)
        return approved_at_least_one

    @transaction.atomic
    def deny(self, requester) -> bool:
        """Terminate the edges ``approve`` would match."""
        denied_at_least_one = False
        now = self._clock()

        for edge in self.resolver.get_friends(requester, refresh=True):
            if self._points_back(edge, requester, self.actor):
                if self.repo.soft_delete_edge(edge.pk, now):
                    logger.info("Friendship %s denied by user %s", edge.pk, self.actor.pk)
                    denied_at_least_one = True

        if denied_at_least_one:
            self._invalidate_pair(requester)
        return denied_at_least_one

    def is_friends_with(self, candidate) -> bool:
        """Return True if ``candidate``'s friend edges include one pointing at the actor."""
        return any(
            self._points_back(edge, candidate, self.actor)
            for edge in self.resolver.get_friends(candidate)
        )

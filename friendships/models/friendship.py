"""Model representing a directed, time-bounded friendship edge."""

from __future__ import annotations
import uuid
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q, F


def _uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4 (for primary keys)."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


class FriendshipQuerySet(models.QuerySet):
    """Liveness and approval filters for edge querysets."""

    def alive(self):
        """Exclude soft-deleted edges."""
        return self.filter(deleted_at__isnull=True)

    def approved(self):
        return self.filter(approved_at__isnull=False)

    def pending(self):
        return self.filter(approved_at__isnull=True)


class Friendship(models.Model):
    """
    Directed friendship edge from ``source`` (the requester) to ``target``.

    The edge is pending until ``approved_at`` is set and terminal once
    ``deleted_at`` is set. ``start``/``end`` optionally bound when an approved
    edge counts as active.
    """
    id = models.UUIDField(primary_key=True, default=_uuid7_or_4, editable=False)

    source = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_friendships",      # user.sent_friendships -> edges this user requested
        db_column="user_id",
    )
    target = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_friendships",  # user.received_friendships -> edges pointing at this user
        db_column="other_user_id",
    )
    name = models.CharField(max_length=255, blank=True, default="")
    other_name = models.CharField(max_length=255, blank=True, default="")
    start = models.DateTimeField(null=True, blank=True)
    end = models.DateTimeField(null=True, blank=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = FriendshipQuerySet.as_manager()

    class Meta:
        """DB metadata and constraints for friendship edges."""
        db_table = "friends"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(condition=~Q(source=F("target")), name="chk_friends_not_self"),
        ]
        indexes = [
            models.Index(fields=["source", "deleted_at"], name="friends_source_alive_idx"),
            models.Index(fields=["target", "deleted_at"], name="friends_target_alive_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        if self.deleted_at:
            state = "deleted"
        elif self.approved_at:
            state = "approved"
        else:
            state = "pending"
        return f"Friendship({self.source_id} -> {self.target_id}, {state})"

    def clean(self):
        """Reject self-friendship before it reaches the database constraint."""
        super().clean()
        if self.source_id is not None and self.source_id == self.target_id:
            raise ValidationError("Users cannot befriend themselves.")

    @property
    def is_pending(self) -> bool:
        return self.approved_at is None and self.deleted_at is None

    @property
    def is_approved(self) -> bool:
        return self.approved_at is not None and self.deleted_at is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def counterpart_id(self, user_id):
        """Return the id of the other side of the edge as seen from ``user_id``."""
        if self.source_id == user_id:
            return self.target_id
        if self.target_id == user_id:
            return self.source_id
        raise ValueError(f"User {user_id} is not part of {self}")

    def counterpart(self, user):
        """Return the other user on this edge as seen from ``user``."""
        if self.counterpart_id(user.pk) == self.target_id:
            return self.target
        return self.source

    def label_for(self, user_id) -> str:
        """Return the label ``user_id`` gives the other side of the edge."""
        if self.source_id == user_id:
            return self.name
        if self.target_id == user_id:
            return self.other_name
        raise ValueError(f"User {user_id} is not part of {self}")

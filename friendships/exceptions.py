"""Validation failures raised at the friendship request boundary."""

from django.core.exceptions import ValidationError


class FriendshipError(ValidationError):
    """Base class for rejected friendship operations."""


class SelfFriendshipError(FriendshipError):
    """Raised when a user tries to befriend themselves."""

    def __init__(self, message="Users cannot befriend themselves."):
        super().__init__(message, code="self_friendship")


class DuplicateFriendRequest(FriendshipError):
    """Raised when an outstanding edge already exists for the ordered pair."""

    def __init__(self, message="A friend request between these users is already outstanding."):
        super().__init__(message, code="duplicate_request")

from datetime import timedelta
import uuid

from django.utils import timezone

from friendships.models import Friendship, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )
    return user


def make_friendship(source, target, *, approved=False, deleted=False, **extra):
    """
    Create an edge directly through the ORM, bypassing the service.
    approved=True / deleted=True stamp the matching timestamps an hour ago.
    """
    an_hour_ago = timezone.now() - timedelta(hours=1)
    return Friendship.objects.create(
        source=source,
        target=target,
        approved_at=an_hour_ago if approved else None,
        deleted_at=an_hour_ago if deleted else None,
        **extra,
    )

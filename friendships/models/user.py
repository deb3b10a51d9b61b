"""Custom user model; the only entity type that takes part in friendships."""

from django.core.validators import RegexValidator
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Model for user auth; its primary key is the identity friendships refer to."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    first_name = models.CharField(max_length=50, blank=False)
    last_name = models.CharField(max_length=50, blank=False)
    email = models.EmailField(unique=True, blank=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    def full_name(self):
        """Return full name string."""
        return f'{self.first_name} {self.last_name}'

    def current_friends(self, now=None):
        """Return the users this user is actively friends with right now."""
        from friendships.services.resolver import default_resolver

        return default_resolver.get_current_friends(self, now=now)

from django.apps import AppConfig

class FriendshipsConfig(AppConfig):
    """Django app config for the friendship relationship engine."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'friendships'

"""Settings lookup for the friendship engine with package defaults."""

from django.conf import settings

DEFAULTS = {
    "ALLOW_DUPLICATE_REQUESTS": False,
    "CACHE_TTL": 60,
}


def friendship_setting(name: str):
    """Return ``settings.FRIENDSHIPS[name]``, falling back to the package default."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown friendship setting: {name}")
    overrides = getattr(settings, "FRIENDSHIPS", None) or {}
    return overrides.get(name, DEFAULTS[name])

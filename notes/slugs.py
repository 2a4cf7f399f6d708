from django.utils import timezone
from django.utils.text import slugify

from .models import Note

SLUG_BASE_MAX_LENGTH = 200


def build_note_slug(title, now=None):
    """Return ``<slugified-title>-YYYYMMDDHHMMSS`` for a new note."""
    now = now or timezone.now()
    base = slugify(title)[:SLUG_BASE_MAX_LENGTH].strip("-") or "note"
    return f"{base}-{now.strftime('%Y%m%d%H%M%S')}"


def unique_note_slug(user, title, now=None):
    """
    Build a slug the user doesn't own yet.

    Two notes with the same title created in the same second would collide,
    so a numeric suffix is appended until the slug is free.
    """
    slug = build_note_slug(title, now=now)
    candidate = slug
    suffix = 2
    while Note.objects.filter(user=user, slug=candidate).exists():
        candidate = f"{slug}-{suffix}"
        suffix += 1
    return candidate

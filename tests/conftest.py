"""Common test fixtures for the notekeeper API."""
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from categories.models import Category
from notes.models import Note
from notes.slugs import unique_note_slug


@pytest.fixture
def api_client():
    """Anonymous API client."""
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="ada", email="ada@example.com", password="s3cret-pass-123", first_name="Ada"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="grace", email="grace@example.com", password="s3cret-pass-456"
    )


@pytest.fixture
def auth_client(user):
    """API client authenticated as ``user``."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def make_category(db):
    def _make(user, name, theme="gray"):
        return Category.objects.create(user=user, name=name, theme=theme)
    return _make


@pytest.fixture
def make_note(db):
    """Create a note directly through the ORM.

    ``age`` shifts created_at/updated_at into the past so ordering tests
    don't depend on insertion speed.
    """
    def _make(user, title="Note", content="", pinned=False, categories=(), age=None):
        note = Note.objects.create(
            user=user,
            title=title,
            slug=unique_note_slug(user, title),
            content=content,
            is_pinned=pinned,
        )
        if categories:
            note.set_categories([category.pk for category in categories])
        if age is not None:
            stamp = timezone.now() - timedelta(minutes=age)
            Note.objects.filter(pk=note.pk).update(created_at=stamp, updated_at=stamp)
            note.refresh_from_db()
        return note
    return _make

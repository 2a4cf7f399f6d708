"""
Query construction for the notes list.

The list view never builds SQL by hand: query parameters are validated by
``NoteFilterSerializer`` and turned into ORM filters by ``filter_notes`` and
``order_notes``.
"""

from django.db.models import Exists, OuterRef, Prefetch, Q
from django.db.models.functions import Lower
from rest_framework import serializers

from categories.models import Category
from .models import Note, NoteCategory

ALL_CATEGORIES = "all"
DEFAULT_SORT = "updatedAt"

SORT_ORDERINGS = {
    "updatedAt": ("-updated_at", "-id"),
    "createdAt": ("-created_at", "-id"),
    "titleAsc": (Lower("title").asc(), "id"),
    "titleDesc": (Lower("title").desc(), "-id"),
}


class NoteFilterSerializer(serializers.Serializer):
    sortBy = serializers.CharField(required=False, allow_blank=True, default=DEFAULT_SORT)
    search = serializers.CharField(required=False, allow_blank=True, default="")
    categoryId = serializers.CharField(required=False, allow_blank=True, default="")
    # the web client sends "category"
    category = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_sortBy(self, value):
        return value if value in SORT_ORDERINGS else DEFAULT_SORT

    def validate(self, attrs):
        return {
            "sort_by": attrs["sortBy"],
            "search": attrs["search"],
            "category": attrs["categoryId"] or attrs["category"],
        }


def _owned_category_id(user, category):
    """Return the integer id if ``category`` names one of the user's categories."""
    try:
        category_id = int(category)
    except (TypeError, ValueError):
        return None
    if not Category.objects.filter(pk=category_id, user=user).exists():
        return None
    return category_id


def filter_notes(user, pinned, search="", category=""):
    queryset = Note.objects.filter(user=user, is_pinned=pinned)

    if search:
        queryset = queryset.filter(Q(title__icontains=search) | Q(content__icontains=search))

    if category and category != ALL_CATEGORIES:
        category_id = _owned_category_id(user, category)
        if category_id is None:
            return queryset.none()
        queryset = queryset.filter(
            Exists(NoteCategory.objects.filter(note=OuterRef("pk"), category_id=category_id))
        )

    return queryset


def order_notes(queryset, sort_by=DEFAULT_SORT):
    return queryset.order_by(*SORT_ORDERINGS.get(sort_by, SORT_ORDERINGS[DEFAULT_SORT]))


def with_categories(queryset):
    return queryset.prefetch_related(
        Prefetch("categories", queryset=Category.objects.order_by("name", "id"))
    )

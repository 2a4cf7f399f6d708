from django.db import IntegrityError, transaction
from rest_framework import serializers

from categories.models import Category
from categories.serializers import CategorySummarySerializer
from core.sanitize import sanitize_html
from .models import Note
from .slugs import unique_note_slug

SLUG_ATTEMPTS = 3


class NoteSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)
    isPinned = serializers.BooleanField(source="is_pinned", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    categories = CategorySummarySerializer(many=True, read_only=True)

    class Meta:
        model = Note
        fields = ["id", "title", "slug", "content", "userId", "createdAt", "updatedAt", "isPinned", "categories"]
        read_only_fields = fields


class NoteWriteSerializer(serializers.ModelSerializer):
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)
    categoryIds = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        source="category_ids",
        required=False,
    )
    isPinned = serializers.BooleanField(source="is_pinned", required=False)

    class Meta:
        model = Note
        fields = ["title", "content", "categoryIds", "isPinned"]

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title cannot be blank.")
        return value

    def validate_content(self, value):
        return sanitize_html(value)

    def validate_categoryIds(self, value):
        category_ids = list(dict.fromkeys(value))
        if not category_ids:
            return category_ids

        user = self.context["request"].user
        owned = set(
            Category.objects.filter(user=user, id__in=category_ids).values_list("id", flat=True)
        )
        unknown = [category_id for category_id in category_ids if category_id not in owned]
        if unknown:
            raise serializers.ValidationError(
                f"Unknown category: {', '.join(str(category_id) for category_id in unknown)}"
            )
        return category_ids

    def create(self, validated_data):
        category_ids = validated_data.pop("category_ids", [])
        user = validated_data["user"]

        with transaction.atomic():
            note = self._create_with_slug(user, validated_data)
            if category_ids:
                note.set_categories(category_ids)
        return note

    def _create_with_slug(self, user, validated_data):
        # a concurrent create can claim the same slug between the check and the insert
        for attempt in range(SLUG_ATTEMPTS):
            try:
                with transaction.atomic():
                    return Note.objects.create(
                        slug=unique_note_slug(user, validated_data["title"]),
                        **validated_data,
                    )
            except IntegrityError:
                if attempt == SLUG_ATTEMPTS - 1:
                    raise

    def update(self, instance, validated_data):
        category_ids = validated_data.pop("category_ids", None)

        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()
            if category_ids is not None:
                instance.set_categories(category_ids)
        return instance

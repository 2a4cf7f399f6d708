from rest_framework import serializers
from .models import Category


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "theme"]


class CategorySerializer(serializers.ModelSerializer):
    noteCount = serializers.IntegerField(source="note_count", read_only=True, default=0)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    theme = serializers.CharField(required=False, allow_blank=True, max_length=32)

    class Meta:
        model = Category
        fields = ["id", "name", "theme", "noteCount", "createdAt"]
        read_only_fields = ["id"]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")

        user = self.context["request"].user
        taken = Category.objects.filter(user=user, name__iexact=value)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise serializers.ValidationError("You already have a category with this name.")
        return value

    def validate_theme(self, value):
        value = value.strip()
        return value or "gray"

from django.contrib import admin
from .models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "theme", "user", "created_at"]
    list_filter = ["theme"]
    search_fields = ["name"]
